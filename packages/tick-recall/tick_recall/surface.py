"""StaticSurface - fixed-geometry render surface for headless play and tests."""
from __future__ import annotations

from typing import Sequence

from tick_recall.layout import flow_positions
from tick_recall.tile import FREE, Tile
from tick_recall.types import Bounds, Footprint, Position


class StaticSurface:
    """RenderSurface with a fixed arena, header, and uniform tile size.

    Unmounted tiles measure as zero, matching an element that has not been
    inserted into the layout yet.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        header: int = 60,
        tile_size: Footprint = Footprint(120, 60),
        gap: int = 8,
    ) -> None:
        self._bounds = Bounds(width, height)
        self._header = header
        self._tile_size = tile_size
        self._gap = gap
        self._mounted: dict[int, Tile] = {}
        self.flow: dict[int, Position] = {}

    def arena_bounds(self) -> Bounds:
        return self._bounds

    def obstruction_height(self) -> int:
        return self._header

    def measure(self, tile: Tile) -> Footprint:
        if self._mounted.get(tile.order) is not tile:
            return Footprint(0, 0)
        return self._tile_size

    def mount(self, tiles: Sequence[Tile]) -> None:
        self.clear()
        for tile in tiles:
            tile.set_flow()
            self._mounted[tile.order] = tile
        positions = flow_positions(
            self._bounds, self._header, [self.measure(t) for t in tiles], self._gap
        )
        self.flow = {t.order: p for t, p in zip(tiles, positions)}

    def clear(self) -> None:
        self._mounted.clear()
        self.flow = {}

    @property
    def mounted(self) -> list[Tile]:
        return list(self._mounted.values())

    def placed_at(self, tile: Tile) -> Position | None:
        """Where the tile is drawn: its free position, or its flow slot."""
        if tile.placement == FREE:
            return tile.position
        return self.flow.get(tile.order)
