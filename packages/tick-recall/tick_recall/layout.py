"""Layout geometry - random scramble placement and the memorize flow layout."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Sequence

from tick_recall.types import Bounds, Footprint, Position, RenderSurface

if TYPE_CHECKING:
    from tick_recall.tile import Tile


def random_position(
    arena: Bounds,
    obstruction_height: int,
    footprint: Footprint,
    rng: random.Random,
) -> Position:
    """Uniform random top/left keeping *footprint* inside *arena* and below the header.

    ``left`` is drawn from ``[0, width - w]`` and ``top`` from
    ``[obstruction, height - h]``, both inclusive. A span that would be
    negative collapses to zero, so an oversized tile lands on the boundary.
    Tiles are not kept apart from each other.
    """
    max_left = max(0, arena.width - footprint.w)
    max_top = max(0, arena.height - footprint.h - obstruction_height)
    left = rng.randint(0, max_left)
    top = rng.randint(0, max_top) + obstruction_height
    return Position(top=top, left=left)


def flow_positions(
    arena: Bounds,
    obstruction_height: int,
    footprints: Sequence[Footprint],
    gap: int = 8,
) -> list[Position]:
    """Centered, wrapping row layout for the memorize phase.

    Tiles are packed left to right and wrap to a new row when the arena
    width would overflow. Each row is centered horizontally, the block of
    rows is centered vertically below the obstruction, and each tile is
    centered vertically inside its row.
    """
    rows: list[list[int]] = []
    row_width = 0
    for index, fp in enumerate(footprints):
        if rows and row_width + gap + fp.w <= arena.width:
            rows[-1].append(index)
            row_width += gap + fp.w
        else:
            rows.append([index])
            row_width = fp.w

    row_heights = [max(footprints[i].h for i in row) for row in rows]
    total_height = sum(row_heights) + gap * max(0, len(rows) - 1)
    free_height = arena.height - obstruction_height
    y = obstruction_height + max(0, (free_height - total_height) // 2)

    positions: list[Position | None] = [None] * len(footprints)
    for row, row_h in zip(rows, row_heights):
        width = sum(footprints[i].w for i in row) + gap * (len(row) - 1)
        x = max(0, (arena.width - width) // 2)
        for i in row:
            fp = footprints[i]
            positions[i] = Position(top=y + (row_h - fp.h) // 2, left=x)
            x += fp.w + gap
        y += row_h + gap
    return [p for p in positions if p is not None]


class LayoutEngine:
    """Random placement against an injected render surface.

    Holds no state beyond its surface and random source.
    """

    def __init__(self, surface: RenderSurface, rng: random.Random) -> None:
        self._surface = surface
        self._rng = rng

    def position_for(self, tile: Tile) -> Position:
        return random_position(
            self._surface.arena_bounds(),
            self._surface.obstruction_height(),
            tile.footprint(),
            self._rng,
        )
