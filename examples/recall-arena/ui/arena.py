"""Pygame render surface: measures, mounts, and draws tiles."""
from __future__ import annotations

from typing import Sequence

import pygame

from tick_recall import Bounds, Footprint, Position, Tile, flow_positions
from tick_recall.tile import FREE

from ui.constants import (
    HEADER_H,
    SCREEN_H,
    SCREEN_W,
    TILE_BORDER,
    TILE_DISABLED_BORDER,
    TILE_ENABLED_BORDER,
    TILE_MIN_H,
    TILE_MIN_W,
    TILE_PAD_X,
    TILE_PAD_Y,
    TILE_TEXT,
)


def tile_rgb(tile: Tile) -> pygame.Color:
    hue, sat, light = tile.color
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue, sat, light, 100)
    return color


class ArenaSurface:
    """RenderSurface over the whole window, with the header as obstruction.

    Tile sizes come from the rendered label, so they are only known once
    a tile is mounted.
    """

    def __init__(self, font: pygame.font.Font, gap: int = 8) -> None:
        self._font = font
        self._gap = gap
        self._sizes: dict[int, Footprint] = {}
        self._flow: dict[int, Position] = {}
        self._tiles: list[Tile] = []

    def arena_bounds(self) -> Bounds:
        return Bounds(SCREEN_W, SCREEN_H)

    def obstruction_height(self) -> int:
        return HEADER_H

    def measure(self, tile: Tile) -> Footprint:
        return self._sizes.get(id(tile), Footprint(0, 0))

    def mount(self, tiles: Sequence[Tile]) -> None:
        self.clear()
        self._tiles = list(tiles)
        for tile in self._tiles:
            tile.set_flow()
            text_w, text_h = self._font.size(str(tile.order))
            self._sizes[id(tile)] = Footprint(
                max(TILE_MIN_W, text_w + TILE_PAD_X),
                max(TILE_MIN_H, text_h + TILE_PAD_Y),
            )
        positions = flow_positions(
            self.arena_bounds(),
            HEADER_H,
            [self.measure(t) for t in self._tiles],
            self._gap,
        )
        self._flow = {id(t): p for t, p in zip(self._tiles, positions)}

    def clear(self) -> None:
        self._tiles = []
        self._sizes.clear()
        self._flow.clear()

    def rect_of(self, tile: Tile) -> pygame.Rect | None:
        pos = tile.position if tile.placement == FREE else self._flow.get(id(tile))
        if pos is None:
            return None
        fp = self.measure(tile)
        return pygame.Rect(pos.left, pos.top, fp.w, fp.h)

    def tile_at(self, point: tuple[int, int]) -> Tile | None:
        """Topmost tile under *point*; later tiles draw over earlier ones."""
        for tile in reversed(self._tiles):
            rect = self.rect_of(tile)
            if rect is not None and rect.collidepoint(point):
                return tile
        return None

    def draw(self, screen: pygame.Surface) -> None:
        for tile in self._tiles:
            rect = self.rect_of(tile)
            if rect is None:
                continue
            pygame.draw.rect(screen, tile_rgb(tile), rect, border_radius=6)
            border = TILE_ENABLED_BORDER if tile.interactive else TILE_DISABLED_BORDER
            pygame.draw.rect(screen, border, rect, TILE_BORDER, border_radius=6)
            if tile.label:
                text = self._font.render(tile.label, True, TILE_TEXT)
                screen.blit(text, text.get_rect(center=rect.center))
