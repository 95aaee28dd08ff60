"""Tile - one numbered game piece."""
from __future__ import annotations

import random
from typing import Callable

from tick_recall.signals import Channel
from tick_recall.types import Footprint, Position

Color = tuple[int, int, int]  # hue, saturation %, lightness %

FLOW = "flow"
FREE = "free"


def random_color(rng: random.Random) -> Color:
    """Random saturated HSL color: hue 0-359, saturation 70-89, lightness 50-59."""
    return (rng.randrange(360), 70 + rng.randrange(20), 50 + rng.randrange(10))


class Tile:
    """A numbered tile. ``order`` never changes; everything else is view state.

    ``measure`` is the render surface's size query for this tile. Footprints
    are only valid once the surface has mounted the tile.
    """

    def __init__(
        self,
        order: int,
        color: Color,
        measure: Callable[[Tile], Footprint] | None = None,
    ) -> None:
        if order < 1:
            raise ValueError(f"order must be positive, got {order}")
        self._order = order
        self.color = color
        self.revealed = False
        self.interactive = False
        self.placement = FLOW
        self.position: Position | None = None
        self.clicked: Channel[Tile] = Channel()
        self._measure = measure

    @property
    def order(self) -> int:
        return self._order

    @property
    def label(self) -> str:
        return str(self._order) if self.revealed else ""

    def set_interactive(self, flag: bool) -> None:
        self.interactive = bool(flag)

    def enable(self) -> None:
        self.set_interactive(True)

    def disable(self) -> None:
        self.set_interactive(False)

    def set_revealed(self, flag: bool) -> None:
        self.revealed = bool(flag)

    def set_flow(self) -> None:
        self.placement = FLOW
        self.position = None

    def set_free(self) -> None:
        self.placement = FREE

    def set_position(self, top: int, left: int) -> None:
        """Store free-placement coordinates, relative to the arena origin."""
        self.position = Position(top=top, left=left)

    def footprint(self) -> Footprint:
        if self._measure is None:
            return Footprint(0, 0)
        return self._measure(self)

    def click(self) -> bool:
        """Notify click subscribers. Disabled tiles swallow the click."""
        if not self.interactive:
            return False
        self.clicked.emit(self)
        return True

    def __repr__(self) -> str:
        return (
            f"Tile(order={self._order}, revealed={self.revealed}, "
            f"interactive={self.interactive}, placement={self.placement!r})"
        )


def create_tiles(
    n: int,
    rng: random.Random,
    measure: Callable[[Tile], Footprint] | None = None,
) -> list[Tile]:
    """Tiles ordered 1..n, each with a random color, hidden and disabled."""
    return [Tile(order, random_color(rng), measure) for order in range(1, n + 1)]
