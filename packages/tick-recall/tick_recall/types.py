"""Shared types, protocols, and errors for tick-recall."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from tick_recall.tile import Tile


class Phase(Enum):
    """One discrete stage of a round."""

    IDLE = "idle"
    MEMORIZE = "memorize"
    SCRAMBLING = "scrambling"
    RECALL = "recall"
    SUCCESS = "success"
    FAILURE = "failure"


class Status:
    """Semantic status signal names. Formatting belongs to the sink."""

    READY = "ready"
    INVALID_COUNT = "invalid_count"
    MEMORIZE = "memorize"  # count, seconds
    SCRAMBLE = "scramble"  # step, total
    RECALL = "recall"
    SUCCESS = "success"
    WRONG_ORDER = "wrong_order"  # expected, clicked

    ALL = (READY, INVALID_COUNT, MEMORIZE, SCRAMBLE, RECALL, SUCCESS, WRONG_ORDER)


@dataclass(frozen=True, slots=True)
class Bounds:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Footprint:
    w: int
    h: int


@dataclass(frozen=True, slots=True)
class Position:
    top: int
    left: int


class RenderSurface(Protocol):
    """Measurement and mounting capability supplied by the presentation layer.

    ``measure`` must reflect the tile's rendered size, so it is only
    meaningful after ``mount`` has inserted the tile.
    """

    def arena_bounds(self) -> Bounds: ...
    def obstruction_height(self) -> int: ...
    def measure(self, tile: Tile) -> Footprint: ...
    def mount(self, tiles: Sequence[Tile]) -> None: ...
    def clear(self) -> None: ...


class InvalidCountError(ValueError):
    """Raised when a round size is not a whole number in range."""

    def __init__(self, raw: Any, message: str) -> None:
        self.raw = raw
        super().__init__(message)
