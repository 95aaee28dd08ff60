"""Round configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecallConfig:
    """Immutable timing and sizing settings for a game controller.

    Attributes:
        min_tiles: Smallest accepted round size.
        max_tiles: Largest accepted round size.
        memorize_seconds_per_tile: Memorize lasts this many seconds per tile.
        scramble_interval: Seconds between scramble steps, and between the
            last step and recall.
        tps: Ticks per second of the deferred-task clock.
        flow_gap: Pixel gap between tiles in the memorize flow layout.
    """

    min_tiles: int = 3
    max_tiles: int = 7
    memorize_seconds_per_tile: float = 1.0
    scramble_interval: float = 2.0
    tps: int = 20
    flow_gap: int = 8

    def __post_init__(self) -> None:
        if self.min_tiles < 1:
            raise ValueError("min_tiles must be at least 1")
        if self.min_tiles > self.max_tiles:
            raise ValueError(
                f"min_tiles ({self.min_tiles}) exceeds max_tiles ({self.max_tiles})"
            )
        if self.memorize_seconds_per_tile <= 0:
            raise ValueError("memorize_seconds_per_tile must be positive")
        if self.scramble_interval <= 0:
            raise ValueError("scramble_interval must be positive")
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.flow_gap < 0:
            raise ValueError("flow_gap must not be negative")
