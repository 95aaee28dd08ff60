"""GameController - phase machine for one memory round at a time."""
from __future__ import annotations

import logging
import random
from typing import Any, Callable

from tick_recall.clock import Clock
from tick_recall.config import RecallConfig
from tick_recall.layout import LayoutEngine
from tick_recall.parsing import parse_count
from tick_recall.scheduler import TaskHandle, TaskScheduler
from tick_recall.signals import SignalBus
from tick_recall.tile import Tile, create_tiles
from tick_recall.types import InvalidCountError, Phase, RenderSurface, Status

logger = logging.getLogger(__name__)

# Legal forward transitions. reset() returns to IDLE from anywhere.
TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.IDLE: frozenset({Phase.MEMORIZE}),
    Phase.MEMORIZE: frozenset({Phase.SCRAMBLING}),
    Phase.SCRAMBLING: frozenset({Phase.RECALL}),
    Phase.RECALL: frozenset({Phase.SUCCESS, Phase.FAILURE}),
    Phase.SUCCESS: frozenset(),
    Phase.FAILURE: frozenset(),
}


class GameController:
    """Drives a round: memorize, scramble, recall, then success or failure.

    The controller is the only writer of ``tiles`` and ``phase``. Timed
    steps are tasks on its scheduler; the host calls ``advance`` once per
    tick. Status notifications go out on ``bus`` keyed by ``Status`` names.
    """

    def __init__(
        self,
        surface: RenderSurface,
        bus: SignalBus | None = None,
        *,
        config: RecallConfig | None = None,
        rng: random.Random | None = None,
        layout: LayoutEngine | None = None,
    ) -> None:
        self.config = config or RecallConfig()
        self.surface = surface
        self.bus = bus if bus is not None else SignalBus()
        self.rng = rng if rng is not None else random.Random()
        self.layout = layout if layout is not None else LayoutEngine(surface, self.rng)
        self.scheduler = TaskScheduler(Clock(self.config.tps))

        self.tiles: list[Tile] = []
        self.phase = Phase.IDLE
        self.expected_next = 1
        self.scramble_count = 0
        self.scramble_total = 0

        self._emit(Status.READY)

    # --- Queries ---

    @property
    def pending_timers(self) -> list[TaskHandle]:
        return self.scheduler.handles()

    def tile(self, order: int) -> Tile | None:
        if 1 <= order <= len(self.tiles):
            return self.tiles[order - 1]
        return None

    # --- Input ---

    def start(self, raw: Any) -> bool:
        """Start a round of *raw* tiles. Invalid input leaves the state as is."""
        try:
            n = parse_count(raw, self.config.min_tiles, self.config.max_tiles)
        except InvalidCountError as exc:
            logger.info("rejected round size: %s", exc)
            self._emit(Status.INVALID_COUNT, raw=raw)
            return False

        self.reset()
        logger.info("starting round with %d tiles", n)
        self.tiles = create_tiles(n, self.rng, measure=self.surface.measure)
        self.surface.mount(self.tiles)
        for tile in self.tiles:
            tile.set_revealed(True)
            tile.disable()
        self.scramble_total = n
        self._enter(Phase.MEMORIZE)

        seconds = n * self.config.memorize_seconds_per_tile
        self._emit(Status.MEMORIZE, count=n, seconds=seconds)
        self._after(seconds, self._scramble_step, "scramble")
        return True

    def click(self, order: int) -> bool:
        """Route a click on the tile numbered *order*. Ignored outside recall."""
        if self.phase is not Phase.RECALL:
            logger.debug("ignored click on %d during %s", order, self.phase.value)
            return False
        tile = self.tile(order)
        if tile is None:
            logger.debug("ignored click on unknown tile %d", order)
            return False
        return tile.click()

    def reset(self) -> None:
        """Cancel pending steps and discard the tile set."""
        self.scheduler.cancel_all()
        self._freeze()
        self.tiles = []
        self.surface.clear()
        self.phase = Phase.IDLE
        self.expected_next = 1
        self.scramble_count = 0
        self.scramble_total = 0

    def advance(self, ticks: int = 1) -> int:
        return self.scheduler.advance(ticks)

    # --- Phase steps ---

    def _scramble_step(self) -> None:
        if self.phase is Phase.MEMORIZE:
            self._enter(Phase.SCRAMBLING)
        self.scramble_count += 1
        self._emit(Status.SCRAMBLE, step=self.scramble_count, total=self.scramble_total)
        for tile in self.tiles:
            tile.set_free()
            pos = self.layout.position_for(tile)
            tile.set_position(pos.top, pos.left)

        interval = self.config.scramble_interval
        if self.scramble_count < self.scramble_total:
            self._after(interval, self._scramble_step, "scramble")
        else:
            self._after(interval, self._start_recall, "recall")

    def _start_recall(self) -> None:
        self._enter(Phase.RECALL)
        self.expected_next = 1
        for tile in self.tiles:
            tile.set_revealed(False)
            tile.enable()
            tile.clicked.connect(self._on_tile_click)
        self._emit(Status.RECALL)

    def _on_tile_click(self, tile: Tile) -> None:
        if self.phase is not Phase.RECALL:
            return
        if tile.order == self.expected_next:
            tile.set_revealed(True)
            self.expected_next += 1
            if self.expected_next > len(self.tiles):
                self._finish(Phase.SUCCESS, Status.SUCCESS)
            return

        self._finish(
            Phase.FAILURE,
            Status.WRONG_ORDER,
            expected=self.expected_next,
            clicked=tile.order,
        )

    def _finish(self, phase: Phase, status: str, **data: Any) -> None:
        self._freeze()
        for tile in self.tiles:
            tile.set_revealed(True)
        self._enter(phase)
        self._emit(status, **data)

    def _freeze(self) -> None:
        for tile in self.tiles:
            tile.disable()
            tile.clicked.disconnect(self._on_tile_click)

    # --- Plumbing ---

    def _enter(self, phase: Phase) -> None:
        if phase not in TRANSITIONS[self.phase]:
            raise RuntimeError(
                f"Illegal phase transition {self.phase.value} -> {phase.value}"
            )
        logger.info("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _after(
        self, seconds: float, callback: Callable[[], None], name: str
    ) -> TaskHandle:
        return self.scheduler.schedule(
            self.scheduler.clock.ticks_for(seconds), callback, name
        )

    def _emit(self, status: str, **data: Any) -> None:
        self.bus.publish(status, **data)
