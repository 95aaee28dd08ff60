"""Tests for GameController phases, timing, clicks, and cancellation."""
from __future__ import annotations

import random

import pytest

from tick_recall import (
    Footprint,
    GameController,
    LayoutEngine,
    Phase,
    RecallConfig,
    SignalBus,
    StaticSurface,
    Status,
)

TPS = 20
INTERVAL_TICKS = 40  # 2.0 s at 20 tps


class CountingLayout(LayoutEngine):
    """LayoutEngine that records every tile it places."""

    def __init__(self, surface, rng):
        super().__init__(surface, rng)
        self.calls = []

    def position_for(self, tile):
        self.calls.append(tile)
        return super().position_for(tile)


def _make(seed: int = 42, config: RecallConfig | None = None):
    surface = StaticSurface(width=500, height=400, header=40, tile_size=Footprint(50, 30))
    rng = random.Random(seed)
    layout = CountingLayout(surface, rng)
    bus = SignalBus()
    ctrl = GameController(surface, bus, config=config, rng=rng, layout=layout)
    return ctrl, layout, bus


def _memorize_ticks(n: int) -> int:
    return n * TPS


def _to_recall(ctrl: GameController, n: int) -> None:
    ctrl.start(str(n))
    ctrl.advance(_memorize_ticks(n) + n * INTERVAL_TICKS)
    assert ctrl.phase is Phase.RECALL


def _signals(bus: SignalBus) -> list[str]:
    return [name for name, _ in bus.history]


class TestIdle:
    def test_starts_idle_with_ready_status(self):
        ctrl, _, bus = _make()
        assert ctrl.phase is Phase.IDLE
        assert ctrl.tiles == []
        assert bus.last() == (Status.READY, {})

    @pytest.mark.parametrize("raw", ["2", "8", "abc", "5.5", ""])
    def test_invalid_count_stays_idle(self, raw):
        ctrl, _, bus = _make()
        assert ctrl.start(raw) is False
        assert ctrl.phase is Phase.IDLE
        assert ctrl.tiles == []
        assert ctrl.pending_timers == []
        assert bus.last() == (Status.INVALID_COUNT, {"raw": raw})

    @pytest.mark.parametrize("raw", ["3", "7"])
    def test_valid_count_starts_round(self, raw):
        ctrl, _, _ = _make()
        assert ctrl.start(raw) is True
        assert ctrl.phase is Phase.MEMORIZE
        assert len(ctrl.tiles) == int(raw)

    def test_invalid_count_mid_round_leaves_round_running(self):
        ctrl, _, _ = _make()
        ctrl.start("4")
        tiles = list(ctrl.tiles)

        assert ctrl.start("99") is False
        assert ctrl.phase is Phase.MEMORIZE
        assert ctrl.tiles == tiles
        assert len(ctrl.pending_timers) == 1


class TestMemorize:
    def test_entry_state(self):
        ctrl, _, bus = _make()
        ctrl.start("5")

        assert [t.order for t in ctrl.tiles] == [1, 2, 3, 4, 5]
        for tile in ctrl.tiles:
            assert tile.revealed
            assert not tile.interactive
            assert tile.placement == "flow"
        assert set(ctrl.surface.flow) == {1, 2, 3, 4, 5}
        assert bus.last() == (Status.MEMORIZE, {"count": 5, "seconds": 5.0})

    def test_lasts_n_seconds(self):
        ctrl, layout, _ = _make()
        ctrl.start("4")

        ctrl.advance(_memorize_ticks(4) - 1)
        assert ctrl.phase is Phase.MEMORIZE
        assert layout.calls == []

        ctrl.advance()
        assert ctrl.phase is Phase.SCRAMBLING
        assert ctrl.scramble_count == 1


class TestScrambling:
    def test_first_step_frees_and_places_every_tile(self):
        ctrl, _, _ = _make()
        ctrl.start("3")
        ctrl.advance(_memorize_ticks(3))

        for tile in ctrl.tiles:
            assert tile.placement == "free"
            assert 0 <= tile.position.left <= 450
            assert 40 <= tile.position.top <= 370
            assert tile.revealed
            assert not tile.interactive

    def test_steps_spaced_by_interval(self):
        ctrl, _, bus = _make()
        ctrl.start("3")
        ctrl.advance(_memorize_ticks(3))
        assert ctrl.scramble_count == 1

        ctrl.advance(INTERVAL_TICKS - 1)
        assert ctrl.scramble_count == 1
        ctrl.advance()
        assert ctrl.scramble_count == 2

        steps = [d for name, d in bus.history if name == Status.SCRAMBLE]
        assert steps == [{"step": 1, "total": 3}, {"step": 2, "total": 3}]

    def test_recall_one_interval_after_last_step(self):
        ctrl, _, _ = _make()
        ctrl.start("3")
        ctrl.advance(_memorize_ticks(3) + 2 * INTERVAL_TICKS)
        assert ctrl.scramble_count == 3
        assert ctrl.phase is Phase.SCRAMBLING

        ctrl.advance(INTERVAL_TICKS - 1)
        assert ctrl.phase is Phase.SCRAMBLING
        ctrl.advance()
        assert ctrl.phase is Phase.RECALL

    def test_five_tiles_scrambled_five_times_each(self):
        ctrl, layout, _ = _make()
        _to_recall(ctrl, 5)

        assert len(layout.calls) == 25
        for tile in ctrl.tiles:
            assert sum(1 for t in layout.calls if t is tile) == 5
        assert ctrl.scramble_count == ctrl.scramble_total == 5

    def test_clicks_ignored_while_scrambling(self):
        ctrl, _, _ = _make()
        ctrl.start("3")
        ctrl.advance(_memorize_ticks(3))

        assert ctrl.click(1) is False
        assert ctrl.tiles[0].click() is False
        assert ctrl.phase is Phase.SCRAMBLING
        assert ctrl.expected_next == 1


class TestRecall:
    def test_entry_state(self):
        ctrl, _, bus = _make()
        _to_recall(ctrl, 4)

        assert ctrl.expected_next == 1
        for tile in ctrl.tiles:
            assert not tile.revealed
            assert tile.label == ""
            assert tile.interactive
            assert len(tile.clicked) == 1
        assert bus.last() == (Status.RECALL, {})
        assert ctrl.pending_timers == []

    def test_correct_sequence_succeeds(self):
        ctrl, _, bus = _make()
        _to_recall(ctrl, 4)

        for order in (1, 2, 3):
            assert ctrl.click(order)
            assert ctrl.tile(order).revealed
            assert ctrl.phase is Phase.RECALL
        assert not ctrl.tile(4).revealed

        ctrl.click(4)
        assert ctrl.phase is Phase.SUCCESS
        assert all(t.revealed and not t.interactive for t in ctrl.tiles)
        assert all(len(t.clicked) == 0 for t in ctrl.tiles)
        assert bus.last() == (Status.SUCCESS, {})

    def test_skipping_fails_and_reveals_all(self):
        ctrl, _, bus = _make()
        _to_recall(ctrl, 4)

        ctrl.click(1)
        ctrl.click(2)
        ctrl.click(4)

        assert ctrl.phase is Phase.FAILURE
        assert all(t.revealed and not t.interactive for t in ctrl.tiles)
        assert bus.last() == (Status.WRONG_ORDER, {"expected": 3, "clicked": 4})

    def test_first_click_wrong_fails_immediately(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        ctrl.click(2)
        assert ctrl.phase is Phase.FAILURE

    def test_clicks_after_result_ignored(self):
        ctrl, _, bus = _make()
        _to_recall(ctrl, 3)
        ctrl.click(3)
        count = len(bus.history)

        assert ctrl.click(1) is False
        assert ctrl.phase is Phase.FAILURE
        assert len(bus.history) == count

    def test_repeat_click_on_revealed_tile_fails(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        ctrl.click(1)
        ctrl.click(1)
        assert ctrl.phase is Phase.FAILURE

    def test_unknown_order_ignored(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        assert ctrl.click(9) is False
        assert ctrl.phase is Phase.RECALL

    def test_tile_channel_drives_validation(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        for tile in ctrl.tiles:
            tile.click()
        assert ctrl.phase is Phase.SUCCESS


class TestRestart:
    def test_restart_while_scrambling_cancels_old_round(self):
        ctrl, layout, _ = _make()
        ctrl.start("5")
        ctrl.advance(_memorize_ticks(5) + INTERVAL_TICKS)
        assert ctrl.scramble_count == 2

        old_tiles = list(ctrl.tiles)
        old_positions = [t.position for t in old_tiles]
        calls_before = len(layout.calls)

        assert ctrl.start("3") is True
        assert ctrl.phase is Phase.MEMORIZE
        assert ctrl.scramble_count == 0
        assert len(ctrl.pending_timers) == 1

        ctrl.advance(1000)
        assert [t.position for t in old_tiles] == old_positions
        assert all(t not in old_tiles for t in layout.calls[calls_before:])
        assert ctrl.phase is Phase.RECALL
        assert len(ctrl.tiles) == 3

    def test_restart_after_result_replaces_tiles(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        ctrl.click(1)
        ctrl.click(2)
        ctrl.click(3)
        old = list(ctrl.tiles)

        ctrl.start("6")
        assert ctrl.phase is Phase.MEMORIZE
        assert ctrl.expected_next == 1
        assert len(ctrl.tiles) == 6
        assert not any(t in old for t in ctrl.tiles)

    def test_restart_during_recall_unsubscribes_old_tiles(self):
        ctrl, _, _ = _make()
        _to_recall(ctrl, 3)
        old = list(ctrl.tiles)

        ctrl.start("3")
        assert all(len(t.clicked) == 0 and not t.interactive for t in old)
        old[0].enable()
        old[0].click()
        assert ctrl.phase is Phase.MEMORIZE

    def test_reset_returns_to_idle(self):
        ctrl, _, _ = _make()
        ctrl.start("4")
        ctrl.reset()

        assert ctrl.phase is Phase.IDLE
        assert ctrl.tiles == []
        assert ctrl.pending_timers == []
        assert ctrl.surface.mounted == []
        ctrl.advance(500)
        assert ctrl.phase is Phase.IDLE


class TestConfig:
    def test_custom_timing(self):
        config = RecallConfig(tps=10, memorize_seconds_per_tile=0.5, scramble_interval=0.3)
        ctrl, _, _ = _make(config=config)
        ctrl.start("4")

        ctrl.advance(19)
        assert ctrl.phase is Phase.MEMORIZE
        ctrl.advance(1)
        assert ctrl.phase is Phase.SCRAMBLING

        # 4 steps spaced 3 ticks, recall 3 ticks after the last
        ctrl.advance(3 * 4 - 1)
        assert ctrl.phase is Phase.SCRAMBLING
        ctrl.advance(1)
        assert ctrl.phase is Phase.RECALL

    def test_custom_range(self):
        ctrl, _, _ = _make(config=RecallConfig(min_tiles=2, max_tiles=9))
        assert ctrl.start("9") is True
        assert ctrl.start("1") is False
