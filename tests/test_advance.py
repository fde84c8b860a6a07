from blockfall.config import GameConfig
from blockfall.game_state import GameState
from blockfall.tetromino import PieceKind


class FixedRandom:
    """Always spawn a horizontal I piece in the leftmost legal column."""

    def randrange(self, start: int, stop: int) -> int:
        return start


def make_state(start_time=0.0, updates_per_second=10.0):
    config = GameConfig(updates_per_second=updates_per_second)
    return GameState(config=config, rng=FixedRandom(), start_time=start_time)


def test_first_tick_is_due_at_start_time():
    state = make_state(start_time=1000.0)
    assert state.advance(999.0) == 0
    assert state.active.origin == (1, 0)
    assert state.advance(1000.0) == 1
    assert state.active.origin == (1, 1)


def test_advance_twice_with_same_time_is_idempotent():
    state = make_state()
    assert state.advance(250.0) == 3
    origin = state.active.origin
    ticks = state.tick_count
    assert state.advance(250.0) == 0
    assert state.active.origin == origin
    assert state.tick_count == ticks


def test_overdue_ticks_are_caught_up():
    state = make_state()
    state.advance(0.0)
    # A late poll runs every tick due since the previous call.
    assert state.advance(550.0) == 5
    assert state.active.origin == (1, 6)
    assert state.tick_count == 6


def test_schedule_does_not_drift_with_irregular_polling():
    state = make_state()
    for now in (0.0, 130.0, 170.0, 260.0, 399.0, 400.0):
        state.advance(now)
    # Ticks due at 0, 100, 200, 300 and 400.
    assert state.tick_count == 5
    assert state.active.origin == (1, 5)


def test_time_before_start_runs_nothing():
    state = make_state(start_time=500.0)
    assert state.advance(0.0) == 0
    assert state.tick_count == 0


def test_period_follows_updates_per_second():
    state = make_state(updates_per_second=2.0)
    assert state.config.period_ms == 500.0
    assert state.advance(999.0) == 2
    assert state.advance(1000.0) == 1


def test_piece_locks_after_reaching_floor():
    state = make_state()
    # 32 ticks: 31 descents, then a lock and a fresh spawn.
    assert state.advance(3100.0) == 32
    assert state.pieces == 1
    assert state.active.origin == (1, 0)
    assert state.board.get((0, 31)).kind is PieceKind.I
    assert state.board.get((3, 31)).kind is PieceKind.I
    assert state.board.get((4, 31)).kind is None
