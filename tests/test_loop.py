# tests/test_loop.py
from snake_engine.grid import Direction, Point
from snake_engine.intents import Intent, apply_intents
from snake_engine.loop import LoopResult, run_game
from snake_engine.scheduler import TickScheduler


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snap):
        self.frames.append(snap)


def scripted_poll(batches):
    """poll() returning one batch per call, then nothing."""
    it = iter(batches)
    return lambda: next(it, [])


def test_apply_intents_maps_moves_and_quit(game):
    assert apply_intents(game, [Intent.MOVE_UP]) is True
    assert game.snake.pending == Direction.UP
    assert apply_intents(game, [Intent.MOVE_DOWN, Intent.QUIT, Intent.MOVE_UP]) is False
    assert game.snake.pending == Direction.DOWN


def test_apply_intents_drops_reversal(game):
    apply_intents(game, [Intent.MOVE_LEFT])
    assert game.snake.pending is None


def test_quit_before_any_step(game, clock):
    renderer = RecordingRenderer()
    sched = TickScheduler(150, clock)
    result = run_game(game, sched, scripted_poll([[Intent.QUIT]]), renderer, sleep=lambda s: None)
    assert result is LoopResult.QUIT
    assert len(renderer.frames) == 1  # initial frame only


def test_renders_only_when_a_step_happens(game, clock):
    game.food = Point(3, 3)
    renderer = RecordingRenderer()
    sched = TickScheduler(150, clock)
    passes = []

    def poll():
        passes.append(clock.now())
        # three ticks (150, 300, 450 ms), then quit on the next pass
        return [Intent.QUIT] if clock.now() >= 460 else []

    result = run_game(game, sched, poll, renderer, sleep=lambda s: clock.advance(s * 1000), idle_ms=10)
    assert result is LoopResult.QUIT
    assert len(passes) == 47
    assert len(renderer.frames) == 1 + 3
    assert [f.head for f in renderer.frames] == [(10, 7), (11, 7), (12, 7), (13, 7)]


def test_buffered_turn_applies_on_next_tick(game, clock):
    game.food = Point(3, 3)
    renderer = RecordingRenderer()
    sched = TickScheduler(150, clock)
    batches = [[Intent.MOVE_UP, Intent.MOVE_DOWN]] + [[]] * 15 + [[Intent.QUIT]]
    run_game(game, sched, scripted_poll(batches), renderer,
             sleep=lambda s: clock.advance(s * 1000), idle_ms=10)
    # both requests landed before the first tick; the later one won
    assert renderer.frames[1].head == (10, 8)
    assert renderer.frames[1].direction == Direction.DOWN


def test_runs_until_game_over(game, clock):
    game.food = Point(3, 3)
    renderer = RecordingRenderer()
    sched = TickScheduler(150, clock)
    result = run_game(game, sched, lambda: [], renderer,
                      sleep=lambda s: clock.advance(s * 1000), idle_ms=50)
    assert result is LoopResult.GAME_OVER
    # (10, 7) -> (19, 7) takes nine ticks
    assert len(renderer.frames) == 1 + 9
    assert renderer.frames[-1].terminal
    assert renderer.frames[-1].reason == "wall"


def test_zero_idle_never_sleeps(game, clock):
    slept = []
    game.food = Point(3, 3)

    def poll():
        clock.advance(50)
        return []

    result = run_game(game, TickScheduler(150, clock), poll, RecordingRenderer(),
                      sleep=slept.append, idle_ms=0)
    assert result is LoopResult.GAME_OVER
    assert slept == []
