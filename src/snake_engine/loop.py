# loop.py
from __future__ import annotations
from enum import Enum
from typing import Callable, List, Protocol
import time

from .game import GameState, Snapshot
from .intents import Intent, apply_intents
from .scheduler import TickScheduler


class Renderer(Protocol):
    def draw(self, snap: Snapshot) -> None: ...


class LoopResult(Enum):
    QUIT = "quit"
    GAME_OVER = "game_over"


def run_game(
    state: GameState,
    scheduler: TickScheduler,
    poll: Callable[[], List[Intent]],
    renderer: Renderer,
    sleep: Callable[[float], None] = time.sleep,
    idle_ms: float = 10,
) -> LoopResult:
    """
    Drive one game until the player quits or the snake dies.

    Each pass: 1) drain input, 2) at most one simulation step when the
    scheduler admits it, 3) redraw only if a step happened. The sleep
    only caps CPU usage; idle_ms=0 is valid.
    """
    renderer.draw(state.snapshot())

    while True:
        # 1) input
        if not apply_intents(state, poll()):
            return LoopResult.QUIT

        # 2) update
        if scheduler.ready():
            state.step()
            # 3) render
            renderer.draw(state.snapshot())
            if state.terminal:
                return LoopResult.GAME_OVER

        if idle_ms > 0:
            sleep(idle_ms / 1000.0)
