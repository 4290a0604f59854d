# keyboard.py
from __future__ import annotations
from typing import Iterable, List
import pygame  # type: ignore

from .intents import Intent

KEY_TO_INTENT = {
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_w: Intent.MOVE_UP,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_s: Intent.MOVE_DOWN,
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_d: Intent.MOVE_RIGHT,
    pygame.K_q: Intent.QUIT,
    pygame.K_ESCAPE: Intent.QUIT,
}


def intents_from_events(events: Iterable[pygame.event.Event]) -> List[Intent]:
    """Translate pygame events into intents, keeping their order; unknown keys are ignored."""
    intents: List[Intent] = []
    for event in events:
        if event.type == pygame.QUIT:
            intents.append(Intent.QUIT)
        elif event.type == pygame.KEYDOWN:
            intent = KEY_TO_INTENT.get(event.key)
            if intent is not None:
                intents.append(intent)
    return intents


class PygameInput:
    def poll(self) -> List[Intent]:
        # non-blocking: whatever is queued right now, possibly nothing
        return intents_from_events(pygame.event.get())
