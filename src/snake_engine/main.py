# main.py
from __future__ import annotations
from dataclasses import replace
import argparse
import logging

import pygame  # type: ignore

from .config import CFG, CELL_SIZE, Config, clamp_board
from .game import GameState, new_game_state
from .keyboard import PygameInput
from .loop import LoopResult, run_game
from .render import PygameRenderer, board_size_for_display, window_size
from .scheduler import PygameClock, TickScheduler

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Play snake in a pygame window.")
    p.add_argument("--width", type=int, default=None, help="board width in cells")
    p.add_argument("--height", type=int, default=None, help="board height in cells")
    p.add_argument("--fit", action="store_true",
                   help="size the board to the current display instead of --width/--height")
    p.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="milliseconds per simulation step")
    p.add_argument("--seed", type=int, default=CFG.seed)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    cfg = replace(CFG, seed=args.seed, tick_ms=args.tick_ms)
    w = args.width if args.width is not None else cfg.board_w
    h = args.height if args.height is not None else cfg.board_h
    w, h = clamp_board(w, h)
    return replace(cfg, board_w=w, board_h=h)


def wait_for_restart(renderer: PygameRenderer, score: int, clock: pygame.time.Clock, fps: int) -> bool:
    """Show the game-over overlay until R (True) or Q / Esc / close (False)."""
    renderer.draw_game_over(score)
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    return True
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    return False
        clock.tick(fps)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)

    pygame.init()
    try:
        if args.fit:
            info = pygame.display.Info()
            w, h = board_size_for_display(info.current_w, info.current_h)
            cfg = replace(cfg, board_w=w, board_h=h)
        logger.info("board %dx%d, tick %d ms", cfg.board_w, cfg.board_h, cfg.tick_ms)

        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode(window_size(cfg.board_w, cfg.board_h, CELL_SIZE))
        pygame.display.set_caption("Snake")
        renderer = PygameRenderer(screen, font, CELL_SIZE)
        keyboard = PygameInput()
        scheduler = TickScheduler(cfg.tick_ms, PygameClock())
        clock = pygame.time.Clock()

        state: GameState = new_game_state(cfg.board_w, cfg.board_h, cfg.seed)
        while True:
            result = run_game(state, scheduler, keyboard.poll, renderer, idle_ms=cfg.idle_ms)
            if result is LoopResult.QUIT:
                break
            if not wait_for_restart(renderer, state.score, clock, cfg.fps):
                break
            # restart: same board, everything else starts over
            state.reset()
            scheduler.restart()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
