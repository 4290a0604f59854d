# render.py
from __future__ import annotations
from typing import Tuple
import pygame  # type: ignore

from .config import BG, CELL_SIZE, GREEN, GREY, HEAD, HUD_H, RED, TEXT, clamp_board
from .game import Snapshot


def board_size_for_display(px_w: int, px_h: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Largest board that fits the display area, never below the minimum playable size."""
    return clamp_board(px_w // cell_size, (px_h - HUD_H) // cell_size)


def window_size(board_w: int, board_h: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Pixel size of a window holding the board plus the score strip."""
    return board_w * cell_size, board_h * cell_size + HUD_H


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)


class PygameRenderer:
    """Draws snapshots onto a pygame surface. Holds no game state."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font,
                 cell_size: int = CELL_SIZE, flip: bool = True):
        self.screen = screen
        self.font = font
        self.cell_size = cell_size
        self.flip = flip  # False when drawing onto an off-screen surface

    def draw(self, snap: Snapshot) -> None:
        cs = self.cell_size
        self.screen.fill(BG)
        # border
        for x in range(snap.board_w):
            draw_cell(self.screen, x, 0, GREY, cs)
            draw_cell(self.screen, x, snap.board_h - 1, GREY, cs)
        for y in range(1, snap.board_h - 1):
            draw_cell(self.screen, 0, y, GREY, cs)
            draw_cell(self.screen, snap.board_w - 1, y, GREY, cs)
        # food
        draw_cell(self.screen, snap.food.x, snap.food.y, RED, cs)
        # snake, head last so it stays visible on a collision
        for p in snap.segments:
            draw_cell(self.screen, p.x, p.y, GREEN, cs)
        draw_cell(self.screen, snap.head.x, snap.head.y, HEAD, cs)
        # score
        txt = self.font.render(f"Score: {snap.score}", True, TEXT)
        self.screen.blit(txt, (8, snap.board_h * cs + 6))
        if self.flip:
            pygame.display.flip()

    def draw_game_over(self, score: int) -> None:
        width, height = self.screen.get_size()
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render("GAME OVER", True, (240, 240, 250))
        sco   = self.font.render(f"Final score: {score}", True, (220, 220, 230))
        sub   = self.font.render("R to restart, Q to quit", True, (220, 220, 230))

        self.screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 28)))
        self.screen.blit(sco, sco.get_rect(center=(width // 2, height // 2)))
        self.screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 28)))
        if self.flip:
            pygame.display.flip()
