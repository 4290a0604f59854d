from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Board (in cells) -----
BOARD_W, BOARD_H = 20, 15
MIN_BOARD_W, MIN_BOARD_H = 20, 10

# ----- Window -----
CELL_SIZE = 24
HUD_H = 28  # strip under the board for the score line

# ----- Colors -----
BG    = (20, 20, 24)
GREY  = (110, 110, 120)
GREEN = (80, 200, 80)
HEAD  = (150, 255, 150)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    board_w: int = BOARD_W
    board_h: int = BOARD_H
    tick_ms: int = 150    # one simulation step per tick
    idle_ms: int = 10     # sleep between loop passes, CPU cap only
    fps: int = 30         # redraw rate of the game-over prompt

CFG = Config()


def clamp_board(width: int, height: int) -> Tuple[int, int]:
    """Clamp requested board dimensions to the minimum playable size."""
    return max(width, MIN_BOARD_W), max(height, MIN_BOARD_H)
