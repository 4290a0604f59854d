# food.py
from __future__ import annotations
import logging
import random
from typing import Container, Optional

from .grid import Point

logger = logging.getLogger(__name__)


def place_food(
    width: int,
    height: int,
    occupied: Container[Point],
    rng: Optional[random.Random] = None,
) -> Point:
    """
    Pick a random interior cell (outer ring excluded) that is not in `occupied`.

    Plain rejection sampling with no retry cap: it only slows down as the
    snake fills the interior, and never terminates if the interior is full.
    """
    rng = rng or random
    rejected = 0
    while True:
        p = Point(rng.randrange(1, width - 1), rng.randrange(1, height - 1))
        if p not in occupied:
            if rejected:
                logger.debug("food placed at %s after %d rejected samples", p, rejected)
            return p
        rejected += 1
