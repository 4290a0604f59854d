# tests/test_food.py
import logging
import random

from snake_engine.food import place_food
from snake_engine.grid import Point, in_interior


def test_food_is_inside_the_border(rng):
    for _ in range(2000):
        p = place_food(20, 15, [], rng)
        assert 1 <= p.x <= 18
        assert 1 <= p.y <= 13


def test_food_avoids_snake_body(rng):
    body = [Point(x, y) for x in range(1, 19) for y in range(1, 13)]
    for _ in range(200):
        p = place_food(20, 15, body, rng)
        assert p not in body
        assert p.y == 13


def test_single_free_cell_is_found(rng):
    # 5x5 board -> 3x3 interior; fill all but the centre
    occupied = {Point(x, y) for x in range(1, 4) for y in range(1, 4)} - {Point(2, 2)}
    assert place_food(5, 5, occupied, rng) == (2, 2)


def test_seeded_rng_is_reproducible():
    a = [place_food(20, 15, [], random.Random(42)) for _ in range(3)]
    b = [place_food(20, 15, [], random.Random(42)) for _ in range(3)]
    assert a == b
    assert all(in_interior(p, 20, 15) for p in a)


class ScriptedRng:
    def __init__(self, values):
        self.values = iter(values)

    def randrange(self, start, stop):
        v = next(self.values)
        assert start <= v < stop
        return v


def test_retries_until_free_and_logs_rejections(caplog):
    occupied = {Point(2, 2), Point(3, 3)}
    rng = ScriptedRng([2, 2, 3, 3, 1, 3])
    with caplog.at_level(logging.DEBUG, logger="snake_engine.food"):
        assert place_food(5, 5, occupied, rng) == (1, 3)
    assert any("2 rejected" in r.getMessage() for r in caplog.records)
