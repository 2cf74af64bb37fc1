import random

import pytest

from arena.controls import ScriptedInput
from arena.game import Game


class RecordingSurface:
    """Draw surface that remembers every call instead of drawing"""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def names(self, name):
        return [args for call, args in self.calls if call == name]

    def clear_rect(self, *args):
        self._record("clear_rect", *args)

    def save(self):
        self._record("save")

    def restore(self):
        self._record("restore")

    def translate(self, *args):
        self._record("translate", *args)

    def rotate(self, *args):
        self._record("rotate", *args)

    def draw_image_region(self, *args):
        self._record("draw_image_region", *args)

    def fill_rect(self, *args):
        self._record("fill_rect", *args)

    def stroke_rect(self, *args):
        self._record("stroke_rect", *args)

    def fill_text(self, *args):
        self._record("fill_text", *args)

    def measure_text(self, text, size):
        return len(text) * size * 0.5


class SequenceRng:
    """Stands in for random / random.Random, replaying fixed values"""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def inp():
    return ScriptedInput()


@pytest.fixture
def game(inp):
    """640x480 game in the menu, no automatic spawning"""
    return Game(640, 480, input_controller=inp, spawn_frequency=10 ** 9, rng=random.Random(7))


@pytest.fixture
def playing(game):
    """Game that has just started, with the immediate first spawn disarmed"""
    game.start_game()
    game.spawner.reset()
    return game
