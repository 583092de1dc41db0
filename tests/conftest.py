"""
Shared fixtures: a scripted random source and a recording renderer.
"""

import pytest


class FixedRandom:
    """Stand-in for random.Random with predictable draws.

    ``random()`` pops from ``rolls`` and falls back to ``roll`` once the
    script runs out. Range draws land at ``frac`` of the way through their
    range; ``choice`` and ``randrange`` always take the first slot.
    """

    def __init__(self, roll=0.0, rolls=None, frac=0.0):
        self.roll = roll
        self.rolls = list(rolls or [])
        self.frac = frac
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.rolls:
            return self.rolls.pop(0)
        return self.roll

    def uniform(self, a, b):
        return a + (b - a) * self.frac

    def randint(self, a, b):
        return a + int((b - a) * self.frac)

    def randrange(self, n):
        return 0

    def choice(self, seq):
        return seq[0]


class SequenceGlyphs:
    """Glyph provider that hands out A, B, C, ... in order."""

    def __init__(self, alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
        self.alphabet = alphabet
        self.index = 0

    def random_character(self, rng):
        ch = self.alphabet[self.index % len(self.alphabet)]
        self.index += 1
        return ch


class RecordingRenderer:
    def __init__(self, width=1920, height=1080):
        self.width = width
        self.height = height
        self.calls = []
        self.chars_drawn = []

    def clear(self, color):
        self.calls.append(("clear", color))
        self.chars_drawn = []

    def draw_batch(self, chars):
        self.calls.append(("draw_batch", len(chars)))
        self.chars_drawn.extend(chars)

    def present(self):
        self.calls.append(("present", None))

    def surface_width(self):
        return self.width

    def surface_height(self):
        return self.height


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def glyphs():
    return SequenceGlyphs()


@pytest.fixture
def renderer():
    return RecordingRenderer()
