"""
Shared fixtures: a surface that records drawing calls and scripted randomness.
"""

import itertools
from typing import List, Tuple

import pytest

from rendering.surface import Surface


class RecordingSurface(Surface):
    """Surface fake that logs every drawing call instead of drawing."""

    def __init__(self, width: float = 800, height: float = 600):
        self._width = width
        self._height = height
        self.calls: List[Tuple] = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def set_stroke_width(self, width):
        self.calls.append(('set_stroke_width', width))

    def set_stroke_color(self, color):
        self.calls.append(('set_stroke_color', color))

    def begin_path(self):
        self.calls.append(('begin_path',))

    def move_to(self, x, y):
        self.calls.append(('move_to', x, y))

    def line_to(self, x, y):
        self.calls.append(('line_to', x, y))

    def stroke(self):
        self.calls.append(('stroke',))

    def stroke_circle(self, x, y, radius, color):
        self.calls.append(('stroke_circle', x, y, radius, color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(('fill_rect', x, y, w, h, color))

    def named(self, name: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == name]


def scripted_random(*values):
    """Random source that cycles through the given values."""
    cycle = itertools.cycle(values)
    return lambda: next(cycle)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
