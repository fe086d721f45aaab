"""
Color policy for new top-level branches.
"""

from .branch import Color
from .random_source import RandomSource

NEUTRAL_COLOR: Color = (1.0, 1.0, 1.0, 1.0)


def hex_to_rgba(value: int, alpha: float = 1.0) -> Color:
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0, alpha)


def next_color(colorful: bool, random: RandomSource) -> Color:
    """White unless colorful, otherwise a uniformly drawn 24-bit color."""
    if not colorful:
        return NEUTRAL_COLOR
    return hex_to_rgba(round(0xFFFFFF * random()))
