"""
BranchState - the parameters of one growth step of a branch lineage.

A lineage has no long-lived object: each step receives a BranchState and
schedules the next step with a fresh one.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .vector import Vector2D

Color = Tuple[float, float, float, float]


def effective_width(width: float, lifetime: int, loss: float) -> float:
    """Stroke width after lifetime decay."""
    return width - lifetime * loss


@dataclass(frozen=True)
class BranchState:
    position: Vector2D
    velocity: Vector2D
    width: float
    growth_rate: float
    lifetime: int
    color: Color

    def effective_width(self, loss: float) -> float:
        return effective_width(self.width, self.lifetime, loss)

    def next_step(self, **changes) -> 'BranchState':
        """Continuation of this lineage, one step older."""
        return replace(self, lifetime=self.lifetime + 1, **changes)

    def __repr__(self) -> str:
        return (f"BranchState(pos={self.position}, vel={self.velocity}, "
                f"w={self.width:.2f}, life={self.lifetime})")
