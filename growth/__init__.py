"""
Stochastic branch growth for animated 2D trees.

Every branch is a lineage of small straight segments. At each step a branch
drifts, narrows and occasionally spawns a new branch; steps are staggered on
a cooperative timer queue so the forest grows as a continuous animation.
"""

from .vector import Vector2D
from .branch import BranchState, effective_width
from .color import next_color
from .scheduler import VirtualScheduler, TimerHandle, SchedulerError
from .random_source import make_random_source, constant_random
from .engine import GrowthEngine
from .generator import TreeGenerator

__all__ = [
    'Vector2D',
    'BranchState',
    'effective_width',
    'next_color',
    'VirtualScheduler',
    'TimerHandle',
    'SchedulerError',
    'make_random_source',
    'constant_random',
    'GrowthEngine',
    'TreeGenerator',
]
