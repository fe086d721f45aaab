"""
Uniform [0, 1) samplers used for every randomized decision of the generator.
"""

from typing import Callable, Optional
import numpy as np

RandomSource = Callable[[], float]


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    rng = np.random.default_rng(seed)

    def sample() -> float:
        return float(rng.random())

    return sample


def constant_random(value: float) -> RandomSource:
    if not 0.0 <= value < 1.0:
        raise ValueError(f"value must be in [0, 1), got {value}")
    return lambda: value
