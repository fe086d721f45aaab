"""
Configuration for the branch growth process.
"""

from dataclasses import dataclass, fields
from typing import Tuple, Optional, Dict, Any

# Option names used by the browser version of the generator
CAMEL_CASE_ALIASES = {
    'minSleep': 'min_sleep',
    'branchLoss': 'branch_loss',
    'mainLoss': 'main_loss',
    'newBranch': 'new_branch',
    'fastMode': 'fast_mode',
    'fadeOut': 'fade_out',
    'fadeAmount': 'fade_amount',
    'autoSpawn': 'auto_spawn',
    'spawnInterval': 'spawn_interval',
    'initialWidth': 'initial_width',
    'indicateNewBranch': 'indicate_new_branch',
    'fadeInterval': 'fade_interval',
    'growthRate': 'growth_rate',
}


@dataclass
class TreeConfig:
    loss: float = 0.03               # Width loss per step
    min_sleep: float = 10.0          # Floor of the spawn delay (ms)
    branch_loss: float = 0.8         # Width kept by a new branch
    main_loss: float = 0.8           # Width kept by the parent after branching
    speed: float = 0.3               # Velocity perturbation
    new_branch: float = 0.8          # Chance of NOT starting a new branch

    colorful: bool = False
    fast_mode: bool = True
    fade_out: bool = True
    fade_amount: float = 0.05

    auto_spawn: bool = True
    spawn_interval: float = 250.0    # ms
    fade_interval: float = 250.0     # ms

    initial_width: float = 10.0
    growth_rate: float = 30.0        # Step delay of new top-level branches (ms)
    seed_velocity: Tuple[float, float] = (0.0, -3.0)

    indicate_new_branch: bool = False
    new_branch_marker_color: Tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.4)

    random_seed: Optional[int] = None

    def __post_init__(self):
        self.seed_velocity = tuple(self.seed_velocity)
        self.new_branch_marker_color = tuple(self.new_branch_marker_color)

        if self.loss < 0:
            raise ValueError(f"loss must be >= 0, got {self.loss}")
        if self.min_sleep < 0:
            raise ValueError(f"min_sleep must be >= 0, got {self.min_sleep}")
        for name in ('branch_loss', 'main_loss', 'new_branch', 'fade_amount'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        for name in ('spawn_interval', 'fade_interval'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        if self.initial_width <= 0:
            raise ValueError(f"initial_width must be > 0, got {self.initial_width}")
        if self.growth_rate < 0:
            raise ValueError(f"growth_rate must be >= 0, got {self.growth_rate}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TreeConfig':
        """Build a config from a dict, accepting snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = CAMEL_CASE_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown tree option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['seed_velocity'] = list(self.seed_velocity)
        data['new_branch_marker_color'] = list(self.new_branch_marker_color)
        return data
