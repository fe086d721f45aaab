"""
Configuration for the drawing surface and animation output.
"""

from dataclasses import dataclass, fields
from typing import Tuple, Dict, Any


@dataclass
class SurfaceConfig:
    width: int = 800
    height: int = 600
    background_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    antialiasing: bool = True

    fps: int = 30
    duration_seconds: float = 10.0

    output_dir: str = 'outputs'

    def __post_init__(self):
        self.background_color = tuple(self.background_color)
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        if self.duration_seconds < 0:
            raise ValueError(f"duration_seconds must be >= 0, got {self.duration_seconds}")

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.fps

    @property
    def num_frames(self) -> int:
        return int(round(self.duration_seconds * self.fps))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SurfaceConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown render options: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['background_color'] = list(self.background_color)
        return data
