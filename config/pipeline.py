"""
Unified configuration for the tree generator.

A single JSON file holds both sections:

    {
        "tree":   {...TreeConfig fields (snake_case or camelCase)...},
        "render": {...SurfaceConfig fields...}
    }
"""

from dataclasses import dataclass, field
from pathlib import Path
import json

from .tree_config import TreeConfig
from .render_config import SurfaceConfig


@dataclass
class GeneratorConfig:
    tree: TreeConfig = field(default_factory=TreeConfig)
    render: SurfaceConfig = field(default_factory=SurfaceConfig)

    # ==================== DERIVED PATHS ====================
    @property
    def output_dir(self) -> Path:
        return Path(self.render.output_dir)

    @property
    def animation_path(self) -> Path:
        return self.output_dir / 'trees.gif'

    @property
    def final_frame_path(self) -> Path:
        return self.output_dir / 'trees_final.png'

    def create_output_dirs(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/generator.json') -> GeneratorConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return GeneratorConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    unknown = set(data) - {'tree', 'render'}
    if unknown:
        raise ValueError(f"Unknown config sections in {config_path}: {sorted(unknown)}")

    return GeneratorConfig(
        tree=TreeConfig.from_dict(data.get('tree', {})),
        render=SurfaceConfig.from_dict(data.get('render', {})),
    )


def save_config(config: GeneratorConfig, path: str = 'config/generator.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'tree': config.tree.to_dict(),
        'render': config.render.to_dict(),
    }

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
