"""
Configuration module.
"""

from .pipeline import GeneratorConfig, load_config, save_config
from .tree_config import TreeConfig
from .render_config import SurfaceConfig

__all__ = [
    'GeneratorConfig',
    'load_config',
    'save_config',
    'TreeConfig',
    'SurfaceConfig',
]
