"""
Drawing surfaces and animation output for the tree generator.
Uses Cairo for anti-aliased vector drawing.
"""

from config.render_config import SurfaceConfig
from .surface import Surface, CairoSurface, SurfaceError, check_surface
from .animation import (
    collect_frames,
    save_animation,
    save_frame,
    record_animation,
    play_animation
)
