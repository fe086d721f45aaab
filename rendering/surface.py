"""
Drawing surfaces consumed by the growth engine.

Surface is the contract: a canvas-like stroke/fill API plus the surface size.
CairoSurface implements it on a cairo.ImageSurface so frames can be pulled
out as numpy arrays for display or export.
"""

import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

import cairo
import numpy as np

Color = Tuple[float, float, float, float]


class SurfaceError(RuntimeError):
    """The drawing surface is missing or unusable."""


class Surface(ABC):
    @property
    @abstractmethod
    def width(self) -> float:
        pass

    @property
    @abstractmethod
    def height(self) -> float:
        pass

    @abstractmethod
    def set_stroke_width(self, width: float):
        pass

    @abstractmethod
    def set_stroke_color(self, color: Color):
        pass

    @abstractmethod
    def begin_path(self):
        pass

    @abstractmethod
    def move_to(self, x: float, y: float):
        pass

    @abstractmethod
    def line_to(self, x: float, y: float):
        pass

    @abstractmethod
    def stroke(self):
        pass

    @abstractmethod
    def stroke_circle(self, x: float, y: float, radius: float, color: Color):
        pass

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        pass


def check_surface(surface) -> None:
    """Raise SurfaceError unless surface can be drawn on."""
    if surface is None:
        raise SurfaceError("No drawing surface given")
    try:
        width, height = surface.width, surface.height
    except AttributeError as e:
        raise SurfaceError(f"Drawing surface has no size: {e}") from e
    if not width or not height or width <= 0 or height <= 0:
        raise SurfaceError(f"Drawing surface has invalid size {width}x{height}")


class CairoSurface(Surface):
    def __init__(self, width: int, height: int,
                 background_color: Color = (0.0, 0.0, 0.0, 1.0),
                 antialiasing: bool = True):
        if width <= 0 or height <= 0:
            raise SurfaceError(f"Cannot create a {width}x{height} surface")
        self._width = int(width)
        self._height = int(height)
        self.background_color = tuple(background_color)

        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, self._width, self._height)
        self.ctx = cairo.Context(self.surface)
        if antialiasing:
            self.ctx.set_antialias(cairo.ANTIALIAS_BEST)
        self.ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        self._stroke_color: Color = (1.0, 1.0, 1.0, 1.0)

        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self):
        """Paint the whole surface with the opaque background color."""
        r, g, b, a = self.background_color
        self.ctx.save()
        self.ctx.set_operator(cairo.OPERATOR_SOURCE)
        self.ctx.set_source_rgba(r, g, b, a)
        self.ctx.paint()
        self.ctx.restore()

    def set_stroke_width(self, width: float):
        # cairo rejects negative widths; the engine may pass them on a lineage's last step
        self.ctx.set_line_width(max(0.0, width))

    def set_stroke_color(self, color: Color):
        self._stroke_color = tuple(color)

    def begin_path(self):
        self.ctx.new_path()

    def move_to(self, x: float, y: float):
        self.ctx.move_to(x, y)

    def line_to(self, x: float, y: float):
        self.ctx.line_to(x, y)

    def stroke(self):
        self.ctx.set_source_rgba(*self._stroke_color)
        self.ctx.stroke()

    def stroke_circle(self, x: float, y: float, radius: float, color: Color):
        self.ctx.save()
        self.ctx.set_line_width(1.0)
        self.ctx.set_source_rgba(*color)
        self.ctx.new_path()
        self.ctx.arc(x, y, max(0.0, radius), 0, 2 * math.pi)
        self.ctx.close_path()
        self.ctx.stroke()
        self.ctx.restore()

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        self.ctx.save()
        self.ctx.set_source_rgba(*color)
        self.ctx.rectangle(x, y, w, h)
        self.ctx.fill()
        self.ctx.restore()

    def to_numpy(self) -> np.ndarray:
        """Current pixels as an (H, W, 4) RGBA uint8 array."""
        self.surface.flush()
        buf = self.surface.get_data()
        arr = np.ndarray(
            shape=(self._height, self.surface.get_stride() // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self._width]
        # cairo stores premultiplied BGRA on little-endian machines
        return arr[:, :, [2, 1, 0, 3]].copy()

    def save_png(self, output_path: str):
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        self.surface.flush()
        self.surface.write_to_png(str(output_path))
