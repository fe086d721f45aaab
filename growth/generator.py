"""
TreeGenerator - session controller for the growing forest.

start() plants a seed branch at the bottom center of the surface and starts
two periodic timers: one planting new top-level branches, one fading the
surface. stop() cancels the timers; lineages already growing drain on their
own.
"""

from typing import Optional, Dict

from config.tree_config import TreeConfig
from rendering.surface import check_surface
from .branch import BranchState
from .color import NEUTRAL_COLOR, next_color
from .engine import GrowthEngine
from .random_source import RandomSource, make_random_source
from .scheduler import VirtualScheduler, TimerHandle
from .vector import Vector2D

MAX_SPAWN_SPEED = 3.0


class TreeGenerator:
    def __init__(self, surface, config: Optional[TreeConfig] = None,
                 scheduler: Optional[VirtualScheduler] = None,
                 random: Optional[RandomSource] = None,
                 background_color=(0.0, 0.0, 0.0, 1.0)):
        self.config = config or TreeConfig()
        self.surface = surface
        self.scheduler = scheduler or VirtualScheduler()
        self.random = random or make_random_source(self.config.random_seed)
        self.background_color = tuple(background_color)

        self.engine = GrowthEngine(self.config, surface, self.scheduler, self.random)

        self._seed_timer: Optional[TimerHandle] = None
        self._spawn_timer: Optional[TimerHandle] = None
        self._fade_timer: Optional[TimerHandle] = None
        self.fade_passes = 0

    @property
    def running(self) -> bool:
        return self._fade_timer is not None

    def seed_branch(self) -> BranchState:
        dx, dy = self.config.seed_velocity
        return BranchState(
            position=Vector2D(self.surface.width / 2, self.surface.height),
            velocity=Vector2D(dx, dy),
            width=self.config.initial_width,
            growth_rate=self.config.growth_rate,
            lifetime=0,
            color=NEUTRAL_COLOR,
        )

    def random_branch(self) -> BranchState:
        """A new top-level branch rising from a random point on the bottom edge."""
        return BranchState(
            position=Vector2D(self.random() * self.surface.width, self.surface.height),
            velocity=Vector2D(0.0, -self.random() * MAX_SPAWN_SPEED),
            width=self.config.initial_width * self.random(),
            growth_rate=self.config.growth_rate,
            lifetime=0,
            color=next_color(self.config.colorful, self.random),
        )

    def start(self):
        if self.running:
            return
        check_surface(self.surface)

        self._seed_timer = self.engine.plant(self.seed_branch())
        if self.config.auto_spawn:
            self._spawn_timer = self.scheduler.schedule_interval(
                lambda: self.engine.plant(self.random_branch()),
                self.config.spawn_interval
            )
        self._fade_timer = self.scheduler.schedule_interval(self.fade, self.config.fade_interval)

    def stop(self):
        for timer in (self._seed_timer, self._spawn_timer, self._fade_timer):
            self.scheduler.cancel(timer)
        self._seed_timer = None
        self._spawn_timer = None
        self._fade_timer = None

    def fade(self):
        """Overlay the surface with a translucent background-colored rectangle."""
        if not self.config.fade_out:
            return
        r, g, b, _ = self.background_color
        self.surface.fill_rect(0, 0, self.surface.width, self.surface.height,
                               (r, g, b, self.config.fade_amount))
        self.fade_passes += 1

    def clear(self):
        r, g, b, _ = self.background_color
        self.surface.fill_rect(0, 0, self.surface.width, self.surface.height, (r, g, b, 1.0))

    def stats(self) -> Dict[str, float]:
        engine = self.engine
        return {
            'time_ms': self.scheduler.now,
            'segments': engine.segments_drawn,
            'spawns': engine.spawn_events,
            'lineages_started': engine.lineages_started,
            'lineages_finished': engine.lineages_finished,
            'lineages_active': engine.lineages_started - engine.lineages_finished,
            'fade_passes': self.fade_passes,
        }
