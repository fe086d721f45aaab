"""
Growth engine - advances one branch lineage by one step.

Each call to step() draws a single segment and then hands the lineage back to
the scheduler: a continuation one lifetime older while the effective width is
at least 1, and occasionally an independent child lineage spawned from the
new tip. Nothing survives between steps except the scheduled BranchState.
"""

import math

from config.tree_config import TreeConfig
from .branch import BranchState
from .random_source import RandomSource
from .scheduler import VirtualScheduler
from .vector import Vector2D

MIN_WIDTH = 1.0
EDGE_WIDTH = 6.0          # Branches thinner than this shrink near the bottom edge
EDGE_BAND = 0.3           # Fraction of the surface height treated as the edge
EDGE_SHRINK = 0.8
CHILD_TURN = 2.0          # Velocity magnitude of a freshly spawned branch
SPAWN_AGE_PER_WIDTH = 5.0
SPAWN_AGE_JITTER = 100.0
CHILD_RATE_JITTER = 100.0


class GrowthEngine:
    def __init__(self, config: TreeConfig, surface, scheduler: VirtualScheduler, random: RandomSource):
        self.config = config
        self.surface = surface
        self.scheduler = scheduler
        self.random = random

        self.segments_drawn = 0
        self.spawn_events = 0
        self.lineages_started = 0
        self.lineages_finished = 0

    def plant(self, state: BranchState, delay: float = 0.0):
        """Schedule the first step of a new lineage."""
        def first_step():
            self.lineages_started += 1
            self.step(state)

        return self.scheduler.schedule_delayed(first_step, delay)

    def _perturb(self, velocity: Vector2D, lifetime: int, scale: float) -> Vector2D:
        return Vector2D(
            velocity.x + math.sin(self.random() + lifetime) * scale,
            velocity.y + math.cos(self.random() + lifetime) * scale,
        )

    def _should_spawn(self, width: float, lifetime: int) -> bool:
        if lifetime <= SPAWN_AGE_PER_WIDTH * width + self.random() * SPAWN_AGE_JITTER:
            return False
        return self.random() > self.config.new_branch

    def _spawn(self, parent: BranchState, tip: Vector2D, width: float, growth_rate: float):
        """Schedule an independent lineage starting at tip."""
        cfg = self.config
        lifetime = parent.lifetime
        child = BranchState(
            position=tip,
            velocity=self._perturb(Vector2D(0, 0), lifetime, CHILD_TURN),
            width=(width - lifetime * cfg.loss) * cfg.branch_loss,
            growth_rate=growth_rate + self.random() * CHILD_RATE_JITTER,
            lifetime=0,
            color=parent.color,
        )
        delay = 2 * growth_rate * self.random() + cfg.min_sleep

        def birth():
            if cfg.indicate_new_branch:
                self.surface.stroke_circle(tip.x, tip.y, width, cfg.new_branch_marker_color)
            self.lineages_started += 1
            self.step(child)

        self.spawn_events += 1
        self.scheduler.schedule_delayed(birth, delay)
        return child

    def step(self, state: BranchState):
        cfg = self.config
        surface = self.surface
        lifetime = state.lifetime
        width = state.width
        growth_rate = state.growth_rate

        surface.set_stroke_width(state.effective_width(cfg.loss))
        surface.begin_path()
        surface.move_to(state.position.x, state.position.y)

        if cfg.fast_mode:
            growth_rate *= 0.5

        tip = state.position + state.velocity
        velocity = self._perturb(state.velocity, lifetime, cfg.speed)

        if state.effective_width(cfg.loss) < EDGE_WIDTH:
            edge = surface.height - self.random() * (EDGE_BAND * surface.height)
            if tip.y > edge:
                width *= EDGE_SHRINK

        surface.set_stroke_color(state.color)
        surface.line_to(tip.x, tip.y)
        surface.stroke()
        self.segments_drawn += 1

        # Termination uses the width before any post-spawn reduction
        continues = width - lifetime * cfg.loss >= MIN_WIDTH

        if self._should_spawn(width, lifetime):
            # Child width comes from the parent before its own reduction
            self._spawn(state, tip, width, growth_rate)
            width *= cfg.main_loss

        if continues:
            continuation = state.next_step(
                position=tip,
                velocity=velocity,
                width=width,
                growth_rate=growth_rate,
            )
            self.scheduler.schedule_delayed(lambda: self.step(continuation), growth_rate)
        else:
            self.lineages_finished += 1
