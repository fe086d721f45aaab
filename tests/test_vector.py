"""
Tests for the immutable vector and branch state values.
"""

import pytest

from growth.branch import BranchState
from growth.vector import Vector2D


class TestVector2D:
    """Tests for vector arithmetic."""

    def test_addition(self) -> None:
        """Addition works component-wise."""
        assert Vector2D(1, 2) + Vector2D(3, -1) == Vector2D(4, 1)

    def test_immutable(self) -> None:
        """Vectors cannot be modified in place."""
        v = Vector2D(1, 1)
        with pytest.raises(AttributeError):
            v.x = 5


class TestBranchState:
    """Tests for the per-step branch parameters."""

    def test_next_step_increments_lifetime(self) -> None:
        """next_step ages the lineage and applies changes."""
        state = BranchState(Vector2D(0, 0), Vector2D(1, 0), 5.0, 20.0, 7, (1, 1, 1, 1))
        nxt = state.next_step(position=Vector2D(1, 0), width=4.0)
        assert nxt.lifetime == 8
        assert nxt.position == Vector2D(1, 0)
        assert nxt.width == 4.0
        assert nxt.growth_rate == 20.0
        assert state.lifetime == 7

    def test_frozen(self) -> None:
        """States are values, not mutable objects."""
        state = BranchState(Vector2D(0, 0), Vector2D(1, 0), 5.0, 20.0, 0, (1, 1, 1, 1))
        with pytest.raises(AttributeError):
            state.width = 1.0
