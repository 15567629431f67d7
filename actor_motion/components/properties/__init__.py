"""Property component aggregates.

This module re-exports the components describing the controllable actor:
:class:`Agent` (routing marker), :class:`Velocity` (bounded step counters and
speed scaling), :class:`Position` (continuous world coordinates) and
:class:`Facing` (view direction for sprite selection).

All properties are immutable dataclasses; creating a new instance is how state
changes are expressed between ticks.
"""

from .agent import Agent
from .facing import Facing
from .position import Position
from .velocity import DEFAULT_ACCELERATION_STEPS, Velocity

__all__ = [
    "Agent",
    "DEFAULT_ACCELERATION_STEPS",
    "Facing",
    "Position",
    "Velocity",
]
