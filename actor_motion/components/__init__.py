"""actor_motion.components
=========================

Aggregate import surface for the ECS component dataclasses, e.g.::

    from actor_motion.components import Position, Velocity

All component classes are frozen ``@dataclass`` value objects manipulated by
systems during the tick pipeline. ``Velocity`` additionally derives the
per-tick displacement and facing quadrant from its own counters.
"""

from .properties import Agent
from .properties import DEFAULT_ACCELERATION_STEPS
from .properties import Facing
from .properties import Position
from .properties import Velocity

__all__ = [
    "Agent",
    "DEFAULT_ACCELERATION_STEPS",
    "Facing",
    "Position",
    "Velocity",
]
