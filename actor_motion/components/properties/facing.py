"""Facing component.

Direction the actor looks at, used to pick a sprite row. It only follows the
velocity while the actor moves, so an actor that stops keeps looking the way it
last walked. Fresh actors look ``DOWN`` (towards the viewer).
"""

from dataclasses import dataclass

from actor_motion.types import Direction


@dataclass(frozen=True)
class Facing:
    """View direction.

    Attributes:
        direction: Current facing, ``DOWN`` by default.
    """

    direction: Direction = Direction.DOWN
