"""Position integration system.

Adds each entity's per-tick displacement (``Velocity.x`` / ``Velocity.y``) to
its :class:`Position`. Runs after the control system so it integrates the
velocity of the current tick.
"""

from dataclasses import replace
from typing import Dict

from pyrsistent import pmap
from actor_motion.components import Position
from actor_motion.state import State
from actor_motion.types import EntityID


def position_system(state: State) -> State:
    """Move every entity with both a position and a velocity.

    Args:
        state (State): Current immutable simulation state.

    Returns:
        State: New state with translated positions. Entities without a
            velocity keep their position.
    """
    position: Dict[EntityID, Position] = {}
    for eid, pos in state.position.items():
        velocity = state.velocity.get(eid)
        if velocity is None or not velocity.is_moving:
            position[eid] = pos
        else:
            position[eid] = pos.translated(velocity.x, velocity.y)
    return replace(state, position=pmap(position))
