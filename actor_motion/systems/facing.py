"""Facing system.

Turns an entity towards the quadrant of its velocity while it moves. A
stationary entity keeps its previous facing, so releasing all keys leaves the
actor looking the way it last walked.
"""

from dataclasses import replace

from actor_motion.components import Facing
from actor_motion.state import State
from actor_motion.types import EntityID


def facing_system(state: State, entity_id: EntityID) -> State:
    """Update ``entity_id``'s facing from its velocity if it is moving."""
    velocity = state.velocity.get(entity_id)
    if velocity is None or not velocity.is_moving:
        return state

    facing = state.facing.get(entity_id, Facing())
    if facing.direction == velocity.direction:
        return state

    return replace(
        state,
        facing=state.facing.set(entity_id, replace(facing, direction=velocity.direction)),
    )
