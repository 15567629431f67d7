"""Velocity control system.

Feeds one tick of :class:`Controls` into an entity's :class:`Velocity`: each
pressed direction accelerates, each released direction decelerates. All four
signals are applied before anything reads the velocity, so later systems see
the fully updated state of the tick.
"""

from dataclasses import replace

from actor_motion.controls import Controls
from actor_motion.state import State
from actor_motion.types import EntityID, MOVE_DIRECTIONS


def velocity_control_system(
    state: State, controls: Controls, entity_id: EntityID
) -> State:
    """Apply pressed / released signals to ``entity_id``'s velocity.

    Args:
        state (State): Current state.
        controls (Controls): Pressed signals for this tick.
        entity_id (EntityID): Controlled entity.

    Returns:
        State: Same state if the entity has no velocity, otherwise a new state
            with the updated velocity.
    """
    velocity = state.velocity.get(entity_id)
    if velocity is None:
        return state

    for direction in MOVE_DIRECTIONS:
        if controls.is_pressed(direction):
            velocity = velocity.accelerate(direction)
        else:
            velocity = velocity.decelerate(direction)

    return replace(state, velocity=state.velocity.set(entity_id, velocity))
