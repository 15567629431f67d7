"""Convenience factories for building motion states.

``spawn_actor`` attaches the full component set of a controllable actor
(agent marker, velocity at rest, position, facing ``DOWN``) to a fresh entity
id and returns the new state together with that id.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

from actor_motion.components import Agent, Facing, Position, Velocity
from actor_motion.config import MotionConfig
from actor_motion.entity import new_entity_id
from actor_motion.state import State
from actor_motion.types import EntityID

logger = logging.getLogger(__name__)


def empty_state() -> State:
    """State with no entities at turn 0."""
    return State()


def spawn_actor(
    state: State,
    config: Optional[MotionConfig] = None,
    x: float = 0.0,
    y: float = 0.0,
    entity_id: Optional[EntityID] = None,
    name: str = "actor",
) -> Tuple[State, EntityID]:
    """Add a controllable actor at ``(x, y)``.

    Args:
        state (State): State to extend.
        config (MotionConfig | None): Speed tunables; defaults if ``None``.
        x (float): Initial horizontal coordinate.
        y (float): Initial vertical coordinate.
        entity_id (EntityID | None): Explicit id, otherwise a new one.
        name (str): Agent label for log output.

    Returns:
        Tuple[State, EntityID]: Extended state and the actor's id.
    """
    config = config or MotionConfig()
    eid = new_entity_id(state) if entity_id is None else entity_id
    state = replace(
        state,
        agent=state.agent.set(eid, Agent(name)),
        velocity=state.velocity.set(
            eid, Velocity.at_rest(config.max_speed, config.acceleration_steps)
        ),
        position=state.position.set(eid, Position(x, y)),
        facing=state.facing.set(eid, Facing()),
    )
    logger.debug("Spawned %s (%d) at (%s, %s) with %s", name, eid, x, y, config)
    return state, eid
