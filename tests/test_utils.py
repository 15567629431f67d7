from typing import Iterable, Tuple

from actor_motion.components import Velocity
from actor_motion.config import MotionConfig
from actor_motion.levels.factories import empty_state, spawn_actor
from actor_motion.state import State
from actor_motion.types import Direction, EntityID


def make_actor_state(
    agent_id: EntityID = 1,
    agent_pos: Tuple[float, float] = (0.0, 0.0),
    max_speed: int = 5,
    acceleration_steps: int = 10,
) -> Tuple[State, EntityID]:
    """Single-actor state for system and integration tests."""
    config = MotionConfig(max_speed=max_speed, acceleration_steps=acceleration_steps)
    return spawn_actor(
        empty_state(), config, agent_pos[0], agent_pos[1], entity_id=agent_id
    )


def accelerated(
    directions: Iterable[Direction],
    max_speed: int = 10,
    acceleration_steps: int = 10,
) -> Velocity:
    """Velocity at rest accelerated once per listed direction."""
    velocity = Velocity.at_rest(max_speed, acceleration_steps)
    for direction in directions:
        velocity = velocity.accelerate(direction)
    return velocity
