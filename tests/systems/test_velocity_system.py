from dataclasses import replace

from actor_motion.controls import Controls, NO_CONTROLS
from actor_motion.systems.velocity import velocity_control_system
from actor_motion.types import EntityID
from tests.test_utils import make_actor_state


def test_pressed_directions_accelerate() -> None:
    agent_id: EntityID = 1
    state, _ = make_actor_state(agent_id=agent_id)

    state = velocity_control_system(state, Controls(up=True, right=True), agent_id)

    assert state.velocity[agent_id].steps == (1, 1)


def test_released_directions_decelerate() -> None:
    agent_id: EntityID = 1
    state, _ = make_actor_state(agent_id=agent_id)
    for _ in range(3):
        state = velocity_control_system(state, Controls(left=True), agent_id)
    assert state.velocity[agent_id].steps == (-3, 0)

    state = velocity_control_system(state, NO_CONTROLS, agent_id)
    assert state.velocity[agent_id].steps == (-2, 0)


def test_opposite_directions_cancel() -> None:
    agent_id: EntityID = 1
    state, _ = make_actor_state(agent_id=agent_id)

    state = velocity_control_system(state, Controls(left=True, right=True), agent_id)

    assert not state.velocity[agent_id].is_moving


def test_entity_without_velocity_is_untouched() -> None:
    agent_id: EntityID = 1
    state, _ = make_actor_state(agent_id=agent_id)
    state = replace(state, velocity=state.velocity.discard(agent_id))

    assert velocity_control_system(state, Controls(up=True), agent_id) is state
