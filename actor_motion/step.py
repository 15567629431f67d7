"""State reducer and tick orchestration.

This module wires the systems together to implement a single *tick* given the
pressed :class:`Controls`. The exported :func:`step` is the public
progression entry point and is pure: it returns a *new*
:class:`actor_motion.state.State`.

Ordering:

1. ``velocity_control_system`` applies all four signals to the agent.
2. ``facing_system`` turns the agent towards its velocity if it moves.
3. ``position_system`` integrates every entity's velocity.
4. ``turn`` is bumped.

Keyboard front-ends call :func:`step_keys`, which translates key names with
the bindings of a :class:`MotionConfig` before stepping.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from actor_motion.config import MotionConfig
from actor_motion.controls import Controls
from actor_motion.state import State
from actor_motion.systems.facing import facing_system
from actor_motion.systems.position import position_system
from actor_motion.systems.velocity import velocity_control_system
from actor_motion.types import EntityID

logger = logging.getLogger(__name__)


def step(
    state: State, controls: Controls, agent_id: Optional[EntityID] = None
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.
        controls (Controls): Pressed signals for this tick.
        agent_id (EntityID | None): Explicit agent entity id. If ``None`` the
            first entity in ``state.agent`` is used.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If there is no agent.
    """
    if agent_id is None and (agent_id := next(iter(state.agent.keys()), None)) is None:
        raise ValueError("State contains no agent")

    state = velocity_control_system(state, controls, agent_id)
    state = facing_system(state, agent_id)
    state = position_system(state)

    if logger.isEnabledFor(logging.DEBUG) and agent_id in state.velocity:
        velocity = state.velocity[agent_id]
        logger.debug(
            "turn=%d agent=%s(%d) steps=%s speed=(%d, %d) direction=%s",
            state.turn,
            state.agent[agent_id].name if agent_id in state.agent else "?",
            agent_id,
            velocity.steps,
            velocity.x,
            velocity.y,
            velocity.direction,
        )

    return replace(state, turn=state.turn + 1)


def step_keys(
    state: State,
    pressed_keys: Iterable[str],
    config: MotionConfig,
    agent_id: Optional[EntityID] = None,
) -> State:
    """Advance one tick from raw key names, translated by ``config.key_bindings``.

    Keys without a binding are ignored, so a custom binding table fully
    replaces the default W/A/S/D layout.
    """
    controls = Controls.from_keys(pressed_keys, config.key_bindings)
    return step(state, controls, agent_id=agent_id)
