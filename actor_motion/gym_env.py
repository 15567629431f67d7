"""Gymnasium environment wrapper for the motion model.

The action is the tick's four pressed signals as ``MultiBinary(4)`` (ordered
as :data:`actor_motion.types.MOVE_DIRECTIONS`). The observation exposes the
raw step counters, the scaled speed, the position and the facing:

``{"steps": int64[2], "speed": int64[2], "position": float64[2], "facing": int}``

There is no objective: reward is always 0 and episodes never terminate; pass
``max_episode_steps`` to truncate them.

Usage:

``env = MotionEnv(config=MotionConfig(max_speed=40, acceleration_steps=2))``
"""

import logging
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from actor_motion.config import MotionConfig
from actor_motion.controls import Controls
from actor_motion.levels.factories import empty_state, spawn_actor
from actor_motion.state import State
from actor_motion.step import step
from actor_motion.types import EntityID, MOVE_DIRECTIONS

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]


def observation_dict(state: State, agent_id: EntityID) -> ObsType:
    """Encode the agent's motion components as numpy arrays."""
    velocity = state.velocity[agent_id]
    position = state.position[agent_id]
    facing = state.facing[agent_id]
    return {
        "steps": np.array(velocity.steps, dtype=np.int64),
        "speed": np.array((velocity.x, velocity.y), dtype=np.int64),
        "position": np.array((position.x, position.y), dtype=np.float64),
        "facing": MOVE_DIRECTIONS.index(facing.direction),
    }


class MotionEnv(gym.Env[ObsType, np.ndarray]):
    """Gymnasium ``Env`` driving a single actor."""

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        config: Optional[MotionConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: Optional[int] = None,
        start: Tuple[float, float] = (0.0, 0.0),
    ):
        """Create a new environment instance.

        Arguments:
            config: Speed tunables of the actor; defaults if ``None``.
            render_mode: ``"ansi"`` to render a text summary, else ``None``.
            max_episode_steps: Truncate episodes after this many ticks.
            start: Initial ``(x, y)`` of the actor.
        """
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.config = config or MotionConfig()
        self.render_mode = render_mode
        self._max_episode_steps = max_episode_steps
        self._start = start

        self.state: Optional[State] = None
        self.agent_id: Optional[EntityID] = None

        steps = self.config.acceleration_steps
        max_speed = self.config.max_speed
        self.action_space = spaces.MultiBinary(len(MOVE_DIRECTIONS))
        self.observation_space = spaces.Dict(
            {
                "steps": spaces.Box(low=-steps, high=steps, shape=(2,), dtype=np.int64),
                "speed": spaces.Box(
                    low=-max_speed, high=max_speed, shape=(2,), dtype=np.int64
                ),
                "position": spaces.Box(
                    low=-np.inf, high=np.inf, shape=(2,), dtype=np.float64
                ),
                "facing": spaces.Discrete(len(MOVE_DIRECTIONS)),
            }
        )

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        super().reset(seed=seed)
        x, y = self._start
        self.state, self.agent_id = spawn_actor(empty_state(), self.config, x, y)
        logger.debug("Reset motion env with agent %d", self.agent_id)
        return observation_dict(self.state, self.agent_id), self._info()

    def step(
        self, action: np.ndarray
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        if self.state is None or self.agent_id is None:
            raise RuntimeError("Call reset() before step()")

        controls = Controls.from_array(action)
        self.state = step(self.state, controls, agent_id=self.agent_id)

        truncated = (
            self._max_episode_steps is not None
            and self.state.turn >= self._max_episode_steps
        )
        obs = observation_dict(self.state, self.agent_id)
        return obs, 0.0, False, truncated, self._info()

    def render(self) -> Optional[str]:
        if self.render_mode != "ansi" or self.state is None or self.agent_id is None:
            return None
        velocity = self.state.velocity[self.agent_id]
        position = self.state.position[self.agent_id]
        facing = self.state.facing[self.agent_id]
        return (
            f"turn={self.state.turn} pos=({position.x:.1f}, {position.y:.1f}) "
            f"speed=({velocity.x}, {velocity.y}) facing={facing.direction}"
        )

    def _info(self) -> Dict[str, Any]:
        assert self.state is not None and self.agent_id is not None
        return {
            "turn": self.state.turn,
            "moving": self.state.velocity[self.agent_id].is_moving,
            "depth": self.state.position[self.agent_id].depth,
        }
