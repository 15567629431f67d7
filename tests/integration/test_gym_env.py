import numpy as np
import pytest

from actor_motion.config import MotionConfig
from actor_motion.gym_env import MotionEnv
from actor_motion.types import Direction, MOVE_DIRECTIONS


def test_reset_returns_actor_at_rest() -> None:
    env = MotionEnv(start=(10.0, 20.0))
    obs, info = env.reset(seed=0)

    assert obs["steps"].tolist() == [0, 0]
    assert obs["speed"].tolist() == [0, 0]
    assert obs["position"].tolist() == [10.0, 20.0]
    assert obs["facing"] == MOVE_DIRECTIONS.index(Direction.DOWN)
    assert info["turn"] == 0
    assert not info["moving"]
    assert env.observation_space.contains(obs)


def test_step_applies_pressed_flags() -> None:
    env = MotionEnv(config=MotionConfig(max_speed=40, acceleration_steps=2))
    env.reset(seed=0)

    # RIGHT only
    obs, reward, terminated, truncated, info = env.step(np.array([0, 0, 0, 1]))

    assert obs["steps"].tolist() == [1, 0]
    assert obs["speed"].tolist() == [20, 0]
    assert obs["position"].tolist() == [20.0, 0.0]
    assert obs["facing"] == MOVE_DIRECTIONS.index(Direction.RIGHT)
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["moving"]
    assert env.observation_space.contains(obs)


def test_episode_truncates_after_max_steps() -> None:
    env = MotionEnv(max_episode_steps=2)
    env.reset()

    _, _, _, truncated, _ = env.step(np.zeros(4, dtype=np.int8))
    assert not truncated
    _, _, _, truncated, _ = env.step(np.zeros(4, dtype=np.int8))
    assert truncated


def test_step_before_reset_raises() -> None:
    env = MotionEnv()
    with pytest.raises(RuntimeError):
        env.step(np.zeros(4, dtype=np.int8))


def test_ansi_render() -> None:
    env = MotionEnv(render_mode="ansi")
    env.reset()
    env.step(np.array([1, 0, 0, 0]))

    frame = env.render()

    assert frame is not None
    assert "facing=up" in frame


def test_unsupported_render_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        MotionEnv(render_mode="human")
