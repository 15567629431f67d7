"""Motion configuration and logging setup.

``MotionConfig`` gathers the tunables of an actor: its speed cap, how many
ticks of held input it takes to reach that cap, and which keys steer it. A
config can be built in code or loaded from a YAML file::

    max_speed: 5
    acceleration_steps: 10
    key_bindings:
      w: up
      a: left
      s: down
      d: right

Missing keys fall back to the defaults; unknown keys are rejected so typos do
not go unnoticed.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

import yaml
from pyrsistent import PMap, pmap

from actor_motion.components import DEFAULT_ACCELERATION_STEPS
from actor_motion.types import Direction

logger = logging.getLogger(__name__)

DEFAULT_MAX_SPEED = 5

DEFAULT_KEY_BINDINGS: PMap[str, Direction] = pmap(
    {
        "w": Direction.UP,
        "a": Direction.LEFT,
        "s": Direction.DOWN,
        "d": Direction.RIGHT,
    }
)


@dataclass(frozen=True)
class MotionConfig:
    """Tunables of a controllable actor.

    Attributes:
        max_speed: Displacement per tick at full single-axis acceleration.
        acceleration_steps: Ticks of held input needed to reach ``max_speed``.
        key_bindings: Lower-case key name to direction.
    """

    max_speed: int = DEFAULT_MAX_SPEED
    acceleration_steps: int = DEFAULT_ACCELERATION_STEPS
    key_bindings: PMap[str, Direction] = field(
        default_factory=lambda: DEFAULT_KEY_BINDINGS
    )

    def __post_init__(self) -> None:
        for name in ("max_speed", "acceleration_steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.key_bindings, Mapping):
            raise ValueError(
                f"key_bindings must be a mapping, got {self.key_bindings!r}"
            )
        if self.max_speed < 0:
            raise ValueError(f"max_speed must be non-negative, got {self.max_speed}")
        if self.acceleration_steps < 1:
            raise ValueError(
                f"acceleration_steps must be positive, got {self.acceleration_steps}"
            )
        bindings = {}
        for key, direction in self.key_bindings.items():
            try:
                bindings[str(key).lower()] = Direction(str(direction).lower())
            except ValueError:
                raise ValueError(
                    f"Unknown direction {direction!r} bound to key {key!r}"
                ) from None
        object.__setattr__(self, "key_bindings", pmap(bindings))


def config_from_mapping(data: Mapping[str, Any]) -> MotionConfig:
    """Build a :class:`MotionConfig` from a plain mapping (e.g. parsed YAML)."""
    known = {f.name for f in fields(MotionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
    return MotionConfig(**data)


def load_config(path: str) -> MotionConfig:
    """Load a YAML config file; a missing file yields the defaults."""
    if not os.path.exists(path):
        logger.debug("No motion config at %s, using defaults", path)
        return MotionConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Motion config {path} must contain a mapping")

    config = config_from_mapping(data)
    logger.debug("Loaded motion config from %s: %s", path, config)
    return config


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    """Route ``actor_motion`` log records to a single stream handler."""
    package_logger = logging.getLogger("actor_motion")
    package_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
