"""Velocity component.

Two saturating step counters (``x_step``, ``y_step``) and a speed cap. Each
tick the controls push the counters one step per pressed direction and let
them relax one step towards zero per released direction. The counters are the
*state*; the per-tick displacement (``x``/``y``) and the facing quadrant
(``direction``) are derived from them on demand.

Speed scaling:

* Axis-aligned motion is linear: ``n`` steps give ``n / acceleration_steps``
  of ``max_speed``, and the limit lands exactly on ``max_speed``.
* Diagonal motion takes its overall speed from the dominant axis and
  reprojects it on the step vector, so walking diagonally is never faster than
  walking straight.

Like every component, ``Velocity`` is immutable; ``accelerate`` and
``decelerate`` return a new instance.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from actor_motion.bounded import BoundedInt
from actor_motion.types import Direction
from actor_motion.utils.direction import classify_direction
from actor_motion.utils.math import scale_axis

DEFAULT_ACCELERATION_STEPS = 10


@dataclass(frozen=True)
class Velocity:
    """Bounded two-axis velocity.

    Attributes:
        max_speed: Displacement per tick at full single-axis acceleration.
        acceleration_steps: Steps needed to reach ``max_speed``; also the
            bound of both step counters.
        x_step: Horizontal step counter (positive is right).
        y_step: Vertical step counter (positive is up).
    """

    max_speed: int
    acceleration_steps: int
    x_step: BoundedInt
    y_step: BoundedInt

    def __post_init__(self) -> None:
        if self.max_speed < 0:
            raise ValueError(f"max_speed must be non-negative, got {self.max_speed}")
        if self.acceleration_steps < 1:
            raise ValueError(
                f"acceleration_steps must be positive, got {self.acceleration_steps}"
            )
        for step in (self.x_step, self.y_step):
            if step.limit != self.acceleration_steps:
                raise ValueError(
                    f"Step limit {step.limit} does not match "
                    f"acceleration_steps {self.acceleration_steps}"
                )

    @classmethod
    def at_rest(
        cls, max_speed: int, acceleration_steps: int = DEFAULT_ACCELERATION_STEPS
    ) -> "Velocity":
        """Velocity with both counters at zero."""
        return cls(
            max_speed=max_speed,
            acceleration_steps=acceleration_steps,
            x_step=BoundedInt(acceleration_steps),
            y_step=BoundedInt(acceleration_steps),
        )

    def accelerate(self, direction: Direction) -> "Velocity":
        """Push one step towards ``direction``; saturated axes stay put."""
        if direction == Direction.UP:
            return replace(self, y_step=self.y_step + 1)
        if direction == Direction.DOWN:
            return replace(self, y_step=self.y_step - 1)
        if direction == Direction.LEFT:
            return replace(self, x_step=self.x_step - 1)
        if direction == Direction.RIGHT:
            return replace(self, x_step=self.x_step + 1)
        raise ValueError(f"Unknown direction: {direction!r}")

    def decelerate(self, direction: Direction) -> "Velocity":
        """Release ``direction``: relax one step towards zero.

        Only applies while the axis is moving *in* that direction, so releasing
        never overshoots zero nor flips the sign.
        """
        if direction == Direction.UP and self.y_step > 0:
            return replace(self, y_step=self.y_step - 1)
        if direction == Direction.DOWN and self.y_step < 0:
            return replace(self, y_step=self.y_step + 1)
        if direction == Direction.LEFT and self.x_step < 0:
            return replace(self, x_step=self.x_step + 1)
        if direction == Direction.RIGHT and self.x_step > 0:
            return replace(self, x_step=self.x_step - 1)
        return self

    @property
    def steps(self) -> Tuple[int, int]:
        return self.x_step.value, self.y_step.value

    @property
    def is_moving(self) -> bool:
        return self.x_step != 0 or self.y_step != 0

    @property
    def x(self) -> int:
        """Horizontal displacement per tick."""
        return scale_axis(
            self.x_step.value,
            self.y_step.value,
            self.max_speed,
            self.acceleration_steps,
        )

    @property
    def y(self) -> int:
        """Vertical displacement per tick."""
        return scale_axis(
            self.y_step.value,
            self.x_step.value,
            self.max_speed,
            self.acceleration_steps,
        )

    @property
    def direction(self) -> Direction:
        """Compass quadrant of the raw step counters."""
        return classify_direction(self.x_step.value, self.y_step.value)
