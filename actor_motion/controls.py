"""Per-tick control input.

:class:`Controls` holds the four independent *pressed* signals of one tick.
The reducer accelerates towards every pressed direction and releases every
other one, so opposite directions pressed together cancel out.

Controls can be built from raw key names (keyboard front-ends) or from a 0/1
array ordered as ``MOVE_DIRECTIONS`` (Gymnasium ``MultiBinary`` actions).
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from actor_motion.config import DEFAULT_KEY_BINDINGS
from actor_motion.types import Direction, MOVE_DIRECTIONS


@dataclass(frozen=True)
class Controls:
    """Pressed state of the four direction signals."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def is_pressed(self, direction: Direction) -> bool:
        return {
            Direction.UP: self.up,
            Direction.DOWN: self.down,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }[direction]

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> "Controls":
        pressed = set(directions)
        return cls(
            up=Direction.UP in pressed,
            down=Direction.DOWN in pressed,
            left=Direction.LEFT in pressed,
            right=Direction.RIGHT in pressed,
        )

    @classmethod
    def from_keys(
        cls,
        pressed_keys: Iterable[str],
        bindings: Mapping[str, Direction] = DEFAULT_KEY_BINDINGS,
    ) -> "Controls":
        """Translate pressed key names; unbound keys are ignored.

        Key names are matched case-insensitively against ``bindings``.
        """
        return cls.from_directions(
            bindings[key.lower()] for key in pressed_keys if key.lower() in bindings
        )

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "Controls":
        """Controls from four 0/1 flags ordered as ``MOVE_DIRECTIONS``."""
        if len(values) != len(MOVE_DIRECTIONS):
            raise ValueError(
                f"Expected {len(MOVE_DIRECTIONS)} control flags, got {len(values)}"
            )
        return cls.from_directions(
            direction for direction, flag in zip(MOVE_DIRECTIONS, values) if flag
        )


NO_CONTROLS = Controls()
