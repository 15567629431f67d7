"""Common type aliases and enumerations.

``Direction`` is shared by the input side (which signals are pressed), the
velocity model (which axis to accelerate) and the output side (which way the
actor faces).
"""

from enum import StrEnum, auto


EntityID = int


class Direction(StrEnum):
    """Compass direction of an input signal or a facing.

    ``UP`` points towards growing ``y`` and ``RIGHT`` towards growing ``x``.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
"""Canonical direction order (control arrays, observation encoding)."""
