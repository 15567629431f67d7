"""Saturating bounded integer.

``BoundedInt`` is an immutable integer confined to ``[-limit, limit]``. All
arithmetic saturates at the bounds instead of raising, which models a physical
speed cap: pushing an already saturated value further is simply a no-op.

Instances compare and hash by value alone, also against plain ``int`` values,
so callers can write ``velocity.y_step > 0`` without unwrapping.

Examples
--------
>>> v = BoundedInt(3)
>>> v += 5
>>> v.value
3
>>> v - 10 == -3
True
"""

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Union

from actor_motion.utils.math import clamp


@total_ordering
@dataclass(frozen=True, eq=False)
class BoundedInt:
    """Integer clamped to a symmetric range.

    Attributes:
        limit: Non-negative bound; the value stays within ``[-limit, limit]``.
        value: Current integer value, clamped on construction.
    """

    limit: int
    value: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"BoundedInt limit must be non-negative, got {self.limit}")
        object.__setattr__(self, "value", clamp(self.value, -self.limit, self.limit))

    def add(self, delta: int) -> "BoundedInt":
        """Return a copy with ``delta`` added, saturating at ``±limit``."""
        return replace(self, value=clamp(self.value + delta, -self.limit, self.limit))

    def subtract(self, delta: int) -> "BoundedInt":
        """Return a copy with ``delta`` subtracted, saturating at ``±limit``."""
        return replace(self, value=clamp(self.value - delta, -self.limit, self.limit))

    @property
    def magnitude(self) -> int:
        return abs(self.value)

    def __add__(self, delta: int) -> "BoundedInt":
        return self.add(delta)

    def __sub__(self, delta: int) -> "BoundedInt":
        return self.subtract(delta)

    def __abs__(self) -> int:
        return self.magnitude

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedInt):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: Union["BoundedInt", int]) -> bool:
        if isinstance(other, BoundedInt):
            return self.value < other.value
        if isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        # same hash as the plain int of equal value
        return hash(self.value)
