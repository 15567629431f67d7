"""Quadrant classification of a raw step pair.

The plane is cut into four pie slices by the diagonals ``y = x`` and
``y = -x``. Each diagonal ray belongs to exactly one slice:

* ``(-n, -n)`` (down-left) -> ``DOWN``
* ``(n, -n)`` (down-right) -> ``RIGHT``
* ``(n, n)`` (up-right) -> ``UP``
* ``(-n, n)`` (up-left) -> ``LEFT``

The origin maps to ``DOWN``, the default facing of a fresh actor.
"""

from actor_motion.types import Direction


def classify_direction(x_step: int, y_step: int) -> Direction:
    """Return the compass quadrant of ``(x_step, y_step)``."""
    if -y_step > abs(x_step) or (-y_step == abs(x_step) and x_step <= 0):
        return Direction.DOWN

    if x_step > abs(y_step) or (x_step == abs(y_step) and y_step < 0):
        return Direction.RIGHT

    if x_step <= -abs(y_step):
        return Direction.LEFT

    return Direction.UP
