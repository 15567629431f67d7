"""Integer helpers behind the velocity model.

The speed scaling works on small integer step counts, so rounding and
truncation rules matter: the values produced here are added to positions every
tick and must not depend on the platform's default rounding mode.
"""

import math


def clamp(value: int, low: int, high: int) -> int:
    """Return ``value`` limited to the closed range ``[low, high]``."""
    return max(low, min(high, value))


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; ties move away from zero (``2.5 -> 3``).

    Python's ``round`` uses banker's rounding, which would turn ``-0.5`` into
    ``0`` and ``2.5`` into ``2``.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def scale_axis(coord: int, other: int, max_speed: int, steps: int) -> int:
    """Scaled speed of one axis given both raw step counts.

    Args:
        coord (int): Step count of the queried axis.
        other (int): Step count of the orthogonal axis.
        max_speed (int): Speed reached at ``steps`` on a single axis.
        steps (int): Acceleration steps needed to reach ``max_speed``.

    Returns:
        int: Signed speed. Axis-aligned motion is linear in ``coord`` and
            lands exactly on ``±max_speed`` at the limit. Diagonal motion is
            driven by the dominant axis and reprojected onto the step vector,
            so it never exceeds ``max_speed`` overall.
    """
    if other == 0:
        if coord == steps:
            return max_speed
        if coord == -steps:
            return -max_speed
        return truncating_div(coord * max_speed, steps)

    dominant = max(abs(coord), abs(other))
    current_speed = max_speed * dominant // steps
    length = math.sqrt(coord * coord + other * other)
    return round_half_away_from_zero(coord * current_speed / length)
