"""Position component.

Continuous world coordinates of an entity, stored in ``State.position`` keyed
by entity id. ``y`` grows upward, matching the velocity model where ``UP``
increases the vertical step.
"""

from dataclasses import dataclass

# The camera sits at depth 1000 and the background at 0; actors live in
# between, the lower on screen the closer to the camera.
DEPTH_ORIGIN = 500.0
DEPTH_PER_UNIT = 0.1


@dataclass(frozen=True)
class Position:
    """World coordinate.

    Attributes:
        x: Horizontal coordinate (grows to the right).
        y: Vertical coordinate (grows upward).
    """

    x: float = 0.0
    y: float = 0.0

    @property
    def depth(self) -> float:
        """Draw depth derived from ``y``; never feeds back into ``x``/``y``."""
        return -self.y * DEPTH_PER_UNIT + DEPTH_ORIGIN

    def translated(self, dx: float, dy: float) -> "Position":
        return Position(self.x + dx, self.y + dy)
