"""Agent component.

Marks the entity the per-tick controls are routed to. When a state holds
several agents and no id is given, the reducer steers the first one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Controllable actor.

    Attributes:
        name: Label used in log output.
    """

    name: str = "actor"
