"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole simulation snapshot at a single tick. Systems are pure functions that
take a previous ``State`` plus inputs (the tick's ``Controls``) and return a
*new* ``State``; no mutation happens in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* Velocity holds the only cross-tick motion history (its step counters);
    ``Facing`` remembers the last direction the actor moved in.

See :mod:`actor_motion.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any
from pyrsistent import PMap, pmap

from actor_motion.components import Agent, Facing, Position, Velocity
from actor_motion.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        agent (PMap[EntityID, Agent]): Controllable entity markers.
        velocity (PMap[EntityID, Velocity]): Bounded step counters per entity.
        position (PMap[EntityID, Position]): Continuous world coordinates.
        facing (PMap[EntityID, Facing]): View direction for sprite selection.
        turn (int): Tick counter (0-based).
    """

    agent: PMap[EntityID, Agent] = pmap()
    velocity: PMap[EntityID, Velocity] = pmap()
    position: PMap[EntityID, Position] = pmap()
    facing: PMap[EntityID, Facing] = pmap()

    turn: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of populated fields (empty component maps skipped)."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
