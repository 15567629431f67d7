"""Entity id allocation.

An entity is an ``EntityID`` keyed into the component maps of a
:class:`State`; it has no object of its own. Ids come from a process-wide
counter, but an id already present in the target state (e.g. one chosen
explicitly by a test or a level script) is skipped rather than reused.
"""

import itertools
from typing import Iterable, Optional

from actor_motion.state import State
from actor_motion.types import EntityID

_counter = itertools.count()


def used_entity_ids(state: State) -> Iterable[EntityID]:
    """Ids owning at least one component in ``state``."""
    return set(state.agent) | set(state.velocity) | set(state.position) | set(
        state.facing
    )


def new_entity_id(state: Optional[State] = None) -> EntityID:
    """Next counter id not yet used in ``state``."""
    taken = used_entity_ids(state) if state is not None else ()
    eid = next(_counter)
    while eid in taken:
        eid = next(_counter)
    return eid
