# timeline/order.py
from typing import Iterable, List

from notes.model import Event


def sort_key(e: Event) -> tuple:
    # notes at the same tick go low to high so adjacent intervals are stable
    pitch = e.pitch if e.is_note else -1
    return (e.offset, e.kind.priority, pitch) + e.payload()


def order_events(events: Iterable[Event]) -> List[Event]:
    """Total order: offset, then kind priority, then pitch for notes.

    Remaining payload fields only break ties between otherwise identical
    positions, so any permutation of the same events sorts the same way.
    Mid-track duplicate context events are left in place.
    """
    return sorted(events, key=sort_key)
