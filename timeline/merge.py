# timeline/merge.py
from typing import Iterable, List

from notes.model import Event


def merge_tracks(tracks: Iterable[List[Event]]) -> List[Event]:
    """Concatenate every track and stable-sort by (offset, kind priority).

    Duplicate context events from different tracks are kept; the
    normalizer decides what survives at offset 0.
    """
    merged: List[Event] = []
    for track in tracks:
        merged.extend(track)
    merged.sort(key=lambda e: (e.offset, e.kind.priority))
    return merged
