# ========================= notes/metrics.py =========================
import math
from typing import List, Optional, Tuple

from notes.model import INTERVALS_BY_SEMITONE, Event, NoteInterval


def note_density(notes: List[Event], index: int, window: int) -> float:
    """Local cluster rate around notes[index].

    Counts the notes from the first one sharing this note's offset up to
    the last one starting within `window` ticks after it, divided by
    sqrt(window). Normally below 1, unbounded for very dense passages.
    """
    start = notes[index].offset
    lo = index
    while lo > 0 and notes[lo - 1].offset == start:
        lo -= 1
    hi = lo + 1
    while hi < len(notes) and notes[hi].offset <= start + window:
        hi += 1
    return (hi - lo) / math.sqrt(window)


def classify_interval(difference: int) -> Tuple[NoteInterval, int]:
    """Semitone distance -> (interval within an octave, whole octaves)."""
    difference = abs(difference)
    return INTERVALS_BY_SEMITONE[difference % 12], difference // 12


def note_interval(notes: List[Event], index: int) -> Optional[NoteInterval]:
    if index >= len(notes) - 1:
        return None
    interval, _ = classify_interval(notes[index + 1].pitch - notes[index].pitch)
    return interval


def annotate_notes(events: List[Event], window: int) -> List[Event]:
    """Set density and interval on every note of an ordered sequence, in place."""
    notes = [e for e in events if e.is_note]
    for i, n in enumerate(notes):
        n.density = note_density(notes, i, window)
        n.interval = note_interval(notes, i)
    return events
