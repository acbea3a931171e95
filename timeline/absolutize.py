# timeline/absolutize.py
from typing import Iterable, List, Tuple

from midi.parser import is_note_end, is_note_start, key_to_fifths
from notes.model import (Condition, ConditionKind, Event, key_signature, note,
                         tempo, time_signature)


def _context_event(msg, offset: int):
    if msg.type == 'set_tempo':
        return tempo(offset, msg.tempo)
    if msg.type == 'time_signature':
        return time_signature(offset, msg.numerator, msg.denominator)
    if msg.type == 'key_signature':
        fifths, minor = key_to_fifths(msg.key)
        return key_signature(offset, fifths, minor)
    return None


def absolutize_track(messages: Iterable) -> Tuple[List[Event], List[Condition]]:
    """Turn one track of delta-timed messages into absolute events.

    Notes get their duration from the oldest open note of the same pitch
    when the matching end arrives. Notes still open at end of track are
    closed there. Anything that is not a note or a tempo/key/time
    signature is dropped.
    """
    offset = 0
    events: List[Event] = []
    open_notes: List[Event] = []
    conditions: List[Condition] = []

    for msg in messages:
        offset += msg.time
        if is_note_start(msg):
            ev = note(offset, msg.note, msg.velocity)
            events.append(ev)
            open_notes.append(ev)
        elif is_note_end(msg):
            match = next((n for n in open_notes if n.pitch == msg.note), None)
            if match is None:
                conditions.append(Condition(
                    ConditionKind.UNMATCHED_NOTE_END, offset,
                    f"note off missing partner: pitch={msg.note} tick={offset}"))
                continue
            match.duration = offset - match.offset
            open_notes.remove(match)
        elif msg.type == 'end_of_track':
            break
        else:
            ev = _context_event(msg, offset)
            if ev is not None:
                events.append(ev)

    # close dangling
    for n in open_notes:
        n.duration = offset - n.offset
    return events, conditions
