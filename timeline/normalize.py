# timeline/normalize.py
from typing import Callable, Dict, List, Tuple

from notes.model import (CONTEXT_KINDS, Condition, ConditionKind, Event, EventKind,
                         key_signature, tempo, ticks_per_beat, time_signature)

DEFAULT_TEMPO = 500000          # microseconds per beat, 120 bpm
DEFAULT_TIME_SIGNATURE = (4, 4)
DEFAULT_KEY_SIGNATURE = (0, False)  # C major


def _defaults(resolution: int) -> Dict[EventKind, Callable[[], Event]]:
    return {
        EventKind.TICKS_PER_BEAT: lambda: ticks_per_beat(resolution),
        EventKind.KEY_SIGNATURE: lambda: key_signature(0, *DEFAULT_KEY_SIGNATURE),
        EventKind.TIME_SIGNATURE: lambda: time_signature(0, *DEFAULT_TIME_SIGNATURE),
        EventKind.TEMPO: lambda: tempo(0, DEFAULT_TEMPO),
    }


def normalize_events(events: List[Event], resolution: int) -> Tuple[List[Event], List[Condition]]:
    """Leave exactly one tempo, key, time signature and ticks-per-beat at tick 0.

    Missing kinds get a default appended; when several exist the last one
    wins. Order is not restored here, see timeline.order.
    """
    out = list(events)
    conditions: List[Condition] = []
    defaults = _defaults(resolution)

    for kind in CONTEXT_KINDS:
        found = [e for e in out if e.kind is kind and e.offset == 0]
        if not found:
            out.append(defaults[kind]())
        elif len(found) > 1:
            conditions.append(Condition(
                ConditionKind.MULTIPLE_CONTEXT_EVENTS, 0,
                f"multiple {kind.value} events at tick 0: {len(found)}, keeping last"))
            dropped = {id(e) for e in found[:-1]}
            out = [e for e in out if id(e) not in dropped]
    return out, conditions
