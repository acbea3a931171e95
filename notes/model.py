# notes/model.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    """Closed set of event kinds that survive decoding. The value is the row label."""
    TICKS_PER_BEAT = "ticks_per_beat"   # synthesized, never decoded
    KEY_SIGNATURE = "key_signature"
    TIME_SIGNATURE = "time_signature"
    TEMPO = "tempo"
    NOTE = "note"

    @property
    def priority(self) -> int:
        return KIND_PRIORITY[self]


# same-offset tie-break: context before notes
KIND_PRIORITY = {
    EventKind.TICKS_PER_BEAT: 0,
    EventKind.KEY_SIGNATURE: 1,
    EventKind.TIME_SIGNATURE: 2,
    EventKind.TEMPO: 3,
    EventKind.NOTE: 4,
}

CONTEXT_KINDS = (
    EventKind.TICKS_PER_BEAT,
    EventKind.KEY_SIGNATURE,
    EventKind.TIME_SIGNATURE,
    EventKind.TEMPO,
)


class NoteInterval(Enum):
    PERFECT_UNISON = "Perfect Unison"
    MINOR_SECOND = "Minor Second"
    MAJOR_SECOND = "Major Second"
    MINOR_THIRD = "Minor Third"
    MAJOR_THIRD = "Major Third"
    PERFECT_FOURTH = "Perfect Fourth"
    DIMINISHED_FIFTH = "Diminished Fifth"
    PERFECT_FIFTH = "Perfect Fifth"
    MINOR_SIXTH = "Minor Sixth"
    MAJOR_SIXTH = "Major Sixth"
    MINOR_SEVENTH = "Minor Seventh"
    MAJOR_SEVENTH = "Major Seventh"


# index == semitone distance within one octave
INTERVALS_BY_SEMITONE = list(NoteInterval)


@dataclass(eq=False)
class Event:
    """One absolutized event. Payload fields not used by `kind` stay None.

    Identity semantics (eq=False): two equal-looking tempo events from
    different tracks are still two events.
    """
    kind: EventKind
    offset: int                         # absolute ticks
    duration: int = 0                   # ticks, notes only
    pitch: Optional[int] = None         # NOTE
    velocity: Optional[int] = None      # NOTE
    tempo: Optional[int] = None         # TEMPO, microseconds per beat
    numerator: Optional[int] = None     # TIME_SIGNATURE
    denominator: Optional[int] = None   # TIME_SIGNATURE
    fifths: Optional[int] = None        # KEY_SIGNATURE, signed
    minor: bool = False                 # KEY_SIGNATURE
    value: Optional[int] = None         # TICKS_PER_BEAT
    density: Optional[float] = None     # NOTE, set by notes.metrics
    interval: Optional[NoteInterval] = None

    @property
    def is_note(self) -> bool:
        return self.kind is EventKind.NOTE

    def payload(self) -> tuple:
        fields = (self.pitch, self.velocity, self.duration, self.tempo,
                  self.numerator, self.denominator, self.fifths, self.value)
        return tuple(-1 if f is None else f for f in fields) + (int(self.minor),)


def note(offset: int, pitch: int, velocity: int = 64, duration: int = 0) -> Event:
    return Event(EventKind.NOTE, offset, duration=duration, pitch=pitch, velocity=velocity)


def tempo(offset: int, microseconds: int) -> Event:
    return Event(EventKind.TEMPO, offset, tempo=microseconds)


def time_signature(offset: int, numerator: int, denominator: int) -> Event:
    return Event(EventKind.TIME_SIGNATURE, offset, numerator=numerator, denominator=denominator)


def key_signature(offset: int, fifths: int, minor: bool = False) -> Event:
    return Event(EventKind.KEY_SIGNATURE, offset, fifths=fifths, minor=minor)


def ticks_per_beat(value: int) -> Event:
    return Event(EventKind.TICKS_PER_BEAT, 0, value=value)


class ConditionKind(Enum):
    UNMATCHED_NOTE_END = "unmatched_note_end"
    MULTIPLE_CONTEXT_EVENTS = "multiple_context_events"


@dataclass(frozen=True)
class Condition:
    """A recoverable problem found (and already corrected) by a pipeline stage."""
    kind: ConditionKind
    offset: int
    message: str
