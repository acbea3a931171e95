# render/format.py
from typing import Optional

import mido

from notes.model import Event

# flats are preferred for the key-independent spelling
FLAT_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]
SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# signed fifths -> tonic
KEY_NAMES = {
    -7: "Cb", -6: "Gb", -5: "Db", -4: "Ab", -3: "Eb", -2: "Bb", -1: "F",
    0: "C", 1: "G", 2: "D", 3: "A", 4: "E", 5: "B", 6: "F#", 7: "C#",
}


def _pitch_name(pitch: int, names) -> str:
    return f"{names[pitch % 12]}{pitch // 12}"


def format_note_raw(e: Event) -> str:
    return f"{e.pitch}:{e.velocity}"


def format_note_canonical(e: Event) -> str:
    return _pitch_name(e.pitch, FLAT_NAMES)


def format_note_pretty(e: Event, key: Optional[Event]) -> str:
    flats = key is not None and key.fifths < 0
    return _pitch_name(e.pitch, FLAT_NAMES if flats else SHARP_NAMES)


def format_tempo_raw(e: Event) -> str:
    return str(e.tempo)


def format_tempo_pretty(e: Event) -> str:
    bpm = mido.tempo2bpm(e.tempo)
    return str(int(bpm)) if float(bpm).is_integer() else str(bpm)


def format_time_signature_raw(e: Event) -> str:
    return f"{e.numerator}:{e.denominator}"


def format_time_signature_pretty(e: Event) -> str:
    return f"{e.numerator}/{e.denominator}"


def format_key_signature_raw(e: Event) -> str:
    return f"{e.fifths}:{int(e.minor)}"


def format_key_signature_pretty(e: Event) -> str:
    mode = "Minor" if e.minor else "Major"
    return f"{KEY_NAMES.get(e.fifths, 'Unknown')} {mode}"
