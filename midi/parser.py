# midi/parser.py
import sys
from typing import List, Optional, TextIO, Tuple

import mido

# mido key names ordered by signed fifths, -7..7
MAJOR_KEYS = ['Cb', 'Gb', 'Db', 'Ab', 'Eb', 'Bb', 'F', 'C', 'G', 'D', 'A', 'E', 'B', 'F#', 'C#']
MINOR_KEYS = ['Ab', 'Eb', 'Bb', 'F', 'C', 'G', 'D', 'A', 'E', 'B', 'F#', 'C#', 'G#', 'D#', 'A#']


def load_midi(path: str) -> mido.MidiFile:
    return mido.MidiFile(path)


def read_tracks(path: str) -> Tuple[List[List[mido.Message]], int]:
    """Decode `path` into per-track message lists (delta ticks in `msg.time`)."""
    mid = load_midi(path)
    return [list(track) for track in mid.tracks], mid.ticks_per_beat


def key_to_fifths(name: str) -> Tuple[int, bool]:
    """'Bb' -> (-2, False), 'F#m' -> (3, True)."""
    minor = name.endswith('m')
    tonic = name[:-1] if minor else name
    keys = MINOR_KEYS if minor else MAJOR_KEYS
    if tonic not in keys:
        raise ValueError(f"Unknown key signature: {name!r}")
    return keys.index(tonic) - 7, minor


def is_note_start(msg) -> bool:
    return msg.type == 'note_on' and msg.velocity > 0


def is_note_end(msg) -> bool:
    return msg.type == 'note_off' or (msg.type == 'note_on' and msg.velocity == 0)


def dump_midi(path: str, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    mid = load_midi(path)
    out.write(f"file: {path}\n")
    out.write(f"type: {mid.type}  ticks_per_beat: {mid.ticks_per_beat}  tracks: {len(mid.tracks)}\n")
    for i, track in enumerate(mid.tracks):
        out.write(f"=== Track {i}: {track.name}\n")
        for msg in track:
            out.write(f"{msg!r}\n")
