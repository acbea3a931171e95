import mido
import pytest


def on(note, time=0, velocity=80):
    return mido.Message('note_on', note=note, velocity=velocity, time=time)


def off(note, time=0):
    return mido.Message('note_off', note=note, velocity=0, time=time)


def eot(time=0):
    return mido.MetaMessage('end_of_track', time=time)


@pytest.fixture
def write_midi(tmp_path):
    """Save a type-1 MIDI file from lists of messages and return its path."""
    def _write(tracks, name="song.mid", ticks_per_beat=480):
        mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
        for messages in tracks:
            track = mido.MidiTrack()
            track.extend(messages)
            mid.tracks.append(track)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        mid.save(str(path))
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    d = tmp_path / "logs"
    monkeypatch.setenv("MIDI_RECT_LOG_DIR", str(d))
    return d
