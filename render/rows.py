# render/rows.py
import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from notes.model import Event, EventKind
from render.format import (format_key_signature_pretty, format_key_signature_raw,
                           format_note_canonical, format_note_pretty, format_note_raw,
                           format_tempo_pretty, format_tempo_raw,
                           format_time_signature_pretty, format_time_signature_raw)

log = logging.getLogger(__name__)

NARROW = "narrow"
WIDE = "wide"
LAYOUTS = (WIDE, NARROW)

NARROW_COLUMNS = ["type", "tick_offset", "tick_duration", "value_raw", "value_pretty",
                  "canonical", "density", "interval"]
WIDE_COLUMNS = NARROW_COLUMNS + ["tempo", "time_signature", "key_signature"]


class UnknownEventKindError(ValueError):
    """An event the flattener has no row shape for; a pipeline or decoder bug."""


def columns_for(layout: str) -> List[str]:
    if layout == NARROW:
        return NARROW_COLUMNS
    if layout == WIDE:
        return WIDE_COLUMNS
    raise ValueError(f"Unknown layout: {layout!r} (expected one of {LAYOUTS})")


class Rectanglifier:
    """Flattens an ordered, annotated event list into one dict per event.

    narrow: context rows and note rows each carry only their own values.
    wide: note rows also repeat the last seen tempo, time and key signature.
    """

    def __init__(self, layout: str = WIDE, density_precision: int = 4):
        self.columns = columns_for(layout)
        self.wide = layout == WIDE
        self.density_precision = density_precision
        self._tempo: Optional[Event] = None
        self._time_sig: Optional[Event] = None
        self._key_sig: Optional[Event] = None

    def _base(self, e: Event, raw, pretty) -> Dict[str, object]:
        return {"type": e.kind.value, "tick_offset": e.offset, "tick_duration": e.duration,
                "value_raw": raw, "value_pretty": pretty}

    def _note_row(self, e: Event) -> Dict[str, object]:
        row = self._base(e, format_note_raw(e), format_note_pretty(e, self._key_sig))
        row["canonical"] = format_note_canonical(e)
        row["density"] = None if e.density is None else round(e.density, self.density_precision)
        row["interval"] = e.interval.value if e.interval is not None else None
        if self.wide:
            row["tempo"] = format_tempo_pretty(self._tempo) if self._tempo else None
            row["time_signature"] = format_time_signature_pretty(self._time_sig) if self._time_sig else None
            row["key_signature"] = format_key_signature_pretty(self._key_sig) if self._key_sig else None
        return row

    def row(self, e: Event) -> Dict[str, object]:
        kind = e.kind
        if kind is EventKind.NOTE:
            return self._note_row(e)
        if kind is EventKind.TEMPO:
            self._tempo = e
            return self._base(e, format_tempo_raw(e), format_tempo_pretty(e))
        if kind is EventKind.KEY_SIGNATURE:
            self._key_sig = e
            return self._base(e, format_key_signature_raw(e), format_key_signature_pretty(e))
        if kind is EventKind.TIME_SIGNATURE:
            self._time_sig = e
            return self._base(e, format_time_signature_raw(e), format_time_signature_pretty(e))
        if kind is EventKind.TICKS_PER_BEAT:
            return self._base(e, e.value, e.value)
        raise UnknownEventKindError(f"Unknown event kind: {kind!r}")

    def rows(self, events: Iterable[Event]) -> List[Dict[str, object]]:
        out = []
        for e in events:
            row = self.row(e)
            out.append({c: row.get(c) for c in self.columns})
        log.debug("rectanglified %d events", len(out))
        return out


def rectanglify(events: Iterable[Event], layout: str = WIDE, density_precision: int = 4) -> List[Dict[str, object]]:
    return Rectanglifier(layout, density_precision).rows(events)


def to_frame(rows: List[Dict[str, object]], layout: str = WIDE) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=columns_for(layout))
