# timeline/pipeline.py
from dataclasses import dataclass, field
from typing import Iterable, List

from notes.metrics import annotate_notes
from notes.model import Condition, Event
from timeline.absolutize import absolutize_track
from timeline.merge import merge_tracks
from timeline.normalize import normalize_events
from timeline.order import order_events


@dataclass
class PipelineResult:
    events: List[Event]
    conditions: List[Condition] = field(default_factory=list)


def build_events(tracks: Iterable[Iterable], resolution: int) -> PipelineResult:
    """tracks of delta-timed messages -> one ordered, annotated event list."""
    conditions: List[Condition] = []
    absolute = []
    for track in tracks:
        events, found = absolutize_track(track)
        absolute.append(events)
        conditions.extend(found)

    merged = merge_tracks(absolute)
    normalized, found = normalize_events(merged, resolution)
    conditions.extend(found)
    ordered = order_events(normalized)
    annotate_notes(ordered, resolution)
    return PipelineResult(ordered, conditions)
