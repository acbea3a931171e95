import pytest

from notes.model import ConditionKind, EventKind, key_signature, note, tempo, time_signature
from timeline.normalize import DEFAULT_TEMPO, normalize_events
from timeline.order import order_events


def _at_zero(events, kind):
    return [e for e in events if e.kind is kind and e.offset == 0]


class TestNormalize:
    @pytest.fixture
    def resolution(self):
        return 480

    def test_defaults_are_synthesized(self, resolution):
        events, conditions = normalize_events([note(0, 60)], resolution)
        assert conditions == []
        assert len(events) == 5
        (tpb,) = _at_zero(events, EventKind.TICKS_PER_BEAT)
        (ks,) = _at_zero(events, EventKind.KEY_SIGNATURE)
        (ts,) = _at_zero(events, EventKind.TIME_SIGNATURE)
        (tp,) = _at_zero(events, EventKind.TEMPO)
        assert tpb.value == 480
        assert (ks.fifths, ks.minor) == (0, False)
        assert (ts.numerator, ts.denominator) == (4, 4)
        assert tp.tempo == DEFAULT_TEMPO == 500000

    def test_single_context_event_is_kept(self, resolution):
        mine = tempo(0, 400000)
        events, conditions = normalize_events([mine], resolution)
        assert conditions == []
        assert _at_zero(events, EventKind.TEMPO) == [mine]

    def test_duplicates_keep_the_last_and_report(self, resolution):
        first, second, third = key_signature(0, 1), key_signature(0, 2), key_signature(0, -1)
        events, conditions = normalize_events([first, note(0, 60), second, third], resolution)
        assert _at_zero(events, EventKind.KEY_SIGNATURE) == [third]
        assert len(conditions) == 1
        assert conditions[0].kind is ConditionKind.MULTIPLE_CONTEXT_EVENTS
        assert "key_signature" in conditions[0].message

    def test_each_kind_handled_independently(self, resolution):
        events, conditions = normalize_events(
            [time_signature(0, 3, 4), time_signature(0, 6, 8), tempo(0, 600000)], resolution)
        assert len(conditions) == 1
        (ts,) = _at_zero(events, EventKind.TIME_SIGNATURE)
        assert (ts.numerator, ts.denominator) == (6, 8)
        assert _at_zero(events, EventKind.TEMPO)[0].tempo == 600000
        assert len(_at_zero(events, EventKind.KEY_SIGNATURE)) == 1

    def test_later_context_events_are_left_alone(self, resolution):
        late = tempo(960, 300000)
        events, _ = normalize_events([late, tempo(960, 300000)], resolution)
        assert late in events
        assert len([e for e in events if e.kind is EventKind.TEMPO]) == 3

    def test_is_idempotent(self, resolution):
        once, _ = normalize_events([note(0, 60), tempo(0, 400000), tempo(0, 450000)], resolution)
        once = order_events(once)
        twice, conditions = normalize_events(once, resolution)
        assert conditions == []
        assert twice == once

    def test_does_not_sort(self, resolution):
        n = note(0, 60)
        events, _ = normalize_events([n], resolution)
        assert events[0] is n
