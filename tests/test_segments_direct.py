"""Tests for segment generation and the direct (minute-exact) split."""

import pytest

from shift_split.direct import direct_partition, direct_split
from shift_split.errors import DegenerateShiftCount
from shift_split.partition import DIRECT_SPLIT
from shift_split.segments import generate_segments, total_duration


class TestGenerateSegments:
    def test_accumulates_across_midnight(self):
        segs = generate_segments(23 * 60, [30, 45, 60])
        assert [(s.start, s.end) for s in segs] == [
            ("23:00", "23:30"),
            ("23:30", "00:15"),
            ("00:15", "01:15"),
        ]

    def test_records(self):
        segs = generate_segments(0, [10, 20], names=["Dana"])
        assert segs[0].index == 1 and segs[1].index == 2
        assert segs[0].name == "Dana"
        assert segs[1].name is None
        assert total_duration(segs) == 30

    def test_full_day_wraps_to_start(self):
        segs = generate_segments(600, [720, 720])
        assert segs[-1].end_min == 600

    def test_empty(self):
        assert generate_segments(0, []) == []


class TestDirectSplit:
    def test_fairness(self):
        assert direct_split(100, 3) == [34, 33, 33]

    def test_even(self):
        assert direct_split(480, 8) == [60] * 8

    def test_sum_preserved(self):
        for n in range(1, 20):
            durations = direct_split(487, n)
            assert sum(durations) == 487
            assert max(durations) - min(durations) <= 1

    def test_degenerate(self):
        with pytest.raises(DegenerateShiftCount):
            direct_split(100, 0)


class TestDirectPartition:
    def test_overnight(self):
        alt = direct_partition("22:00", "06:00", 9)
        assert alt.strategy == DIRECT_SPLIT
        assert alt.durations == (54, 54, 54, 53, 53, 53, 53, 53, 53)
        assert alt.segments[0].start == "22:00"
        assert alt.segments[-1].end == "06:00"
        assert alt.total == 480
        assert (alt.start, alt.end) == ("22:00", "06:00")

    def test_names(self):
        alt = direct_partition("08:00", "09:00", 2, names=["A + B", "C"])
        assert [s.name for s in alt.segments] == ["A + B", "C"]
        assert [s.duration for s in alt.segments] == [30, 30]
