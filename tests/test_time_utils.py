"""Tests for clock time arithmetic."""

import pytest

from shift_split import time_utils
from shift_split.errors import InvalidFormat


class TestParseTime:
    def test_zero_padded(self):
        assert time_utils.parse_time("22:00") == 1320

    def test_single_digit_hour(self):
        assert time_utils.parse_time("9:05") == 545

    def test_surrounding_whitespace(self):
        assert time_utils.parse_time(" 08:00 ") == 480

    def test_midnight(self):
        assert time_utils.parse_time("00:00") == 0

    def test_normalized_past_24h(self):
        assert time_utils.parse_time("24:30") == 30

    @pytest.mark.parametrize("value", ["", "abc", "2200", "12:30:00", "aa:bb", "-1:00", None, 1320])
    def test_invalid(self, value):
        with pytest.raises(InvalidFormat):
            time_utils.parse_time(value)

    def test_invalid_is_value_error(self):
        """Callers that only catch ValueError still see format errors."""
        with pytest.raises(ValueError):
            time_utils.parse_time("noon")


class TestFormatTime:
    def test_basic(self):
        assert time_utils.format_time(1320) == "22:00"

    def test_next_day(self):
        assert time_utils.format_time(24 * 60 + 30) == "00:30"

    def test_negative_wraps_to_previous_day(self):
        assert time_utils.format_time(-10) == "23:50"
        assert time_utils.format_time(-15 + 1320) == "21:45"

    def test_normalize_time_str(self):
        assert time_utils.normalize_time_str("7:5") == "07:05"


class TestRoundToGranularity:
    def test_rounds_to_nearest(self):
        assert time_utils.round_to_granularity(53.33) == 55
        assert time_utils.round_to_granularity(52.4) == 50

    def test_ties_away_from_zero(self):
        assert time_utils.round_to_granularity(52.5) == 55
        assert time_utils.round_to_granularity(7.5) == 10
        assert time_utils.round_to_granularity(-2.5) == -5

    def test_exact_multiple(self):
        assert time_utils.round_to_granularity(60) == 60

    def test_other_granularity(self):
        assert time_utils.round_to_granularity(44, 15) == 45
        assert time_utils.round_to_granularity(7, 1) == 7

    def test_bad_granularity(self):
        with pytest.raises(ValueError):
            time_utils.round_to_granularity(10, 0)


class TestSnapTime:
    def test_rounds_up(self):
        assert time_utils.snap_time("22:03") == "22:05"

    def test_rounds_down(self):
        assert time_utils.snap_time("22:02") == "22:00"

    def test_wraps_midnight(self):
        assert time_utils.snap_time("23:58") == "00:00"


class TestIntervalDuration:
    def test_same_day(self):
        assert time_utils.interval_duration(480, 1020) == 540

    def test_overnight(self):
        assert time_utils.interval_duration(1320, 360) == 480

    def test_equal_is_full_day(self):
        assert time_utils.interval_duration(600, 600) == 1440

    def test_crosses_midnight(self):
        assert time_utils.crosses_midnight(1320, 360)
        assert time_utils.crosses_midnight(600, 600)
        assert not time_utils.crosses_midnight(480, 1020)


def test_format_hhmm_duration():
    assert time_utils.format_hhmm_duration(480) == "8:00"
    assert time_utils.format_hhmm_duration(65) == "1:05"
