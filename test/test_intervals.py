import pytest

from scheduling.intervals import (
    IntervalFormatError,
    TimeInterval,
    format_clock,
    parse_interval,
    to_hhmm,
)


def test_parse_interval_to_minutes():
    iv = parse_interval("08:00-14:30")
    assert iv == TimeInterval(480, 870)
    assert iv.minutes == 390
    assert iv.label == "08:00-14:30"


def test_parse_tolerates_whitespace_and_single_digit_hour():
    assert parse_interval(" 8:15 - 9:45 ") == TimeInterval(495, 585)


@pytest.mark.parametrize(
    "raw",
    ["", "08:00", "0800-1000", "08:00-24:00", "08:60-09:00", "10:00-09:00", "09:00-09:00", "ab:cd-ef:gh"],
)
def test_malformed_intervals_raise(raw):
    with pytest.raises(IntervalFormatError):
        parse_interval(raw)


def test_non_string_interval_raises():
    with pytest.raises(IntervalFormatError):
        parse_interval(800)


def test_format_error_is_a_value_error():
    assert issubclass(IntervalFormatError, ValueError)


def test_clock_helpers():
    assert format_clock(0) == "00:00"
    assert format_clock(870) == "14:30"
    assert to_hhmm(870) == 1430
    assert to_hhmm(480) == 800


def test_contains_and_overlaps():
    iv = TimeInterval(480, 720)
    assert iv.contains(480, 720)
    assert iv.contains(500, 600)
    assert not iv.contains(470, 600)
    assert iv.overlaps(TimeInterval(700, 800))
    assert not iv.overlaps(TimeInterval(720, 800))
