"""Tests for timestamp parsing and calendar classification."""

from datetime import date

import pytest

from price_explorer.exceptions import InvalidTimestampError, InvariantViolationError
from price_explorer.utils.calendar_utils import (
    date_key,
    hour_of_day,
    is_weekday,
    make_sample,
    month_label,
    parse_timestamp,
    year_month_key,
)


def test_parse_timestamp_reads_wall_clock_and_offset():
    parts = parse_timestamp("2024-12-01 23:00:00-08:00")

    assert parts.local_date == date(2024, 12, 1)
    assert parts.hour == 23
    assert parts.minute == 0
    assert parts.weekday == 6  # Sunday
    assert parts.utc_offset_minutes == -480


@pytest.mark.parametrize("text, expected_hour", [
    ("2024-12-01 07:30:00", 7),
    ("2024-12-01T13:00", 13),
    ("2024-12-01", 0),
    ("  2024-12-01 05:00:00+01:00 ", 5),
])
def test_parse_timestamp_accepted_shapes(text, expected_hour):
    assert parse_timestamp(text).hour == expected_hour


def test_naive_timestamp_has_no_offset():
    assert parse_timestamp("2024-12-01 07:30:00").utc_offset_minutes is None


@pytest.mark.parametrize("text", ["", "   ", "yesterday", "2024-13-01 00:00:00", "12/01/2024 00:00"])
def test_parse_timestamp_rejects_garbage(text):
    with pytest.raises(InvalidTimestampError):
        parse_timestamp(text)


def test_invalid_timestamp_is_a_value_error():
    with pytest.raises(ValueError):
        parse_timestamp("not a date")


def test_year_month_key_and_date_key():
    assert year_month_key("2024-03-09 10:00:00-08:00") == "2024-03"
    assert date_key("2024-03-09 10:00:00-08:00") == "2024-03-09"


def test_year_month_keys_sort_chronologically():
    keys = [year_month_key(t) for t in ("2025-01-01", "2024-12-31 23:00:00", "2024-02-01")]
    assert sorted(keys) == ["2024-02", "2024-12", "2025-01"]


@pytest.mark.parametrize("key, label", [
    ("2024-12", "December 2024"),
    ("2025-01", "January 2025"),
    ("2023-06", "June 2023"),
])
def test_month_label(key, label):
    assert month_label(key) == label


@pytest.mark.parametrize("key", ["2024-00", "2024-13", "2024", "abc-de"])
def test_month_label_rejects_invalid_months(key):
    with pytest.raises(InvariantViolationError):
        month_label(key)


def test_hour_of_day_ignores_offset_text():
    assert hour_of_day("2024-12-01 00:00:00-08:00") == 0
    assert hour_of_day("2024-12-01 00:00:00+09:00") == 0
    assert hour_of_day("2024-12-01 17:45:00+05:30") == 17


def test_is_weekday_monday_and_saturday():
    assert is_weekday("2024-12-02 00:00:00-08:00") is True
    assert is_weekday("2024-12-02 23:00:00-08:00") is True
    assert is_weekday("2024-12-07 12:00:00-08:00") is False
    assert is_weekday("2024-12-08 00:00:00-08:00") is False


def test_is_weekday_uses_embedded_offset_near_midnight():
    # 23:00 on Friday at -08:00 is already Saturday in UTC; it stays Friday here.
    assert is_weekday("2024-12-06 23:00:00-08:00") is True
    # 00:30 on Monday at +09:00 is still Sunday in UTC; it stays Monday here.
    assert is_weekday("2024-12-02 00:30:00+09:00") is True


def test_classifiers_accept_samples_and_parts():
    sample = make_sample("2024-12-07 06:00:00-08:00", 0.25)

    assert sample.price == 0.25
    assert hour_of_day(sample) == 6
    assert is_weekday(sample) is False
    assert year_month_key(sample.parts) == "2024-12"


def test_make_sample_excludes_parts_from_serialisation():
    sample = make_sample("2024-12-07 06:00:00-08:00", "0.25")

    assert sample.model_dump() == {"timestamp": "2024-12-07 06:00:00-08:00", "price": 0.25}
