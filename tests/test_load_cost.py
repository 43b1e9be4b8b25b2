"""Tests for load profile parsing and the cost calculation."""

import pytest

from price_explorer.exceptions import (
    EmptyInputError,
    InvalidProfileLengthError,
    InvalidProfileValueError,
    InvariantViolationError,
)
from price_explorer.models import Sample, TimestampParts
from price_explorer.utils.load_cost import (
    calculate_hourly_costs,
    parse_load_profile,
    summarize_costs,
    validate_load_profile,
)
from conftest import to_samples

FLAT_PROFILE = [100.0] * 24


def test_parse_load_profile_tolerates_whitespace():
    text = " , ".join(str(hour) for hour in range(24))

    assert parse_load_profile(text) == [float(hour) for hour in range(24)]


def test_parse_load_profile_accepts_decimals_and_exponents():
    profile = parse_load_profile(",".join(["1.5"] * 23 + ["2e2"]))

    assert profile[0] == 1.5
    assert profile[23] == 200.0


def test_parse_load_profile_too_few_values():
    with pytest.raises(InvalidProfileLengthError):
        parse_load_profile("1,2,3")


def test_parse_load_profile_too_many_values():
    with pytest.raises(InvalidProfileLengthError):
        parse_load_profile(",".join(["1"] * 25))


@pytest.mark.parametrize("bad_token", ["abc", "", "nan", "inf", "5x", "1..2", "1_000", "0x10"])
def test_parse_load_profile_non_numeric_token(bad_token):
    text = ",".join(["100"] * 23 + [bad_token])

    with pytest.raises(InvalidProfileValueError):
        parse_load_profile(text)


def test_negative_values_accepted_by_default():
    profile = parse_load_profile(",".join(["-5"] + ["10"] * 23))

    assert profile[0] == -5.0


def test_negative_values_rejected_when_disallowed():
    with pytest.raises(InvalidProfileValueError):
        parse_load_profile(",".join(["-5"] + ["10"] * 23), allow_negative=False)


def test_zero_values_allowed_when_negatives_disallowed():
    assert validate_load_profile([0] * 24, allow_negative=False) == [0.0] * 24


def test_validate_load_profile_length():
    with pytest.raises(InvalidProfileLengthError):
        validate_load_profile([1.0] * 23)


def test_cost_calculation_scenario():
    samples = to_samples([
        ("2024-01-01 00:00:00-08:00", 0.10),
        ("2024-01-01 01:00:00-08:00", 0.20),
    ])

    results = calculate_hourly_costs(samples, FLAT_PROFILE)
    summary = summarize_costs(results)

    assert [r.cost for r in results] == pytest.approx([10.0, 20.0])
    assert [r.hour_of_day for r in results] == [0, 1]
    assert [r.load for r in results] == [100.0, 100.0]
    assert results[0].timestamp == "2024-01-01 00:00:00-08:00"
    assert summary.total_cost == "30.00"
    assert summary.average_cost == "15.0000"
    assert summary.total_load == "200.00"
    assert summary.average_load == "100.00"
    assert summary.data_points == 2


def test_cost_uses_load_of_sample_hour():
    profile = [float(hour) for hour in range(24)]
    samples = to_samples([
        ("2024-01-01 23:00:00-08:00", 2.0),
        ("2024-01-02 05:00:00-08:00", 1.0),
    ])

    results = calculate_hourly_costs(samples, profile)

    assert [r.load for r in results] == [23.0, 5.0]
    assert [r.cost for r in results] == [46.0, 5.0]


def test_one_cost_sample_per_input_sample(two_month_samples):
    results = calculate_hourly_costs(two_month_samples, FLAT_PROFILE)

    assert len(results) == len(two_month_samples)


def test_calculate_hourly_costs_rejects_short_profile(december_samples):
    with pytest.raises(InvalidProfileLengthError):
        calculate_hourly_costs(december_samples, [1.0] * 12)


def test_hour_outside_range_is_an_invariant_violation():
    parts = TimestampParts.model_construct(
        local_date=None, hour=24, minute=0, weekday=0, utc_offset_minutes=None)
    sample = Sample.model_construct(timestamp="broken", price=1.0, parts=parts)

    with pytest.raises(InvariantViolationError):
        calculate_hourly_costs([sample], FLAT_PROFILE)


def test_summarize_costs_empty_input_raises():
    with pytest.raises(EmptyInputError):
        summarize_costs([])


def test_empty_sample_set_gives_empty_cost_series():
    assert calculate_hourly_costs([], FLAT_PROFILE) == []


def test_validate_load_profile_rejects_digit_separators_in_strings():
    with pytest.raises(InvalidProfileValueError):
        validate_load_profile(["1_000"] + ["1"] * 23)


def test_parse_load_profile_accepts_signed_and_bare_decimals():
    profile = parse_load_profile(",".join(["+1", ".5", "2."] + ["0"] * 21))

    assert profile[:3] == [1.0, 0.5, 2.0]
