"""Tests for hourly profiles and monthly bucketing."""

import pytest

from price_explorer.exceptions import EmptyInputError
from price_explorer.utils.profiles import (
    build_dataset_profile,
    build_hourly_profile,
    build_hourly_profiles,
    build_monthly_hourly_profiles,
    build_monthly_statistics,
    split_by_day_type,
)
from conftest import hourly_rows, to_samples


def assert_dense(profile):
    assert len(profile) == 24
    assert [point.hour for point in profile] == list(range(24))


def test_hourly_profile_is_dense_with_zero_defaults(december_samples):
    profile = build_hourly_profile(december_samples)

    assert_dense(profile)
    assert profile[0].average_price == 0.25  # 0.10 and 0.40
    assert profile[0].median_price == 0.25
    assert profile[0].count == 2
    assert profile[5].average_price == 0
    assert profile[5].median_price == 0
    assert profile[5].count == 0


def test_hourly_profile_of_empty_input_is_all_zero():
    profile = build_hourly_profile([])

    assert_dense(profile)
    assert all(point.average_price == 0 and point.count == 0 for point in profile)


def test_weekday_and_weekend_profiles(december_samples):
    profiles = build_hourly_profiles(december_samples)

    assert profiles.weekday_profile[1].average_price == 0.2
    assert profiles.weekend_profile[1].average_price == 0.5
    assert profiles.weekday_profile[2].median_price == 0.3
    assert profiles.weekend_profile[2].median_price == 0.6


def test_every_sample_is_weekday_or_weekend(two_month_samples):
    profiles = build_hourly_profiles(two_month_samples)

    for hour in range(24):
        weekday = profiles.weekday_profile[hour].count
        weekend = profiles.weekend_profile[hour].count
        assert weekday + weekend == profiles.profile[hour].count


def test_split_by_day_type_keeps_order(december_samples):
    weekday, weekend = split_by_day_type(december_samples)

    assert list(weekday["price"]) == [0.10, 0.20, 0.30]
    assert list(weekend["price"]) == [0.40, 0.50, 0.60]


def test_monthly_statistics_are_sorted_and_labelled(two_month_samples):
    # Present the samples out of order; months must still come out ascending.
    monthly = build_monthly_statistics(list(reversed(two_month_samples)))

    assert [m.source_year_month for m in monthly] == ["2024-11", "2024-12"]
    assert [m.month_label for m in monthly] == ["November 2024", "December 2024"]

    november, december = monthly
    assert november.count == 3
    assert november.average == 0.2
    assert november.median == 0.18
    assert december.count == 4
    assert december.max == 0.24
    assert december.min == 0.1


def test_monthly_statistics_partition_the_samples(two_month_samples):
    monthly = build_monthly_statistics(two_month_samples)

    assert sum(m.count for m in monthly) == len(two_month_samples)


def test_monthly_daily_delta_is_scoped_to_month(two_month_samples):
    november, december = build_monthly_statistics(two_month_samples)

    # Nov 29: 0.18-0.12, Nov 30: single sample
    assert november.average_daily_price_delta == 0.03
    # Dec 1: 0.24-0.10, Dec 2: single sample
    assert december.average_daily_price_delta == 0.07


def test_monthly_statistics_empty_input_raises():
    with pytest.raises(EmptyInputError):
        build_monthly_statistics([])


def test_monthly_hourly_profiles(two_month_samples):
    monthly = build_monthly_hourly_profiles(two_month_samples)

    assert [m.month_label for m in monthly] == ["November 2024", "December 2024"]
    november, december = monthly
    for month in monthly:
        assert_dense(month.profile)
        assert_dense(month.weekday_profile)
        assert_dense(month.weekend_profile)

    # Nov 29 is a Friday, Nov 30 a Saturday
    assert november.weekday_profile[0].average_price == 0.12
    assert november.weekend_profile[0].average_price == 0.3
    assert november.profile[0].average_price == 0.21
    # Dec 1 is a Sunday, Dec 2 a Monday
    assert december.weekend_profile[2].average_price == 0.1
    assert december.weekday_profile[0].average_price == 0.15
    assert december.weekday_profile[2].count == 0


def test_dataset_profile_combines_all_sections(two_month_samples):
    result = build_dataset_profile(two_month_samples)

    assert result.statistics.count == 7
    assert len(result.monthly_statistics) == 2
    assert len(result.monthly_hourly_profiles) == 2
    assert_dense(result.hourly_profile)
    assert_dense(result.weekday_hourly_profile)
    assert_dense(result.weekend_hourly_profile)


def test_dataset_profile_is_deterministic(two_month_samples):
    assert build_dataset_profile(two_month_samples) == build_dataset_profile(two_month_samples)


def test_dataset_profile_empty_input_raises():
    with pytest.raises(EmptyInputError):
        build_dataset_profile([])


def test_profile_buckets_by_local_hour_across_offsets():
    rows = hourly_rows("2024-03-09", [0.1], offset="-08:00") + \
        hourly_rows("2024-03-11", [0.3], offset="-07:00")

    profile = build_hourly_profile(to_samples(rows))

    assert profile[0].count == 2
    assert profile[0].average_price == 0.2


def test_monthly_hourly_profiles_of_empty_input():
    assert build_monthly_hourly_profiles([]) == []
