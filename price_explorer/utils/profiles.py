"""
Calendar-bucketed price profiles.

Samples are laid out once as a frame (see `aggregation.samples_frame`) and
grouped with pandas per dimension: month, hour of day and day type. Hourly
profiles are always dense: 24 points indexed 0..23, with 0/0 for hours
that have no samples.
"""

from typing import List, Tuple

import pandas as pd

from ..exceptions import EmptyInputError
from ..models import (
    DatasetProfile,
    HourlyProfilePoint,
    HourlyProfiles,
    MonthlyHourlyProfile,
    MonthlyStatisticsResult,
)
from .aggregation import SampleData, aggregate, round_price, samples_frame
from .calendar_utils import month_label

HOURS_PER_DAY = 24


def build_hourly_profile(samples: SampleData) -> List[HourlyProfilePoint]:
    """Build a dense 24-point average/median profile by hour of day."""
    frame = samples_frame(samples)
    if frame.empty:
        return [HourlyProfilePoint(hour=hour, average_price=0.0, median_price=0.0, count=0)
                for hour in range(HOURS_PER_DAY)]

    by_hour = (frame.groupby("hour")["price"]
               .agg(["mean", "median", "count"])
               .reindex(range(HOURS_PER_DAY), fill_value=0))

    return [
        HourlyProfilePoint(
            hour=hour,
            average_price=round_price(row["mean"]),
            median_price=round_price(row["median"]),
            count=int(row["count"])
        )
        for hour, row in by_hour.iterrows()
    ]


def split_by_day_type(samples: SampleData) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Split samples into (weekday, weekend) frames, keeping input order."""
    frame = samples_frame(samples)
    weekday = frame["is_weekday"].astype(bool)
    return frame[weekday], frame[~weekday]


def build_hourly_profiles(samples: SampleData) -> HourlyProfiles:
    """Build the overall, weekday and weekend hourly profiles."""
    frame = samples_frame(samples)
    weekday_frame, weekend_frame = split_by_day_type(frame)
    return HourlyProfiles(
        profile=build_hourly_profile(frame),
        weekday_profile=build_hourly_profile(weekday_frame),
        weekend_profile=build_hourly_profile(weekend_frame)
    )


def build_monthly_statistics(samples: SampleData) -> List[MonthlyStatisticsResult]:
    """
    Compute statistics for every calendar month present in the samples.

    Returns:
        One MonthlyStatisticsResult per month, ordered by year-month

    Raises:
        EmptyInputError: If samples is empty
    """
    frame = samples_frame(samples)
    if frame.empty:
        raise EmptyInputError()

    results = []
    for key, month_frame in frame.groupby("year_month", sort=True):
        stats = aggregate(month_frame)
        results.append(MonthlyStatisticsResult(
            **stats.model_dump(),
            month_label=month_label(key),
            source_year_month=key
        ))
    return results


def build_monthly_hourly_profiles(samples: SampleData) -> List[MonthlyHourlyProfile]:
    """Build overall/weekday/weekend hourly profiles for every month."""
    frame = samples_frame(samples)
    if frame.empty:
        return []

    results = []
    for key, month_frame in frame.groupby("year_month", sort=True):
        profiles = build_hourly_profiles(month_frame)
        results.append(MonthlyHourlyProfile(
            **profiles.model_dump(),
            month_label=month_label(key),
            source_year_month=key
        ))
    return results


def build_dataset_profile(samples: SampleData) -> DatasetProfile:
    """
    Run every explorer analysis over one sample set.

    Raises:
        EmptyInputError: If samples is empty
    """
    frame = samples_frame(samples)
    if frame.empty:
        raise EmptyInputError()

    hourly = build_hourly_profiles(frame)
    return DatasetProfile(
        statistics=aggregate(frame),
        monthly_statistics=build_monthly_statistics(frame),
        hourly_profile=hourly.profile,
        weekday_hourly_profile=hourly.weekday_profile,
        weekend_hourly_profile=hourly.weekend_profile,
        monthly_hourly_profiles=build_monthly_hourly_profiles(frame)
    )
