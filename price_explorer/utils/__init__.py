"""
Utilities package for price data analysis.

This package contains the pure calendar, statistics, profile and load-cost
functions used by the services.
"""

from .calendar_utils import (
    parse_timestamp,
    make_sample,
    year_month_key,
    date_key,
    month_label,
    hour_of_day,
    is_weekday
)
from .aggregation import samples_frame, mean, median, round_price, average_daily_price_delta, aggregate
from .profiles import (
    build_hourly_profile,
    build_hourly_profiles,
    build_monthly_statistics,
    build_monthly_hourly_profiles,
    build_dataset_profile,
    split_by_day_type
)
from .load_cost import validate_load_profile, parse_load_profile, calculate_hourly_costs, summarize_costs

__all__ = [
    'parse_timestamp', 'make_sample', 'year_month_key', 'date_key', 'month_label',
    'hour_of_day', 'is_weekday',
    'samples_frame', 'mean', 'median', 'round_price', 'average_daily_price_delta', 'aggregate',
    'build_hourly_profile', 'build_hourly_profiles', 'build_monthly_statistics',
    'build_monthly_hourly_profiles', 'build_dataset_profile', 'split_by_day_type',
    'validate_load_profile', 'parse_load_profile', 'calculate_hourly_costs', 'summarize_costs'
]
