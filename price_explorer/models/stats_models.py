"""
Statistics models for price analysis.
"""

from pydantic import BaseModel, ConfigDict
from typing import List


class StatisticsResult(BaseModel):
    """Model for statistics over a set of samples."""
    model_config = ConfigDict(frozen=True)

    count: int
    average: float
    median: float
    max: float
    min: float
    average_daily_price_delta: float


class MonthlyStatisticsResult(StatisticsResult):
    """Model for statistics of a single calendar month."""
    month_label: str  # e.g. "December 2024"
    source_year_month: str  # "YYYY-MM" sort key


class HourlyProfilePoint(BaseModel):
    """Model for one hour-of-day slot of a price profile."""
    model_config = ConfigDict(frozen=True)

    hour: int
    average_price: float
    median_price: float
    count: int = 0


class HourlyProfiles(BaseModel):
    """Model for the overall, weekday and weekend profiles of a sample set."""
    profile: List[HourlyProfilePoint]
    weekday_profile: List[HourlyProfilePoint]
    weekend_profile: List[HourlyProfilePoint]


class MonthlyHourlyProfile(HourlyProfiles):
    """Model for the hourly profiles of a single calendar month."""
    month_label: str
    source_year_month: str


class DatasetProfile(BaseModel):
    """Model for the complete explorer analysis of a dataset."""
    statistics: StatisticsResult
    monthly_statistics: List[MonthlyStatisticsResult]
    hourly_profile: List[HourlyProfilePoint]
    weekday_hourly_profile: List[HourlyProfilePoint]
    weekend_hourly_profile: List[HourlyProfilePoint]
    monthly_hourly_profiles: List[MonthlyHourlyProfile]
