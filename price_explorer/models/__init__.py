"""
Models package for API data structures.
Imports all models for easy access.
"""

# Sample models
from .sample_models import TimestampParts, Sample, PricePoint

# Statistics models
from .stats_models import (
    StatisticsResult,
    MonthlyStatisticsResult,
    HourlyProfilePoint,
    HourlyProfiles,
    MonthlyHourlyProfile,
    DatasetProfile
)

# Computation models
from .computation_models import (
    CostSample,
    CostSummary,
    ComputationParameters,
    ComputationRequest,
    ComputationResult,
    LoadProfileText,
    ParsedLoadProfile
)

# Response models
from .response_models import DatasetEntry, APIInfo, HealthResponse

__all__ = [
    # Sample models
    "TimestampParts",
    "Sample",
    "PricePoint",

    # Statistics models
    "StatisticsResult",
    "MonthlyStatisticsResult",
    "HourlyProfilePoint",
    "HourlyProfiles",
    "MonthlyHourlyProfile",
    "DatasetProfile",

    # Computation models
    "CostSample",
    "CostSummary",
    "ComputationParameters",
    "ComputationRequest",
    "ComputationResult",
    "LoadProfileText",
    "ParsedLoadProfile",

    # Response models
    "DatasetEntry",
    "APIInfo",
    "HealthResponse"
]
