"""
Service for dataset statistics and price profiles.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List

import pandas as pd

from .base_service import BaseService
from ..config import app_config
from ..exceptions import DatasetNotFoundError, PriceExplorerError
from ..repositories import DatasetRepository
from ..models import (
    DatasetEntry,
    DatasetProfile,
    HourlyProfiles,
    MonthlyHourlyProfile,
    MonthlyStatisticsResult,
    Sample,
    StatisticsResult,
)
from ..utils.aggregation import aggregate, mean, round_price, samples_frame
from ..utils.profiles import (
    build_dataset_profile,
    build_hourly_profiles,
    build_monthly_hourly_profiles,
    build_monthly_statistics,
)


class StatisticsService(BaseService):
    """Service for statistics and profile operations."""

    def __init__(self, repository: DatasetRepository = None, parallel: bool = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or DatasetRepository())
        self.parallel = app_config.analysis.parallel_sections if parallel is None else parallel

    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters for dataset queries."""
        name = kwargs.get('name')

        if name is not None and not self.repository.exists(name):
            raise DatasetNotFoundError(f"Dataset not found: {name}")

        return True

    def list_datasets(self, with_average: bool = False) -> List[DatasetEntry]:
        """List available datasets, optionally with their mean price."""
        entries = []
        for name in self.repository.find_all():
            average = None
            if with_average:
                try:
                    prices = [sample.price for sample in self.repository.find_samples(name)]
                    average = round_price(mean(prices))
                except PriceExplorerError as e:
                    self.logger.warning(f"No average for '{name}': {e}")
            entries.append(DatasetEntry(name=name, average=average))
        return entries

    def get_samples(self, name: str) -> List[Sample]:
        """Get the parsed samples of a dataset."""
        try:
            self.validate_input(name=name)
            return self.repository.find_samples(name)
        except Exception as e:
            self.handle_exception(e, f"Error loading dataset '{name}'")

    def get_statistics(self, name: str) -> StatisticsResult:
        """Get overall statistics of a dataset."""
        return aggregate(self.get_samples(name))

    def get_monthly_statistics(self, name: str) -> List[MonthlyStatisticsResult]:
        """Get per-month statistics of a dataset."""
        return build_monthly_statistics(self.get_samples(name))

    def get_hourly_profiles(self, name: str) -> HourlyProfiles:
        """Get overall, weekday and weekend hourly profiles of a dataset."""
        return build_hourly_profiles(self.get_samples(name))

    def get_monthly_hourly_profiles(self, name: str) -> List[MonthlyHourlyProfile]:
        """Get hourly profiles for each month of a dataset."""
        return build_monthly_hourly_profiles(self.get_samples(name))

    def get_dataset_profile(self, name: str) -> DatasetProfile:
        """Get the complete explorer analysis of a dataset."""
        frame = samples_frame(self.get_samples(name))

        if not self.parallel:
            profile = build_dataset_profile(frame)
        else:
            profile = self._build_profile_concurrently(frame)

        self.logger.info(
            f"Built profile for '{name}': {profile.statistics.count} samples, "
            f"{len(profile.monthly_statistics)} months")
        return profile

    def _build_profile_concurrently(self, frame: pd.DataFrame) -> DatasetProfile:
        """Compute the independent sections on a thread pool."""
        with ThreadPoolExecutor(max_workers=app_config.analysis.max_workers) as executor:
            statistics = executor.submit(aggregate, frame)
            monthly_statistics = executor.submit(build_monthly_statistics, frame)
            hourly = executor.submit(build_hourly_profiles, frame)
            monthly_hourly = executor.submit(build_monthly_hourly_profiles, frame)

            hourly_profiles = hourly.result()
            return DatasetProfile(
                statistics=statistics.result(),
                monthly_statistics=monthly_statistics.result(),
                hourly_profile=hourly_profiles.profile,
                weekday_hourly_profile=hourly_profiles.weekday_profile,
                weekend_hourly_profile=hourly_profiles.weekend_profile,
                monthly_hourly_profiles=monthly_hourly.result()
            )
