"""
Controller for dataset exploration endpoints.

This controller serves the data-explorer view:
- Dataset listing
- Parsed price samples for plotting
- Overall and monthly statistics
- Hourly price profiles (overall, weekday, weekend, per month)

Endpoints:
    - GET /datasets: Available datasets
    - GET /datasets/{name}/samples: Parsed samples
    - GET /datasets/{name}/statistics: Overall statistics
    - GET /datasets/{name}/monthly-stats: Statistics per month
    - GET /datasets/{name}/hourly-profiles: 24-hour profiles
    - GET /datasets/{name}/monthly-hourly-profiles: 24-hour profiles per month
    - GET /datasets/{name}/profile: Everything above in one response
"""

from fastapi import Query, Depends
from typing import List

from .base_controller import BaseController
from ..services import StatisticsService
from ..models import (
    DatasetEntry,
    DatasetProfile,
    HourlyProfiles,
    MonthlyHourlyProfile,
    MonthlyStatisticsResult,
    PricePoint,
    StatisticsResult,
)


def get_statistics_service() -> StatisticsService:
    """Dependency injection for StatisticsService."""
    return StatisticsService()


class DatasetController(BaseController):
    """Controller for dataset exploration endpoints."""

    def _setup_routes(self):
        """Setup routes for dataset operations."""

        @self.router.get(
            "/datasets",
            response_model=List[DatasetEntry],
            tags=["Datasets"],
            summary="List available price datasets"
        )
        async def list_datasets(
            with_average: bool = Query(
                False, description="Include the mean price of every dataset"),
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """List the CSV datasets in the data directory, sorted by name."""
            try:
                return service.list_datasets(with_average=with_average)
            except Exception as e:
                self.handle_exception(e, "Error listing datasets")

        @self.router.get(
            "/datasets/{name}/samples",
            response_model=List[PricePoint],
            tags=["Datasets"],
            summary="Get the parsed samples of a dataset"
        )
        async def get_samples(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get (timestamp, price) samples with invalid rows removed."""
            try:
                return service.get_samples(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving samples")

        @self.router.get(
            "/datasets/{name}/statistics",
            response_model=StatisticsResult,
            tags=["Statistics & Analytics"],
            summary="Get overall price statistics"
        )
        async def get_statistics(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get count, average, median, max, min and average daily price delta."""
            try:
                return service.get_statistics(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving statistics")

        @self.router.get(
            "/datasets/{name}/monthly-stats",
            response_model=List[MonthlyStatisticsResult],
            tags=["Statistics & Analytics"],
            summary="Get price statistics per month"
        )
        async def get_monthly_statistics(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get statistics for every calendar month, oldest first."""
            try:
                return service.get_monthly_statistics(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving monthly statistics")

        @self.router.get(
            "/datasets/{name}/hourly-profiles",
            response_model=HourlyProfiles,
            tags=["Statistics & Analytics"],
            summary="Get hourly price profiles"
        )
        async def get_hourly_profiles(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get overall, weekday and weekend 24-hour profiles."""
            try:
                return service.get_hourly_profiles(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving hourly profiles")

        @self.router.get(
            "/datasets/{name}/monthly-hourly-profiles",
            response_model=List[MonthlyHourlyProfile],
            tags=["Statistics & Analytics"],
            summary="Get hourly price profiles per month"
        )
        async def get_monthly_hourly_profiles(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get overall, weekday and weekend 24-hour profiles for every month."""
            try:
                return service.get_monthly_hourly_profiles(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving monthly hourly profiles")

        @self.router.get(
            "/datasets/{name}/profile",
            response_model=DatasetProfile,
            tags=["Statistics & Analytics"],
            summary="Get the complete analysis of a dataset"
        )
        async def get_dataset_profile(
            name: str,
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Get statistics, monthly statistics and every hourly profile at once."""
            try:
                return service.get_dataset_profile(name)
            except Exception as e:
                self.handle_exception(e, "Error retrieving dataset profile")
