"""
Controller for API information and health endpoints.
"""

from fastapi import Depends

from .base_controller import BaseController
from .dataset_controller import get_statistics_service
from ..config import app_config
from ..services import StatisticsService
from ..models import APIInfo, HealthResponse


class InfoController(BaseController):
    """Controller for API information and health endpoints."""

    def _setup_routes(self):
        """Setup routes for API info and health."""

        @self.router.get("/", response_model=APIInfo, tags=["System Information"])
        async def get_api_info():
            """API root endpoint with basic information."""
            return APIInfo(
                message="Electricity Price Explorer API",
                version=app_config.api.version,
                endpoints={
                    "datasets": "/datasets - List price datasets",
                    "samples": "/datasets/{name}/samples - Parsed price samples",
                    "statistics": "/datasets/{name}/statistics - Overall statistics",
                    "monthly_stats": "/datasets/{name}/monthly-stats - Statistics per month",
                    "hourly_profiles": "/datasets/{name}/hourly-profiles - Hourly price profiles",
                    "monthly_hourly_profiles": "/datasets/{name}/monthly-hourly-profiles - Hourly profiles per month",
                    "profile": "/datasets/{name}/profile - Complete dataset analysis",
                    "parse_load_profile": "/load-profile/parse - Validate a load profile",
                    "computations": "/computations - Run a load-cost computation",
                    "health": "/health - Health check"
                }
            )

        @self.router.get("/health", response_model=HealthResponse, tags=["System Information"])
        async def health_check(
            service: StatisticsService = Depends(get_statistics_service)
        ):
            """Health check endpoint."""
            return HealthResponse(
                status="healthy",
                service="price-explorer-api",
                datasets_available=len(service.list_datasets())
            )
