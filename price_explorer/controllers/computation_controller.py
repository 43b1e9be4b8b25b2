"""
Controller for run-computation endpoints.
"""

from fastapi import Depends

from .base_controller import BaseController
from ..services import ComputationService
from ..models import ComputationRequest, ComputationResult, LoadProfileText, ParsedLoadProfile


def get_computation_service() -> ComputationService:
    """Dependency injection for ComputationService."""
    return ComputationService()


class ComputationController(BaseController):
    """Controller for load-profile cost computations."""

    def _setup_routes(self):
        """Setup routes for computation operations."""

        @self.router.post(
            "/load-profile/parse",
            response_model=ParsedLoadProfile,
            tags=["Computations"],
            summary="Validate a comma-separated load profile"
        )
        async def parse_load_profile(
            body: LoadProfileText,
            service: ComputationService = Depends(get_computation_service)
        ):
            """Parse 24 comma-separated load values; 400 when invalid."""
            try:
                return ParsedLoadProfile(load_profile=service.parse_load_profile(body.text))
            except Exception as e:
                self.handle_exception(e, "Error parsing load profile")

        @self.router.post(
            "/computations",
            response_model=ComputationResult,
            tags=["Computations"],
            summary="Run a load-cost computation"
        )
        async def run_computation(
            request: ComputationRequest,
            service: ComputationService = Depends(get_computation_service)
        ):
            """
            Multiply every price of the selected dataset by the load of its
            hour of day and return the cost series with summary totals.
            """
            try:
                return service.run_computation(request)
            except Exception as e:
                self.handle_exception(e, "Error running computation")
