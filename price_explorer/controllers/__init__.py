"""
Controllers package for API endpoint handlers.
Imports all controllers for easy access.
"""

from fastapi import APIRouter

# Base controller
from .base_controller import BaseController

# Individual controllers
from .info_controller import InfoController
from .dataset_controller import DatasetController, get_statistics_service
from .computation_controller import ComputationController, get_computation_service


class PriceExplorerController:
    """
    Aggregate controller that combines all price explorer controllers.
    """

    def __init__(self):
        """Initialize aggregate controller with all sub-controllers."""
        self.router = APIRouter()

        # Initialize individual controllers
        self.info_controller = InfoController()
        self.dataset_controller = DatasetController()
        self.computation_controller = ComputationController()

        # Include all routers
        self._setup_aggregate_routes()

    def _setup_aggregate_routes(self):
        """Setup aggregate routes by including all controller routers."""
        self.router.include_router(self.info_controller.router)
        self.router.include_router(self.dataset_controller.router)
        self.router.include_router(self.computation_controller.router)


# Create aggregate controller
explorer_controller = PriceExplorerController()

__all__ = [
    # Base controller
    "BaseController",

    # Individual controllers
    "InfoController",
    "DatasetController",
    "ComputationController",

    # Dependencies
    "get_statistics_service",
    "get_computation_service",

    # Aggregate controller
    "PriceExplorerController",
    "explorer_controller"
]
