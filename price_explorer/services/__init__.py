"""
Services package for business logic layer.
Imports all services for easy access.
"""

# Base service
from .base_service import BaseService

# Individual services
from .statistics_service import StatisticsService
from .computation_service import ComputationService

__all__ = [
    # Base service
    "BaseService",

    # Individual services
    "StatisticsService",
    "ComputationService"
]
