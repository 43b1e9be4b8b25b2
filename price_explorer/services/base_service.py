"""
Base service interface for business logic.
"""

import logging
from abc import ABC, abstractmethod

from ..exceptions import PriceExplorerError


class BaseService(ABC):
    """Abstract base service interface."""

    def __init__(self, repository=None):
        """Initialize service with repository dependency."""
        self.repository = repository
        self.logger = logging.getLogger(self.__class__.__module__)

    @abstractmethod
    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters."""
        pass

    def handle_exception(self, e: Exception, context: str = None) -> None:
        """
        Handle exceptions consistently across services.

        Domain errors are re-raised unchanged for the controllers to map;
        anything else is logged with context first.
        """
        if isinstance(e, PriceExplorerError):
            self.logger.warning(f"{context}: {e}" if context else str(e))
        else:
            self.logger.exception(f"{context}: {e}" if context else str(e))
        raise e
