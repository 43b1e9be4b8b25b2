"""
Base controller interface for API endpoints.

This module provides the abstract base class for all API controllers of the
price explorer. It enforces consistent router setup and translates domain
errors raised by the services into HTTP responses.

Error mapping:
    - DatasetNotFoundError: 404
    - EmptyInputError: 404 ("No data found" / "No valid price data found")
    - DatasetFormatError: 422 (file is not parseable CSV)
    - InvalidProfileLengthError, InvalidProfileValueError: 400
    - Anything else (including InvariantViolationError): 500 with context

Usage:
    ```python
    class MyController(BaseController):
        def _setup_routes(self):
            @self.router.get("/my-endpoint")
            async def my_endpoint():
                return {"message": "Hello World"}
    ```
"""

import logging
from abc import ABC, abstractmethod
from fastapi import APIRouter, HTTPException
from typing import Optional

from ..exceptions import (
    DatasetFormatError,
    DatasetNotFoundError,
    EmptyInputError,
    InvalidProfileLengthError,
    InvalidProfileValueError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = [
    (DatasetNotFoundError, 404),
    (EmptyInputError, 404),
    (DatasetFormatError, 422),
    (InvalidProfileLengthError, 400),
    (InvalidProfileValueError, 400),
]


class BaseController(ABC):
    """
    Abstract base controller for consistent API endpoint patterns.

    All concrete controllers must inherit from this class and implement
    the _setup_routes() method to define their specific endpoints.

    Attributes:
        router (APIRouter): FastAPI router instance for endpoint registration
    """

    def __init__(self):
        """Initialize controller with FastAPI router and register its routes."""
        self.router = APIRouter()
        self._setup_routes()

    @abstractmethod
    def _setup_routes(self):
        """Setup routes for this controller."""
        pass

    def handle_exception(self, e: Exception, context: Optional[str] = None) -> None:
        """
        Handle exceptions consistently across all controllers.

        Domain errors keep their own message and get a 4xx status code;
        unexpected errors become HTTP 500 with contextual information.

        Args:
            e (Exception): The exception that occurred
            context (Optional[str]): Where the error occurred

        Raises:
            HTTPException: Always
        """
        if isinstance(e, HTTPException):
            raise e

        for error_type, status_code in ERROR_STATUS_CODES:
            if isinstance(e, error_type):
                raise HTTPException(status_code=status_code, detail=str(e)) from e

        logger.error(f"{context}: {e}" if context else str(e))
        error_message = f"{context}: {str(e)}" if context else str(e)
        raise HTTPException(status_code=500, detail=error_message) from e
