"""
Response models for API endpoints.
"""

from pydantic import BaseModel
from typing import Optional


class DatasetEntry(BaseModel):
    """Model for one entry of the dataset list."""
    name: str
    average: Optional[float] = None


class APIInfo(BaseModel):
    """Model for API information."""
    message: str
    version: str
    endpoints: dict


class HealthResponse(BaseModel):
    """Model for health check response."""
    status: str
    service: str
    datasets_available: int
