"""
Domain models for price samples.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TimestampParts(BaseModel):
    """Calendar fields of a timestamp, read from its wall-clock time."""
    model_config = ConfigDict(frozen=True)

    local_date: date
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    weekday: int = Field(ge=0, le=6)  # Monday = 0
    utc_offset_minutes: Optional[int] = None  # None for naive timestamps


class Sample(BaseModel):
    """Model for one (timestamp, price) observation."""
    model_config = ConfigDict(frozen=True)

    timestamp: str
    price: float
    parts: TimestampParts = Field(exclude=True)


class PricePoint(BaseModel):
    """Model for a serialised sample (timestamp and price only)."""
    timestamp: str
    price: float
