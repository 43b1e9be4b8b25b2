"""
Models for the load-cost computation.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union


class CostSample(BaseModel):
    """Model for the cost of a single price sample under a load profile."""
    timestamp: str
    price: float
    hour_of_day: int
    load: float
    cost: float


class CostSummary(BaseModel):
    """Model for roll-up totals of a cost series (fixed-point strings)."""
    total_cost: str  # 2 decimals
    average_cost: str  # 4 decimals
    total_load: str  # 2 decimals
    average_load: str  # 2 decimals
    data_points: int


class ComputationParameters(BaseModel):
    """Model for the validated inputs of a computation run."""
    load_profile: List[float] = Field(min_length=24, max_length=24)
    shift_percentage: float = Field(0.0, ge=0, le=100)
    shed_hours: int = Field(2, ge=0, le=24)
    load_up_hours: int = Field(4, ge=0, le=24)


class ComputationRequest(BaseModel):
    """Model for a computation request as sent by the wizard."""
    dataset: str
    # comma-separated text or an explicit list of 24 values; None means the default profile
    load_profile: Optional[Union[str, List[float]]] = None
    shift_percentage: float = Field(0.0, ge=0, le=100)
    shed_hours: int = Field(2, ge=0, le=24)
    load_up_hours: int = Field(4, ge=0, le=24)


class ComputationResult(BaseModel):
    """Model for the full result of a computation run."""
    dataset: str
    parameters: ComputationParameters
    results: List[CostSample]
    summary: CostSummary


class LoadProfileText(BaseModel):
    """Model for a raw load profile string."""
    text: str


class ParsedLoadProfile(BaseModel):
    """Model for a parsed load profile."""
    load_profile: List[float]
