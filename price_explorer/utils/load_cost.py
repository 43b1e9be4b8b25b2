"""
Load-cost calculation: weights a price series with a 24-value hourly load
profile and rolls the result up into summary totals.
"""

import math
import re
from typing import List, Sequence

from ..exceptions import (
    EmptyInputError,
    InvalidProfileLengthError,
    InvalidProfileValueError,
    InvariantViolationError,
)
from ..models import CostSample, CostSummary, Sample
from .calendar_utils import hour_of_day

PROFILE_LENGTH = 24

# Plain decimal or exponent notation; no digit separators, no hex
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def validate_load_profile(values: Sequence[float], allow_negative: bool = True) -> List[float]:
    """
    Validate a load profile given as numbers.

    Args:
        values: Candidate profile, one value per hour of day
        allow_negative: Whether negative loads are accepted

    Returns:
        The profile as a list of floats

    Raises:
        InvalidProfileLengthError: If there are not exactly 24 values
        InvalidProfileValueError: If a value is not a plain finite number,
            or negative while allow_negative is False
    """
    if len(values) != PROFILE_LENGTH:
        raise InvalidProfileLengthError(
            f"Hourly load profile must contain exactly {PROFILE_LENGTH} values, got {len(values)}")

    profile = []
    for hour, value in enumerate(values):
        if isinstance(value, str) and not NUMBER_PATTERN.fullmatch(value.strip()):
            raise InvalidProfileValueError(
                f"Load for hour {hour} is not a number: {value!r}")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidProfileValueError(
                f"Load for hour {hour} is not a number: {value!r}") from e

        if not math.isfinite(number):
            raise InvalidProfileValueError(
                "All hourly load profile values must be valid numbers")
        if number < 0 and not allow_negative:
            raise InvalidProfileValueError(
                f"Load for hour {hour} must not be negative: {number}")
        profile.append(number)

    return profile


def parse_load_profile(text: str, allow_negative: bool = True) -> List[float]:
    """
    Parse a comma-separated load profile such as "100, 100, ..., 80".

    Whitespace around each token is ignored.

    Raises:
        InvalidProfileLengthError: If the text does not hold 24 tokens
        InvalidProfileValueError: If a token is not a finite number
    """
    tokens = [token.strip() for token in text.split(",")]
    return validate_load_profile(tokens, allow_negative=allow_negative)


def calculate_hourly_costs(samples: Sequence[Sample], load_profile: Sequence[float]) -> List[CostSample]:
    """
    Compute cost = price * load for each sample, taking the load of the
    sample's hour of day.

    Raises:
        InvalidProfileLengthError: If load_profile does not hold 24 values
        InvariantViolationError: If a sample's hour of day is outside 0..23
    """
    if len(load_profile) != PROFILE_LENGTH:
        raise InvalidProfileLengthError(
            f"Hourly load profile must contain exactly {PROFILE_LENGTH} values, got {len(load_profile)}")

    results = []
    for sample in samples:
        hour = hour_of_day(sample)
        if not 0 <= hour < PROFILE_LENGTH:
            raise InvariantViolationError(
                f"Hour of day {hour} out of range for {sample.timestamp!r}")

        load = float(load_profile[hour])
        results.append(CostSample(
            timestamp=sample.timestamp,
            price=sample.price,
            hour_of_day=hour,
            load=load,
            cost=sample.price * load
        ))
    return results


def summarize_costs(cost_samples: Sequence[CostSample]) -> CostSummary:
    """
    Roll a cost series up into totals and per-sample averages.

    Raises:
        EmptyInputError: If cost_samples is empty
    """
    if not cost_samples:
        raise EmptyInputError("No cost data to summarize")

    count = len(cost_samples)
    total_cost = sum(item.cost for item in cost_samples)
    total_load = sum(item.load for item in cost_samples)

    return CostSummary(
        total_cost=f"{total_cost:.2f}",
        average_cost=f"{total_cost / count:.4f}",
        total_load=f"{total_load:.2f}",
        average_load=f"{total_load / count:.2f}",
        data_points=count
    )
