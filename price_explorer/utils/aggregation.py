"""
Statistics aggregation over price samples.

Samples are laid out once as a pandas frame with one column per calendar
dimension (`date`, `year_month`, `hour`, `is_weekday`) taken from their
`TimestampParts`; grouping and roll-ups then run on that frame.

Rounding policy: every reported figure is rounded to 4 decimals with
Python's built-in `round`, i.e. round-half-to-even on the binary float.
"""

from typing import Sequence, Union

import numpy as np
import pandas as pd

from ..exceptions import EmptyInputError
from ..models import Sample, StatisticsResult
from .calendar_utils import date_key, hour_of_day, is_weekday, year_month_key

PRICE_DECIMALS = 4

FRAME_COLUMNS = ["timestamp", "price", "date", "year_month", "hour", "is_weekday"]

SampleData = Union[Sequence[Sample], pd.DataFrame]


def round_price(value: float, decimals: int = PRICE_DECIMALS) -> float:
    """Round a price figure for reporting."""
    return round(float(value), decimals)


def samples_frame(samples: SampleData) -> pd.DataFrame:
    """
    Lay samples out as a frame with one row per sample, in input order.

    A frame that already has the sample columns is returned unchanged.
    """
    if isinstance(samples, pd.DataFrame):
        return samples

    records = [
        (
            sample.timestamp,
            sample.price,
            date_key(sample),
            year_month_key(sample),
            hour_of_day(sample),
            is_weekday(sample),
        )
        for sample in samples
    ]
    frame = pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)
    return frame.astype({"price": float, "hour": int, "is_weekday": bool})


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; raises EmptyInputError on an empty sequence."""
    prices = np.asarray(values, dtype=float)
    if prices.size == 0:
        raise EmptyInputError("Cannot average an empty sequence")
    return float(np.mean(prices))


def median(values: Sequence[float]) -> float:
    """
    Median of the values.

    Even count: mean of the two central values. Odd count: the middle value.
    """
    prices = np.asarray(values, dtype=float)
    if prices.size == 0:
        raise EmptyInputError("Cannot take the median of an empty sequence")
    return float(np.median(prices))


def average_daily_price_delta(samples: SampleData) -> float:
    """
    Average over calendar days of (max - min) price within the day.

    A day with a single sample contributes a delta of 0.
    """
    frame = samples_frame(samples)
    if frame.empty:
        raise EmptyInputError()

    daily = frame.groupby("date", sort=False)["price"].agg(["max", "min"])
    return float((daily["max"] - daily["min"]).mean())


def aggregate(samples: SampleData) -> StatisticsResult:
    """
    Compute count, average, median, max, min and average daily price delta.

    Args:
        samples: Non-empty samples (or their frame) in any order

    Returns:
        StatisticsResult with every figure rounded to 4 decimals

    Raises:
        EmptyInputError: If samples is empty
    """
    frame = samples_frame(samples)
    if frame.empty:
        raise EmptyInputError()

    prices = frame["price"].to_numpy(dtype=float)

    return StatisticsResult(
        count=int(prices.size),
        average=round_price(mean(prices)),
        median=round_price(median(prices)),
        max=round_price(np.max(prices)),
        min=round_price(np.min(prices)),
        average_daily_price_delta=round_price(
            average_daily_price_delta(frame))
    )
