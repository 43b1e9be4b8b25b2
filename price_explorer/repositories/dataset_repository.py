"""
Repository for CSV price datasets.
Turns raw tabular rows into ordered price samples.
"""

import logging
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from .base_repository import BaseRepository
from ..config import DatasetStore, dataset_store
from ..exceptions import EmptyInputError, InvalidTimestampError
from ..models import Sample
from ..utils.calendar_utils import make_sample

logger = logging.getLogger(__name__)


def samples_from_rows(rows: Iterable[Sequence[str]]) -> List[Sample]:
    """
    Convert (timestamp, price, ...) rows into samples.

    Rows whose price is not a finite number or whose timestamp cannot be
    parsed are dropped. Input order is kept.

    Raises:
        EmptyInputError: "No data found" if there are no rows,
            "No valid price data found" if no row survives
    """
    frame = pd.DataFrame([list(row[:2]) for row in rows if len(row) >= 2])
    if frame.empty:
        raise EmptyInputError("No data found")
    return samples_from_frame(frame)


def samples_from_frame(frame: pd.DataFrame) -> List[Sample]:
    """Convert a frame with timestamps in column 0 and prices in column 1."""
    if frame.empty or frame.shape[1] < 2:
        raise EmptyInputError("No data found")

    timestamps = frame.iloc[:, 0].astype(str).str.strip()
    prices = pd.to_numeric(frame.iloc[:, 1].astype(str).str.strip(),
                           errors="coerce").astype(float)
    valid = np.isfinite(prices.to_numpy())

    samples = []
    for timestamp, price in zip(timestamps[valid], prices[valid]):
        try:
            samples.append(make_sample(timestamp, price))
        except InvalidTimestampError:
            logger.debug(f"Dropping row with invalid timestamp: {timestamp!r}")

    dropped = len(frame) - len(samples)
    if dropped:
        logger.debug(f"Dropped {dropped} of {len(frame)} rows without a valid price or timestamp")

    if not samples:
        raise EmptyInputError("No valid price data found")
    return samples


class DatasetRepository(BaseRepository):
    """Repository for CSV dataset operations."""

    def __init__(self, store: DatasetStore = None):
        self.store = store or dataset_store

    def find_all(self) -> List[str]:
        """Find the names of all datasets."""
        return self.store.list_names()

    def exists(self, record_id: str) -> bool:
        """Check whether a dataset exists."""
        return self.store.exists(record_id)

    def count(self, record_id: str) -> int:
        """Count the valid samples of a dataset."""
        return len(self.find_samples(record_id))

    def find_samples(self, name: str) -> List[Sample]:
        """
        Load a dataset as an ordered list of samples.

        Raises:
            DatasetNotFoundError: If the dataset does not exist
            EmptyInputError: If the dataset holds no valid samples
        """
        frame = self.store.read_frame(name)
        samples = samples_from_frame(frame)
        logger.info(f"Loaded {len(samples)} samples from dataset '{name}'")
        return samples
