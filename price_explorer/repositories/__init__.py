"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .dataset_repository import DatasetRepository, samples_from_rows, samples_from_frame

__all__ = [
    "BaseRepository",
    "DatasetRepository",
    "samples_from_rows",
    "samples_from_frame"
]
