"""
Base repository interface for data access.
"""

from abc import ABC, abstractmethod
from typing import List


class BaseRepository(ABC):
    """Abstract base repository interface."""

    @abstractmethod
    def find_all(self) -> List[str]:
        """Find all record identifiers."""
        pass

    @abstractmethod
    def exists(self, record_id: str) -> bool:
        """Check whether a record exists."""
        pass

    @abstractmethod
    def count(self, record_id: str) -> int:
        """Count the rows held by a record."""
        pass
