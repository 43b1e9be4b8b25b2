"""
Dataset Storage Configuration and Management Module

This module provides centralized access to the CSV price datasets served by
the Price Explorer API. A singleton DatasetStore resolves dataset names to
files inside the configured data directory and loads them as pandas
DataFrames for the repository layer.

Usage:
    The dataset_store instance is automatically available for import:

    ```python
    from price_explorer.config import dataset_store

    names = dataset_store.list_names()
    df = dataset_store.read_frame("pge-2024")
    ```

Dataset layout:
    - One CSV file per dataset, named <name>.csv
    - Column 0: timestamp ("YYYY-MM-DD HH:MM:SS+HH:MM")
    - Column 1: price, e.g. "Price ($/kWh)"
    - Further columns are ignored
"""

import os
from glob import glob
from typing import List, Optional

import pandas as pd

from .settings import app_config
from ..exceptions import DatasetFormatError, DatasetNotFoundError


class DatasetStore:
    """
    Centralized file access for CSV price datasets.

    Examples:
        >>> store = DatasetStore("/srv/data")
        >>> store.list_names()
        ['pge-2024', 'sce-2024']
        >>> df = store.read_frame("pge-2024")
    """

    def __init__(self, data_dir: Optional[str] = None):
        """
        Initialize the DatasetStore.

        Args:
            data_dir: Directory holding the CSV files. Defaults to the
                configured data directory.
        """
        self.data_dir = data_dir or app_config.data_dir
        self.file_pattern = app_config.datasets.file_pattern

    def list_names(self) -> List[str]:
        """Get the sorted base names of all dataset files."""
        if not os.path.isdir(self.data_dir):
            return []
        paths = glob(os.path.join(self.data_dir, self.file_pattern))
        return sorted(os.path.splitext(os.path.basename(path))[0]
                      for path in paths if os.path.isfile(path))

    def get_path(self, name: str) -> str:
        """
        Resolve a dataset name to its file path.

        Raises:
            DatasetNotFoundError: If the name is not a plain file name or
                no such dataset exists
        """
        if not name or os.path.basename(name) != name or name.startswith("."):
            raise DatasetNotFoundError(f"Invalid dataset name: {name!r}")

        path = os.path.join(self.data_dir, f"{name}.csv")
        if not os.path.isfile(path):
            raise DatasetNotFoundError(f"Dataset not found: {name}")
        return path

    def exists(self, name: str) -> bool:
        """Check whether a dataset exists."""
        try:
            self.get_path(name)
            return True
        except DatasetNotFoundError:
            return False

    def read_frame(self, name: str) -> pd.DataFrame:
        """
        Read a dataset as raw strings.

        The header row is skipped and columns are numbered from 0, so the
        timestamp stays in column 0 and the price in column 1 whatever the
        header says. Rows with more fields than the rest (a stray or
        trailing delimiter) do not shift the columns. Every cell stays a
        string so the repository decides what counts as valid.

        Raises:
            DatasetNotFoundError: If the dataset does not exist
            DatasetFormatError: If the file is not parseable CSV
        """
        path = self.get_path(name)
        try:
            return pd.read_csv(
                path,
                header=None,
                skiprows=1,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
                engine="python",
                on_bad_lines=lambda row: row[:2]
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise DatasetFormatError(f"Dataset '{name}' is not valid CSV: {e}") from e


# Create a singleton instance for use throughout the application
dataset_store = DatasetStore()
