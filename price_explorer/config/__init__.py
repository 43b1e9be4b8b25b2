"""
Configuration package for application settings.
"""

from .settings import (
    ApplicationConfig,
    APIConfig,
    DatasetConfig,
    AnalysisConfig,
    ComputationConfig,
    LoggingConfig,
    app_config
)
from .dataset_store import DatasetStore, dataset_store

__all__ = [
    "ApplicationConfig",
    "APIConfig",
    "DatasetConfig",
    "AnalysisConfig",
    "ComputationConfig",
    "LoggingConfig",
    "app_config",
    "DatasetStore",
    "dataset_store"
]
