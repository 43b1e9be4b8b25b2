"""
Application configuration settings.
Spring Boot-like configuration management.

Values can be overridden through environment variables, read from a .env
file next to the package or from the process environment:
    PRICE_EXPLORER_DATA_DIR
    PRICE_EXPLORER_LOG_LEVEL
    PRICE_EXPLORER_ALLOW_NEGATIVE_LOAD
    PRICE_EXPLORER_PARALLEL_SECTIONS
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class DatasetConfig(BaseModel):
    """Dataset storage configuration settings."""

    data_dir: str = os.getenv("PRICE_EXPLORER_DATA_DIR", "data")  # Relative to package directory
    file_pattern: str = "*.csv"


class APIConfig(BaseModel):
    """API configuration settings."""

    title: str = "Electricity Price Explorer API"
    description: str = "REST API for exploring CSV electricity price datasets and computing load-profile costs"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS settings
    allow_origins: list = ["*"]
    allow_credentials: bool = True
    allow_methods: list = ["*"]
    allow_headers: list = ["*"]


class AnalysisConfig(BaseModel):
    """Statistics and profile settings."""

    # Compute statistics, monthly statistics and hourly profiles on a thread pool
    parallel_sections: bool = _env_flag("PRICE_EXPLORER_PARALLEL_SECTIONS", False)
    max_workers: int = 3


class ComputationConfig(BaseModel):
    """Load-cost computation settings."""

    allow_negative_load: bool = _env_flag("PRICE_EXPLORER_ALLOW_NEGATIVE_LOAD", True)
    # Hourly load used when a computation request carries no load profile
    default_load_value: float = 100.0


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = os.getenv("PRICE_EXPLORER_LOG_LEVEL", "INFO")
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ApplicationConfig:
    """Main application configuration."""

    def __init__(self, data_dir: Optional[str] = None):
        self.datasets = DatasetConfig()
        if data_dir is not None:
            self.datasets.data_dir = data_dir
        self.api = APIConfig()
        self.analysis = AnalysisConfig()
        self.computation = ComputationConfig()
        self.logging = LoggingConfig()

    @property
    def data_dir(self) -> str:
        """Get the absolute dataset directory."""
        if os.path.isabs(self.datasets.data_dir):
            return self.datasets.data_dir
        # Relative paths resolve against the package directory
        package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return os.path.join(package_dir, self.datasets.data_dir)

    @property
    def default_load_profile(self) -> list:
        """Get the default 24-hour load profile."""
        return [self.computation.default_load_value] * 24


# Global configuration instance
app_config = ApplicationConfig()
