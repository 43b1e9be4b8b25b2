"""Shared fixtures for the price explorer tests."""

import pytest
from fastapi.testclient import TestClient

from price_explorer.config import DatasetStore
from price_explorer.controllers import get_computation_service, get_statistics_service
from price_explorer.main import app
from price_explorer.repositories import DatasetRepository
from price_explorer.services import ComputationService, StatisticsService
from price_explorer.utils.calendar_utils import make_sample

HEADER = "datetime,Price ($/kWh),cld,mec\n"


def hourly_rows(day: str, prices, offset: str = "-08:00"):
    """Rows for consecutive hours of one day starting at midnight."""
    return [(f"{day} {hour:02d}:00:00{offset}", price) for hour, price in enumerate(prices)]


def to_samples(rows):
    return [make_sample(timestamp, price) for timestamp, price in rows]


def write_csv(directory, name, rows, header=HEADER):
    path = directory / f"{name}.csv"
    lines = [header] + [f"{timestamp},{price},0,0\n" for timestamp, price in rows]
    path.write_text("".join(lines))
    return path


@pytest.fixture
def december_samples():
    """Mon 2 Dec and Sat 7 Dec 2024, three hours each."""
    rows = hourly_rows("2024-12-02", [0.10, 0.20, 0.30]) + \
        hourly_rows("2024-12-07", [0.40, 0.50, 0.60])
    return to_samples(rows)


@pytest.fixture
def two_month_samples():
    """Samples spread over November and December 2024."""
    rows = hourly_rows("2024-11-29", [0.12, 0.18]) + \
        hourly_rows("2024-11-30", [0.30]) + \
        hourly_rows("2024-12-01", [0.20, 0.24, 0.10]) + \
        hourly_rows("2024-12-02", [0.15])
    return to_samples(rows)


@pytest.fixture
def data_dir(tmp_path):
    """Data directory with a valid, an invalid and an empty dataset."""
    write_csv(tmp_path, "pge-2024",
              hourly_rows("2024-12-02", [0.10, 0.20, 0.30]) +
              hourly_rows("2024-12-07", [0.40, 0.50, 0.60]) +
              [("2025-01-01 00:00:00-08:00", "not-a-price")])
    write_csv(tmp_path, "broken", [("2024-12-02 00:00:00-08:00", "n/a"),
                                   ("2024-12-02 01:00:00-08:00", "")])
    (tmp_path / "empty.csv").write_text(HEADER)
    (tmp_path / "notes.txt").write_text("not a dataset")
    return tmp_path


@pytest.fixture
def repository(data_dir):
    return DatasetRepository(DatasetStore(str(data_dir)))


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_statistics_service] = lambda: StatisticsService(repository)
    app.dependency_overrides[get_computation_service] = lambda: ComputationService(repository)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
