"""Shared fixtures for the boat tracking tests."""

import pytest
from datetime import time

from ..models.config import RegionConfig, RestrictedZone, TrackingConfig
from ..orchestrator.tracking_service import TrackingService


@pytest.fixture
def region_config():
    """Region used throughout the tests: lat [18, 23], lon [39, 42], 06:00-18:00."""
    return RegionConfig(
        min_lat=18.0,
        max_lat=23.0,
        min_lon=39.0,
        max_lon=42.0,
        operating_start=time(6, 0),
        operating_end=time(18, 0),
        restricted_zones=[RestrictedZone(min_lat=20.5, max_lat=21.0, min_lon=40.5, max_lon=41.0)],
    )


@pytest.fixture
def test_config(region_config):
    """Create test configuration."""
    return TrackingConfig(
        project_name="boat-tracking-test",
        environment="test",
        region=region_config,
    )


@pytest.fixture
def service(test_config):
    return TrackingService(test_config)


@pytest.fixture
def reports_file(tmp_path):
    """CSV report file with valid rows, a comment and two malformed rows."""
    path = tmp_path / "boats_input.csv"
    path.write_text(
        "# BoatID,ChipID,Latitude,Longitude,Timestamp\n"
        "BT-01,chip001,20.00,40.00,2025-01-01 10:00\n"
        "\n"
        "BT-02,chip002,25.00,43.00,2025-01-01 11:00\n"
        "BT-03,chip003,not-a-number,40.00,2025-01-01 11:00\n"
        "BT-04,chip004,19.50,40.00\n"
        "BT-05,chip005,19.50,40.00,2025-01-01 19:00\n",
        encoding="utf-8",
    )
    return path
