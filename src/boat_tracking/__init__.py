"""
Boat Tracking

Monitors a small fleet of chip-identified boats inside a bounded coastal
region and raises alerts when a boat breaks the operating rules.

Features:
- Status evaluation of every position report (normal, near-limit, violation)
- Operating-hours, permitted-area and restricted-zone checks
- Append-only alert log
- CSV report ingestion and console rendering
"""

__version__ = "1.0.0"
__author__ = "Boat Tracking Team"

from .models.config import TrackingConfig, RegionConfig
from .orchestrator.tracking_service import TrackingService
from .utils.logging import setup_logging

__all__ = [
    "TrackingConfig",
    "RegionConfig",
    "TrackingService",
    "setup_logging",
]
