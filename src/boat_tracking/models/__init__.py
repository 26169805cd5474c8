"""Data models and configuration classes."""

from .config import TrackingConfig, RegionConfig, RestrictedZone, RegistryConfig, LoggingConfig
from .schemas import Status, AlertKind, Boat, Alert, Evaluation, BoatReport

__all__ = [
    "TrackingConfig",
    "RegionConfig",
    "RestrictedZone",
    "RegistryConfig",
    "LoggingConfig",
    "Status",
    "AlertKind",
    "Boat",
    "Alert",
    "Evaluation",
    "BoatReport",
]
