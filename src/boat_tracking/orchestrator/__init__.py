"""Tracking service coordinating registry, evaluator and alert log."""

from .tracking_service import TrackingService

__all__ = ["TrackingService"]
