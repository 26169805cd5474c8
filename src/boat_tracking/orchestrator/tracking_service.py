"""Tracking service coordinating registration, evaluation and alerting."""

import threading
import structlog
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..core.alert_log import AlertLog
from ..core.evaluator import evaluate
from ..core.registry import BoatRegistry
from ..models.config import RegionConfig, TrackingConfig
from ..models.schemas import Alert, Boat, Status

logger = structlog.get_logger(__name__)


class TrackingService:
    """Entry point for position reports and fleet queries.

    A single lock serializes registrations and reports so that a boat's
    status write and the matching alert append happen as one step. Reads
    return snapshots taken under the same lock.
    """

    def __init__(self, config: Optional[TrackingConfig] = None):
        self.config = config or TrackingConfig()
        self._registry = BoatRegistry(self.config.registry)
        self._alerts = AlertLog()
        self._lock = threading.RLock()

    @property
    def region(self) -> RegionConfig:
        return self.config.region

    def register_boat(self, chip_id: Optional[str]) -> Boat:
        """Register a boat and return a snapshot of it."""
        with self._lock:
            return self._registry.register(chip_id).model_copy()

    def report_position(self, boat_id: str, latitude: float, longitude: float,
                        timestamp: datetime) -> List[Alert]:
        """
        Process a position report for a registered boat.

        Unknown boat ids are ignored and yield no alerts.

        Args:
            boat_id: System id of the reporting boat
            latitude: Reported latitude
            longitude: Reported longitude
            timestamp: Time of the report

        Returns:
            List[Alert]: Alerts raised by this report, empty if none
        """
        with self._lock:
            if boat_id not in self._registry:
                logger.debug("Ignoring report for unknown boat", boat_id=boat_id)
                return []

            result = evaluate(self.region, latitude, longitude, timestamp, boat_id=boat_id)
            self._registry.update_position(boat_id, latitude, longitude, timestamp, result.status)

            logger.debug("Position evaluated",
                         boat_id=boat_id,
                         latitude=latitude,
                         longitude=longitude,
                         status=result.status.value)

            if not result.is_violation:
                return []

            alert = Alert(boat_id=boat_id,
                          kind=result.alert_kind,
                          message=result.message,
                          timestamp=timestamp)
            self._alerts.append(alert)

            logger.warning("Violation detected",
                           boat_id=boat_id,
                           kind=alert.kind.value,
                           alert_message=alert.message)
            return [alert]

    def get_boat(self, boat_id: str) -> Optional[Boat]:
        with self._lock:
            boat = self._registry.get(boat_id)
            return boat.model_copy() if boat is not None else None

    def boat_location(self, boat_id: str) -> Optional[Tuple[float, float]]:
        """Last reported (latitude, longitude), or None if unknown or never reported."""
        with self._lock:
            boat = self._registry.get(boat_id)
            if boat is None or not boat.has_position:
                return None
            return boat.latitude, boat.longitude

    def list_all(self) -> List[Boat]:
        with self._lock:
            return self._registry.list_all()

    def filter_by_status(self, status: Status) -> List[Boat]:
        with self._lock:
            return self._registry.filter_by_status(status)

    def alert_log(self) -> Tuple[Alert, ...]:
        with self._lock:
            return self._alerts.snapshot()

    def status_counts(self) -> Dict[Status, int]:
        """Number of boats per status, every status present."""
        with self._lock:
            counts = {status: 0 for status in Status}
            for boat in self._registry.list_all():
                counts[boat.status] += 1
            return counts
