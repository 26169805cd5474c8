"""Append-only log of raised alerts."""

from typing import Iterator, List, Tuple

from ..models.schemas import Alert, AlertKind


class AlertLog:
    """Alerts in the order they were raised."""

    def __init__(self):
        self._alerts: List[Alert] = []

    def __len__(self) -> int:
        return len(self._alerts)

    def __iter__(self) -> Iterator[Alert]:
        return iter(self.snapshot())

    def append(self, alert: Alert) -> None:
        self._alerts.append(alert)

    def snapshot(self) -> Tuple[Alert, ...]:
        return tuple(self._alerts)

    def for_boat(self, boat_id: str) -> Tuple[Alert, ...]:
        return tuple(alert for alert in self._alerts if alert.boat_id == boat_id)

    def by_kind(self, kind: AlertKind) -> Tuple[Alert, ...]:
        return tuple(alert for alert in self._alerts if alert.kind is kind)
