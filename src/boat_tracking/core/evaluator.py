"""Status evaluation of position reports against the region rules."""

from datetime import date, datetime, time, timedelta

from ..models.config import RegionConfig
from ..models.schemas import AlertKind, Evaluation, Status


def _closing_threshold(config: RegionConfig) -> time:
    """Time of day after which a boat is considered close to closing time."""
    end = datetime.combine(date.min, config.operating_end)
    window = timedelta(minutes=config.closing_window_minutes)
    if end - datetime.combine(date.min, time.min) < window:
        return time.min
    return (end - window).time()


def _near_boundary(config: RegionConfig, latitude: float, longitude: float) -> bool:
    margin = config.boundary_margin_deg
    return ((latitude - config.min_lat) < margin
            or (config.max_lat - latitude) < margin
            or (longitude - config.min_lon) < margin
            or (config.max_lon - longitude) < margin)


def evaluate(
    config: RegionConfig,
    latitude: float,
    longitude: float,
    timestamp: datetime,
    boat_id: str = "",
) -> Evaluation:
    """
    Decide the status of a boat from one position report.

    Checks run in priority order and the first match wins: operating hours,
    permitted area, restricted zones (in configured order), then proximity
    to the region edges or to closing time. Only violations carry an alert
    kind and message.

    Args:
        config: Region rules
        latitude: Reported latitude in degrees
        longitude: Reported longitude in degrees
        timestamp: Report timestamp, only its time of day is used
        boat_id: Boat identifier used in alert messages

    Returns:
        Evaluation: Resulting status with optional alert kind and message
    """
    time_of_day = timestamp.time()

    if time_of_day < config.operating_start or time_of_day > config.operating_end:
        return Evaluation(
            status=Status.VIOLATION,
            alert_kind=AlertKind.TIME_EXCEEDED,
            message=f"Boat {boat_id} exceeded operating hours at {time_of_day:%H:%M}",
        )

    if not config.contains(latitude, longitude):
        return Evaluation(
            status=Status.VIOLATION,
            alert_kind=AlertKind.AREA_BREACH,
            message=f"Boat {boat_id} left permitted area at ({latitude:.2f}, {longitude:.2f})",
        )

    for zone in config.restricted_zones:
        if zone.contains(latitude, longitude):
            message = f"Boat {boat_id} entered restricted zone at ({latitude:.2f}, {longitude:.2f})"
            if zone.name:
                message += f" [{zone.name}]"
            return Evaluation(
                status=Status.VIOLATION,
                alert_kind=AlertKind.RESTRICTED_ZONE,
                message=message,
            )

    near_closing = time_of_day > _closing_threshold(config)
    if near_closing or _near_boundary(config, latitude, longitude):
        return Evaluation(status=Status.NEAR_LIMIT)

    return Evaluation(status=Status.NORMAL)
