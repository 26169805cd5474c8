"""Text rendering of boats, alerts and a coarse region map."""

import math
from typing import Dict, Iterable, List

from ..models.config import RegionConfig
from ..models.schemas import Alert, Boat, Status

_MARKERS: Dict[Status, str] = {
    Status.NORMAL: "G",
    Status.NEAR_LIMIT: "Y",
    Status.VIOLATION: "R",
}

_COLORS: Dict[Status, str] = {
    Status.NORMAL: "green",
    Status.NEAR_LIMIT: "orange",
    Status.VIOLATION: "red",
}

EMPTY_CELL = "."


def status_marker(status: Status) -> str:
    """Single character map marker for a status."""
    return _MARKERS[status]


def status_color(status: Status) -> str:
    return _COLORS[status]


def _format_position(boat: Boat) -> str:
    if not boat.has_position:
        return "(-, -)"
    return f"({boat.latitude:.2f}, {boat.longitude:.2f})"


def format_boat_table(boats: Iterable[Boat]) -> str:
    lines = ["Current boat positions:"]
    rows = [f"  {boat.id} {_format_position(boat)} - {boat.status.value}" for boat in boats]
    lines.extend(rows or ["  (no registered boats)"])
    return "\n".join(lines)


def format_alerts(alerts: Iterable[Alert]) -> str:
    rows = [f"  {alert}" for alert in alerts]
    if not rows:
        return "No alerts raised."
    return "\n".join(["Alerts raised:", *rows])


def render_map(boats: Iterable[Boat], region: RegionConfig, rows: int = 10, cols: int = 20) -> str:
    """
    Plot boats on a rows x cols grid covering the region, north at the top.

    Each boat is drawn with its status marker. Boats without a position or
    outside the region are left off the map; later boats overwrite earlier
    ones in the same cell.
    """
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be positive")

    grid: List[List[str]] = [[EMPTY_CELL] * cols for _ in range(rows)]
    lat_span = region.max_lat - region.min_lat
    lon_span = region.max_lon - region.min_lon

    for boat in boats:
        if not boat.has_position or not region.contains(boat.latitude, boat.longitude):
            continue
        lat_ratio = (boat.latitude - region.min_lat) / lat_span
        lon_ratio = (boat.longitude - region.min_lon) / lon_span
        # The northern and eastern edges fall into the last row/column
        row = rows - 1 - min(int(math.floor(lat_ratio * rows)), rows - 1)
        col = min(int(math.floor(lon_ratio * cols)), cols - 1)
        grid[row][col] = status_marker(boat.status)

    return "\n".join(" ".join(cells) for cells in grid)
