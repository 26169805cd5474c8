"""Console rendering of the fleet and alert log."""

from .console_map import format_alerts, format_boat_table, render_map, status_color, status_marker

__all__ = [
    "format_alerts",
    "format_boat_table",
    "render_map",
    "status_color",
    "status_marker",
]
