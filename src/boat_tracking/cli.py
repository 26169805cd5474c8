"""Command line interface for boat tracking."""

import typer
from pathlib import Path
from typing import List, Optional, Tuple
from datetime import datetime

from .models.config import TrackingConfig
from .core.evaluator import evaluate as evaluate_report
from .ingestion.file_reader import load_file
from .orchestrator.tracking_service import TrackingService
from .rendering.console_map import format_alerts, format_boat_table, render_map
from .utils.logging import get_logger, setup_logging, setup_logging_from_config

app = typer.Typer(
    name="boat-tracking",
    help="Boat Tracking: status evaluation and alerts for a coastal fleet",
    add_completion=False
)

logger = get_logger(__name__)

TIMESTAMP_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]

# (latitude, longitude, timestamp) reports replayed by the demo command
DEMO_REPORTS: List[Tuple[float, float, datetime]] = [
    (20.0, 40.0, datetime(2025, 1, 1, 10, 0)),
    (18.05, 40.0, datetime(2025, 1, 1, 11, 0)),
    (19.5, 40.0, datetime(2025, 1, 1, 17, 45)),
    (19.5, 40.0, datetime(2025, 1, 1, 19, 0)),
    (25.0, 43.0, datetime(2025, 1, 2, 10, 0)),
    (20.6, 40.6, datetime(2025, 1, 3, 9, 0)),
]


def _load_config(config_path: Optional[Path]) -> TrackingConfig:
    config = TrackingConfig.from_file(config_path) if config_path else TrackingConfig()
    setup_logging_from_config(config.logging)
    return config


@app.command()
def load(
    file_path: Path = typer.Option(..., "--file", "-f", help="Path to boat report CSV file"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to configuration file"
    ),
    show_map: bool = typer.Option(True, "--map/--no-map", help="Print the ASCII region map"),
    rows: int = typer.Option(10, "--rows", help="Map rows"),
    cols: int = typer.Option(20, "--cols", help="Map columns"),
):
    """Load boat reports from a file and show the fleet."""
    setup_logging()

    try:
        config = _load_config(config_path)
        service = TrackingService(config)

        summary = load_file(service, file_path)

        typer.echo(f"Loaded {summary.boats_loaded} of {summary.records_read + summary.lines_skipped} "
                   f"records ({summary.lines_skipped} skipped)")
        typer.echo(format_boat_table(service.list_all()))
        typer.echo(format_alerts(service.alert_log()))
        if show_map:
            typer.echo(render_map(service.list_all(), service.region, rows=rows, cols=cols))

    except Exception as e:
        logger.error("Failed to load boat reports", file_path=str(file_path), error=str(e))
        raise typer.Exit(1)


@app.command()
def evaluate(
    latitude: float = typer.Argument(..., help="Reported latitude"),
    longitude: float = typer.Argument(..., help="Reported longitude"),
    timestamp: datetime = typer.Argument(..., formats=TIMESTAMP_FORMATS, help="Report time (YYYY-MM-DD HH:MM)"),
    boat_id: str = typer.Option("B0000", "--boat", "-b", help="Boat id used in the alert message"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to configuration file"
    ),
):
    """Evaluate a single position report against the region rules."""
    setup_logging()

    try:
        config = _load_config(config_path)
        result = evaluate_report(config.region, latitude, longitude, timestamp, boat_id=boat_id)

        typer.echo(f"Status: {result.status.value}")
        if result.is_violation:
            typer.echo(f"Alert: {result.alert_kind.value} - {result.message}")

    except Exception as e:
        logger.error("Failed to evaluate report", error=str(e))
        raise typer.Exit(1)


@app.command()
def demo(
    chip_id: str = typer.Option("chipX", "--chip", help="Chip id of the demo boat"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to configuration file"
    ),
):
    """Run a scripted scenario covering every status and alert kind."""
    setup_logging()

    try:
        config = _load_config(config_path)
        service = TrackingService(config)

        boat = service.register_boat(chip_id)
        typer.echo(f"Registered {boat.id} (chip {boat.chip_id}) - {boat.status.value}")

        for latitude, longitude, timestamp in DEMO_REPORTS:
            alerts = service.report_position(boat.id, latitude, longitude, timestamp)
            status = service.get_boat(boat.id).status
            line = f"{timestamp:%Y-%m-%d %H:%M} ({latitude:.2f}, {longitude:.2f}) -> {status.value}"
            if alerts:
                line += " " + ", ".join(alert.kind.value for alert in alerts)
            typer.echo(line)

        typer.echo(format_alerts(service.alert_log()))

    except Exception as e:
        logger.error("Demo failed", error=str(e))
        raise typer.Exit(1)


@app.command()
def show_config(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to configuration file"
    ),
):
    """Print the effective region rules."""
    setup_logging()

    try:
        config = _load_config(config_path)
        region = config.region

        typer.echo(f"Environment: {config.environment}")
        typer.echo(f"Region: lat [{region.min_lat}, {region.max_lat}] lon [{region.min_lon}, {region.max_lon}]")
        typer.echo(f"Operating hours: {region.operating_start:%H:%M}-{region.operating_end:%H:%M}")
        for zone in region.restricted_zones:
            typer.echo(f"Restricted zone {zone.name or '(unnamed)'}: "
                       f"lat [{zone.min_lat}, {zone.max_lat}] lon [{zone.min_lon}, {zone.max_lon}]")

    except Exception as e:
        logger.error("Failed to read configuration", error=str(e))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
