"""Reading boat report files and loading them into the tracking service."""

import csv
import structlog
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import BaseModel, Field, ValidationError

from ..models.schemas import BoatReport
from ..orchestrator.tracking_service import TrackingService

logger = structlog.get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
FIELD_COUNT = 5


class LoadSummary(BaseModel):
    """Outcome of loading a report file."""

    records_read: int = 0
    boats_loaded: int = 0
    lines_skipped: int = 0
    alerts_raised: int = 0
    loaded_ids: List[str] = Field(default_factory=list)


def parse_line(fields: List[str]) -> BoatReport:
    """
    Parse one CSV row: BoatID,ChipID,Latitude,Longitude,Timestamp.

    Raises:
        ValueError: If the row has the wrong shape or unparsable values
    """
    if len(fields) != FIELD_COUNT:
        raise ValueError(f"Expected {FIELD_COUNT} fields, found {len(fields)}")

    boat_hint, chip_id, latitude, longitude, timestamp = (field.strip() for field in fields)
    return BoatReport(
        boat_hint=boat_hint,
        chip_id=chip_id,
        latitude=float(latitude),
        longitude=float(longitude),
        timestamp=datetime.strptime(timestamp, TIMESTAMP_FORMAT),
    )


def parse_reports(lines: Iterable[str]) -> Tuple[List[BoatReport], int]:
    """
    Parse report lines, skipping blanks, comments and malformed rows.

    Args:
        lines: Raw text lines

    Returns:
        Tuple of parsed reports and the number of malformed lines skipped
    """
    reports: List[BoatReport] = []
    skipped = 0

    for line_number, row in enumerate(csv.reader(lines), start=1):
        if not row or not "".join(row).strip() or row[0].lstrip().startswith("#"):
            continue

        try:
            reports.append(parse_line(row))
        except (ValueError, ValidationError) as e:
            skipped += 1
            logger.warning("Skipping invalid line",
                           line_number=line_number,
                           line=",".join(row),
                           error=str(e))

    return reports, skipped


def read_reports(file_path: Path) -> Tuple[List[BoatReport], int]:
    """Read and parse a report file."""
    logger.info("Reading boat reports", file_path=str(file_path))

    with open(file_path, 'r', newline='', encoding='utf-8') as f:
        return parse_reports(f)


def load_reports(service: TrackingService, reports: Iterable[BoatReport]) -> LoadSummary:
    """Register one boat per report and apply its position, in order."""
    summary = LoadSummary()

    for report in reports:
        summary.records_read += 1
        boat = service.register_boat(report.chip_id)
        alerts = service.report_position(boat.id, report.latitude, report.longitude, report.timestamp)

        summary.boats_loaded += 1
        summary.alerts_raised += len(alerts)
        summary.loaded_ids.append(boat.id)

    return summary


def load_file(service: TrackingService, file_path: Path) -> LoadSummary:
    """
    Load a report file into the tracking service.

    Args:
        service: Tracking service receiving the reports
        file_path: CSV report file

    Returns:
        LoadSummary: Counts of loaded boats, skipped lines and alerts
    """
    reports, skipped = read_reports(file_path)
    summary = load_reports(service, reports)
    summary.lines_skipped = skipped

    logger.info("Boat reports loaded",
                file_path=str(file_path),
                boats_loaded=summary.boats_loaded,
                lines_skipped=summary.lines_skipped,
                alerts_raised=summary.alerts_raised)
    return summary
