"""Report file ingestion."""

from .file_reader import LoadSummary, load_file, load_reports, parse_reports, read_reports

__all__ = [
    "LoadSummary",
    "load_file",
    "load_reports",
    "parse_reports",
    "read_reports",
]
