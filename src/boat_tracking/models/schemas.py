"""Data schemas and models for boat tracking."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class Status(str, Enum):
    """Operational status of a boat."""
    NORMAL = "NORMAL"
    NEAR_LIMIT = "NEAR_LIMIT"
    VIOLATION = "VIOLATION"


class AlertKind(str, Enum):
    """Kinds of rule violation."""
    TIME_EXCEEDED = "TIME_EXCEEDED"
    AREA_BREACH = "AREA_BREACH"
    RESTRICTED_ZONE = "RESTRICTED_ZONE"


class Boat(BaseModel):
    """State of a tracked boat."""

    id: str = Field(..., description="System assigned boat identifier")
    chip_id: str = Field(..., description="Identifier of the chip attached to the boat")
    latitude: Optional[float] = Field(None, description="Last reported latitude")
    longitude: Optional[float] = Field(None, description="Last reported longitude")
    status: Status = Field(default=Status.NORMAL, description="Status derived from the last report")
    last_update: Optional[datetime] = Field(None, description="Timestamp of the last report")

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class Alert(BaseModel):
    """Record of a detected violation."""

    model_config = ConfigDict(frozen=True)

    boat_id: str = Field(..., description="Boat that raised the alert")
    kind: AlertKind = Field(..., description="Violation kind")
    message: str = Field(..., description="Human readable description")
    timestamp: datetime = Field(..., description="Timestamp of the offending report")

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.timestamp:%Y-%m-%d %H:%M} {self.message}"


class Evaluation(BaseModel):
    """Outcome of evaluating one position report."""

    model_config = ConfigDict(frozen=True)

    status: Status
    alert_kind: Optional[AlertKind] = None
    message: Optional[str] = None

    @property
    def is_violation(self) -> bool:
        return self.status is Status.VIOLATION and self.alert_kind is not None


class BoatReport(BaseModel):
    """One ingestion record read from a report file."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    boat_hint: str = Field("", description="Advisory boat id from the source, not the system id")
    chip_id: str = Field(..., min_length=1, description="Chip identifier")
    latitude: float = Field(..., description="Reported latitude")
    longitude: float = Field(..., description="Reported longitude")
    timestamp: datetime = Field(..., description="Report timestamp")
