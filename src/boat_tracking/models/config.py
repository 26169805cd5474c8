"""Configuration models for the boat tracking system."""

from datetime import time
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..exceptions import ConfigurationError


class RestrictedZone(BaseModel):
    """Rectangular area inside the region where presence is a violation."""

    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    name: Optional[str] = Field(None, description="Human readable zone name")

    @model_validator(mode="after")
    def _check_bounds(self) -> "RestrictedZone":
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise ValueError("restricted zone minimum must not exceed maximum")
        return self

    def contains(self, latitude: float, longitude: float) -> bool:
        """Inclusive containment test."""
        return (self.min_lat <= latitude <= self.max_lat
                and self.min_lon <= longitude <= self.max_lon)


def _default_zones() -> Tuple[RestrictedZone, ...]:
    # Protected fishing area off the central coast
    return (RestrictedZone(min_lat=20.5, max_lat=21.0, min_lon=40.5, max_lon=41.0,
                           name="fishing-area"),)


class RegionConfig(BaseModel):
    """Permitted region, operating hours and restricted zones.

    Defaults describe the Red Sea coast between Al Qunfudhah (south) and
    Rabigh (north).
    """

    model_config = ConfigDict(frozen=True)

    min_lat: float = 18.0
    max_lat: float = 23.0
    min_lon: float = 39.0
    max_lon: float = 42.0

    operating_start: time = time(6, 0)
    operating_end: time = time(18, 0)

    restricted_zones: Tuple[RestrictedZone, ...] = Field(default_factory=_default_zones)

    # Proximity thresholds for NEAR_LIMIT
    boundary_margin_deg: float = Field(default=0.1, ge=0)
    closing_window_minutes: int = Field(default=30, ge=0)

    @field_validator("operating_start", "operating_end", mode="before")
    @classmethod
    def _reject_numeric_times(cls, value):
        # Unquoted YAML times such as 18:00 load as base-60 integers
        if isinstance(value, (int, float)):
            raise ValueError("operating hours must be given as \"HH:MM\" strings")
        return value

    @field_validator("operating_start", "operating_end")
    @classmethod
    def _reject_aware_times(cls, value: time) -> time:
        if value.tzinfo is not None:
            raise ValueError("operating hours must not carry a UTC offset")
        return value

    @model_validator(mode="after")
    def _check_region(self) -> "RegionConfig":
        if self.min_lat >= self.max_lat:
            raise ValueError("min_lat must be lower than max_lat")
        if self.min_lon >= self.max_lon:
            raise ValueError("min_lon must be lower than max_lon")
        if self.operating_start >= self.operating_end:
            raise ValueError("operating_start must be earlier than operating_end")
        return self

    def contains(self, latitude: float, longitude: float) -> bool:
        """Inclusive test against the region rectangle."""
        return (self.min_lat <= latitude <= self.max_lat
                and self.min_lon <= longitude <= self.max_lon)


class RegistryConfig(BaseModel):
    """Boat identifier format."""

    id_prefix: str = "B"
    id_width: int = Field(default=4, ge=1)


class LoggingConfig(BaseModel):
    """Logging settings passed to ``setup_logging``."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_logs: bool = False
    log_file: Optional[Path] = None


class TrackingConfig(BaseModel):
    """Main configuration class for the boat tracking system."""

    # Project settings
    project_name: str = "boat-tracking"
    version: str = "1.0.0"
    environment: str = Field(default="dev", pattern="^(dev|staging|prod|test)$")

    region: RegionConfig = Field(default_factory=RegionConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "TrackingConfig":
        """Load configuration from a YAML file."""
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Invalid configuration {config_path}: expected a mapping at the top level")

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration {config_path}: {e}") from e
