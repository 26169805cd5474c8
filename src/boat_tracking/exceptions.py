"""Exceptions raised by the boat tracking system."""


class BoatTrackingError(Exception):
    """Base exception for boat tracking failures."""


class InvalidInputError(BoatTrackingError, ValueError):
    """A required identifier was missing or blank."""


class BoatNotFoundError(BoatTrackingError, KeyError):
    """An operation referenced an unknown boat id."""

    def __init__(self, boat_id: str):
        super().__init__(boat_id)
        self.boat_id = boat_id

    def __str__(self) -> str:
        return f"Unknown boat id: {self.boat_id}"


class ConfigurationError(BoatTrackingError):
    """Configuration file could not be read or failed validation."""
