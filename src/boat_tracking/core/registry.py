"""Registry of tracked boats."""

import structlog
from datetime import datetime
from typing import Dict, List, Optional

from ..exceptions import BoatNotFoundError, InvalidInputError
from ..models.config import RegistryConfig
from ..models.schemas import Boat, Status

logger = structlog.get_logger(__name__)


class BoatRegistry:
    """Owns boat state keyed by system id and hands out new ids."""

    def __init__(self, config: Optional[RegistryConfig] = None):
        self.config = config or RegistryConfig()
        self._boats: Dict[str, Boat] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._boats)

    def __contains__(self, boat_id: object) -> bool:
        return boat_id in self._boats

    def _issue_id(self) -> str:
        boat_id = f"{self.config.id_prefix}{self._next_id:0{self.config.id_width}d}"
        self._next_id += 1
        return boat_id

    def register(self, chip_id: Optional[str]) -> Boat:
        """
        Register a new boat carrying the given chip.

        Args:
            chip_id: Identifier of the chip attached to the boat

        Returns:
            Boat: The stored boat, status NORMAL and no position

        Raises:
            InvalidInputError: If chip_id is missing or blank
        """
        if chip_id is None or not str(chip_id).strip():
            raise InvalidInputError("chip_id must not be empty")

        boat = Boat(id=self._issue_id(), chip_id=str(chip_id).strip())
        self._boats[boat.id] = boat

        logger.info("Boat registered", boat_id=boat.id, chip_id=boat.chip_id)
        return boat

    def get(self, boat_id: str) -> Optional[Boat]:
        return self._boats.get(boat_id)

    def update_position(self, boat_id: str, latitude: float, longitude: float,
                        timestamp: datetime, status: Status) -> Boat:
        """Apply a report and its evaluated status to the stored boat."""
        boat = self._boats.get(boat_id)
        if boat is None:
            raise BoatNotFoundError(boat_id)

        boat.latitude = latitude
        boat.longitude = longitude
        boat.last_update = timestamp
        boat.status = status
        return boat

    def list_all(self) -> List[Boat]:
        """Copies of all boats in registration order."""
        return [boat.model_copy() for boat in self._boats.values()]

    def filter_by_status(self, status: Status) -> List[Boat]:
        return [boat.model_copy() for boat in self._boats.values() if boat.status is status]
