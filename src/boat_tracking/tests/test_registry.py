"""Tests for the boat registry and alert log."""

import pytest
from datetime import datetime

from ..core.alert_log import AlertLog
from ..core.registry import BoatRegistry
from ..exceptions import BoatNotFoundError, InvalidInputError
from ..models.config import RegistryConfig
from ..models.schemas import Alert, AlertKind, Status


class TestBoatRegistry:
    """Registration, lookup and in-place updates."""

    def setup_method(self):
        self.registry = BoatRegistry()

    def test_register_assigns_sequential_ids(self):
        first = self.registry.register("chipA")
        second = self.registry.register("chipB")

        assert first.id == "B0001"
        assert second.id == "B0002"
        assert len(self.registry) == 2

    def test_registered_boat_starts_normal_without_position(self):
        boat = self.registry.register("chipX")

        assert boat.status is Status.NORMAL
        assert boat.latitude is None
        assert boat.longitude is None
        assert boat.last_update is None
        assert not boat.has_position

    def test_duplicate_chip_ids_get_distinct_boats(self):
        first = self.registry.register("chipA")
        second = self.registry.register("chipA")

        assert first.id != second.id
        assert first.chip_id == second.chip_id == "chipA"

    @pytest.mark.parametrize("chip_id", [None, "", "   "])
    def test_register_rejects_missing_chip_id(self, chip_id):
        with pytest.raises(InvalidInputError):
            self.registry.register(chip_id)

        assert len(self.registry) == 0
        # Rejected registrations do not consume an id
        assert self.registry.register("chipA").id == "B0001"

    def test_custom_id_format(self):
        registry = BoatRegistry(RegistryConfig(id_prefix="RS-", id_width=6))

        assert registry.register("chipA").id == "RS-000001"

    def test_get_unknown_boat_returns_none(self):
        assert self.registry.get("B9999") is None
        assert "B9999" not in self.registry

    def test_update_position_mutates_stored_boat(self):
        boat = self.registry.register("chipA")
        timestamp = datetime(2025, 1, 1, 10, 0)

        self.registry.update_position(boat.id, 20.0, 40.0, timestamp, Status.NEAR_LIMIT)

        stored = self.registry.get(boat.id)
        assert (stored.latitude, stored.longitude) == (20.0, 40.0)
        assert stored.last_update == timestamp
        assert stored.status is Status.NEAR_LIMIT

    def test_update_unknown_boat_raises_not_found(self):
        with pytest.raises(BoatNotFoundError) as excinfo:
            self.registry.update_position("B9999", 20.0, 40.0, datetime(2025, 1, 1, 10), Status.NORMAL)

        assert excinfo.value.boat_id == "B9999"
        assert len(self.registry) == 0

    def test_list_all_is_a_snapshot(self):
        boat = self.registry.register("chipA")
        listed = self.registry.list_all()

        self.registry.update_position(boat.id, 20.0, 40.0, datetime(2025, 1, 1, 10), Status.VIOLATION)

        assert listed[0].status is Status.NORMAL
        assert self.registry.list_all()[0].status is Status.VIOLATION

    def test_filter_by_status_matches_exactly(self):
        a = self.registry.register("chipA")
        b = self.registry.register("chipB")
        self.registry.register("chipC")
        self.registry.update_position(a.id, 20.0, 40.0, datetime(2025, 1, 1, 10), Status.VIOLATION)
        self.registry.update_position(b.id, 18.05, 40.0, datetime(2025, 1, 1, 10), Status.NEAR_LIMIT)

        assert [boat.id for boat in self.registry.filter_by_status(Status.VIOLATION)] == ["B0001"]
        assert [boat.id for boat in self.registry.filter_by_status(Status.NEAR_LIMIT)] == ["B0002"]
        assert [boat.id for boat in self.registry.filter_by_status(Status.NORMAL)] == ["B0003"]


class TestAlertLog:
    """Append-only alert log."""

    def make_alert(self, boat_id, kind, hour):
        return Alert(boat_id=boat_id, kind=kind, message=f"{kind.value} for {boat_id}",
                     timestamp=datetime(2025, 1, 1, hour, 0))

    def test_preserves_insertion_order_not_timestamp_order(self):
        log = AlertLog()
        late = self.make_alert("B0001", AlertKind.TIME_EXCEEDED, 20)
        early = self.make_alert("B0002", AlertKind.AREA_BREACH, 8)

        log.append(late)
        log.append(early)

        assert log.snapshot() == (late, early)
        assert list(log) == [late, early]
        assert len(log) == 2

    def test_snapshot_does_not_track_later_appends(self):
        log = AlertLog()
        log.append(self.make_alert("B0001", AlertKind.AREA_BREACH, 10))
        snapshot = log.snapshot()

        log.append(self.make_alert("B0001", AlertKind.AREA_BREACH, 11))

        assert len(snapshot) == 1
        assert len(log) == 2

    def test_queries_by_boat_and_kind(self):
        log = AlertLog()
        log.append(self.make_alert("B0001", AlertKind.AREA_BREACH, 10))
        log.append(self.make_alert("B0002", AlertKind.RESTRICTED_ZONE, 11))
        log.append(self.make_alert("B0001", AlertKind.TIME_EXCEEDED, 20))

        assert [a.kind for a in log.for_boat("B0001")] == [AlertKind.AREA_BREACH, AlertKind.TIME_EXCEEDED]
        assert [a.boat_id for a in log.by_kind(AlertKind.RESTRICTED_ZONE)] == ["B0002"]
        assert log.for_boat("B0404") == ()

    def test_alerts_are_immutable(self):
        alert = self.make_alert("B0001", AlertKind.AREA_BREACH, 10)

        with pytest.raises(Exception):
            alert.message = "changed"

    def test_alert_str(self):
        alert = self.make_alert("B0001", AlertKind.AREA_BREACH, 10)

        assert str(alert) == "[AREA_BREACH] 2025-01-01 10:00 AREA_BREACH for B0001"
