"""
Booking conflict tests.

A driver or truck cannot be on two trips in progress at once.
"""

import pytest

from freight.app.models.trip import Trip
from freight.app.models.status_enums import TripStatus
from freight.app.domain.fleet_status.conflicts import (
    check_conflicts, FieldError, DRIVER_BUSY_MESSAGE, TRUCK_BUSY_MESSAGE
)


def make_trip(trip_id, driver_id, truck_id, status=TripStatus.IN_PROGRESS):
    return Trip(id=trip_id, driver_id=driver_id, truck_id=truck_id, cargo_id=trip_id, route_id=1, status=status)


@pytest.mark.parametrize("status", [TripStatus.PLANNED, TripStatus.COMPLETED])
def test_only_in_progress_candidates_conflict(status):
    existing = [make_trip(1, driver_id=1, truck_id=1)]
    candidate = make_trip(None, driver_id=1, truck_id=1, status=status)

    assert check_conflicts(candidate, existing) == []


def test_driver_conflict_only():
    """Trip A (D1, T1) in progress; candidate B (D1, T2) in progress."""
    trip_a = make_trip(1, driver_id=1, truck_id=1)
    trip_b = make_trip(2, driver_id=1, truck_id=2)

    errors = check_conflicts(trip_b, [trip_a])

    assert errors == [FieldError("driver_id", DRIVER_BUSY_MESSAGE)]


def test_truck_conflict_only():
    existing = [make_trip(1, driver_id=1, truck_id=1)]
    candidate = make_trip(2, driver_id=2, truck_id=1)

    errors = check_conflicts(candidate, existing)

    assert [e.field for e in errors] == ["truck_id"]
    assert errors[0].message == TRUCK_BUSY_MESSAGE


def test_driver_and_truck_conflicts_reported_together():
    existing = [
        make_trip(1, driver_id=1, truck_id=5),
        make_trip(2, driver_id=6, truck_id=2),
    ]
    candidate = make_trip(3, driver_id=1, truck_id=2)

    errors = check_conflicts(candidate, existing)

    assert [e.field for e in errors] == ["driver_id", "truck_id"]


def test_finished_or_planned_trips_do_not_block():
    existing = [
        make_trip(1, driver_id=1, truck_id=1, status=TripStatus.COMPLETED),
        make_trip(2, driver_id=1, truck_id=1, status=TripStatus.PLANNED),
    ]
    candidate = make_trip(3, driver_id=1, truck_id=1)

    assert check_conflicts(candidate, existing) == []


def test_edited_trip_does_not_conflict_with_itself():
    stored = make_trip(1, driver_id=1, truck_id=1)
    edited = make_trip(1, driver_id=1, truck_id=1)

    assert check_conflicts(edited, [stored], exclude_trip_id=1) == []
    # Without the exclusion the stored copy would count as a second trip
    assert len(check_conflicts(edited, [stored])) == 2


def test_exclusion_only_skips_the_edited_trip():
    existing = [
        make_trip(1, driver_id=1, truck_id=1),
        make_trip(2, driver_id=1, truck_id=3),
    ]
    edited = make_trip(1, driver_id=1, truck_id=1)

    errors = check_conflicts(edited, existing, exclude_trip_id=1)

    assert [e.field for e in errors] == ["driver_id"]
