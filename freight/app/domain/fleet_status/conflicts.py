"""
Booking Conflict Checker.

A driver or truck may be claimed by at most one in-progress trip.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from freight.app.models.status_enums import TripStatus


DRIVER_BUSY_MESSAGE = "The selected driver already has a trip in progress"
TRUCK_BUSY_MESSAGE = "The selected truck is already on a trip in progress"


@dataclass(frozen=True)
class FieldError:
    """A validation error attached to one input field."""
    field: str
    message: str


def check_conflicts(
    candidate,
    existing_trips: Iterable,
    exclude_trip_id: Optional[int] = None
) -> List[FieldError]:
    """
    Check a resolved candidate trip against the stored trips.

    Only an IN_PROGRESS candidate can conflict. The driver and truck checks
    are independent, so both errors may be returned together.

    Args:
        candidate: Trip being created or edited (status already resolved)
        existing_trips: Trips currently in the store
        exclude_trip_id: ID of the trip being edited, so it never conflicts with itself

    Returns:
        Field-scoped errors; empty when the trip can be accepted
    """
    if candidate.status != TripStatus.IN_PROGRESS:
        return []

    active = [
        t for t in existing_trips
        if t.status == TripStatus.IN_PROGRESS
        and (exclude_trip_id is None or t.id != exclude_trip_id)
    ]

    errors = []
    if any(t.driver_id == candidate.driver_id for t in active):
        errors.append(FieldError("driver_id", DRIVER_BUSY_MESSAGE))
    if any(t.truck_id == candidate.truck_id for t in active):
        errors.append(FieldError("truck_id", TRUCK_BUSY_MESSAGE))
    return errors
