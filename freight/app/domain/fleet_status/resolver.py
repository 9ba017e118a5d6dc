"""
Trip Status Resolver.

A trip's status is a pure function of its actual dates:
1. Actual arrival recorded -> COMPLETED
2. Actual departure recorded -> IN_PROGRESS
3. Neither -> PLANNED
"""

from datetime import datetime
from typing import Optional

from freight.app.models.status_enums import TripStatus


def derive_trip_status(
    departure_actual: Optional[datetime],
    arrival_actual: Optional[datetime]
) -> TripStatus:
    """
    Derive a trip status from its actual departure and arrival dates.

    Total over every combination of inputs; never raises.
    """
    if arrival_actual is not None:
        return TripStatus.COMPLETED
    if departure_actual is not None:
        return TripStatus.IN_PROGRESS
    return TripStatus.PLANNED


def resolve_trip_status(trip) -> TripStatus:
    """
    Overwrite the trip's status with the one derived from its actual dates.

    Must run before conflict checks and cascades, which trust trip.status.

    Args:
        trip: Any object with departure_date_actual, arrival_date_actual
              and a writable status attribute

    Returns:
        The resolved status
    """
    trip.status = derive_trip_status(trip.departure_date_actual, trip.arrival_date_actual)
    return trip.status
