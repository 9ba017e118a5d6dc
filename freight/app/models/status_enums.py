"""
Status enumerations for drivers, trucks, cargos and trips.

Each domain owns a closed, independent enumeration. Display labels live in
freight.app.domain.fleet_status.labels, not on the enum members.
"""

import enum


class DriverStatus(str, enum.Enum):
    """Driver status enumeration."""
    FREE = "FREE"
    VACATION = "VACATION"
    TRIP = "TRIP"  # Driving an in-progress trip
    SICK = "SICK"


class TruckStatus(str, enum.Enum):
    """Truck status enumeration."""
    FREE = "FREE"
    IN_TRIP = "IN_TRIP"
    IN_REPAIR = "IN_REPAIR"


class CargoStatus(str, enum.Enum):
    """Cargo status enumeration."""
    NOT_DELIVERED = "NOT_DELIVERED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"


class CargoType(str, enum.Enum):
    """Cargo type enumeration."""
    FRAGILE = "FRAGILE"
    SOLID = "SOLID"
    DANGEROUS = "DANGEROUS"
    PERISHABLE = "PERISHABLE"


class TripStatus(str, enum.Enum):
    """
    Trip status enumeration.

    Always derived from the trip's actual dates, never set directly.
    """
    PLANNED = "PLANNED"  # No actual departure yet
    IN_PROGRESS = "IN_PROGRESS"  # Departed, not yet arrived
    COMPLETED = "COMPLETED"  # Actual arrival recorded
