"""
Display labels for status and type enumerations.

Kept as a lookup table so the enums stay plain values. Keyed by enum class
first: str-valued members of different enums (e.g. DriverStatus.FREE and
TruckStatus.FREE) compare equal.
"""

from enum import Enum
from typing import Dict, List, Tuple, Type

from freight.app.models.status_enums import (
    DriverStatus, TruckStatus, CargoStatus, CargoType, TripStatus
)


DISPLAY_LABELS: Dict[Type[Enum], Dict[Enum, str]] = {
    DriverStatus: {
        DriverStatus.FREE: "Free",
        DriverStatus.VACATION: "On vacation",
        DriverStatus.TRIP: "On a trip",
        DriverStatus.SICK: "On sick leave",
    },
    TruckStatus: {
        TruckStatus.FREE: "Free",
        TruckStatus.IN_TRIP: "On a trip",
        TruckStatus.IN_REPAIR: "In repair",
    },
    CargoStatus: {
        CargoStatus.NOT_DELIVERED: "Not delivered",
        CargoStatus.IN_TRANSIT: "In transit",
        CargoStatus.DELIVERED: "Delivered",
    },
    CargoType: {
        CargoType.FRAGILE: "Fragile",
        CargoType.SOLID: "Solid",
        CargoType.DANGEROUS: "Dangerous",
        CargoType.PERISHABLE: "Perishable",
    },
    TripStatus: {
        TripStatus.PLANNED: "Planned",
        TripStatus.IN_PROGRESS: "In progress",
        TripStatus.COMPLETED: "Completed",
    },
}


def display_label(value: Enum) -> str:
    """Human-readable label for an enum member, falling back to its value."""
    return DISPLAY_LABELS.get(type(value), {}).get(value, value.value)


def choices(enum_cls: Type[Enum]) -> List[Tuple[str, str]]:
    """(value, label) pairs for every member of enum_cls, in declaration order."""
    return [(member.value, display_label(member)) for member in enum_cls]


def label_tables() -> Dict[str, List[Tuple[str, str]]]:
    """Every label table, keyed by enum class name."""
    return {enum_cls.__name__: choices(enum_cls) for enum_cls in DISPLAY_LABELS}
