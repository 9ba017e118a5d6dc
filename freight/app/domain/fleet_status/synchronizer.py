"""
Fleet Status Synchronizer.

Keeps driver, truck and cargo statuses in line with the trips that
reference them. Two separate code paths:

- apply_trip_effects: cascade one saved trip onto its driver, truck and cargo.
  Order-sensitive, so only used when a single trip changes.
- resynchronize_fleet: reset every status, then apply the aggregate of all
  trips. A pure function of the trip statuses.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from freight.app.models.status_enums import (
    DriverStatus, TruckStatus, CargoStatus, TripStatus
)
from freight.app.domain.fleet_status.resolver import resolve_trip_status

logger = logging.getLogger("freight.fleet_status")


# trip status -> (driver status, truck status, cargo status)
TRIP_EFFECTS = {
    TripStatus.PLANNED: (DriverStatus.FREE, TruckStatus.FREE, CargoStatus.NOT_DELIVERED),
    TripStatus.IN_PROGRESS: (DriverStatus.TRIP, TruckStatus.IN_TRIP, CargoStatus.IN_TRANSIT),
    TripStatus.COMPLETED: (DriverStatus.FREE, TruckStatus.FREE, CargoStatus.DELIVERED),
}


@dataclass(frozen=True)
class FleetSyncReport:
    """Outcome of a bulk resynchronization."""
    trips: int
    drivers_on_trip: int
    trucks_in_trip: int
    cargos_in_transit: int
    cargos_delivered: int


def apply_trip_effects(trip, driver, truck, cargo) -> bool:
    """
    Cascade a resolved trip's status onto its driver, truck and cargo.

    Does not look at other trips referencing the same entities. If any of
    the three entities is missing nothing is changed.

    Args:
        trip: Trip whose status has already been resolved
        driver: Referenced driver (or None)
        truck: Referenced truck (or None)
        cargo: Referenced cargo (or None)

    Returns:
        True if the statuses were applied, False on a missing reference
    """
    if driver is None or truck is None or cargo is None:
        logger.warning(
            "Skipping status cascade for trip %s: missing reference "
            "(driver=%s, truck=%s, cargo=%s)",
            trip.id, trip.driver_id, trip.truck_id, trip.cargo_id
        )
        return False

    driver.status, truck.status, cargo.status = TRIP_EFFECTS[trip.status]
    return True


def resynchronize_fleet(
    trips: Iterable,
    drivers: Iterable,
    trucks: Iterable,
    cargos: Iterable
) -> FleetSyncReport:
    """
    Recompute every driver, truck and cargo status from the full trip set.

    Phase 1 resets all statuses to their defaults. Phase 2 marks each entity
    from the existence of a referencing trip in the relevant state, so the
    result does not depend on iteration order and a second run changes nothing.

    Trip statuses are taken as given; see recalculate_all_statuses for the
    variant that re-derives them from dates first.
    """
    trips = list(trips)
    drivers = list(drivers)
    trucks = list(trucks)
    cargos = list(cargos)

    # Phase 1: reset
    for driver in drivers:
        driver.status = DriverStatus.FREE
    for truck in trucks:
        truck.status = TruckStatus.FREE
    for cargo in cargos:
        cargo.status = CargoStatus.NOT_DELIVERED

    # Phase 2: apply
    busy_drivers = {t.driver_id for t in trips if t.status == TripStatus.IN_PROGRESS}
    busy_trucks = {t.truck_id for t in trips if t.status == TripStatus.IN_PROGRESS}
    cargos_moving = {t.cargo_id for t in trips if t.status == TripStatus.IN_PROGRESS}
    cargos_done = {t.cargo_id for t in trips if t.status == TripStatus.COMPLETED}

    for driver in drivers:
        if driver.id in busy_drivers:
            driver.status = DriverStatus.TRIP

    for truck in trucks:
        if truck.id in busy_trucks:
            truck.status = TruckStatus.IN_TRIP

    for cargo in cargos:
        # In transit wins over delivered
        if cargo.id in cargos_moving:
            cargo.status = CargoStatus.IN_TRANSIT
        elif cargo.id in cargos_done:
            cargo.status = CargoStatus.DELIVERED

    report = FleetSyncReport(
        trips=len(trips),
        drivers_on_trip=sum(1 for d in drivers if d.status == DriverStatus.TRIP),
        trucks_in_trip=sum(1 for t in trucks if t.status == TruckStatus.IN_TRIP),
        cargos_in_transit=sum(1 for c in cargos if c.status == CargoStatus.IN_TRANSIT),
        cargos_delivered=sum(1 for c in cargos if c.status == CargoStatus.DELIVERED),
    )
    logger.info("Fleet resynchronized: %s", report)
    return report


def recalculate_all_statuses(
    trips: Iterable,
    drivers: Iterable,
    trucks: Iterable,
    cargos: Iterable
) -> FleetSyncReport:
    """Re-derive every trip's status from its dates, then resynchronize the fleet."""
    trips = list(trips)
    for trip in trips:
        resolve_trip_status(trip)
    return resynchronize_fleet(trips, drivers, trucks, cargos)
