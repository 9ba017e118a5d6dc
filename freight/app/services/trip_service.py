"""
Trip service.

Single-trip path for create and edit, always in this order:
1. Resolve the trip status from its actual dates
2. Check booking conflicts against the stored trips
3. Cascade the status onto the driver, truck and cargo
4. Persist
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from freight.app.models.trip import Trip
from freight.app.models.driver import Driver
from freight.app.models.truck import Truck
from freight.app.models.cargo import Cargo
from freight.app.models.route import Route
from freight.app.schemas.trip import TripBase
from freight.app.domain.fleet_status.resolver import resolve_trip_status
from freight.app.domain.fleet_status.conflicts import check_conflicts
from freight.app.domain.fleet_status.synchronizer import apply_trip_effects
from freight.app.core.exceptions import (
    ResourceNotFoundError, BookingConflictError, CargoAlreadyAssignedError
)
from freight.app.services.audit import log_event, AuditAction

logger = logging.getLogger("freight.trips")


async def get_or_404(db: AsyncSession, model, entity_id: int, resource: str):
    """Fetch a record by primary key or raise ResourceNotFoundError."""
    entity = await db.get(model, entity_id)
    if entity is None:
        raise ResourceNotFoundError(resource, entity_id)
    return entity


async def _load_references(db: AsyncSession, payload: TripBase):
    """Resolve the driver, truck, cargo and route a trip payload points at."""
    driver = await get_or_404(db, Driver, payload.driver_id, "Driver")
    truck = await get_or_404(db, Truck, payload.truck_id, "Truck")
    cargo = await get_or_404(db, Cargo, payload.cargo_id, "Cargo")
    await get_or_404(db, Route, payload.route_id, "Route")
    return driver, truck, cargo


async def _all_trips(db: AsyncSession) -> list[Trip]:
    result = await db.execute(select(Trip).order_by(Trip.id))
    return list(result.scalars().all())


def _ensure_cargo_available(trips, cargo_id: int, exclude_trip_id: Optional[int] = None) -> None:
    """A cargo may be carried by one trip only."""
    for trip in trips:
        if trip.cargo_id == cargo_id and trip.id != exclude_trip_id:
            raise CargoAlreadyAssignedError(cargo_id, trip.id)


async def list_trips(db: AsyncSession) -> list[Trip]:
    return await _all_trips(db)


async def get_trip(db: AsyncSession, trip_id: int) -> Trip:
    return await get_or_404(db, Trip, trip_id, "Trip")


async def create_trip(db: AsyncSession, payload: TripBase) -> Trip:
    """
    Create a trip and cascade its status onto the assigned entities.

    Raises:
        ResourceNotFoundError: A referenced driver, truck, cargo or route is missing
        CargoAlreadyAssignedError: The cargo is already used by another trip
        BookingConflictError: The driver or truck is busy on another trip in progress
    """
    driver, truck, cargo = await _load_references(db, payload)
    existing_trips = await _all_trips(db)
    _ensure_cargo_available(existing_trips, payload.cargo_id)

    trip = Trip(**payload.model_dump())
    resolve_trip_status(trip)

    errors = check_conflicts(trip, existing_trips)
    if errors:
        logger.info(
            "Rejected new trip for driver %s / truck %s: %s",
            trip.driver_id, trip.truck_id, [e.field for e in errors]
        )
        raise BookingConflictError(errors)

    apply_trip_effects(trip, driver, truck, cargo)

    db.add(trip)
    await db.commit()
    await db.refresh(trip)

    await log_event(
        db=db,
        action=AuditAction.TRIP_CREATED,
        entity_type="Trip",
        entity_id=trip.id,
        metadata={
            "driver_id": trip.driver_id,
            "truck_id": trip.truck_id,
            "cargo_id": trip.cargo_id,
            "status": trip.status.value
        }
    )

    return trip


async def update_trip(db: AsyncSession, trip_id: int, payload: TripBase) -> Trip:
    """
    Edit a trip and cascade its new status onto the assigned entities.

    Entities the trip no longer references keep their status until the
    next fleet resynchronization. A rejected edit leaves the trip unchanged.
    """
    trip = await get_or_404(db, Trip, trip_id, "Trip")
    driver, truck, cargo = await _load_references(db, payload)
    existing_trips = await _all_trips(db)
    _ensure_cargo_available(existing_trips, payload.cargo_id, exclude_trip_id=trip_id)

    previous_status = trip.status
    for field, value in payload.model_dump().items():
        setattr(trip, field, value)
    resolve_trip_status(trip)

    errors = check_conflicts(trip, existing_trips, exclude_trip_id=trip_id)
    if errors:
        logger.info(
            "Rejected edit of trip %s: %s", trip_id, [e.field for e in errors]
        )
        await db.rollback()
        raise BookingConflictError(errors)

    apply_trip_effects(trip, driver, truck, cargo)

    await db.commit()
    await db.refresh(trip)

    await log_event(
        db=db,
        action=AuditAction.TRIP_UPDATED,
        entity_type="Trip",
        entity_id=trip.id,
        metadata={
            "previous_status": previous_status.value,
            "status": trip.status.value
        }
    )

    return trip


async def delete_trip(db: AsyncSession, trip_id: int) -> None:
    """Delete a trip. Entity statuses catch up on the next resynchronization."""
    trip = await get_or_404(db, Trip, trip_id, "Trip")

    await db.delete(trip)
    await db.commit()

    await log_event(
        db=db,
        action=AuditAction.TRIP_DELETED,
        entity_type="Trip",
        entity_id=trip_id
    )
