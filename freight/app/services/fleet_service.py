"""
Fleet service.

Fleet-wide operations: full status recalculation, dashboard counts and the
selectable entities for the trip form.
"""

import logging
from dataclasses import asdict
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from freight.app.models.trip import Trip
from freight.app.models.driver import Driver
from freight.app.models.truck import Truck
from freight.app.models.cargo import Cargo
from freight.app.models.route import Route
from freight.app.models.status_enums import DriverStatus, TruckStatus, CargoStatus, TripStatus
from freight.app.domain.fleet_status.synchronizer import recalculate_all_statuses, FleetSyncReport
from freight.app.services.audit import log_event, AuditAction
from freight.app.services.trip_service import get_or_404

logger = logging.getLogger("freight.fleet")

# Statuses under which a driver or truck can be put on a trip
ASSIGNABLE_DRIVER_STATUSES = (DriverStatus.FREE, DriverStatus.TRIP)
ASSIGNABLE_TRUCK_STATUSES = (TruckStatus.FREE, TruckStatus.IN_TRIP)


async def _all(db: AsyncSession, model) -> list:
    result = await db.execute(select(model).order_by(model.id))
    return list(result.scalars().all())


async def resynchronize(db: AsyncSession) -> FleetSyncReport:
    """
    Recalculate every trip, driver, truck and cargo status from scratch.

    Loads one snapshot of the fleet, re-derives each trip status from its
    dates, resets and re-applies entity statuses, then commits.
    """
    trips = await _all(db, Trip)
    drivers = await _all(db, Driver)
    trucks = await _all(db, Truck)
    cargos = await _all(db, Cargo)

    report = recalculate_all_statuses(trips, drivers, trucks, cargos)
    await db.commit()

    await log_event(
        db=db,
        action=AuditAction.FLEET_RESYNCHRONIZED,
        metadata=asdict(report)
    )

    return report


async def _count(db: AsyncSession, model, *conditions) -> int:
    query = select(func.count(model.id))
    if conditions:
        query = query.where(*conditions)
    result = await db.execute(query)
    return result.scalar() or 0


async def get_dashboard_summary(db: AsyncSession) -> dict:
    """Record counts for the dashboard."""
    return {
        "drivers_count": await _count(db, Driver),
        "trucks_count": await _count(db, Truck),
        "cargos_count": await _count(db, Cargo),
        "routes_count": await _count(db, Route),
        "trips_count": await _count(db, Trip),
        "active_trips": await _count(db, Trip, Trip.status == TripStatus.IN_PROGRESS),
        "free_drivers": await _count(db, Driver, Driver.status == DriverStatus.FREE),
        "busy_trucks": await _count(db, Truck, Truck.status == TruckStatus.IN_TRIP),
        "cargos_in_transit": await _count(db, Cargo, Cargo.status == CargoStatus.IN_TRANSIT),
    }


async def get_assignment_options(db: AsyncSession, trip_id: Optional[int] = None) -> dict:
    """
    Drivers, trucks, cargos and routes selectable for a trip.

    Drivers and trucks must be free or already on a trip (the conflict check
    decides the rest); cargos must not be carried by any trip yet. When
    editing, the trip's current assignments are always offered.
    """
    trip = await get_or_404(db, Trip, trip_id, "Trip") if trip_id is not None else None

    drivers = [
        d for d in await _all(db, Driver)
        if d.status in ASSIGNABLE_DRIVER_STATUSES or (trip and d.id == trip.driver_id)
    ]
    trucks = [
        t for t in await _all(db, Truck)
        if t.status in ASSIGNABLE_TRUCK_STATUSES or (trip and t.id == trip.truck_id)
    ]

    used_cargo_ids = {t.cargo_id for t in await _all(db, Trip)}
    cargos = [
        c for c in await _all(db, Cargo)
        if c.id not in used_cargo_ids or (trip and c.id == trip.cargo_id)
    ]

    return {
        "drivers": drivers,
        "trucks": trucks,
        "cargos": cargos,
        "routes": await _all(db, Route),
    }
