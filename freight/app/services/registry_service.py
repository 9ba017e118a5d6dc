"""
Registry service for drivers, trucks, cargos and routes.

Plain create/list/edit/delete. Statuses are never taken from input, and
deletion is refused while any trip references the record.
"""

from collections import namedtuple

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from freight.app.models.trip import Trip
from freight.app.models.driver import Driver
from freight.app.models.truck import Truck
from freight.app.models.cargo import Cargo
from freight.app.models.route import Route
from freight.app.models.status_enums import DriverStatus
from freight.app.core.exceptions import ReferenceInUseError
from freight.app.services.audit import log_event, AuditAction
from freight.app.services.trip_service import get_or_404


RegistryEntry = namedtuple("RegistryEntry", "resource trip_column updated_action deleted_action")

REGISTRY = {
    Driver: RegistryEntry("Driver", Trip.driver_id, AuditAction.DRIVER_UPDATED, AuditAction.DRIVER_DELETED),
    Truck: RegistryEntry("Truck", Trip.truck_id, AuditAction.TRUCK_UPDATED, AuditAction.TRUCK_DELETED),
    Cargo: RegistryEntry("Cargo", Trip.cargo_id, AuditAction.CARGO_UPDATED, AuditAction.CARGO_DELETED),
    Route: RegistryEntry("Route", Trip.route_id, AuditAction.ROUTE_UPDATED, AuditAction.ROUTE_DELETED),
}

# Free drivers first, then alphabetical
LIST_ORDER = {
    Driver: ((Driver.status == DriverStatus.FREE).desc(), Driver.surname, Driver.id),
}


async def create_entity(db: AsyncSession, model, data: BaseModel):
    """Create a record from validated input. Status columns take their defaults."""
    entity = model(**data.model_dump())
    db.add(entity)
    await db.commit()
    await db.refresh(entity)
    return entity


async def list_entities(db: AsyncSession, model) -> list:
    order = LIST_ORDER.get(model, (model.id,))
    result = await db.execute(select(model).order_by(*order))
    return list(result.scalars().all())


async def update_entity(db: AsyncSession, model, entity_id: int, data: BaseModel):
    """
    Replace the editable fields of a record.

    The input schemas carry no status field, so the status set by the
    fleet status engine is left as it is.

    Raises:
        ResourceNotFoundError: No such record
    """
    entry = REGISTRY[model]
    entity = await get_or_404(db, model, entity_id, entry.resource)

    changes = data.model_dump()
    for field, value in changes.items():
        setattr(entity, field, value)

    await db.commit()
    await db.refresh(entity)

    await log_event(
        db=db,
        action=entry.updated_action,
        entity_type=entry.resource,
        entity_id=entity_id,
        metadata={"fields": sorted(changes)}
    )

    return entity


async def has_trip_references(db: AsyncSession, model, entity_id: int) -> bool:
    """Whether any trip references the record."""
    result = await db.execute(
        select(func.count(Trip.id)).where(REGISTRY[model].trip_column == entity_id)
    )
    return (result.scalar() or 0) > 0


async def delete_entity(db: AsyncSession, model, entity_id: int) -> None:
    """
    Delete a record unless a trip references it.

    Raises:
        ResourceNotFoundError: No such record
        ReferenceInUseError: Trips still reference the record
    """
    entry = REGISTRY[model]
    entity = await get_or_404(db, model, entity_id, entry.resource)

    if await has_trip_references(db, model, entity_id):
        raise ReferenceInUseError(entry.resource, entity_id)

    await db.delete(entity)
    await db.commit()

    await log_event(
        db=db,
        action=entry.deleted_action,
        entity_type=entry.resource,
        entity_id=entity_id
    )
