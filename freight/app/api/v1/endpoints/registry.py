"""
Driver, Truck, Cargo and Route API Endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends, Path, Body, status
from sqlalchemy.ext.asyncio import AsyncSession

from freight.app.db.session import get_db
from freight.app.models.driver import Driver
from freight.app.models.truck import Truck
from freight.app.models.cargo import Cargo
from freight.app.models.route import Route
from freight.app.schemas.registry import (
    DriverCreate, DriverResponse,
    TruckCreate, TruckResponse,
    CargoCreate, CargoResponse,
    RouteCreate, RouteResponse,
)
from freight.app.services import registry_service

drivers_router = APIRouter(prefix="/drivers", tags=["Drivers"])
trucks_router = APIRouter(prefix="/trucks", tags=["Trucks"])
cargos_router = APIRouter(prefix="/cargos", tags=["Cargos"])
routes_router = APIRouter(prefix="/routes", tags=["Routes"])


# Drivers

@drivers_router.get("", response_model=List[DriverResponse])
async def list_drivers(db: AsyncSession = Depends(get_db)):
    return await registry_service.list_entities(db, Driver)


@drivers_router.post("", response_model=DriverResponse, status_code=status.HTTP_201_CREATED)
async def create_driver(data: DriverCreate = Body(...), db: AsyncSession = Depends(get_db)):
    return await registry_service.create_entity(db, Driver, data)


@drivers_router.put("/{driver_id}", response_model=DriverResponse)
async def update_driver(
    driver_id: int = Path(...),
    data: DriverCreate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    """Edit a driver's details. The status stays under trip control."""
    return await registry_service.update_entity(db, Driver, driver_id, data)


@drivers_router.delete("/{driver_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_driver(driver_id: int = Path(...), db: AsyncSession = Depends(get_db)):
    """Delete a driver. Refused with 409 while any trip references the driver."""
    await registry_service.delete_entity(db, Driver, driver_id)


# Trucks

@trucks_router.get("", response_model=List[TruckResponse])
async def list_trucks(db: AsyncSession = Depends(get_db)):
    return await registry_service.list_entities(db, Truck)


@trucks_router.post("", response_model=TruckResponse, status_code=status.HTTP_201_CREATED)
async def create_truck(data: TruckCreate = Body(...), db: AsyncSession = Depends(get_db)):
    return await registry_service.create_entity(db, Truck, data)


@trucks_router.put("/{truck_id}", response_model=TruckResponse)
async def update_truck(
    truck_id: int = Path(...),
    data: TruckCreate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    return await registry_service.update_entity(db, Truck, truck_id, data)


@trucks_router.delete("/{truck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_truck(truck_id: int = Path(...), db: AsyncSession = Depends(get_db)):
    await registry_service.delete_entity(db, Truck, truck_id)


# Cargos

@cargos_router.get("", response_model=List[CargoResponse])
async def list_cargos(db: AsyncSession = Depends(get_db)):
    return await registry_service.list_entities(db, Cargo)


@cargos_router.post("", response_model=CargoResponse, status_code=status.HTTP_201_CREATED)
async def create_cargo(data: CargoCreate = Body(...), db: AsyncSession = Depends(get_db)):
    return await registry_service.create_entity(db, Cargo, data)


@cargos_router.put("/{cargo_id}", response_model=CargoResponse)
async def update_cargo(
    cargo_id: int = Path(...),
    data: CargoCreate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    return await registry_service.update_entity(db, Cargo, cargo_id, data)


@cargos_router.delete("/{cargo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cargo(cargo_id: int = Path(...), db: AsyncSession = Depends(get_db)):
    await registry_service.delete_entity(db, Cargo, cargo_id)


# Routes

@routes_router.get("", response_model=List[RouteResponse])
async def list_routes(db: AsyncSession = Depends(get_db)):
    return await registry_service.list_entities(db, Route)


@routes_router.post("", response_model=RouteResponse, status_code=status.HTTP_201_CREATED)
async def create_route(data: RouteCreate = Body(...), db: AsyncSession = Depends(get_db)):
    return await registry_service.create_entity(db, Route, data)


@routes_router.put("/{route_id}", response_model=RouteResponse)
async def update_route(
    route_id: int = Path(...),
    data: RouteCreate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    return await registry_service.update_entity(db, Route, route_id, data)


@routes_router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_route(route_id: int = Path(...), db: AsyncSession = Depends(get_db)):
    await registry_service.delete_entity(db, Route, route_id)
