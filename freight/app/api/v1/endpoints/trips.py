"""
Trip API Endpoints.

Create and edit go through the fleet status engine: the status is derived
from the actual dates, booking conflicts are rejected with field-scoped
errors, and accepted trips cascade onto their driver, truck and cargo.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, Body, status
from sqlalchemy.ext.asyncio import AsyncSession

from freight.app.db.session import get_db
from freight.app.schemas.trip import TripCreate, TripUpdate, TripResponse, TripListResponse
from freight.app.schemas.fleet import AssignmentOptions
from freight.app.services import trip_service, fleet_service

router = APIRouter(prefix="/trips", tags=["Trips"])


@router.get("", response_model=TripListResponse)
async def list_trips(db: AsyncSession = Depends(get_db)):
    """List every trip."""
    trips = await trip_service.list_trips(db)
    return TripListResponse(
        trips=[TripResponse.model_validate(t) for t in trips],
        total=len(trips)
    )


@router.get("/options", response_model=AssignmentOptions)
async def get_assignment_options(
    trip_id: Optional[int] = Query(None, description="Trip being edited"),
    db: AsyncSession = Depends(get_db)
):
    """Drivers, trucks, cargos and routes that can be assigned to a trip."""
    return await fleet_service.get_assignment_options(db, trip_id)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    payload: TripCreate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a trip.

    Returns 409 with field errors on driver_id / truck_id when the driver or
    truck is already on another trip in progress.
    """
    trip = await trip_service.create_trip(db, payload)
    return TripResponse.model_validate(trip)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: int = Path(..., description="Trip ID"),
    db: AsyncSession = Depends(get_db)
):
    trip = await trip_service.get_trip(db, trip_id)
    return TripResponse.model_validate(trip)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int = Path(..., description="Trip ID"),
    payload: TripUpdate = Body(...),
    db: AsyncSession = Depends(get_db)
):
    """Edit a trip. The trip never conflicts with itself."""
    trip = await trip_service.update_trip(db, trip_id, payload)
    return TripResponse.model_validate(trip)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int = Path(..., description="Trip ID"),
    db: AsyncSession = Depends(get_db)
):
    await trip_service.delete_trip(db, trip_id)
