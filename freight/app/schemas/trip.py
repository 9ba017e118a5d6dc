"""
Trip schemas.

The trip status is never accepted as input; it is derived from the actual dates.
Naive datetimes are taken as UTC so every trip date is timezone-aware.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import List, Optional
from datetime import datetime, timezone

from freight.app.models.status_enums import TripStatus

TRIP_DATE_FIELDS = ("departure_date", "arrival_date", "departure_date_actual", "arrival_date_actual")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TripBase(BaseModel):
    """Fields shared by trip creation and editing."""
    driver_id: int = Field(..., gt=0, description="Assigned driver")
    truck_id: int = Field(..., gt=0, description="Assigned truck")
    cargo_id: int = Field(..., gt=0, description="Carried cargo")
    route_id: int = Field(..., gt=0, description="Route")

    # Planned dates
    departure_date: datetime = Field(..., description="Planned departure")
    arrival_date: datetime = Field(..., description="Planned arrival")

    # Actual dates
    departure_date_actual: Optional[datetime] = Field(None, description="Actual departure")
    arrival_date_actual: Optional[datetime] = Field(None, description="Actual arrival")

    @field_validator(*TRIP_DATE_FIELDS)
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    @field_validator("arrival_date")
    @classmethod
    def arrival_not_before_departure(cls, v: datetime, info: ValidationInfo) -> datetime:
        departure = info.data.get("departure_date")
        if departure is not None and as_utc(v) < as_utc(departure):
            raise ValueError("Arrival date cannot be earlier than departure date")
        return v

    @field_validator("arrival_date_actual")
    @classmethod
    def actual_arrival_requires_departure(cls, v: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        if v is None:
            return v
        departure = info.data.get("departure_date_actual")
        if departure is None:
            raise ValueError("Actual arrival date cannot be set without an actual departure date")
        if as_utc(v) < as_utc(departure):
            raise ValueError("Actual arrival date cannot be earlier than actual departure date")
        return v


class TripCreate(TripBase):
    """Schema for creating a trip."""
    pass


class TripUpdate(TripBase):
    """Schema for editing a trip. Replaces every editable field."""
    pass


class TripResponse(BaseModel):
    """Schema for trip response."""
    id: int
    driver_id: int
    truck_id: int
    cargo_id: int
    route_id: int
    departure_date: datetime
    arrival_date: datetime
    departure_date_actual: Optional[datetime]
    arrival_date_actual: Optional[datetime]
    status: TripStatus

    class Config:
        from_attributes = True


class TripListResponse(BaseModel):
    """Schema for trip list."""
    trips: List[TripResponse]
    total: int
