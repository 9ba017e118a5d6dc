"""
Driver, truck, cargo and route schemas.

Statuses are output-only: new records always start at the default status
and only the fleet status engine changes them afterwards.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from datetime import date
from typing import Optional

from freight.app.models.status_enums import DriverStatus, TruckStatus, CargoStatus, CargoType

NAME_PATTERN = r"^[A-Za-zА-Яа-яЁё\-]+$"


class DriverCreate(BaseModel):
    """Schema for registering a driver."""
    surname: str = Field(..., min_length=1, max_length=100, pattern=NAME_PATTERN)
    name: str = Field(..., min_length=1, max_length=100, pattern=NAME_PATTERN)
    middle_name: Optional[str] = Field(None, max_length=100, pattern=r"^[A-Za-zА-Яа-яЁё\-]*$")
    birth_date: Optional[date] = None
    phone_number: str = Field(..., min_length=1, max_length=30, pattern=r"^\d+$")
    license_number: str = Field(..., min_length=1, max_length=50, pattern=r"^[A-ZА-ЯЁ0-9\-]+$")

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, v: Optional[date]) -> Optional[date]:
        if v is not None and v > date.today():
            raise ValueError("Birth date cannot be in the future")
        return v


class DriverResponse(BaseModel):
    """Schema for driver response."""
    id: int
    surname: str
    name: str
    middle_name: Optional[str]
    full_name: str
    birth_date: Optional[date]
    phone_number: str
    license_number: str
    status: DriverStatus

    class Config:
        from_attributes = True


class TruckCreate(BaseModel):
    """Schema for registering a truck."""
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: Optional[int] = Field(None, gt=0)
    capacity_tons: float = Field(..., gt=0, description="Load capacity in tonnes")
    plate_number: str = Field(..., min_length=1, max_length=20)

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v > date.today().year:
            raise ValueError("Year of manufacture cannot be later than the current year")
        return v


class TruckResponse(BaseModel):
    """Schema for truck response."""
    id: int
    brand: str
    model: str
    year: Optional[int]
    capacity_tons: float
    plate_number: str
    status: TruckStatus

    class Config:
        from_attributes = True


class CargoCreate(BaseModel):
    """Schema for registering a cargo."""
    description: str = Field(..., min_length=1, max_length=50)
    weight_tons: float = Field(..., gt=0, description="Weight in tonnes")
    sender: str = Field(..., min_length=1, max_length=200)
    receiver: str = Field(..., min_length=1, max_length=200)
    cargo_type: CargoType

    @field_validator("receiver")
    @classmethod
    def receiver_differs_from_sender(cls, v: str, info: ValidationInfo) -> str:
        sender = info.data.get("sender")
        if sender is not None and sender.strip().lower() == v.strip().lower():
            raise ValueError("Sender and receiver cannot be the same")
        return v


class CargoResponse(BaseModel):
    """Schema for cargo response."""
    id: int
    description: str
    weight_tons: float
    sender: str
    receiver: str
    cargo_type: CargoType
    status: CargoStatus

    class Config:
        from_attributes = True


class RouteCreate(BaseModel):
    """Schema for creating a route."""
    origin: str = Field(..., min_length=1, max_length=200)
    destination: str = Field(..., min_length=1, max_length=200)

    @field_validator("destination")
    @classmethod
    def destination_differs_from_origin(cls, v: str, info: ValidationInfo) -> str:
        origin = info.data.get("origin")
        if origin is not None and origin.strip().lower() == v.strip().lower():
            raise ValueError("Origin and destination cannot be the same")
        return v


class RouteResponse(BaseModel):
    """Schema for route response."""
    id: int
    origin: str
    destination: str
    full_route: str

    class Config:
        from_attributes = True
