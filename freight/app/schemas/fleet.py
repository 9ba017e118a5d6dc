"""
Fleet-wide schemas: resynchronization results, dashboard summary and
assignment options for the trip form.
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime

from freight.app.schemas.registry import (
    DriverResponse, TruckResponse, CargoResponse, RouteResponse
)


class ResynchronizeResponse(BaseModel):
    """Result of a full status recalculation."""
    trips: int
    drivers_on_trip: int
    trucks_in_trip: int
    cargos_in_transit: int
    cargos_delivered: int

    class Config:
        from_attributes = True


class DashboardSummary(BaseModel):
    """Record counts shown on the dashboard."""
    drivers_count: int
    trucks_count: int
    cargos_count: int
    routes_count: int
    trips_count: int
    active_trips: int
    free_drivers: int
    busy_trucks: int
    cargos_in_transit: int


class AssignmentOptions(BaseModel):
    """Entities selectable when creating or editing a trip."""
    drivers: List[DriverResponse]
    trucks: List[TruckResponse]
    cargos: List[CargoResponse]
    routes: List[RouteResponse]


class StatusLabelsResponse(BaseModel):
    """(value, label) pairs per enumeration."""
    labels: Dict[str, List[Tuple[str, str]]]


class AuditLogResponse(BaseModel):
    """One audit trail entry."""
    id: int
    action: str
    entity_type: Optional[str]
    entity_id: Optional[int]
    meta_data: Optional[Dict[str, Any]]
    timestamp: datetime

    class Config:
        from_attributes = True
