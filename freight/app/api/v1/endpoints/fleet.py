"""
Fleet API Endpoints.

The "refresh statuses" administrative trigger, dashboard counts, status
label tables and the audit trail.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from freight.app.db.session import get_db
from freight.app.schemas.fleet import (
    ResynchronizeResponse, DashboardSummary, StatusLabelsResponse, AuditLogResponse
)
from freight.app.services import fleet_service
from freight.app.services.audit import get_audit_trail
from freight.app.domain.fleet_status.labels import label_tables

router = APIRouter(prefix="/fleet", tags=["Fleet"])


@router.post("/resynchronize", response_model=ResynchronizeResponse)
async def resynchronize_fleet(db: AsyncSession = Depends(get_db)):
    """
    Recalculate every status from scratch.

    Re-derives each trip's status from its actual dates, resets all drivers,
    trucks and cargos to their default status, then applies the trips.
    """
    report = await fleet_service.resynchronize(db)
    return ResynchronizeResponse.model_validate(report)


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(db: AsyncSession = Depends(get_db)):
    return await fleet_service.get_dashboard_summary(db)


@router.get("/statuses", response_model=StatusLabelsResponse)
async def get_status_labels():
    return StatusLabelsResponse(labels=label_tables())


@router.get("/audit", response_model=List[AuditLogResponse])
async def get_audit_log(
    entity_type: Optional[str] = Query(None, description="e.g. Trip, Driver"),
    action: Optional[str] = Query(None, description="e.g. TRIP_UPDATED"),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db)
):
    """Audit trail entries, most recent first."""
    return await get_audit_trail(db, entity_type=entity_type, action=action, limit=limit)
