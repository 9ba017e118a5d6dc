"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from freight.app.api.v1.endpoints import trips, registry, fleet

router = APIRouter()

# Trips
router.include_router(trips.router)

# Drivers, trucks, cargos and routes
router.include_router(registry.drivers_router)
router.include_router(registry.trucks_router)
router.include_router(registry.cargos_router)
router.include_router(registry.routes_router)

# Fleet-wide status operations
router.include_router(fleet.router)
