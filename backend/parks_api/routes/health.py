"""
National Parks API — Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports how many records each catalog holds. The catalogs are loaded
       before the server accepts connections, so a running process is
       healthy unless a catalog came up empty.

Status levels:
    - healthy:   both catalogs hold at least one record (HTTP 200)
    - unhealthy: a catalog is empty (HTTP 200, flagged for monitoring)
"""

import logging
import time

from fastapi import APIRouter, Depends

from parks_api import __version__
from parks_api.routes.dependencies import get_park_service, get_state_service
from parks_api.schemas.catalog import HealthResponse, Park, State
from parks_api.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the service status and the number of records in each catalog.",
)
async def health_check(
    parks: CatalogService[Park] = Depends(get_park_service),
    states: CatalogService[State] = Depends(get_state_service),
) -> HealthResponse:
    overall = "healthy"
    if len(parks) == 0 or len(states) == 0:
        overall = "unhealthy"
        logger.warning(
            "Health check: empty catalog (parks=%d, states=%d)", len(parks), len(states)
        )

    return HealthResponse(
        status=overall,
        version=__version__,
        parks=len(parks),
        states=len(states),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
