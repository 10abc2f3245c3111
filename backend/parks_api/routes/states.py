"""
National Parks API — States Route Handlers
============================================

What:  GET /states, GET /states/{id}, GET /states/search/{query}.
Who:   Clients looking up which states contain national parks.

Only the state name is searched; the park counts are never matched.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from parks_api.routes.dependencies import get_state_service, parse_record_id
from parks_api.schemas.catalog import RECORD_ID_PATTERN, ErrorResponse, State
from parks_api.services.catalog_service import CatalogService

router = APIRouter(prefix="/states", tags=["States"])


@router.get(
    "",
    response_model=List[State],
    responses={
        200: {"description": "Get all states"},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="List all states with national parks",
)
async def get_all_states(
    service: CatalogService[State] = Depends(get_state_service),
) -> List[State]:
    return list(service.list_all())


@router.get(
    "/search/{query:path}",
    response_model=List[State],
    responses={
        200: {"description": "Find states by query"},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="Fuzzy search states by name",
)
async def find_states_by_query(
    query: str,
    service: CatalogService[State] = Depends(get_state_service),
) -> List[State]:
    return service.search(query)


@router.get(
    "/{state_id}",
    response_model=State,
    responses={
        200: {"description": "Get state by ID"},
        400: {"description": "Invalid state ID", "model": ErrorResponse},
        404: {"description": "State not found", "model": ErrorResponse},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="Get a single state by ID",
)
async def get_state_by_id(
    state_id: str = Path(pattern=RECORD_ID_PATTERN, description="State identifier (unsigned integer)"),
    service: CatalogService[State] = Depends(get_state_service),
) -> State:
    return service.get_by_id(parse_record_id(state_id, "state_id"))
