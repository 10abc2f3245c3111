"""
National Parks API — Parks Route Handlers
===========================================

What:  GET /parks, GET /parks/{id}, GET /parks/search/{query}.
How:   Extracts the path parameter, delegates to the parks CatalogService,
       returns the records; FastAPI serializes them with camelCase keys.

Errors (handled by the global exception handlers in main.py):
    404 {"status": "error", "message": "Park not found"}  unknown id
    400 {"status": "error", "message": ...}               id is not an unsigned integer
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from parks_api.routes.dependencies import get_park_service, parse_record_id
from parks_api.schemas.catalog import RECORD_ID_PATTERN, ErrorResponse, Park
from parks_api.services.catalog_service import CatalogService

router = APIRouter(prefix="/parks", tags=["Parks"])


@router.get(
    "",
    response_model=List[Park],
    responses={
        200: {"description": "Get all parks"},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="List all national parks",
)
async def get_all_parks(
    service: CatalogService[Park] = Depends(get_park_service),
) -> List[Park]:
    return list(service.list_all())


@router.get(
    "/search/{query:path}",
    response_model=List[Park],
    responses={
        200: {"description": "Find parks by query"},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="Fuzzy search parks by name or description",
    description=(
        "Case-insensitive substring / word containment match against each park's "
        "name and description. Returns an empty array when nothing matches."
    ),
)
async def find_parks_by_query(
    query: str,
    service: CatalogService[Park] = Depends(get_park_service),
) -> List[Park]:
    """
    Search parks.

    `query` arrives already URL-decoded ("grand%20can" → "grand can") and is
    passed to the service untouched. An empty query (GET /parks/search/)
    matches every park.
    """
    return service.search(query)


@router.get(
    "/{park_id}",
    response_model=Park,
    responses={
        200: {"description": "Get park by ID"},
        400: {"description": "Invalid park ID", "model": ErrorResponse},
        404: {"description": "Park not found", "model": ErrorResponse},
        500: {"description": "Internal server error", "model": ErrorResponse},
    },
    summary="Get a single park by ID",
)
async def get_park_by_id(
    park_id: str = Path(pattern=RECORD_ID_PATTERN, description="Park identifier (unsigned integer)"),
    service: CatalogService[Park] = Depends(get_park_service),
) -> Park:
    return service.get_by_id(parse_record_id(park_id, "park_id"))
