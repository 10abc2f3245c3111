"""
FastAPI dependencies that hand each request read access to the catalog services.

The services are attached to `app.state` by the application factory or the
lifespan, before the first request is accepted.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from parks_api.schemas.catalog import Park, RecordId, State
from parks_api.services.catalog_service import CatalogService

_record_id_adapter = TypeAdapter(RecordId)


def get_park_service(request: Request) -> CatalogService[Park]:
    return request.app.state.park_service


def get_state_service(request: Request) -> CatalogService[State]:
    return request.app.state.state_service


def parse_record_id(raw: str, name: str) -> int:
    """
    Convert an `{id}` path segment to a record id.

    Only an optional "+" followed by ASCII digits within the u32 range is
    accepted ("01" and "+1" are id 1). Anything else ("1.0", "1_0", " 1")
    raises RequestValidationError, which the global handler turns into a 400.
    """
    try:
        return _record_id_adapter.validate_python(raw)
    except PydanticValidationError as e:
        errors = [
            {"type": err["type"], "loc": ("path", name), "msg": err["msg"], "input": raw}
            for err in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors) from e
