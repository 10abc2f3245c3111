"""
National Parks API — Pydantic Record & Response Schemas
=========================================================

What:  Pydantic models for the two catalog record types and the API's
       error and health bodies.
How:   The same models validate the JSON files at startup and serialize the
       API responses, so the on-disk and on-the-wire shapes cannot drift.
       FastAPI also builds the OpenAPI schema from them.

Key style:
    Attributes are snake_case in Python; JSON keys are lower camelCase
    (total_parks ↔ totalParks). Input accepts either spelling, output always
    uses camelCase.

Immutability:
    Records are frozen. A catalog is a tuple of frozen records, so nothing
    can mutate it after the startup load.
"""

import re
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Record ids and visitor counts are unsigned 32-bit integers.
U32_MAX = 2**32 - 1

# A path id is an optional "+" followed by ASCII digits, nothing else.
RECORD_ID_PATTERN = r"^\+?[0-9]+$"
_RECORD_ID_RE = re.compile(r"\+?[0-9]+")


def _parse_record_id(value):
    if isinstance(value, str):
        if not _RECORD_ID_RE.fullmatch(value):
            raise ValueError("must be an unsigned integer")
        return int(value)
    return value


RecordId = Annotated[int, BeforeValidator(_parse_record_id), Field(ge=0, le=U32_MAX)]


_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    # JSON strings are never coerced to integers (and vice versa)
    strict=True,
)


class Park(BaseModel):
    """
    What:  A single national park.
    Who:   Returned by GET /parks, GET /parks/{id}, GET /parks/search/{query}.

    `name` and `description` are the fields the park search matches against.
    """

    model_config = _RECORD_CONFIG

    id: int = Field(ge=0, le=U32_MAX, description="Unique park identifier")
    name: str = Field(description="Park name")
    image: str = Field(description="Image URL or path")
    location: str = Field(description="Where the park is located")
    established: str = Field(description="Establishment date, free text")
    area: str = Field(description="Area, free text (e.g. '761,747.50 acres')")
    visitors: int = Field(ge=0, le=U32_MAX, description="Recreational visitors per year")
    description: str = Field(description="Free-text description of the park")


class State(BaseModel):
    """
    What:  A state that contains at least one national park.
    Who:   Returned by GET /states, GET /states/{id}, GET /states/search/{query}.

    The park counts are Optional: None means "unknown", which is not the
    same thing as zero parks. Missing keys in the source file load as None
    and serialize as null.
    """

    model_config = _RECORD_CONFIG

    id: int = Field(ge=0, le=U32_MAX, description="Unique state identifier")
    state: str = Field(description="State name, the field matched by state search")
    total_parks: Optional[int] = Field(
        default=None, ge=0, le=U32_MAX,
        description="Number of national parks in the state (null when unknown)",
    )
    exclusive_parks: Optional[int] = Field(
        default=None, ge=0, le=U32_MAX,
        description="Parks located only in this state (null when unknown)",
    )
    shared_parks: Optional[int] = Field(
        default=None, ge=0, le=U32_MAX,
        description="Parks shared with another state (null when unknown)",
    )


class ErrorResponse(BaseModel):
    """
    Standard error body for every non-2xx response.

    Example:
        {"status": "error", "message": "Park not found"}
    """

    status: str = Field(default="error", description="Always 'error'")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check body: service status and the size of each loaded catalog."""

    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    parks: int = Field(description="Number of park records loaded")
    states: int = Field(description="Number of state records loaded")
    uptime_seconds: float = Field(description="Seconds since service started")
