"""
National Parks API — Catalog Loader
=====================================

What:  Reads parks.json and states.json into two immutable, typed collections.
How:   Each file is read as bytes and validated in one pass by a Pydantic
       TypeAdapter for a list of records, then frozen into a tuple.
Who:   Called by the application lifespan and by run() before the server starts.
When:  Exactly once per process. The files are never re-read or written.

Failure Policy:
    Any problem (missing file, permission denied, invalid JSON, a record that
    does not match the schema) raises CatalogLoadError. There is no partial
    load and no retry: the service must not accept connections without both
    catalogs.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from parks_api.exceptions import CatalogLoadError
from parks_api.schemas.catalog import Park, State

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class Catalog:
    """Both loaded collections, in file order."""

    parks: Tuple[Park, ...]
    states: Tuple[State, ...]


def load_records(path: Union[str, Path], model: Type[RecordT]) -> Tuple[RecordT, ...]:
    """
    Load a JSON array document and validate every element into `model`.

    Args:
        path:  Filesystem path to the JSON document.
        model: Record type (Park or State).

    Returns:
        Tuple of records in file order.

    Raises:
        CatalogLoadError: The file is absent or unreadable, or its content is
            not a JSON array of `model` objects.
    """
    path = Path(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Cannot read catalog file %s: %s", path, e)
        raise CatalogLoadError(str(path), e.strerror or str(e)) from e

    try:
        records: List[RecordT] = TypeAdapter(List[model]).validate_json(raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        reason = f"{e.error_count()} validation error(s), first at {location}: {first['msg']}"
        logger.error("Invalid catalog file %s: %s", path, reason)
        raise CatalogLoadError(
            str(path), reason, context={"errors": e.error_count()}
        ) from e

    duplicates = [rid for rid, count in Counter(r.id for r in records).items() if count > 1]
    if duplicates:
        # Lookups return the first record with a given id
        logger.warning("Catalog %s has duplicate ids: %s", path.name, sorted(duplicates))

    logger.info("Loaded %d %s records from %s", len(records), model.__name__, path)
    return tuple(records)


def load_catalog(parks_path: Union[str, Path], states_path: Union[str, Path]) -> Catalog:
    """Load both catalog files. Parks are loaded first; either failure aborts."""
    return Catalog(
        parks=load_records(parks_path, Park),
        states=load_records(states_path, State),
    )
