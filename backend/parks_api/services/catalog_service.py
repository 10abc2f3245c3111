"""
National Parks API — Catalog Service (Lookup & Search)
========================================================

What:  The three read operations every catalog supports: list, get-by-id, search.
How:   One CatalogService per catalog, parameterized by the records, the
       resource name used in not-found messages, and the text fields the
       fuzzy search looks at.
Who:   Called by the parks and states route handlers.

Instances:
    parks  → resource "Park",  search fields (name, description)
    states → resource "State", search fields (state,)

Concurrency:
    The records are a tuple of frozen models and the service never assigns to
    them after __init__, so any number of concurrent requests can share one
    instance without locking.
"""

import logging
from typing import Generic, Iterable, List, Tuple, TypeVar

from parks_api.exceptions import NotFoundError
from parks_api.schemas.catalog import Park, State
from parks_api.services.matcher import fuzzy_match

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Park, State)


class CatalogService(Generic[RecordT]):
    """
    Read-only operations over one immutable catalog.

    Methods:
        - list_all():  Full collection in load order
        - get_by_id(): First record with a matching id, or NotFoundError
        - search():    Records whose designated fields fuzzy-match the query
    """

    def __init__(
        self,
        records: Iterable[RecordT],
        resource: str,
        search_fields: Tuple[str, ...],
    ):
        self._records: Tuple[RecordT, ...] = tuple(records)
        self.resource = resource
        self.search_fields = search_fields

    @classmethod
    def for_parks(cls, parks: Iterable[Park]) -> "CatalogService[Park]":
        return cls(parks, resource="Park", search_fields=("name", "description"))

    @classmethod
    def for_states(cls, states: Iterable[State]) -> "CatalogService[State]":
        return cls(states, resource="State", search_fields=("state",))

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> Tuple[RecordT, ...]:
        """Return every record in load order, unfiltered."""
        return self._records

    def get_by_id(self, record_id: int) -> RecordT:
        """
        Return the first record whose id equals `record_id`.

        Linear scan: the catalogs hold tens to low hundreds of records and ids
        are compared by equality only (no ordering assumed).

        Raises:
            NotFoundError: No record has this id (→ 404 "<Resource> not found").
        """
        for record in self._records:
            if record.id == record_id:
                return record

        logger.debug("%s %s not found", self.resource, record_id)
        raise NotFoundError(resource=self.resource, resource_id=record_id)

    def search(self, query: str) -> List[RecordT]:
        """
        Return every record where at least one search field fuzzy-matches `query`.

        Results keep collection order; there is no ranking. No match is an
        empty list, not an error.
        """
        results = [
            record
            for record in self._records
            if any(fuzzy_match(query, getattr(record, name)) for name in self.search_fields)
        ]
        logger.debug(
            "%s search %r matched %d of %d", self.resource, query, len(results), len(self._records)
        )
        return results
