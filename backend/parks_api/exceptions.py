"""
National Parks API — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the few failure modes this service has.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch the request-time
       ones and return a JSON body of the form {"status": "error", "message": ...}
       with the matching HTTP status code.
Who:   Raised by the catalog loader and the catalog services.

Exception Hierarchy:
    ParksAPIError (base)
    ├── NotFoundError      → 404 Not Found
    └── CatalogLoadError   → startup only; the process never starts serving
"""

from typing import Any, Dict, Optional


class ParksAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(ParksAPIError):
    """
    Raised when a lookup by id finds no record.

    HTTP:  404 Not Found
    The message is "<resource> not found", e.g. "Park not found". The id is
    kept in the context only, so the response body stays identical for every
    missing id.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class CatalogLoadError(ParksAPIError):
    """
    Raised when a catalog file cannot be read or does not match the record shape.

    Fatal: a missing or malformed catalog is a deployment defect. The lifespan
    lets it propagate so uvicorn aborts before binding, and run() exits with
    status 1. It is never retried.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"Failed to load catalog '{path}': {reason}",
            context=ctx,
        )
        self.path = path
        self.reason = reason
