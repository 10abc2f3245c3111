"""
National Parks API — Application Package Initializer
======================================================

What: Marks the `parks_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin read-only layer over two in-memory catalogs:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Lookup & Search)      │  ← list / get-by-id / fuzzy search
    ├─────────────────────────────────────┤
    │          Schemas (Records)          │  ← Park, State (Pydantic, frozen)
    ├─────────────────────────────────────┤
    │        Catalog Loader (Startup)     │  ← parks.json / states.json → tuples
    └─────────────────────────────────────┘

    The loader runs once before the first request is accepted. Everything
    after that point only reads.
"""

__version__ = "1.0.0"
