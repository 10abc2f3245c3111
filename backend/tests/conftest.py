"""
National Parks API — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── sample_parks / sample_states: small hand-written catalogs
    ├── catalog: Catalog built from the two samples
    ├── catalog_files: the samples written to parks.json / states.json in tmp_path
    └── test_client: HTTPX AsyncClient bound to an app with the sample catalog
"""

import json
import os

# Set before any parks_api import so the settings singleton picks it up
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from parks_api.schemas.catalog import Park, State
from parks_api.services.catalog_loader import Catalog


PARK_DICTS = [
    {
        "id": 1,
        "name": "Test Park",
        "image": "https://example.com/test.jpg",
        "location": "Nowhere",
        "established": "January 1, 2000",
        "area": "1.00 acres",
        "visitors": 10,
        "description": "A park used in tests.",
    },
    {
        "id": 2,
        "name": "Yosemite",
        "image": "https://example.com/yosemite.jpg",
        "location": "California",
        "established": "October 1, 1890",
        "area": "761,747.50 acres",
        "visitors": 3667550,
        "description": "Granite cliffs and tall waterfalls.",
    },
    {
        "id": 3,
        "name": "Grand Canyon",
        "image": "https://example.com/grand-canyon.jpg",
        "location": "Arizona",
        "established": "February 26, 1919",
        "area": "1,201,647.03 acres",
        "visitors": 4733705,
        "description": "Carved by the Colorado River.",
    },
    {
        # ids are not contiguous
        "id": 5,
        "name": "Redwood",
        "image": "https://example.com/redwood.jpg",
        "location": "California",
        "established": "January 1, 1968",
        "area": "138,999.37 acres",
        "visitors": 409105,
        "description": "Home of the tallest trees on Earth.",
    },
]

STATE_DICTS = [
    {"id": 1, "state": "California", "totalParks": 9, "exclusiveParks": 8, "sharedParks": 1},
    {"id": 2, "state": "Utah", "totalParks": 5, "exclusiveParks": 5, "sharedParks": 0},
    {"id": 3, "state": "Virgin Islands", "totalParks": 1},
]


@pytest.fixture
def park_dicts():
    """Raw park records exactly as they appear in parks.json."""
    return [dict(p) for p in PARK_DICTS]


@pytest.fixture
def state_dicts():
    """Raw state records exactly as they appear in states.json."""
    return [dict(s) for s in STATE_DICTS]


@pytest.fixture
def sample_parks(park_dicts):
    return tuple(Park.model_validate(p) for p in park_dicts)


@pytest.fixture
def sample_states(state_dicts):
    return tuple(State.model_validate(s) for s in state_dicts)


@pytest.fixture
def catalog(sample_parks, sample_states):
    return Catalog(parks=sample_parks, states=sample_states)


@pytest.fixture
def catalog_files(tmp_path, park_dicts, state_dicts):
    """
    Writes the sample catalogs to disk.

    Returns:
        (parks_path, states_path) as strings.
    """
    parks_path = tmp_path / "parks.json"
    states_path = tmp_path / "states.json"
    parks_path.write_text(json.dumps(park_dicts), encoding="utf-8")
    states_path.write_text(json.dumps(state_dicts), encoding="utf-8")
    return str(parks_path), str(states_path)


@pytest_asyncio.fixture
async def test_client(catalog):
    """
    Provides an async HTTP test client for endpoint testing.

    The app is created with the sample catalog injected, so no files are read.

    Usage:
        async def test_parks(test_client):
            response = await test_client.get("/parks")
            assert response.status_code == 200
    """
    from parks_api.main import create_app

    app = create_app(catalog)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
