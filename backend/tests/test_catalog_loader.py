"""
National Parks API — Catalog Loader Unit Tests
================================================

What:  Tests for load_records / load_catalog against files in tmp_path.

Test Strategy:
    ✅ Valid files load in order with camelCase keys mapped to attributes
    ✅ Missing optional counts load as None, extra keys are ignored
    ✅ Missing file, invalid JSON, wrong shape → CatalogLoadError
    ✅ Strict typing: no string → int coercion, no negative ids
"""

import json

import pytest

from parks_api.exceptions import CatalogLoadError
from parks_api.schemas.catalog import Park, State
from parks_api.services.catalog_loader import Catalog, load_catalog, load_records


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadRecords:
    def test_load_parks_preserves_order(self, catalog_files):
        parks_path, _ = catalog_files
        parks = load_records(parks_path, Park)
        assert isinstance(parks, tuple)
        assert [p.id for p in parks] == [1, 2, 3, 5]
        assert parks[0].name == "Test Park"

    def test_load_states_maps_camel_case(self, catalog_files):
        _, states_path = catalog_files
        states = load_records(states_path, State)
        california = states[0]
        assert california.total_parks == 9
        assert california.exclusive_parks == 8
        assert california.shared_parks == 1

    def test_missing_optional_counts_are_none(self, tmp_path):
        path = _write(tmp_path / "states.json", [{"id": 7, "state": "Guam"}])
        (state,) = load_records(path, State)
        assert state.total_parks is None
        assert state.exclusive_parks is None
        assert state.shared_parks is None

    def test_explicit_null_count(self, tmp_path):
        path = _write(tmp_path / "states.json", [{"id": 7, "state": "Guam", "totalParks": None}])
        assert load_records(path, State)[0].total_parks is None

    def test_zero_is_not_unknown(self, tmp_path):
        path = _write(tmp_path / "states.json", [{"id": 7, "state": "Guam", "sharedParks": 0}])
        assert load_records(path, State)[0].shared_parks == 0

    def test_extra_keys_ignored(self, tmp_path, park_dicts):
        park_dicts[0]["nickname"] = "The Test"
        path = _write(tmp_path / "parks.json", park_dicts)
        assert len(load_records(path, Park)) == 4

    def test_empty_array(self, tmp_path):
        path = _write(tmp_path / "parks.json", [])
        assert load_records(path, Park) == ()


class TestLoadFailures:
    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            load_records(tmp_path / "nope.json", Park)
        assert exc_info.value.path.endswith("nope.json")

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_records(tmp_path, Park)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "parks.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_records(path, Park)

    def test_object_instead_of_array(self, tmp_path, park_dicts):
        path = _write(tmp_path / "parks.json", park_dicts[0])
        with pytest.raises(CatalogLoadError):
            load_records(path, Park)

    def test_missing_required_field(self, tmp_path, park_dicts):
        del park_dicts[2]["description"]
        path = _write(tmp_path / "parks.json", park_dicts)
        with pytest.raises(CatalogLoadError, match="description"):
            load_records(path, Park)

    def test_string_id_not_coerced(self, tmp_path, park_dicts):
        park_dicts[0]["id"] = "1"
        path = _write(tmp_path / "parks.json", park_dicts)
        with pytest.raises(CatalogLoadError):
            load_records(path, Park)

    def test_number_for_string_field_rejected(self, tmp_path, park_dicts):
        park_dicts[0]["area"] = 12.5
        path = _write(tmp_path / "parks.json", park_dicts)
        with pytest.raises(CatalogLoadError):
            load_records(path, Park)

    def test_negative_visitors_rejected(self, tmp_path, park_dicts):
        park_dicts[1]["visitors"] = -1
        path = _write(tmp_path / "parks.json", park_dicts)
        with pytest.raises(CatalogLoadError):
            load_records(path, Park)

    def test_id_above_u32_rejected(self, tmp_path):
        path = _write(tmp_path / "states.json", [{"id": 2**32, "state": "Too Big"}])
        with pytest.raises(CatalogLoadError):
            load_records(path, State)


class TestLoadCatalog:
    def test_load_both(self, catalog_files):
        catalog = load_catalog(*catalog_files)
        assert isinstance(catalog, Catalog)
        assert len(catalog.parks) == 4
        assert len(catalog.states) == 3

    def test_states_failure_aborts(self, catalog_files, tmp_path):
        parks_path, _ = catalog_files
        with pytest.raises(CatalogLoadError):
            load_catalog(parks_path, tmp_path / "missing-states.json")
