"""Tests for catalog loading."""

import json

import pytest
import yaml

from apartment_matcher.services.catalog import load_catalog


@pytest.fixture
def catalog_data():
    return {
        "buildings": [
            {"id": 1, "name": "The Castilian", "latitude": 30.2868, "longitude": -97.7424, "amenities": ["wifi"]},
        ],
        "listings": [
            {"id": 101, "buildingId": 1, "price": 1450, "bedrooms": 0, "bathrooms": 1},
            {"id": 102, "buildingId": 1, "price": 2350, "bedrooms": 2, "bathrooms": 2},
        ],
    }


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_load_json(self, tmp_path, catalog_data):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_data))

        buildings, listings = load_catalog(str(path))

        assert [b.id for b in buildings] == [1]
        assert buildings[0].amenities == ["wifi"]
        assert [l.id for l in listings] == [101, 102]
        assert listings[1].building_id == 1

    def test_load_yaml(self, tmp_path, catalog_data):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(catalog_data))

        buildings, listings = load_catalog(str(path))
        assert len(buildings) == 1
        assert len(listings) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Catalog file not found"):
            load_catalog(str(tmp_path / "nope.json"))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_catalog(str(path))

    def test_record_without_id(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"buildings": [], "listings": [{"price": 100}]}))
        with pytest.raises(ValueError, match=r"listings\[0\]"):
            load_catalog(str(path))

    def test_missing_sections_are_empty(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("buildings: []\n")
        assert load_catalog(str(path)) == ([], [])
