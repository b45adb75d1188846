"""
Tests for the catalog loader and the phone record model.

Run with: pytest tests/test_catalog_loader.py -v
"""

import dataclasses
import json

import pytest
from catalog_loader import load_catalog, parse_catalog, get_catalog_statistics
from config.settings import DEFAULT_CATALOG_PATH
from core.context import PhoneRecord
from core.errors import CatalogLoadError
from core.orchestrator import QueryEngine
from core.context import ResponseShape


@pytest.fixture
def shipped_catalog():
    return load_catalog(DEFAULT_CATALOG_PATH)


def write_json(tmp_path, data, name="phones.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestShippedCatalog:
    """The catalog bundled in data/phones.json."""

    def test_loads(self, shipped_catalog):
        assert len(shipped_catalog) == 12
        assert all(isinstance(p, PhoneRecord) for p in shipped_catalog)

    def test_ids_unique(self, shipped_catalog):
        ids = [p.id for p in shipped_catalog]
        assert len(set(ids)) == len(ids)

    def test_samsung_under_20000_is_top_pick(self, shipped_catalog):
        payload = QueryEngine(shipped_catalog).process("samsung phone under 20000")
        assert payload.shape == ResponseShape.TOP_PICK
        assert payload.matched_records[0].model == "Galaxy M34 5G"


class TestLoadErrors:
    """Bad catalog files raise CatalogLoadError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError, match="not found"):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "phones.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="not valid JSON"):
            load_catalog(path)

    def test_not_a_list(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_catalog(write_json(tmp_path, {"brand": "Vivo"}))

    def test_negative_price(self, tmp_path):
        path = write_json(tmp_path, [{"brand": "Vivo", "model": "T3", "price": -1}])
        with pytest.raises(CatalogLoadError, match="entry 0"):
            load_catalog(path)

    def test_empty_brand(self, tmp_path):
        path = write_json(tmp_path, [{"brand": " ", "model": "T3", "price": 100}])
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_missing_price(self):
        with pytest.raises(CatalogLoadError):
            parse_catalog([{"brand": "Vivo", "model": "T3"}])

    @pytest.mark.parametrize("field,value", [
        ("specs", ["8GB RAM"]),
        ("features", "5G"),
        ("pros", {"a": "b"}),
        ("reviews", ["Great phone"]),
    ])
    def test_wrong_field_type(self, field, value):
        raw = {"brand": "Vivo", "model": "T3", "price": 19999, field: value}
        with pytest.raises(CatalogLoadError, match="entry 1"):
            parse_catalog([{"brand": "Vivo", "model": "T2", "price": 9999}, raw])


class TestParse:
    """Record parsing."""

    def test_wrapped_form(self):
        phones = parse_catalog({"phones": [{"brand": "Vivo", "model": "T3", "price": 19999}]})
        assert phones[0].name == "Vivo T3"

    def test_optional_fields_absent(self):
        phone = parse_catalog([{"brand": "Vivo", "model": "T3", "price": 19999}])[0]
        assert phone.specs is None
        assert phone.features is None
        assert phone.pros == ()
        assert phone.reviews == ()

    def test_reviews_parsed(self):
        phone = parse_catalog([{
            "brand": "Vivo", "model": "T3", "price": 19999,
            "reviews": [{"user": "Sahil", "comment": "Smooth"}],
        }])[0]
        assert phone.reviews[0].user == "Sahil"

    def test_to_dict_round_trip_fields(self):
        raw = {
            "id": "vivo-t3", "brand": "Vivo", "model": "T3", "price": 19999,
            "specs": {"ram": "8GB RAM"}, "features": ["5G"],
            "pros": ["Light"], "cons": ["Bloatware"],
        }
        assert parse_catalog([raw])[0].to_dict() == raw


class TestImmutability:
    """Records can't be edited after load."""

    def test_frozen_fields(self, shipped_catalog):
        with pytest.raises(dataclasses.FrozenInstanceError):
            shipped_catalog[0].price = 1

    def test_specs_read_only(self, shipped_catalog):
        with pytest.raises(TypeError):
            shipped_catalog[0].specs["ram"] = "1GB"

    def test_features_tuple(self, shipped_catalog):
        assert isinstance(shipped_catalog[0].features, tuple)


class TestStatistics:
    """Catalog statistics for the sidebar."""

    def test_statistics(self, shipped_catalog):
        stats = get_catalog_statistics(shipped_catalog)
        assert stats['total'] == 12
        assert stats['by_brand']['Samsung'] == 2
        assert stats['by_brand']['OnePlus'] == 2
        assert sum(stats['by_brand'].values()) == 12
        assert stats['min_price'] == 9999
        assert stats['max_price'] == 54999
        assert stats['median_price'] == 23999
        assert stats['with_reviews'] == 5

    def test_empty(self):
        stats = get_catalog_statistics(())
        assert stats['total'] == 0
        assert stats['min_price'] is None
