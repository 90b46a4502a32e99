"""Tests for the JSON-file catalog repositories."""

import json

import pytest

from phytoshop.domain.exceptions import ValidationError
from phytoshop.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from phytoshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def catalog_dir(tmp_path):
    (tmp_path / "categories.json").write_text(json.dumps([
        {"id": "2", "name": "Immunité", "icon": "shield"},
        {"id": "1", "name": "Digestion", "icon": "leaf"},
    ]), encoding="utf-8")
    (tmp_path / "products.json").write_text(json.dumps([
        {"id": "20", "name": "Tisane de Moringa", "price": 5000, "category_id": "2"},
        {"id": "10", "name": "Gingembre", "price": 3000, "category_id": "1",
         "in_stock": False},
        {"id": "30", "name": "Mystère", "price": 100, "category_id": "9"},
    ]), encoding="utf-8")
    return tmp_path


class TestJsonCategoryRepository:

    def test_list_all_sorted_by_name(self, catalog_dir):
        repo = JsonCategoryRepository(catalog_dir / "categories.json")
        assert [c.name for c in repo.list_all()] == ["Digestion", "Immunité"]

    def test_get_by_id(self, catalog_dir):
        repo = JsonCategoryRepository(catalog_dir / "categories.json")
        assert repo.get_by_id("2").icon == "shield"
        assert repo.get_by_id("99") is None


class TestJsonProductRepository:

    def _repo(self, catalog_dir) -> JsonProductRepository:
        return JsonProductRepository(
            catalog_dir / "products.json",
            category_repo=JsonCategoryRepository(catalog_dir / "categories.json"),
        )

    def test_list_all_sorted_by_name(self, catalog_dir):
        names = [p.name for p in self._repo(catalog_dir).list_all()]
        assert names == ["Gingembre", "Mystère", "Tisane de Moringa"]

    def test_category_names_resolved(self, catalog_dir):
        repo = self._repo(catalog_dir)
        assert repo.get_by_id("20").category == "Immunité"
        assert repo.get_by_id("30").category == "Autre"

    def test_get_by_id_missing(self, catalog_dir):
        assert self._repo(catalog_dir).get_by_id("404") is None

    def test_without_category_repo(self, catalog_dir):
        repo = JsonProductRepository(catalog_dir / "products.json")
        assert repo.get_by_id("20").category == "Autre"

    def test_missing_file_is_empty_catalog(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "nope.json")
        assert repo.list_all() == []
        assert not (tmp_path / "nope.json").exists()

    def test_invalid_json_rejected(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonProductRepository(path).list_all()

    def test_non_list_rejected(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('{"id": "1"}', encoding="utf-8")
        with pytest.raises(ValidationError, match="list of records"):
            JsonProductRepository(path).list_all()


class TestMalformedRecords:

    def test_bad_product_row_is_skipped(self, tmp_path, caplog):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([
            {"id": "1", "name": "Tisane de Moringa", "price": 1000},
            {"id": "2", "name": "Artemisia Annua"},
        ]), encoding="utf-8")
        repo = JsonProductRepository(path)

        with caplog.at_level("WARNING"):
            products = repo.list_all()

        assert [p.id for p in products] == ["1"]
        assert repo.get_by_id("2") is None
        assert "missing 'price'" in caplog.text

    def test_bad_category_row_is_skipped(self, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text(json.dumps([
            {"id": "1", "name": "Digestion"},
            {"id": "2"},
        ]), encoding="utf-8")
        assert [c.id for c in JsonCategoryRepository(path).list_all()] == ["1"]
