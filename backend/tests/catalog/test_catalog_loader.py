"""Tests for the JSON catalog loader.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import json
from pathlib import Path

import pytest

from catalog_search.catalog.loader import load_catalog, parse_catalog, products_to_items
from catalog_search.core.exceptions import CatalogLoadError

__all__ = ()


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_loads_products(self, catalog_file: Path) -> None:
        """A valid file should load into products in order."""
        products = load_catalog(catalog_file)

        assert [product.id for product in products] == ["p1"]
        assert products[0].content == "Watch - Steel watch - 500"

    def test_accepts_string_path(self, catalog_file: Path) -> None:
        """String paths should be accepted."""
        assert len(load_catalog(str(catalog_file))) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file should raise CatalogLoadError."""
        with pytest.raises(CatalogLoadError, match="missing.json") as exc_info:
            load_catalog(tmp_path / "missing.json")

        assert exc_info.value.recoverable is False

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON should raise CatalogLoadError."""
        path = tmp_path / "products.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="invalid JSON"):
            load_catalog(path)


class TestParseCatalog:
    """Tests for parse_catalog."""

    def test_rejects_non_array(self) -> None:
        """The catalog root must be an array."""
        with pytest.raises(CatalogLoadError, match="expected a JSON array"):
            parse_catalog(json.dumps({"id": "p1"}))

    def test_rejects_invalid_entries(self) -> None:
        """Entries missing required fields should be reported."""
        raw = json.dumps([{"id": "p1", "name": "Hat", "price": 1}, {"id": "p2"}])

        with pytest.raises(CatalogLoadError, match="invalid product entries"):
            parse_catalog(raw)

    def test_empty_array(self) -> None:
        """An empty catalog is valid."""
        assert parse_catalog("[]") == []


class TestProductsToItems:
    """Tests for products_to_items."""

    def test_items(self) -> None:
        """Products should become (content, metadata) pairs."""
        products = parse_catalog(json.dumps([{"id": 1, "name": "Hat", "description": "Wool", "price": 9.5}]))

        assert products_to_items(products) == [("Hat - Wool - 9.5", {"source": 1})]
