"""Tests for catalog loading and CSV export."""

import json
import logging

import pandas as pd
import pytest

from facets.catalog import (
    EXPORT_COLUMNS,
    CatalogError,
    category_slug,
    export_csv,
    load_catalog,
    read_catalog_csv,
)
from facets.models import Category, CpuDetail


class TestJsonCatalog:
    """Test JSON payload loading."""

    def test_payload_object(self, catalog_json_path):
        payload = load_catalog(catalog_json_path)

        assert [p.id for p in payload.components] == ["cpu-1", "cpu-2", "cpu-3"]
        assert payload.categories == [Category(slug="processors", name="Processors")]
        assert isinstance(payload.components[0].detail, CpuDetail)
        assert payload.components[0].detail.integrated_gpu is True

    def test_bare_component_list_derives_categories(self, tmp_path, cpu_catalog):
        path = tmp_path / "list.json"
        path.write_text(json.dumps(cpu_catalog["components"]), encoding="utf-8")

        payload = load_catalog(path)

        assert len(payload.components) == 3
        assert payload.categories == [Category(slug="processors", name="Processors")]
        assert payload.specifications is None

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError, match="Invalid JSON"):
            load_catalog(path)

    def test_components_must_be_list(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"components": {"id": "1"}}), encoding="utf-8")

        with pytest.raises(CatalogError, match="must be a list"):
            load_catalog(path)

    def test_scalar_document(self, tmp_path):
        path = tmp_path / "scalar.json"
        path.write_text("42", encoding="utf-8")

        with pytest.raises(CatalogError):
            load_catalog(path)


class TestCsvCatalog:
    """Test CSV catalog parsing."""

    def test_rows_become_products(self, catalog_csv_path):
        products = read_catalog_csv(catalog_csv_path)

        assert [p.id for p in products] == ["1", "2", "3"]
        assert products[0].specifications == {"Memory Type": "DDR5", "Capacity": "32GB"}
        assert products[0].brand == "Corsair"
        assert products[0].stock == 5

    def test_blank_cells_are_missing(self, catalog_csv_path):
        products = read_catalog_csv(catalog_csv_path)

        assert products[0].discount_price is None
        assert products[1].effective_price == pytest.approx(49.99)
        assert products[2].brand is None
        assert products[2].specifications == {}

    def test_load_catalog_derives_categories(self, catalog_csv_path):
        payload = load_catalog(catalog_csv_path)

        assert payload.categories == [Category(slug="memory", name="Memory")]

    def test_missing_required_columns(self, tmp_path):
        path = tmp_path / "partial.csv"
        path.write_text("id,name\n1,Widget\n", encoding="utf-8")

        with pytest.raises(CatalogError, match="price"):
            read_catalog_csv(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(CatalogError):
            read_catalog_csv(path)

    def test_invalid_json_cell_is_ignored(self, tmp_path, caplog):
        path = tmp_path / "cells.csv"
        path.write_text("id,name,price,specifications\n1,Widget,10,{not json}\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="facets.catalog"):
            products = read_catalog_csv(path)

        assert products[0].specifications == {}
        assert "invalid JSON" in caplog.text


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "catalog.txt"
        path.write_text("hello", encoding="utf-8")

        with pytest.raises(CatalogError, match="Unsupported"):
            load_catalog(path)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestExport:
    """Test CSV export."""

    def test_export_creates_directories(self, tmp_path, cpu_payload):
        path = export_csv(cpu_payload.components, tmp_path / "out" / "result.csv")

        assert path.exists()
        df = pd.read_csv(path, dtype={"id": str})
        assert list(df.columns) == EXPORT_COLUMNS
        assert list(df["id"]) == ["cpu-1", "cpu-2", "cpu-3"]
        assert list(df["effectivePrice"]) == [229.0, 379.0, 449.0]

    def test_specifications_written_as_json(self, tmp_path, cpu_payload):
        path = export_csv(cpu_payload.components[:1], tmp_path / "one.csv")

        df = pd.read_csv(path)
        assert json.loads(df.loc[0, "specifications"]) == {"Socket": "AM5", "Cores": "6", "TDP": "105 W"}

    def test_empty_export_has_header(self, tmp_path):
        path = export_csv([], tmp_path / "empty.csv")

        assert path.read_text(encoding="utf-8").strip() == ",".join(EXPORT_COLUMNS)


@pytest.mark.parametrize(
    "name,slug",
    [
        ("Graphics Cards", "graphics-cards"),
        ("PC Cases & Towers", "pc-cases-towers"),
        ("  Memory ", "memory"),
    ],
)
def test_category_slug(name, slug):
    assert category_slug(name) == slug
