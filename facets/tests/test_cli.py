"""Tests for the command-line interface."""

import json
import logging

import pandas as pd
import pytest

from facets.cli import main, parse_selections
from facets.models import FilterGroup, FilterOption


@pytest.fixture(autouse=True)
def reset_facets_logger():
    """main() installs console handlers; drop them after each test."""
    yield
    logger = logging.getLogger("facets")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


class TestParseSelections:
    def test_groups_by_type(self):
        selected = parse_selections(["socket=AM5", "cores=8", "socket=LGA1700"])

        assert selected == {"socket": ["socket=AM5", "socket=LGA1700"], "cores": ["cores=8"]}

    def test_value_may_contain_equals(self):
        assert parse_selections(["resolution=a=b"]) == {"resolution": ["resolution=a=b"]}

    def test_options_filed_under_their_group(self):
        groups = [
            FilterGroup(
                title="Performance",
                type="performance",
                options=[FilterOption(id="cores=8", name="8"), FilterOption(id="threads=16", name="16")],
            )
        ]

        selected = parse_selections(["cores=8", "threads=16", "socket=AM5"], groups)

        assert selected == {"performance": ["cores=8", "threads=16"], "socket": ["socket=AM5"]}

    @pytest.mark.parametrize("token", ["AM5", "=AM5", "socket="])
    def test_invalid_tokens(self, token):
        with pytest.raises(ValueError, match="Invalid selection"):
            parse_selections([token])


class TestMain:
    """Run the CLI end to end against temporary catalogs."""

    def test_lists_all_products_by_price(self, catalog_json_path, capsys):
        assert main([str(catalog_json_path)]) == 0

        out = capsys.readouterr().out
        assert "3 products" in out
        assert out.index("cpu-1") < out.index("cpu-2") < out.index("cpu-3")
        assert "(was 409.00)" in out

    def test_select_and_price_bound(self, catalog_json_path, capsys):
        code = main([str(catalog_json_path), "--select", "manufacturer=AMD", "--max-price", "300"])

        out = capsys.readouterr().out
        assert code == 0
        assert "cpu-1" in out
        assert "cpu-3" not in out
        assert "1 products" in out

    def test_sort_by_name_desc(self, catalog_json_path, capsys):
        main([str(catalog_json_path), "--sort", "name-desc"])

        out = capsys.readouterr().out
        assert out.index("cpu-2") < out.index("cpu-3") < out.index("cpu-1")

    def test_groups(self, catalog_json_path, capsys):
        assert main([str(catalog_json_path), "--category", "processors", "--groups"]) == 0

        out = capsys.readouterr().out
        assert "Category: Processors (builder facets)" in out
        assert "Manufacturer [manufacturer]" in out
        assert "manufacturer=AMD" in out

    def test_export_csv(self, catalog_json_path, tmp_path, capsys):
        target = tmp_path / "exports" / "amd.csv"

        code = main([str(catalog_json_path), "--select", "manufacturer=AMD", "--export-csv", str(target)])

        assert code == 0
        assert "Exported to" in capsys.readouterr().out
        df = pd.read_csv(target)
        assert list(df["id"]) == ["cpu-1", "cpu-3"]

    def test_csv_catalog(self, catalog_csv_path, capsys):
        assert main([str(catalog_csv_path), "--search", "kingston"]) == 0

        out = capsys.readouterr().out
        assert "Kingston Fury 16GB DDR4" in out
        assert "(was 59.99)" in out
        assert "1 products" in out

    def test_fallback_bucket_options_are_ored(self, tmp_path, capsys):
        components = [
            {"id": "w1", "name": "Eight core box", "price": 900, "categoryName": "Workstations",
             "specifications": {"Cores": "8"}},
            {"id": "w2", "name": "Sixteen thread box", "price": 1100, "categoryName": "Workstations",
             "specifications": {"Threads": "16"}},
            {"id": "w3", "name": "Quad box", "price": 500, "categoryName": "Workstations",
             "specifications": {"Cores": "4"}},
        ]
        path = tmp_path / "workstations.json"
        path.write_text(json.dumps(components), encoding="utf-8")

        main([str(path), "--groups"])
        groups_out = capsys.readouterr().out
        assert "Performance [performance]" in groups_out
        assert "cores=8" in groups_out and "threads=16" in groups_out

        assert main([str(path), "--select", "cores=8", "--select", "threads=16"]) == 0
        out = capsys.readouterr().out
        assert "2 products" in out
        assert "w1" in out and "w2" in out
        assert "w3" not in out

    def test_list_categories(self, tmp_path, capsys):
        assert main([str(tmp_path / "unused.json"), "--list-categories"]) == 0

        out = capsys.readouterr().out
        assert "gpu: Graphics Cards" in out

    def test_missing_catalog(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1

        assert "Error: Catalog file not found" in capsys.readouterr().err

    def test_bad_selection(self, catalog_json_path, capsys):
        assert main([str(catalog_json_path), "--select", "AM5"]) == 2

        assert "Invalid selection" in capsys.readouterr().err

    def test_unknown_sort_is_rejected_by_argparse(self, catalog_json_path):
        with pytest.raises(SystemExit) as exc:
            main([str(catalog_json_path), "--sort", "popularity"])

        assert exc.value.code == 2
