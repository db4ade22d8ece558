"""Tests for the category registry and classifier."""

import pytest

from facets.categories import (
    CATEGORY_REGISTRY,
    classify_category,
    get_all_category_names,
    get_category_config,
    get_category_facets,
)
from facets.component_facets import CPU_FACETS, GPU_FACETS


class TestRegistry:
    """Test the registry helpers."""

    def test_precedence_order(self):
        assert get_all_category_names()[:11] == [
            "gpu",
            "keyboard",
            "mouse",
            "mouse_pad",
            "headphones",
            "monitor",
            "microphone",
            "camera",
            "speaker",
            "gamepad",
            "cpu",
        ]
        assert get_all_category_names()[11:17] == ["motherboard", "ram", "storage", "psu", "case", "cooling"]

    def test_every_category_has_required_fields(self):
        for key, config in CATEGORY_REGISTRY.items():
            for field in ("display_name", "slugs", "name_patterns", "exclude_patterns", "facets"):
                assert field in config, f"{key} missing {field}"

    def test_unknown_category_config(self):
        assert get_category_config("toaster") is None
        assert get_category_config("gpu")["display_name"] == "Graphics Cards"


class TestClassifier:
    """Test slug and name classification."""

    @pytest.mark.parametrize(
        "slug,expected",
        [
            ("graphics-cards", "gpu"),
            ("gpu", "gpu"),
            ("processors", "cpu"),
            ("mouse-pads", "mouse_pad"),
            ("cpu-coolers", "cooling"),
            ("power-supplies", "psu"),
            ("Keyboards", "keyboard"),
        ],
    )
    def test_slugs(self, slug, expected):
        assert classify_category(slug=slug) == expected

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Graphics Cards", "gpu"),
            ("Gaming Mice", "mouse"),
            ("Mouse Pads", "mouse_pad"),
            ("CPU Coolers", "cooling"),
            ("Desktop Processors", "cpu"),
            ("Graphics Tablets", "tablet"),
            ("PC Cases", "case"),
            ("Webcams", "camera"),
        ],
    )
    def test_names(self, name, expected):
        assert classify_category(name=name) == expected

    def test_first_match_wins(self):
        # "gpu" precedes "cpu" even when both words appear
        assert classify_category(name="CPU and GPU bundles") == "gpu"

    def test_no_match(self):
        assert classify_category("gift-cards", "Gift Cards") is None
        assert get_category_facets("gift-cards", "Gift Cards") is None

    def test_facets_lookup(self):
        assert get_category_facets("processors") is CPU_FACETS
        assert get_category_facets(name="Video Cards") is GPU_FACETS
