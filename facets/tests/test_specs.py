"""Tests for normalization helpers and the specification extractor."""

import pytest

from facets.models import Specification
from facets.normalize import (
    bool_token,
    clean_value,
    first_number,
    fold_text,
    format_number,
    normalize_key,
    title_from_key,
)
from facets.specs import (
    SpecRule,
    canonical_key,
    derive_specifications,
    extract,
    facet_title,
    lookup_spec_values,
    match_rule,
    product_values,
)


class TestNormalize:
    """Test the shared normalization helpers."""

    @pytest.mark.parametrize("key", ["Memory Type", "memoryType", "memory_type", "memory-type"])
    def test_key_spellings_collapse(self, key):
        assert normalize_key(key) == "memorytype"

    @pytest.mark.parametrize(
        "value,expected",
        [("3.5 GHz", 3.5), ("2 x 16GB", 2.0), ("no digits", 0.0), ("", 0.0), (None, 0.0), (12, 12.0)],
    )
    def test_first_number(self, value, expected):
        assert first_number(value) == expected

    def test_format_number_drops_trailing_zero(self):
        assert format_number(16.0) == "16"
        assert format_number(3.5) == "3.5"

    @pytest.mark.parametrize("value", ["Yes", "true", "1", "Supported", True])
    def test_true_synonyms(self, value):
        assert bool_token(value) == "true"

    @pytest.mark.parametrize("value", ["No", "false", "0", "Not supported", False])
    def test_false_synonyms(self, value):
        assert bool_token(value) == "false"

    def test_unrecognized_boolean(self):
        assert bool_token("maybe") is None

    def test_clean_value(self):
        assert clean_value("  DDR5 ") == "DDR5"
        assert clean_value("   ") is None
        assert clean_value(None) is None

    def test_title_from_key(self):
        assert title_from_key("memory_type") == "Memory Type"

    def test_fold_text_strips_accents(self):
        assert fold_text("Écran") == "ecran"


class TestRules:
    """Test ordered key-to-facet rules."""

    def test_memory_and_type_maps_to_memory_type(self):
        assert canonical_key("Memory Type") == "memory_type"

    def test_first_matching_rule_wins(self):
        rules = (SpecRule("a", any_of=("power",)), SpecRule("b", any_of=("power",)))

        assert match_rule("Power Draw", rules).facet == "a"

    def test_none_of_excludes(self):
        assert canonical_key("Core Clock") == "frequency"
        assert canonical_key("Cores") == "cores"

    @pytest.mark.parametrize("key", ["TDP", "Power Supply", "Power Output", "Max Power Draw"])
    def test_any_power_key_maps_to_tdp(self, key):
        assert canonical_key(key) == "tdp"

    def test_unmatched_key_keeps_snake_case_name(self):
        assert canonical_key("Warranty Period") == "warranty_period"


class TestExtract:
    """Test extraction across products."""

    def test_values_deduplicated_per_facet(self, product_factory):
        products = [
            product_factory(id="1", specifications={"Memory Type": "DDR5", "Socket": "AM5"}),
            product_factory(id="2", specifications={"memory_type": " DDR5 ", "socket": "LGA1700"}),
        ]

        facets = extract(products)

        assert facets["memory_type"] == {"DDR5"}
        assert facets["socket"] == {"AM5", "LGA1700"}

    def test_empty_values_skipped(self, product_factory):
        facets = extract([product_factory(specifications={"Color": "  "})])

        assert "color" not in facets

    def test_also_duplicates_into_derived_facet(self, product_factory):
        rules = (SpecRule("memory", any_of=("memory",), also=("vram",)),)

        facets = extract([product_factory(specifications={"Memory": "8GB"})], rules)

        assert facets["memory"] == {"8GB"}
        assert facets["vram"] == {"8GB"}

    def test_typed_detail_values_are_extracted(self, product_factory):
        facets = extract([product_factory(cpu={"socket": "AM5", "cores": 8})])

        assert facets["socket"] == {"AM5"}
        assert facets["cores"] == {"8"}


class TestLookup:
    """Test the alias-table lookups."""

    def test_lookup_matches_any_alias_spelling(self, product_factory):
        product = product_factory(specifications={"RAM Type": "DDR4"})

        assert lookup_spec_values(product, "memory_type") == ["DDR4"]

    def test_detail_values_win_over_specifications(self, product_factory):
        product = product_factory(
            specifications={"Memory Type": "DDR4"},
            ram={"memoryType": "DDR5"},
        )

        assert product_values(product, "memory_type") == ["DDR5"]


class TestTitles:
    """Test facet title derivation."""

    def test_title_case_without_translation(self):
        assert facet_title("memory_type") == "Memory Type"

    def test_translation_used_when_found(self):
        t = {"categoryPage.filterGroups.socket": "Sockel"}.get

        assert facet_title("socket", t, "categoryPage.filterGroups.socket") == "Sockel"

    def test_untranslated_key_falls_back(self):
        t = lambda key: key  # noqa: E731

        assert facet_title("socket", t, "categoryPage.filterGroups.socket", default="Socket") == "Socket"


def test_derive_specifications_from_products(product_factory):
    products = [
        product_factory(id="1", specifications={"Color": "White"}),
        product_factory(id="2", specifications={"Colour": "black"}),
    ]

    specs = derive_specifications(products)

    assert specs == [Specification(id="color", name="color", display_name="Color", values=["black", "White"])]
