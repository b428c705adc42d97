"""Unit tests for identifier derivation and cell normalization."""

import pytest

from tagmap.core.identity import id_safe, normalize, product_id, split_tags, tag_id


class TestNormalize:
    def test_none_becomes_empty(self):
        assert normalize(None) == ""

    def test_trims_whitespace(self):
        assert normalize("  Sencha \t") == "Sencha"

    def test_non_string_is_coerced(self):
        assert normalize(42) == "42"


class TestIdSafe:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Earl Grey", "earl-grey"),
            ("  Earl   Grey  ", "earl-grey"),
            ("Jasmine Pearls (50g)", "jasmine-pearls-50g"),
            ("v1.2_special:edition", "v1.2_special:edition"),
            ("Café & Co.", "caf--co."),
            ("", ""),
        ],
    )
    def test_reduces_to_safe_alphabet(self, raw, expected):
        assert id_safe(raw) == expected

    def test_is_deterministic(self):
        assert id_safe("Assam Bold") == id_safe("assam   bold ")


class TestSplitTags:
    def test_splits_and_trims(self):
        assert split_tags(" green , organic,loose leaf ") == ["green", "organic", "loose leaf"]

    def test_drops_empty_tokens(self):
        assert split_tags("green,, ,organic,") == ["green", "organic"]

    def test_empty_cell(self):
        assert split_tags("") == []
        assert split_tags(None) == []

    def test_keeps_repeats(self):
        assert split_tags("green,green") == ["green", "green"]

    def test_custom_delimiter(self):
        assert split_tags("green; organic, fair", delimiter=";") == ["green", "organic, fair"]


class TestNamespacedIds:
    def test_product_prefers_handle(self):
        assert product_id("Sencha Classic", "sencha-classic-2") == "product:sencha-classic-2"

    def test_product_falls_back_to_title(self):
        assert product_id("Sencha Classic", "") == "product:sencha-classic"
        assert product_id("Sencha Classic", "   ") == "product:sencha-classic"

    def test_tag_id(self):
        assert tag_id("Loose Leaf") == "tag:loose-leaf"

    def test_product_and_tag_never_collide(self):
        assert product_id("blue") != tag_id("blue")
