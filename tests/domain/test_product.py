"""Unit tests for the Product snapshot."""

import dataclasses

import pytest

from tests.fakes import make_product


class TestProduct:

    def test_is_immutable(self):
        product = make_product()
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "Autre chose"

    def test_default_category(self):
        assert make_product().category == "Autre"

    @pytest.mark.parametrize("query", ["moringa", "MORINGA", "  Tisane ", "vitamines"])
    def test_matches_name_or_description(self, query):
        product = make_product(name="Tisane de Moringa", description="Riche en vitamines")
        assert product.matches(query)

    def test_blank_query_matches_everything(self):
        assert make_product().matches("   ")

    def test_no_match(self):
        assert not make_product(name="Gingembre").matches("moringa")
