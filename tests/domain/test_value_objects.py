"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_defaults_to_congolese_franc(self):
        m = Money(Decimal("1500"))
        assert m.amount == Decimal("1500")
        assert m.currency == "CDF"

    def test_of_factory_from_string(self):
        assert Money.of("2500.50").amount == Decimal("2500.50")

    def test_of_factory_from_int(self):
        assert Money.of(1000).amount == Decimal("1000")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_factory_rejects_bool(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero(self):
        assert Money.zero() == Money.of(0)

    def test_addition(self):
        assert Money.of(1000) + Money.of(500) == Money.of(1500)

    def test_multiplication_by_int(self):
        assert Money.of(7500) * 3 == Money.of(22500)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of(100) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "CDF") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of(12500)) == "12,500 FC"
        assert str(Money.of(0)) == "0 FC"
        assert str(Money.of("1000.00")) == "1,000 FC"
        assert str(Money.of("999.5")) == "999.50 FC"

    def test_no_ordering_or_subtraction(self):
        with pytest.raises(TypeError):
            Money.of(5) < Money.of(10)
        with pytest.raises(TypeError):
            Money.of(10) - Money.of(5)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
