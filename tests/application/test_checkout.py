"""Tests for the Checkout use case."""

import pytest

from phytoshop.application.checkout import (
    CheckoutHandler,
    CustomerInfo,
    PaymentMethod,
)
from phytoshop.application.session import ShopSession
from phytoshop.domain.exceptions import ValidationError
from tests.fakes import make_product


def _customer(**overrides) -> CustomerInfo:
    fields = {
        "name": "Mbuyi Kabasele",
        "phone": "+243 810 000 000",
        "address": "12 avenue de la Paix, Gombe",
    }
    fields.update(overrides)
    return CustomerInfo(**fields)


def _session_with_items() -> ShopSession:
    session = ShopSession()
    session.cart.add(make_product("1", "Tisane de Moringa", price=5000), 2)
    session.cart.add(make_product("2", "Artemisia Annua", price=7500))
    return session


class TestCheckoutHappyPath:

    def test_receipt_totals_include_delivery_fee(self):
        session = _session_with_items()
        receipt = CheckoutHandler(session).handle(_customer(), PaymentMethod.CASH)
        assert receipt.subtotal == "17,500 FC"
        assert receipt.delivery_fee == "2,000 FC"
        assert receipt.total == "19,500 FC"
        assert receipt.total_items == 3
        assert receipt.payment_method == "cash"
        assert len(receipt.lines) == 2

    def test_defaults(self):
        receipt = CheckoutHandler(_session_with_items()).handle(_customer())
        assert receipt.city == "Kinshasa"
        assert receipt.payment_method == "mobile_money"

    def test_clears_cart(self):
        session = _session_with_items()
        CheckoutHandler(session).handle(_customer())
        assert session.cart.is_empty

    def test_strips_customer_fields(self):
        receipt = CheckoutHandler(_session_with_items()).handle(
            _customer(name="  Mbuyi  ", city=" Lubumbashi ")
        )
        assert receipt.customer_name == "Mbuyi"
        assert receipt.city == "Lubumbashi"


class TestCheckoutValidation:

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            CheckoutHandler(ShopSession()).handle(_customer())

    def test_missing_fields_rejected_and_cart_kept(self):
        session = _session_with_items()
        with pytest.raises(ValidationError, match="phone, address"):
            CheckoutHandler(session).handle(_customer(phone="", address="  "))
        assert session.cart.total_items == 3

    def test_closed_session_rejected(self):
        session = _session_with_items()
        session.close()
        with pytest.raises(ValidationError, match="closed"):
            CheckoutHandler(session).handle(_customer())
