"""Application service: Checkout use case.

Turns the session's cart into a receipt: subtotal, flat delivery fee and
payment method. The order itself is recorded by the remote backend, so
a successful checkout only returns the receipt and empties the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from phytoshop.application.dto import CartLineDTO, to_cart_dto
from phytoshop.application.session import ShopSession
from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.value_objects import Money
from phytoshop.log import get_logger

logger = get_logger(__name__)

DELIVERY_FEE = Money(Decimal("2000"))
DEFAULT_CITY = "Kinshasa"


class PaymentMethod(Enum):
    MOBILE_MONEY = "mobile_money"  # Airtel Money, Orange Money, M-Pesa
    CASH = "cash"  # paid on delivery


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    phone: str
    address: str
    city: str = DEFAULT_CITY

    def missing_fields(self) -> list[str]:
        return [
            label
            for label, value in (
                ("name", self.name),
                ("phone", self.phone),
                ("address", self.address),
            )
            if not value or not value.strip()
        ]


@dataclass(frozen=True)
class CheckoutReceiptDTO:
    customer_name: str
    phone: str
    address: str
    city: str
    payment_method: str
    lines: list[CartLineDTO]
    total_items: int
    subtotal: str
    delivery_fee: str
    total: str


class CheckoutHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(
        self,
        customer: CustomerInfo,
        payment_method: PaymentMethod = PaymentMethod.MOBILE_MONEY,
    ) -> CheckoutReceiptDTO:
        """Place the order for everything in the cart.

        Raises ValidationError if the cart is empty or a required customer
        field is blank. The cart is cleared only on success.
        """
        cart = self._session.cart
        if cart.is_empty:
            raise ValidationError("Cart is empty")

        missing = customer.missing_fields()
        if missing:
            raise ValidationError(
                f"Missing required customer fields: {', '.join(missing)}"
            )

        summary = to_cart_dto(cart)
        subtotal = cart.total_price
        receipt = CheckoutReceiptDTO(
            customer_name=customer.name.strip(),
            phone=customer.phone.strip(),
            address=customer.address.strip(),
            city=customer.city.strip() or DEFAULT_CITY,
            payment_method=payment_method.value,
            lines=summary.lines,
            total_items=summary.total_items,
            subtotal=str(subtotal),
            delivery_fee=str(DELIVERY_FEE),
            total=str(subtotal + DELIVERY_FEE),
        )

        cart.clear()
        logger.info(
            "Order placed: %d items, total %s, payment %s",
            receipt.total_items,
            receipt.total,
            receipt.payment_method,
        )
        return receipt
