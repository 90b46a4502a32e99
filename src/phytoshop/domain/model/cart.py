"""Cart aggregate: the customer's basket for one shopping session.

The Cart owns its lines. All mutations go through its methods so the
invariants below hold after every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.product import Product
from phytoshop.domain.model.value_objects import Money, Quantity
from phytoshop.log import get_logger

logger = get_logger(__name__)


@dataclass
class CartLine:
    """One product snapshot and how many units of it are in the cart."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - every line holds a quantity >= 1; a change that would take it to
      zero or below removes the line instead
    - ``product.id`` is the only key: at most one line per product, and
      adding a product already in the cart increases that line
    - lines keep insertion order (display only)
    """

    _lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` units of ``product``.

        Raises ValidationError for a non-integer or non-positive quantity;
        the cart is left unchanged in that case.
        """
        qty = Quantity(quantity)
        logger.debug("Adding to cart: %s quantity=%s", product.id, qty)

        line = self.get_line(product.id)
        if line is not None:
            line.quantity = line.quantity + qty
        else:
            self._lines.append(CartLine(product=product, quantity=qty))

    def remove(self, product_id: str) -> None:
        """Drop the line for ``product_id``. Unknown ids are ignored."""
        logger.debug("Removing from cart: %s", product_id)
        self._lines = [line for line in self._lines if line.product_id != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set the line's quantity to exactly ``quantity``.

        Unlike ``add`` this replaces the quantity. Zero or a negative
        value removes the line. Unknown ids are ignored.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        logger.debug("Updating quantity: %s new quantity=%s", product_id, quantity)

        if quantity <= 0:
            self.remove(product_id)
            return

        line = self.get_line(product_id)
        if line is not None:
            line.quantity = Quantity(quantity)

    def clear(self) -> None:
        logger.debug("Clearing cart")
        self._lines = []

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def total_items(self) -> int:
        """Sum of quantities, not the number of lines."""
        return sum(line.quantity.value for line in self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return any(line.product_id == product_id for line in self._lines)
