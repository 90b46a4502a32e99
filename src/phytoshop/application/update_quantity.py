"""Application service: Update Quantity use case.

Sets a line's quantity outright. Zero or below removes the line.
"""

from __future__ import annotations

from phytoshop.application.dto import CartDTO, to_cart_dto
from phytoshop.application.session import ShopSession


class UpdateQuantityHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, product_id: str, quantity: int) -> CartDTO:
        cart = self._session.cart
        cart.update_quantity(product_id, quantity)
        return to_cart_dto(cart)
