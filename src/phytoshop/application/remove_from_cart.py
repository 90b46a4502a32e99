"""Application service: Remove From Cart use case."""

from __future__ import annotations

from phytoshop.application.dto import CartDTO, to_cart_dto
from phytoshop.application.session import ShopSession


class RemoveFromCartHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, product_id: str) -> CartDTO:
        """Remove a product's line; a product not in the cart is ignored."""
        cart = self._session.cart
        cart.remove(product_id)
        return to_cart_dto(cart)
