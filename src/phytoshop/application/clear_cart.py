"""Application service: Clear Cart use case."""

from __future__ import annotations

from phytoshop.application.dto import CartDTO, to_cart_dto
from phytoshop.application.session import ShopSession


class ClearCartHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        cart = self._session.cart
        cart.clear()
        return to_cart_dto(cart)
