"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from phytoshop.application.dto import CartDTO, to_cart_dto
from phytoshop.application.session import ShopSession


class ShowCartHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        return to_cart_dto(self._session.cart)
