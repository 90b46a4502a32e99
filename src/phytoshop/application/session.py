"""The shopping session: sole owner of the customer's cart.

One ShopSession is created when the app starts and handed by reference
to every use case that reads or changes the cart. The cart lives exactly
as long as the session; closing the session empties it for good.
"""

from __future__ import annotations

from types import TracebackType

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.cart import Cart
from phytoshop.log import get_logger

logger = get_logger(__name__)


class ShopSession:

    def __init__(self) -> None:
        self._cart = Cart()
        self._closed = False
        logger.info("Shopping session opened")

    @property
    def cart(self) -> Cart:
        if self._closed:
            raise ValidationError("Shopping session is closed")
        return self._cart

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the session and discard the cart. Safe to call twice."""
        if self._closed:
            return
        self._cart.clear()
        self._closed = True
        logger.info("Shopping session closed")

    def __enter__(self) -> ShopSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
