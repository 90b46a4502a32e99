"""Application service: Add To Cart use case.

Looks the product up in the catalog, takes a snapshot of it and hands it
to the Cart aggregate. The cart itself never talks to the catalog.
"""

from __future__ import annotations

from phytoshop.application.dto import CartDTO, to_cart_dto
from phytoshop.application.session import ShopSession
from phytoshop.domain.exceptions import EntityNotFoundError, ValidationError
from phytoshop.domain.repository.product_repository import ProductRepository
from phytoshop.log import get_logger

logger = get_logger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository, session: ShopSession) -> None:
        self._product_repo = product_repo
        self._session = session

    def handle(self, product_id: str, quantity: int = 1) -> CartDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.in_stock:
            raise ValidationError(f"{product.name} is out of stock")

        cart = self._session.cart
        cart.add(product, quantity)
        logger.info("Added %s x%s to cart", product.name, quantity)
        return to_cart_dto(cart)
