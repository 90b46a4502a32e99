"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted
for display ("12,500 FC").
"""

from __future__ import annotations

from dataclasses import dataclass

from phytoshop.domain.model.cart import Cart
from phytoshop.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    category: str
    price: str
    usage: str
    contraindications: list[str]
    in_stock: bool
    rating: float
    reviews: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    category: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total_items: int
    total_price: str


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        category=product.category,
        price=str(product.price),
        usage=product.usage,
        contraindications=list(product.contraindications),
        in_stock=product.in_stock,
        rating=product.rating,
        reviews=product.reviews,
    )


def to_cart_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product.name,
                category=line.product.category,
                quantity=line.quantity.value,
                unit_price=str(line.product.price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        total_items=cart.total_items,
        total_price=str(cart.total_price),
    )
