"""Catalog entities: Product and Category.

The catalog is owned by the remote backend; locally these are read-only
snapshots. A Product placed in a cart is kept exactly as it was at the
moment it was added.
"""

from __future__ import annotations

from dataclasses import dataclass

from phytoshop.domain.model.value_objects import Money

DEFAULT_CATEGORY = "Autre"


@dataclass(frozen=True)
class Product:
    """A phytotherapy product as sold in the shop.

    Frozen so that a snapshot held by a cart line can never drift from
    what the customer saw when adding it.
    """

    id: str
    name: str
    price: Money
    description: str = ""
    category: str = DEFAULT_CATEGORY
    image: str = ""
    usage: str = ""
    contraindications: tuple[str, ...] = ()
    in_stock: bool = True
    rating: float = 0.0
    reviews: int = 0
    category_id: str | None = None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = query.strip().lower()
        if not needle:
            return True
        return needle in self.name.lower() or needle in self.description.lower()


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str = ""
