"""Application service: Browse Catalog use cases (queries).

The storefront only lists products that can be bought right now, so
out-of-stock products never appear in browse results.
"""

from __future__ import annotations

from phytoshop.application.dto import ProductDTO, to_product_dto
from phytoshop.domain.exceptions import EntityNotFoundError
from phytoshop.domain.model.product import Category
from phytoshop.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        query: str | None = None,
        category_id: str | None = None,
    ) -> list[ProductDTO]:
        """List in-stock products, optionally filtered.

        Args:
            query: Case-insensitive text matched against name and
                description. Blank means no text filter.
            category_id: Exact category ID to keep.
        """
        products = [p for p in self._product_repo.list_all() if p.in_stock]

        if query:
            products = [p for p in products if p.matches(query)]
        if category_id:
            products = [p for p in products if p.category_id == category_id]

        products.sort(key=lambda p: p.name.lower())
        return [to_product_dto(p) for p in products]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return to_product_dto(product)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[Category]:
        return self._category_repo.list_all()
