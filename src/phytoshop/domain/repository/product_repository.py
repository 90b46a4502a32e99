"""Abstract repositories for the read-only catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog itself belongs to the remote backend;
concrete implementations only read it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from phytoshop.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by name."""


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category, ordered by name."""
