"""JSON-file-backed implementation of ProductRepository.

The file holds product rows exactly as exported from the remote catalog;
each row goes through the catalog mapper on the way in. A row the mapper
rejects is logged and left out, the rest of the catalog stays usable.
"""

from __future__ import annotations

from pathlib import Path

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.product import Product
from phytoshop.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)
from phytoshop.infrastructure.persistence.catalog_mapper import product_from_record
from phytoshop.infrastructure.persistence.json_file import load_records
from phytoshop.log import get_logger

logger = get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        file_path: Path,
        category_repo: CategoryRepository | None = None,
    ) -> None:
        self._file_path = file_path
        self._category_repo = category_repo

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.name.lower())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        category_names = self._category_names()
        products: dict[str, Product] = {}
        for index, raw in enumerate(load_records(self._file_path)):
            try:
                product = product_from_record(raw, category_names)
            except ValidationError as exc:
                logger.warning(
                    "Skipping product record #%d (id=%r) in %s: %s",
                    index, raw.get("id"), self._file_path, exc,
                )
                continue
            products[product.id] = product
        return products

    def _category_names(self) -> dict[str, str]:
        if self._category_repo is None:
            return {}
        return {c.id: c.name for c in self._category_repo.list_all()}
