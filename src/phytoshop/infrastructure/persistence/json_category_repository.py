"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.product import Category
from phytoshop.domain.repository.product_repository import CategoryRepository
from phytoshop.infrastructure.persistence.catalog_mapper import category_from_record
from phytoshop.infrastructure.persistence.json_file import load_records
from phytoshop.log import get_logger

logger = get_logger(__name__)


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: str) -> Category | None:
        return self._load().get(category_id)

    def list_all(self) -> list[Category]:
        return sorted(self._load().values(), key=lambda c: c.name.lower())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for index, raw in enumerate(load_records(self._file_path)):
            try:
                category = category_from_record(raw)
            except ValidationError as exc:
                logger.warning(
                    "Skipping category record #%d in %s: %s", index, self._file_path, exc
                )
                continue
            categories[category.id] = category
        return categories
