"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from phytoshop.application.session import ShopSession
from phytoshop.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from phytoshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "PHYTOSHOP_DATA_DIR"

# Default catalog export lives in <repo>/data when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(data_dir() / "categories.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(
        data_dir() / "products.json",
        category_repo=category_repository(),
    )


def shop_session() -> ShopSession:
    return ShopSession()
