"""Adapts raw catalog records into the canonical Product and Category.

Product rows reach us in several shapes: snake_case rows straight from
the ``products`` table, rows joined with their category
(``"categories": {"name": ...}``), and camelCase objects already shaped
for display. Everything is normalised here, at the boundary, so nothing
past this module sees the remote schema.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from phytoshop.domain.exceptions import ValidationError
from phytoshop.domain.model.product import DEFAULT_CATEGORY, Category, Product
from phytoshop.domain.model.value_objects import Money


def product_from_record(
    raw: Mapping[str, Any],
    categories: Mapping[str, str] | None = None,
) -> Product:
    """Build a Product from one raw record.

    Args:
        raw: The record as returned by the catalog source.
        categories: Optional ``{category_id: name}`` used when the record
            only carries a category id.
    """
    product_id = _required(raw, "id")
    name = _required(raw, "name")
    if raw.get("price") is None:
        raise ValidationError(f"Product record '{product_id}' is missing 'price'")

    category_id = _first(raw, "category_id", "categoryId")
    if category_id is not None:
        category_id = str(category_id)

    try:
        rating = float(raw.get("rating") or 0)
        reviews = int(raw.get("reviews") or 0)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Product record '{product_id}' has an invalid rating or review count"
        ) from exc

    return Product(
        id=product_id,
        name=name,
        price=Money.of(raw["price"]),
        description=_text(raw.get("description")),
        category=_category_name(raw, category_id, categories or {}),
        image=_text(_first(raw, "image", "image_url", "imageUrl")),
        usage=_text(raw.get("usage")),
        contraindications=_string_tuple(raw.get("contraindications")),
        in_stock=_flag(_first(raw, "in_stock", "inStock", default=True), product_id),
        rating=rating,
        reviews=reviews,
        category_id=category_id,
    )


def category_from_record(raw: Mapping[str, Any]) -> Category:
    return Category(
        id=_required(raw, "id"),
        name=_required(raw, "name"),
        icon=_text(raw.get("icon")),
    )


# --- Helpers ------------------------------------------------------------------


def _required(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise ValidationError(f"Catalog record is missing '{key}'")
    return str(value).strip()


def _first(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return default


_TRUE_STRINGS = frozenset({"true", "t", "yes", "y", "1"})
_FALSE_STRINGS = frozenset({"false", "f", "no", "n", "0"})


def _flag(value: Any, product_id: str) -> bool:
    """Read a boolean column that may arrive as a bool, 0/1 or text."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValidationError(
        f"Product record '{product_id}' has an invalid stock flag: {value!r}"
    )


def _text(value: Any) -> str:
    return str(value) if value is not None else ""


def _string_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    return tuple(str(item).strip() for item in value if item and str(item).strip())


def _category_name(
    raw: Mapping[str, Any],
    category_id: str | None,
    categories: Mapping[str, str],
) -> str:
    """Resolve the display name, most specific source first."""
    for key in ("category", "categories"):
        value = raw.get(key)
        if isinstance(value, Mapping):
            value = value.get("name")
        if isinstance(value, str) and value.strip():
            return value.strip()

    if category_id is not None and category_id in categories:
        return categories[category_id]
    return DEFAULT_CATEGORY
