"""Shared helper for reading catalog exports from disk."""

from __future__ import annotations

import json
from pathlib import Path

from phytoshop.domain.exceptions import ValidationError
from phytoshop.log import get_logger

logger = get_logger(__name__)


def load_records(file_path: Path) -> list[dict]:
    """Return the list of records in ``file_path``.

    A missing file is an empty catalog. Anything other than a JSON list
    of objects raises ValidationError.
    """
    if not file_path.exists():
        logger.warning("Catalog file %s not found, treating as empty", file_path)
        return []

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Catalog file {file_path} is not valid JSON") from exc

    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        raise ValidationError(f"Catalog file {file_path} must contain a list of records")

    logger.debug("Loaded %d records from %s", len(raw), file_path)
    return raw
