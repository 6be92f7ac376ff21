"""Package catalog loading & validation."""

from .loader import (  # noqa: F401
    items_from_payload,
    load_catalog_json,
    load_items,
    load_items_from_html,
    load_items_from_json,
)
from .validator import CatalogValidationError, validate_catalog_payload  # noqa: F401

__all__ = [
    "items_from_payload",
    "load_catalog_json",
    "load_items",
    "load_items_from_html",
    "load_items_from_json",
    "CatalogValidationError",
    "validate_catalog_payload",
]
