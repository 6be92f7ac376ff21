"""Validation for the packages catalog JSON payload."""

from __future__ import annotations
from typing import List, Dict, Any

from utils import clean_amount


class CatalogValidationError(Exception):
    pass


def validate_catalog_payload(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    if not isinstance(data, dict):
        raise CatalogValidationError("Root must be an object")
    if data.get("version") != 1:
        raise CatalogValidationError("Unsupported or missing version (expected 1)")
    packages = data.get("packages")
    if not isinstance(packages, list) or not packages:
        raise CatalogValidationError("'packages' must be a non-empty list")
    seen = set()
    normed: List[Dict[str, Any]] = []
    for idx, entry in enumerate(packages):
        if not isinstance(entry, dict):
            raise CatalogValidationError(f"Package at index {idx} is not an object")
        label = str(entry.get("label", "")).strip()
        if not label:
            raise CatalogValidationError(f"Package at index {idx} missing label")
        item_id = str(entry.get("id") or f"item-{idx + 1}").strip()
        if item_id in seen:
            raise CatalogValidationError(f"Duplicate package id: {item_id}")
        cost = clean_amount(entry.get("cost"))
        if cost is None or not cost.is_finite() or cost < 0:
            raise CatalogValidationError(f"Package '{label}' has invalid cost: {entry.get('cost')!r}")
        locked = bool(entry.get("locked", False))
        normed.append(
            {
                "id": item_id,
                "label": label,
                "cost": cost,
                "rate": str(entry.get("rate") or "").strip(),
                "group": str(entry.get("group") or "").strip(),
                "base": bool(entry.get("base", False)),
                "selected": locked or bool(entry.get("selected", False)),
                "locked": locked,
            }
        )
        seen.add(item_id)
    return normed
