"""Load selectable packages from the order-form page or a JSON catalog.

Group membership is resolved here, once, so pricing never has to look at
page layout.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, List

from bs4 import BeautifulSoup

from ..constants import BASE_PACKAGE_PREFIX
from ..models import SelectableItem
from ..pricing.engine import parse_cost
from .validator import validate_catalog_payload

LOGGER = logging.getLogger(__name__)

CHECKBOX_SELECTOR = "input.package-checkbox"
GROUP_HEADER_CLASS = "group-header"
BASE_PACKAGE_SELECTOR = "td.us-package"


def _first_cell_text(row) -> str:
    cell = row.find("td")
    return cell.get_text(strip=True) if cell else ""


def _own(row, selector):
    """Matches inside ``row`` that are not part of a table nested in it."""
    return [el for el in row.select(selector) if el.find_parent("tr") is row]


def load_items_from_html(markup: str) -> List[SelectableItem]:
    """Build items from the order-form table rows.

    Rows are walked top to bottom; a ``group-header`` row names the group for
    the rows after it until the next header or the end of its table section.
    """
    soup = BeautifulSoup(markup, "html.parser")
    items: List[SelectableItem] = []
    # Current group per table section; nested tables keep their own
    groups: Dict[int, str] = {}
    for row in soup.find_all("tr"):
        section = id(row.parent)
        if GROUP_HEADER_CLASS in (row.get("class") or []):
            groups[section] = _first_cell_text(row)
            continue
        is_base = bool(_own(row, BASE_PACKAGE_SELECTOR))
        for checkbox in _own(row, CHECKBOX_SELECTOR):
            prefix = BASE_PACKAGE_PREFIX if is_base else groups.get(section, "")
            locked = checkbox.has_attr("disabled")
            item_id = checkbox.get("id") or checkbox.get("value") or f"item-{len(items) + 1}"
            items.append(
                SelectableItem(
                    item_id=str(item_id),
                    label=_first_cell_text(row),
                    cost=parse_cost(checkbox.get("data-cost")),
                    rate_text=(checkbox.get("data-rate") or "").strip(),
                    group_prefix=prefix,
                    selected=locked or checkbox.has_attr("checked"),
                    locked=locked,
                )
            )
    LOGGER.info(f"Loaded {len(items)} packages from order form")
    return items


def load_catalog_json(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"catalog json not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return data


def items_from_payload(data: Dict[str, Any]) -> List[SelectableItem]:
    items = []
    for entry in validate_catalog_payload(data):
        items.append(
            SelectableItem(
                item_id=entry["id"],
                label=entry["label"],
                cost=entry["cost"],
                rate_text=entry["rate"],
                group_prefix=BASE_PACKAGE_PREFIX if entry["base"] else entry["group"],
                selected=entry["selected"],
                locked=entry["locked"],
            )
        )
    return items


def load_items_from_json(path: str | Path) -> List[SelectableItem]:
    items = items_from_payload(load_catalog_json(path))
    LOGGER.info(f"Loaded {len(items)} packages from {path}")
    return items


def load_items(path: str | Path) -> List[SelectableItem]:
    """Load items from ``.json`` catalogs or saved order-form ``.html`` pages."""
    p = Path(path)
    if p.suffix.lower() in (".html", ".htm"):
        return load_items_from_html(p.read_text(encoding="utf-8"))
    return load_items_from_json(p)


__all__ = [
    "items_from_payload",
    "load_catalog_json",
    "load_items",
    "load_items_from_html",
    "load_items_from_json",
]
