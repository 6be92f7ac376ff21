"""
Domain models for the checkout page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List

from utils import format_money

from .constants import BASE_DISCOUNT_RATE, BASE_PACKAGE_PREFIX


@dataclass
class SelectableItem:
    """One package checkbox on the order form."""

    item_id: str
    label: str
    cost: Decimal = Decimal("0")
    rate_text: str = ""
    group_prefix: str = ""
    selected: bool = False
    locked: bool = False  # mandatory base package, always selected

    @property
    def is_base_package(self) -> bool:
        return self.group_prefix == BASE_PACKAGE_PREFIX

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.item_id,
            "label": self.label,
            "cost": f"{self.cost:.2f}",
            "rate": self.rate_text,
            "group": self.group_prefix,
            "selected": self.selected,
            "locked": self.locked,
        }


@dataclass(frozen=True)
class ReceiptLine:
    description: str
    price_text: str
    cost: Decimal


@dataclass(frozen=True)
class PromoResult:
    """Outcome of evaluating one promo code input."""

    code: str
    rate: Decimal
    status: str  # "applied", "invalid" or "empty"
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status == "applied"


@dataclass(frozen=True)
class Receipt:
    """Derived receipt. Amounts are unrounded; use display() for text."""

    lines: List[ReceiptLine] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    base_discount: Decimal = Decimal("0")
    promo_rate: Decimal = Decimal("0")
    promo_discount: Decimal = Decimal("0")
    final_cost: Decimal = Decimal("0")

    @property
    def discounted_after_base(self) -> Decimal:
        return self.subtotal - self.base_discount

    @property
    def show_promo_line(self) -> bool:
        return self.promo_discount > 0

    @property
    def base_label(self) -> str:
        return f"Discount: -{BASE_DISCOUNT_RATE * 100:.0f}%"

    @property
    def promo_label(self) -> str:
        return f"Promo Discount: -{self.promo_rate * 100:.0f}%"

    def display(self) -> Dict[str, str]:
        """Return the 2-decimal strings shown on the page and sent to the server."""
        values = {
            "subtotal": format_money(self.subtotal),
            "base_discount": format_money(self.base_discount),
            "discounted_after_base": format_money(self.discounted_after_base),
            "final_cost": format_money(self.final_cost),
        }
        if self.show_promo_line:
            values["promo_discount"] = format_money(self.promo_discount)
        return values
