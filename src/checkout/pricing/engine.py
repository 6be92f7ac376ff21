"""
Pricing engine: subtotal, stacked discounts and receipt lines.

Every call recomputes the receipt from the item list; nothing is patched
incrementally. Amounts stay unrounded here and are rounded to cents only when
rendered.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Tuple

from utils import clean_amount, format_money

from ..constants import BASE_DISCOUNT_RATE, CURRENCY_SYMBOL
from ..models import PromoResult, Receipt, ReceiptLine, SelectableItem
from .promo import evaluate_promo

LOGGER = logging.getLogger(__name__)

ZERO = Decimal("0")


def parse_cost(raw) -> Decimal:
    """Parse an item cost; anything unusable counts as zero."""
    amount = clean_amount(raw)
    if amount is None or not amount.is_finite() or amount < 0:
        LOGGER.debug(f"Unusable cost {raw!r}, treating as 0")
        return ZERO
    return amount


def describe_item(item: SelectableItem) -> str:
    if item.group_prefix:
        return f"[{item.group_prefix}] {item.label}"
    return item.label


def price_text(item: SelectableItem) -> str:
    text = f"{CURRENCY_SYMBOL}{format_money(parse_cost(item.cost))}"
    if item.rate_text:
        text = f"{text} {item.rate_text}"
    return text


def build_lines(items: Iterable[SelectableItem]) -> List[ReceiptLine]:
    return [
        ReceiptLine(
            description=describe_item(item),
            price_text=price_text(item),
            cost=parse_cost(item.cost),
        )
        for item in items
        if item.selected
    ]


def recompute_receipt(items: Iterable[SelectableItem], promo_rate=ZERO) -> Receipt:
    """Compute the full receipt for the current selection.

    The promo discount is taken from the amount left after the base discount,
    so the two rates stack multiplicatively.
    """
    lines = build_lines(items)
    rate = parse_cost(promo_rate)

    subtotal = sum((line.cost for line in lines), ZERO)
    base_discount = subtotal * BASE_DISCOUNT_RATE
    discounted_after_base = subtotal - base_discount
    promo_discount = discounted_after_base * rate
    final_cost = max(ZERO, discounted_after_base - promo_discount)

    return Receipt(
        lines=lines,
        subtotal=subtotal,
        base_discount=base_discount,
        promo_rate=rate,
        promo_discount=promo_discount,
        final_cost=final_cost,
    )


def compute_receipt(
    items: Iterable[SelectableItem], promo_code: str | None = None
) -> Tuple[Receipt, PromoResult]:
    """Evaluate ``promo_code`` and price the selection in one pure call."""
    promo = evaluate_promo(promo_code)
    return recompute_receipt(items, promo.rate), promo


__all__ = [
    "build_lines",
    "compute_receipt",
    "describe_item",
    "parse_cost",
    "price_text",
    "recompute_receipt",
]
