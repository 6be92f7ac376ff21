"""
Checkout page state: current selection, promo input and the live receipt.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

from .models import PromoResult, Receipt, SelectableItem
from .pricing.engine import recompute_receipt
from .pricing.promo import NO_PROMO, evaluate_promo

logger = logging.getLogger(__name__)

ReceiptListener = Callable[[Receipt], None]


class CheckoutSession:
    """Event-driven checkout state.

    Each event (toggle, promo apply) recomputes the receipt in full and
    notifies listeners with it. The promo rate is held here and passed to the
    engine explicitly.
    """

    def __init__(self, items: Iterable[SelectableItem]):
        self.items: List[SelectableItem] = list(items)
        self._by_id: Dict[str, SelectableItem] = {item.item_id: item for item in self.items}
        for item in self.items:
            if item.locked:
                item.selected = True
        self.promo: PromoResult = NO_PROMO
        self._listeners: List[ReceiptListener] = []
        self.receipt: Receipt = recompute_receipt(self.items, self.promo_rate)

    @property
    def promo_rate(self) -> Decimal:
        return self.promo.rate

    @property
    def promo_message(self) -> str:
        return self.promo.message

    def on_change(self, listener: ReceiptListener) -> None:
        self._listeners.append(listener)

    def refresh(self) -> Receipt:
        self.receipt = recompute_receipt(self.items, self.promo_rate)
        for listener in self._listeners:
            listener(self.receipt)
        return self.receipt

    def item(self, item_id: str) -> SelectableItem:
        return self._by_id[item_id]

    def set_selected(self, item_id: str, selected: bool) -> bool:
        item = self.item(item_id)
        if item.locked:
            logger.warning(f"Package {item_id} is mandatory and cannot be changed")
            return False
        item.selected = bool(selected)
        self.refresh()
        return True

    def toggle(self, item_id: str) -> bool:
        return self.set_selected(item_id, not self.item(item_id).selected)

    def apply_promo(self, code: Optional[str]) -> PromoResult:
        self.promo = evaluate_promo(code)
        self.refresh()
        return self.promo

    def selected_items(self) -> List[SelectableItem]:
        return [item for item in self.items if item.selected]
