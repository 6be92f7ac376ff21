"""Package checkout: pricing, receipts, order submission."""

from .models import PromoResult, Receipt, ReceiptLine, SelectableItem  # noqa: F401

__all__ = ["PromoResult", "Receipt", "ReceiptLine", "SelectableItem"]
