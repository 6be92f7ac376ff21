"""Discount math and promo codes."""

from .engine import compute_receipt, parse_cost, recompute_receipt  # noqa: F401
from .promo import evaluate_promo  # noqa: F401

__all__ = ["compute_receipt", "evaluate_promo", "parse_cost", "recompute_receipt"]
