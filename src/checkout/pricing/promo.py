"""Promo code evaluation."""

from __future__ import annotations

import logging
from decimal import Decimal

from ..constants import PROMO_APPLIED_MESSAGE, PROMO_CODES, PROMO_INVALID_MESSAGE
from ..models import PromoResult

LOGGER = logging.getLogger(__name__)

NO_PROMO = PromoResult(code="", rate=Decimal("0"), status="empty")


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def evaluate_promo(code: str | None) -> PromoResult:
    """Evaluate a promo code input from scratch.

    The rate always starts at zero, so an empty or unknown code clears any
    previously applied promo.
    """
    normalized = normalize_code(code)
    if not normalized:
        return NO_PROMO

    rate = PROMO_CODES.get(normalized)
    if rate is None:
        LOGGER.info(f"Rejected promo code: {normalized!r}")
        return PromoResult(
            code=normalized,
            rate=Decimal("0"),
            status="invalid",
            message=PROMO_INVALID_MESSAGE,
        )

    message = PROMO_APPLIED_MESSAGE.format(code=normalized, percent=f"{rate * 100:.0f}")
    return PromoResult(code=normalized, rate=rate, status="applied", message=message)


__all__ = ["NO_PROMO", "evaluate_promo", "normalize_code"]
