"""
Shared constants for pricing, promo codes and receipt rendering.
"""

from decimal import Decimal

# Applied to every order regardless of promo code
BASE_DISCOUNT_RATE = Decimal("0.10")

PROMO_CODES: dict[str, Decimal] = {
    "WELCOME10": Decimal("0.10"),
    "RETURN15": Decimal("0.15"),
}

PROMO_APPLIED_MESSAGE = "{code} applied: -{percent}% discount!"
PROMO_INVALID_MESSAGE = "Invalid promo code."

BASE_PACKAGE_PREFIX = "Base Package"

CURRENCY_SYMBOL = "$"

SUBMIT_FAILED_MESSAGE = "Order submission failed."
SUBMIT_RETRY_MESSAGE = "Order submission failed. Please try again."
