"""Order submission."""

from .client import OrderClient, SubmitResult, build_order_payload  # noqa: F401
from .state import OrderStateStore  # noqa: F401

__all__ = ["OrderClient", "OrderStateStore", "SubmitResult", "build_order_payload"]
