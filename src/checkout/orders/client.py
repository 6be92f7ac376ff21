"""
Order submission client.

Serializes the receipt, posts it to the order endpoint and, on success,
stores the issued order id for the next step of the flow.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from utils import format_money

from ..config import CheckoutConfig
from ..constants import SUBMIT_FAILED_MESSAGE, SUBMIT_RETRY_MESSAGE
from ..models import Receipt
from ..receipt.render import render_invoice_html
from .state import OrderStateStore

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"
SUCCEEDED = "succeeded"
FAILED = "failed"


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    order_id: Optional[str] = None
    redirect_to: Optional[str] = None
    message: str = ""


def build_order_payload(receipt: Receipt, email_address: Optional[str] = None) -> Dict[str, Any]:
    """Request body for POST /submit-order. Amounts are 2-decimal strings."""
    payload = {
        "invoice": render_invoice_html(receipt),
        "subtotal": format_money(receipt.subtotal),
        "discount": format_money(receipt.base_discount),
        "finalCost": format_money(receipt.final_cost),
    }
    if email_address:
        payload["emailAddress"] = email_address
    return payload


def _log_alert(message: str) -> None:
    logger.error(message)


class OrderClient:
    """One outstanding submission at a time; extra clicks are ignored."""

    def __init__(
        self,
        config: Optional[CheckoutConfig] = None,
        session: Optional[requests.Session] = None,
        state: Optional[OrderStateStore] = None,
        alert: Callable[[str], None] = _log_alert,
    ):
        self.config = config or CheckoutConfig()
        self.session = session or requests.Session()
        self.state = state or OrderStateStore(self.config.state_path)
        self.alert = alert
        self.status = IDLE
        self._lock = threading.Lock()

    @property
    def in_flight(self) -> bool:
        return self.status == SUBMITTING

    def submit(self, receipt: Receipt, email_address: Optional[str] = None) -> Optional[SubmitResult]:
        """Post the order. Returns None when a submission is already running."""
        if not self._lock.acquire(blocking=False):
            logger.warning("Order submission already in progress; ignoring click")
            return None
        try:
            self.status = SUBMITTING
            result = self._submit(build_order_payload(receipt, email_address), email_address)
            self.status = SUCCEEDED if result.ok else FAILED
            if not result.ok:
                self.alert(result.message)
            return result
        except Exception:
            self.status = FAILED
            raise
        finally:
            self._lock.release()

    def _submit(self, payload: Dict[str, Any], email_address: Optional[str]) -> SubmitResult:
        url = self.config.submit_url
        try:
            resp = self.session.post(url, json=payload, timeout=self.config.timeout)
            logger.info(f"Posted order to {url}, status {resp.status_code}")
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error submitting order: {e}")
            return SubmitResult(ok=False, message=SUBMIT_RETRY_MESSAGE)

        order_id = body.get("orderId") if isinstance(body, dict) else None
        if not (isinstance(body, dict) and body.get("success") is True and order_id):
            logger.warning(f"Order endpoint rejected submission: {body!r}")
            return SubmitResult(ok=False, message=SUBMIT_FAILED_MESSAGE)

        values = {"orderId": str(order_id)}
        if email_address:
            values["emailAddress"] = email_address
        self.state.set(**values)
        logger.info(f"Order {order_id} submitted")
        return SubmitResult(ok=True, order_id=str(order_id), redirect_to=self.config.redirect_path)
