"""Receipt rendering."""

from .render import render_invoice_html, render_receipt_text  # noqa: F401

__all__ = ["render_invoice_html", "render_receipt_text"]
