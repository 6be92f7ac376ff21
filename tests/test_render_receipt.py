import os
import sys
import unittest
from decimal import Decimal
from html import unescape

# Ensure src/ is on sys.path for imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from checkout.models import SelectableItem  # noqa: E402
from checkout.pricing import compute_receipt  # noqa: E402
from checkout.receipt import render_invoice_html, render_receipt_text  # noqa: E402


def sample_items():
    return [
        SelectableItem(
            item_id="base",
            label="US Recruiters",
            cost=Decimal("100"),
            rate_text="per month",
            group_prefix="Base Package",
            selected=True,
            locked=True,
        ),
        SelectableItem(
            item_id="resume",
            label="Resume & Cover Letter",
            cost=Decimal("30"),
            rate_text="per session",
            group_prefix="For English Speakers",
            selected=True,
        ),
        SelectableItem(item_id="misc", label="Extras", cost=Decimal("5"), selected=True),
        SelectableItem(item_id="off", label="Not Chosen", cost=Decimal("999"), selected=False),
    ]


class TestRenderReceipt(unittest.TestCase):
    def test_line_descriptions_and_prices(self):
        receipt, _ = compute_receipt(sample_items())
        lines = [(line.description, line.price_text) for line in receipt.lines]
        self.assertEqual(
            lines,
            [
                ("[Base Package] US Recruiters", "$100.00 per month"),
                ("[For English Speakers] Resume & Cover Letter", "$30.00 per session"),
                ("Extras", "$5.00"),
            ],
        )

    def test_invoice_without_promo(self):
        receipt, _ = compute_receipt(sample_items(), "")
        html = render_invoice_html(receipt)
        self.assertIn("Resume &amp; Cover Letter", html)
        text = unescape(html)
        self.assertIn("Selected Packages:", text)
        self.assertIn("$135.00", text)
        self.assertIn("Discount: -10%:", text)
        self.assertIn("-$13.50", text)
        self.assertIn("$121.50", text)
        self.assertNotIn("Promo Discount", text)
        self.assertNotIn("Not Chosen", text)

    def test_invoice_with_promo(self):
        receipt, _ = compute_receipt(sample_items(), "welcome10")
        text = unescape(render_invoice_html(receipt))
        self.assertIn("Promo Discount: -10%:", text)
        self.assertIn("-$12.15", text)
        self.assertIn("$109.35", text)
        self.assertIn('style="font-weight:bold;"', text)

    def test_text_receipt(self):
        receipt, _ = compute_receipt(sample_items(), "RETURN15")
        text = render_receipt_text(receipt)
        self.assertIn("[Base Package] US Recruiters", text)
        self.assertIn("Promo Discount: -15%", text)
        self.assertTrue(text.splitlines()[-1].startswith("Final Cost"))
        self.assertTrue(text.splitlines()[-1].endswith("$103.28"))

    def test_text_receipt_empty_selection(self):
        receipt, _ = compute_receipt([])
        text = render_receipt_text(receipt)
        self.assertIn("(no packages selected)", text)
        self.assertTrue(text.endswith("$0.00"))


if __name__ == "__main__":
    unittest.main()
