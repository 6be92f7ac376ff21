"""
Receipt rendering: invoice HTML fragment and plain text.
"""

import html

from utils import format_money

from ..constants import CURRENCY_SYMBOL


def _money(value, negative=False):
    sign = "-" if negative else ""
    return f"{sign}{CURRENCY_SYMBOL}{format_money(value)}"


def render_receipt_line(description, price, style=""):
    style_attr = f' style="{style}"' if style else ""
    return (
        f'<div class="receipt-line"{style_attr}>'
        f'<span class="receipt-desc">{html.escape(description)}</span>'
        f'<span class="receipt-price">{html.escape(price)}</span>'
        "</div>"
    )


def render_selected_items(receipt):
    return "\n".join(
        render_receipt_line(line.description, line.price_text) for line in receipt.lines
    )


def render_invoice_html(receipt):
    """Render the receipt as the HTML fragment submitted with the order."""
    parts = [
        "<div>",
        "<h3>Selected Packages:</h3>",
        f'<div id="selected-items">{render_selected_items(receipt)}</div>',
        "<hr>",
        render_receipt_line("Subtotal:", _money(receipt.subtotal)),
        render_receipt_line(f"{receipt.base_label}:", _money(receipt.base_discount, negative=True)),
    ]
    # Promo line only when it actually takes something off
    if receipt.show_promo_line:
        parts.append(
            render_receipt_line(
                f"{receipt.promo_label}:", _money(receipt.promo_discount, negative=True)
            )
        )
    parts += [
        "<hr>",
        render_receipt_line("Final Cost:", _money(receipt.final_cost), style="font-weight:bold;"),
        "</div>",
    ]
    return "\n".join(parts)


def render_receipt_text(receipt, width=48):
    rows = [(line.description, line.price_text) for line in receipt.lines]
    if not rows:
        rows.append(("(no packages selected)", ""))
    rows.append(None)
    rows.append(("Subtotal", _money(receipt.subtotal)))
    rows.append((receipt.base_label, _money(receipt.base_discount, negative=True)))
    if receipt.show_promo_line:
        rows.append((receipt.promo_label, _money(receipt.promo_discount, negative=True)))
    rows.append(None)
    rows.append(("Final Cost", _money(receipt.final_cost)))

    out = []
    for row in rows:
        if row is None:
            out.append("-" * width)
            continue
        desc, price = row
        pad = max(1, width - len(desc) - len(price))
        out.append(f"{desc}{' ' * pad}{price}")
    return "\n".join(out)
