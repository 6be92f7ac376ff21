import sys
import json
import logging
import argparse
from pathlib import Path
from utils import setup_logging  # From utils package
from checkout.catalog import load_items, CatalogValidationError
from checkout.config import CheckoutConfig
from checkout.orders import OrderClient
from checkout.receipt import render_invoice_html, render_receipt_text
from checkout.session import CheckoutSession
from recipients import RecipientStore, StoreConfig, ingest

LOG_FILE = "checkout.log"


def load_checkout_config(args):
    """Config file wins when present, otherwise environment variables."""
    if Path(args.config).exists():
        config = CheckoutConfig.from_config_file(args.config)
    else:
        config = CheckoutConfig.from_env()
    if args.base_url:
        config.base_url = args.base_url.rstrip("/")
    return config


def load_store_config(args):
    if Path(args.store_config).exists():
        return StoreConfig.from_config_file(args.store_config)
    return StoreConfig.from_env()


def build_session(args):
    """Load the catalog and replay the user's selections and promo code."""
    session = CheckoutSession(load_items(args.catalog))
    for item_id in args.select or []:
        session.set_selected(item_id, True)
    for item_id in args.deselect or []:
        session.set_selected(item_id, False)
    if args.promo is not None:
        promo = session.apply_promo(args.promo)
        if promo.message:
            logging.info(f"[PROMO] {promo.message}")
    return session


def quote_payload(session):
    return {
        "packages": [item.to_dict() for item in session.selected_items()],
        "totals": session.receipt.display(),
        "promo": session.promo_message,
    }


def cmd_quote(args):
    session = build_session(args)
    if args.json:
        print(json.dumps(quote_payload(session), indent=2))
        return 0
    if args.html:
        print(render_invoice_html(session.receipt))
    else:
        print(render_receipt_text(session.receipt))
    if session.promo_message:
        print(session.promo_message)
    return 0


def cmd_submit(args):
    session = build_session(args)
    client = OrderClient(load_checkout_config(args), alert=lambda msg: print(msg, file=sys.stderr))
    result = client.submit(session.receipt, email_address=args.email)
    if result is None or not result.ok:
        return 1
    print(f"Order {result.order_id} submitted; continue at {result.redirect_to}")
    return 0


def cmd_ingest(args):
    store = RecipientStore(load_store_config(args))
    report = ingest(args.directory, store, max_workers=args.workers)
    print(
        f"{report.files} files, {report.rows} rows, "
        f"{report.upserted} new recipients, {report.failed} failed"
    )
    return 0


def add_selection_args(parser):
    parser.add_argument("catalog", help="Packages catalog (.json) or saved order form (.html)")
    parser.add_argument("--select", nargs="*", help="Package ids to tick")
    parser.add_argument("--deselect", nargs="*", help="Package ids to untick")
    parser.add_argument("--promo", type=str, default=None, help="Promo code to apply")


def build_parser():
    parser = argparse.ArgumentParser(description="Package checkout pricing and recipient tools")
    parser.add_argument("--log-file", type=str, default=LOG_FILE, help="Log file path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="Print the receipt for a selection")
    add_selection_args(quote)
    quote.add_argument("--html", action="store_true", help="Print the invoice HTML fragment")
    quote.add_argument("--json", action="store_true", help="Print selection and totals as JSON")
    quote.set_defaults(func=cmd_quote)

    submit = sub.add_parser("submit", help="Submit the order to the order endpoint")
    add_selection_args(submit)
    submit.add_argument("--email", type=str, default=None, help="Customer email address")
    submit.add_argument("--base-url", type=str, default=None, help="Order endpoint base URL")
    submit.add_argument(
        "--config",
        type=str,
        default="checkout.conf",
        help="Path to checkout configuration file",
    )
    submit.set_defaults(func=cmd_submit)

    ingest_cmd = sub.add_parser("ingest", help="Load recipient emails from a CSV directory")
    ingest_cmd.add_argument("directory", help="Directory containing .csv files")
    ingest_cmd.add_argument("--workers", type=int, default=None, help="Files loaded in parallel")
    ingest_cmd.add_argument(
        "--store-config",
        type=str,
        default="recipients.conf",
        help="Path to recipient store configuration file",
    )
    ingest_cmd.set_defaults(func=cmd_ingest)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    try:
        return args.func(args)
    except CatalogValidationError as e:
        logging.error(f"[CATALOG] Validation error: {e}")
        return 2
    except FileNotFoundError as e:
        logging.error(f"File not found: {e}")
        return 2
    except KeyError as e:
        logging.error(f"Unknown package id: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
