# Utils package
import os
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")


def quantize_money(value):
    """Round an amount to exactly two decimals (half-up)."""
    value = Decimal(value)
    with localcontext() as ctx:
        # Room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value):
    return f"{quantize_money(value):.2f}"


def read_conf_file(config_path):
    """Parse a ``key = value`` file, skipping blanks and ``#`` comments."""
    config = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    key, value = line.split("=", 1)
                    config[key.strip()] = value.strip()
    return config


def clean_amount(raw):
    """Parse a money-ish string ("$1,200.50", " 30 ") into a Decimal, or None."""
    if raw is None:
        return None
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, (int, float)):
        raw = repr(raw)

    amount = str(raw).replace("$", "").replace(",", "").replace(" ", "").strip()
    if not amount:
        return None

    try:
        return Decimal(amount)
    except (InvalidOperation, ValueError):
        return None


def setup_logging(log_file=None, level=logging.INFO):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
    )
