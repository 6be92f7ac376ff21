from decimal import Decimal

import pytest

from checkout.constants import PROMO_INVALID_MESSAGE
from checkout.models import SelectableItem
from checkout.pricing import compute_receipt, evaluate_promo, parse_cost, recompute_receipt


def items_for(costs):
    return [
        SelectableItem(item_id=f"p{i}", label=f"P{i}", cost=Decimal(str(c)), selected=True)
        for i, c in enumerate(costs)
    ]


@pytest.mark.parametrize("code", ["WELCOME10", "welcome10", "  Welcome10 ", "\twelcome10\n"])
def test_welcome10_is_case_and_whitespace_insensitive(code):
    promo = evaluate_promo(code)
    assert promo.status == "applied"
    assert promo.code == "WELCOME10"
    assert promo.rate == Decimal("0.10")
    assert promo.message == "WELCOME10 applied: -10% discount!"


def test_return15_rate_and_message():
    promo = evaluate_promo("return15")
    assert promo.rate == Decimal("0.15")
    assert promo.message == "RETURN15 applied: -15% discount!"


@pytest.mark.parametrize("code", ["", "   ", None])
def test_empty_code_has_no_rate_and_no_message(code):
    promo = evaluate_promo(code)
    assert promo.status == "empty"
    assert promo.rate == 0
    assert promo.message == ""


@pytest.mark.parametrize("code", ["WELCOME", "RETURN1", "FREE100", "welcome 10"])
def test_unknown_code_is_invalid(code):
    promo = evaluate_promo(code)
    assert promo.status == "invalid"
    assert promo.rate == 0
    assert promo.message == PROMO_INVALID_MESSAGE


def test_lowercase_code_prices_like_uppercase():
    items = items_for([120, 35.5])
    lower, _ = compute_receipt(items, " welcome10 ")
    upper, _ = compute_receipt(items, "WELCOME10")
    assert lower == upper


@pytest.mark.parametrize(
    "costs",
    [[], [0], [100], [50, 30], [19.99, 0.01, 250], [0.33, 0.33, 0.34], [1234.56, 7.89]],
)
@pytest.mark.parametrize("code", ["", "WELCOME10", "RETURN15", "BOGUS"])
def test_final_cost_matches_closed_form(costs, code):
    receipt, promo = compute_receipt(items_for(costs), code)
    subtotal = sum(Decimal(str(c)) for c in costs)
    expected = max(Decimal("0"), subtotal * Decimal("0.9") * (1 - promo.rate))
    assert abs(receipt.final_cost - expected) <= Decimal("0.01")


@pytest.mark.parametrize("code", ["", "BOGUS"])
def test_promo_line_hidden_without_valid_code(code):
    receipt, _ = compute_receipt(items_for([80]), code)
    assert receipt.promo_discount == 0
    assert not receipt.show_promo_line


def test_promo_line_hidden_when_nothing_selected_even_with_code():
    receipt, promo = compute_receipt(items_for([]), "RETURN15")
    assert promo.applied
    assert receipt.promo_discount == 0
    assert not receipt.show_promo_line


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("30", Decimal("30")),
        ("$1,200.50", Decimal("1200.50")),
        (" 12.5 ", Decimal("12.5")),
        (7, Decimal("7")),
        (0.1, Decimal("0.1")),
        (None, Decimal("0")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        ("-5", Decimal("0")),
        ("NaN", Decimal("0")),
        ("Infinity", Decimal("0")),
    ],
)
def test_parse_cost(raw, expected):
    assert parse_cost(raw) == expected


def test_promo_rate_is_passed_not_remembered():
    items = items_for([100])
    with_promo = recompute_receipt(items, Decimal("0.15"))
    without = recompute_receipt(items)
    assert with_promo.final_cost == Decimal("76.5")
    assert without.final_cost == Decimal("90")
