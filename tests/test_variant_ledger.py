"""Tests for the per-variant price/availability ledger."""
from decimal import Decimal

from variant_builder.models.variant import VariantState
from variant_builder.services import variant_ledger
from variant_builder.services.variant_ledger import (
    coerce_availability,
    format_price,
    parse_price,
    reconcile,
)


def test_reconcile_adds_blank_entries():
    ledger = reconcile(["variant-0", "variant-1"], {})
    assert ledger == {
        "variant-0": VariantState(price="", availability=0),
        "variant-1": VariantState(price="", availability=0),
    }


def test_reconcile_keeps_survivors_and_prunes_stale():
    kept = VariantState(price="12.50", availability=4)
    ledger = {"variant-0": kept, "variant-5": VariantState(price="9")}

    result = reconcile(["variant-0", "variant-1"], ledger)

    assert set(result) == {"variant-0", "variant-1"}
    assert result["variant-0"] is kept
    assert result["variant-1"] == VariantState()


def test_reconcile_is_idempotent():
    ledger = {"variant-0": VariantState(price="3", availability=1)}
    once = reconcile(["variant-0", "variant-1"], ledger)
    twice = reconcile(["variant-0", "variant-1"], once)
    assert once == twice


def test_set_price_stores_text_verbatim():
    ledger = reconcile(["variant-0"], {})
    variant_ledger.set_price(ledger, "variant-0", "12.")
    assert ledger["variant-0"].price == "12."
    assert variant_ledger.set_price(ledger, "variant-9", "1") is None


def test_set_availability_coerces():
    ledger = reconcile(["variant-0"], {})
    variant_ledger.set_availability(ledger, "variant-0", "7")
    assert ledger["variant-0"].availability == 7

    variant_ledger.set_availability(ledger, "variant-0", "lots")
    assert ledger["variant-0"].availability == 0


def test_coerce_availability():
    assert coerce_availability("12abc") == 12
    assert coerce_availability(" 3 ") == 3
    assert coerce_availability("-4") == 0
    assert coerce_availability(-2) == 0
    assert coerce_availability("") == 0
    assert coerce_availability(None) == 0
    assert coerce_availability(5.9) == 5


def test_parse_price():
    assert parse_price("10") == Decimal("10")
    assert parse_price(" 12. ") == Decimal("12")
    assert parse_price("") is None
    assert parse_price("abc") is None
    assert parse_price("NaN") is None
    assert parse_price("Infinity") is None
    assert parse_price("-1") == Decimal("-1")


def test_format_price_two_decimals():
    assert format_price(Decimal("10")) == "10.00"
    assert format_price(Decimal("12.345")) == "12.35"


def test_total_inventory():
    ledger = {
        "variant-0": VariantState(availability=3),
        "variant-1": VariantState(availability=4),
    }
    assert variant_ledger.total_inventory(ledger) == 7


def test_format_price_large_amounts():
    assert format_price(Decimal("1e30")) == "1" + "0" * 30 + ".00"
    assert (
        format_price(Decimal("12345678901234567890123456789"))
        == "12345678901234567890123456789.00"
    )


def test_parse_price_rejects_absurd_magnitudes():
    assert parse_price("1e30") == Decimal("1e30")
    assert parse_price("1e100") is None
    assert parse_price("1e-30") == Decimal("1e-30")
