"""Per-variant price and availability, keyed by positional variant id.

A ledger is a plain ``{variant_id: VariantState}`` dict. Prices are kept as
the raw text the merchant typed; parsing happens when a number is needed.
"""
import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from variant_builder.models.variant import VariantState

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_CENTS = Decimal("0.01")
# Integer digits a price may have before it stops counting as a number
MAX_PRICE_DIGITS = 100


def reconcile(variant_ids, ledger):
    """Return a ledger holding exactly ``variant_ids``.

    New ids get a blank entry, ids that disappeared are dropped, and entries
    for surviving ids are carried over untouched.
    """
    return {
        vid: ledger[vid] if vid in ledger else VariantState()
        for vid in variant_ids
    }


def set_price(ledger, variant_id, raw_price):
    """Store the price text verbatim. Returns the entry, or None if unknown."""
    state = ledger.get(variant_id)
    if state is None:
        return None
    state.price = "" if raw_price is None else str(raw_price)
    return state


def set_availability(ledger, variant_id, raw_value):
    state = ledger.get(variant_id)
    if state is None:
        return None
    state.availability = coerce_availability(raw_value)
    return state


def coerce_availability(raw_value):
    """Read a stock count leniently: junk and negatives become 0."""
    if isinstance(raw_value, bool) or raw_value is None:
        return 0
    if isinstance(raw_value, int):
        return max(raw_value, 0)
    if isinstance(raw_value, float):
        return max(int(raw_value), 0) if math.isfinite(raw_value) else 0
    match = _LEADING_INT.match(str(raw_value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def parse_price(raw_price):
    """Parse price text into a Decimal, or None when blank or not a number."""
    if raw_price is None:
        return None
    text = str(raw_price).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() >= MAX_PRICE_DIGITS:
        return None
    return value


def format_price(value):
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def total_inventory(ledger):
    return sum(state.availability for state in ledger.values())
