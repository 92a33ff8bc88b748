"""Group variants by one option and keep each group's price in sync.

The first variant of a group (in derivation order) is its representative.
Setting the representative's price fans out to every sibling; editing a
sibling directly is allowed and makes the group show a price range.
"""
import logging
from dataclasses import replace

from variant_builder.errors import InvalidPrice, ValidationError
from variant_builder.models.variant import VariantState
from variant_builder.services.variant_ledger import format_price, parse_price

logger = logging.getLogger(__name__)

NO_GROUPING = "none"


def grouping_choices(options):
    """Grouping is only offered once there is more than one option."""
    if len(options) < 2:
        return [NO_GROUPING]
    return [NO_GROUPING] + [option.name for option in options]


def filter_variants(variants, query):
    """Keep variants whose title contains ``query`` (case-insensitive)."""
    if not query:
        return list(variants)
    needle = query.lower()
    return [v for v in variants if needle in v.title.lower()]


def group_variants(variants, options, option_name):
    """Partition variants by the value of ``option_name``.

    Returns an ordered ``{value: [variants]}`` mapping that keeps derivation
    order inside and across groups, or ``None`` when grouping is off.
    """
    if not option_name or option_name == NO_GROUPING:
        return None

    index = next(
        (i for i, option in enumerate(options) if option.name == option_name), None
    )
    if index is None:
        logger.warning("Cannot group by unknown option %r", option_name)
        return None

    groups = {}
    for variant in variants:
        groups.setdefault(variant.values[index], []).append(variant)
    return groups


def representative(group):
    return group[0]


def _state(ledger, variant):
    return ledger.get(variant.id) or VariantState()


def _price_key(raw_price):
    parsed = parse_price(raw_price)
    if parsed is not None:
        return parsed
    return (raw_price or "").strip()


def price_display(group, ledger):
    """Blank, a single 2dp price, or "min - max" when the group disagrees."""
    prices = {
        parsed
        for parsed in (parse_price(_state(ledger, v).price) for v in group)
        if parsed is not None
    }
    if not prices:
        return ""
    low, high = min(prices), max(prices)
    if low == high:
        return format_price(low)
    return f"{format_price(low)} - {format_price(high)}"


def is_representative_editable(group, ledger):
    """False only when prices diverge and the representative has one set."""
    rep_price = _state(ledger, representative(group)).price
    rep_key = _price_key(rep_price)
    converged = all(
        _price_key(_state(ledger, v).price) == rep_key for v in group[1:]
    )
    if converged:
        return True
    return not rep_price.strip()


def propagate_price(representative_id, raw_price, group, ledger):
    """Write ``raw_price`` to the representative and all its siblings.

    Returns a new ledger; the given one is left as it was. Raises
    :class:`InvalidPrice` unless the price is a number >= 0.
    """
    if representative(group).id != representative_id:
        raise ValidationError(
            {"variant": "Only the group representative sets the group price"}
        )

    parsed = parse_price(raw_price)
    if parsed is None or parsed < 0:
        raise InvalidPrice(raw_price)

    price = str(raw_price)
    updated = dict(ledger)
    for variant in group:
        updated[variant.id] = replace(_state(ledger, variant), price=price)

    logger.info(
        "Propagated price %s from %s to %d variants",
        price,
        representative_id,
        len(group),
    )
    return updated


def reseed_from_minimum(group, ledger):
    """Re-seed a diverged group from its lowest price so it converges again."""
    prices = [
        parsed
        for parsed in (parse_price(_state(ledger, v).price) for v in group)
        if parsed is not None and parsed >= 0
    ]
    if not prices:
        return ledger
    return propagate_price(
        representative(group).id, format_price(min(prices)), group, ledger
    )
