"""Derive every variant of a product from its options."""
from itertools import product

from variant_builder.models.variant import Variant

TITLE_SEPARATOR = " / "


def variant_id(index):
    return f"variant-{index}"


def derive_variants(options, separator=TITLE_SEPARATOR):
    """Return the cartesian product of option values as variants.

    Combinations come out in option order with the last option varying
    fastest. Ids are assigned by output position, so identical options always
    yield identical variants. No options means no variants.
    """
    if not options:
        return []

    combinations = product(*(option.values for option in options))
    return [
        Variant(id=variant_id(i), title=separator.join(combo), values=tuple(combo))
        for i, combo in enumerate(combinations)
    ]


def variant_ids(variants):
    return [variant.id for variant in variants]
