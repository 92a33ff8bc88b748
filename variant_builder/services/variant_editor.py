"""Editor state for one product's options, variants and variant ledger.

Every mutation runs to completion before returning: options change, variants
are re-derived, the ledger is reconciled, and the settled state is saved to
the record store (when one is attached).
"""
import logging

from variant_builder.services import grouping, record_store, variant_ledger
from variant_builder.services.combination_engine import (
    TITLE_SEPARATOR,
    derive_variants,
    variant_ids,
)
from variant_builder.services.option_store import MAX_OPTIONS, OptionStore

logger = logging.getLogger(__name__)

OPTIONS_KEY = "variants_options_v1"
PRICES_KEY = "variants_prices_v1"
AVAILABILITY_KEY = "variants_availability_v1"


class VariantEditor:
    def __init__(
        self,
        options=None,
        ledger=None,
        group_by=grouping.NO_GROUPING,
        store=None,
        max_options=MAX_OPTIONS,
        separator=TITLE_SEPARATOR,
        keys=(OPTIONS_KEY, PRICES_KEY, AVAILABILITY_KEY),
    ):
        self.option_store = OptionStore(options, max_options=max_options)
        self.store = store
        self.separator = separator
        self.options_key, self.prices_key, self.availability_key = keys
        self.group_by = group_by
        self.variants = []
        self.ledger = dict(ledger or {})
        self._recompute()
        if not self._is_grouping(self.group_by):
            self.group_by = grouping.NO_GROUPING

    @classmethod
    def load(cls, store, group_by=grouping.NO_GROUPING, **kwargs):
        """Build an editor from the three persisted records."""
        keys = kwargs.pop("keys", (OPTIONS_KEY, PRICES_KEY, AVAILABILITY_KEY))
        options_key, prices_key, availability_key = keys
        return cls(
            options=record_store.load_options(store, options_key),
            ledger=record_store.load_ledger(store, prices_key, availability_key),
            group_by=group_by,
            store=store,
            keys=keys,
            **kwargs,
        )

    @property
    def options(self):
        return self.option_store.options

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _recompute(self):
        self.variants = derive_variants(self.options, separator=self.separator)
        self.ledger = variant_ledger.reconcile(variant_ids(self.variants), self.ledger)

    def _save_options(self):
        if self.store is not None:
            record_store.save_options(self.store, self.options_key, self.options)

    def _save_ledger(self):
        if self.store is not None:
            record_store.save_ledger(
                self.store, self.prices_key, self.availability_key, self.ledger
            )

    def _settle(self):
        self._recompute()
        self._save_options()
        self._save_ledger()

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def add_option(self):
        option_id = self.option_store.add_option()
        if option_id is not None:
            self._settle()
        return option_id

    def save_option(self, option_id, name, values):
        """Upsert an option; raises ValidationError with nothing changed."""
        old = self.option_store.get(option_id) if option_id is not None else None
        old_name = old.name if old else None

        option = self.option_store.save_option(option_id, name, values)
        if option is None:
            return None

        if old_name and self.group_by == old_name and option.name != old_name:
            self.group_by = option.name
        self._settle()
        logger.info("Saved option %s (%d values)", option.name, len(option.values))
        return option

    def delete_option(self, option_id):
        option = self.option_store.delete_option(option_id)
        if option is None:
            return None

        if self.group_by == option.name:
            remaining = self.options
            self.group_by = (
                remaining[0].name if len(remaining) == 1 else grouping.NO_GROUPING
            )
        self._settle()
        logger.info("Deleted option %s", option.name)
        return option

    def reorder_options(self, option_ids):
        self.option_store.reorder_options(option_ids)
        self._settle()
        return self.options

    def reorder_option_values(self, option_id, values):
        option = self.option_store.reorder_option_values(option_id, values)
        if option is not None:
            self._settle()
        return option

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def _is_grouping(self, option_name):
        if option_name == grouping.NO_GROUPING:
            return True
        return bool(option_name) and option_name in self.option_store.names()

    def set_group_by(self, option_name):
        if not self._is_grouping(option_name):
            return None
        self.group_by = option_name
        return self.group_by

    def groups(self, query=""):
        visible = grouping.filter_variants(self.variants, query)
        return grouping.group_variants(visible, self.options, self.group_by)

    def group(self, key):
        groups = grouping.group_variants(self.variants, self.options, self.group_by)
        if not groups:
            return None
        return groups.get(key)

    # ------------------------------------------------------------------
    # Variant state
    # ------------------------------------------------------------------

    def set_price(self, variant_id, raw_price):
        state = variant_ledger.set_price(self.ledger, variant_id, raw_price)
        if state is not None:
            self._save_ledger()
        return state

    def set_availability(self, variant_id, raw_value):
        state = variant_ledger.set_availability(self.ledger, variant_id, raw_value)
        if state is not None:
            self._save_ledger()
        return state

    def set_group_price(self, key, raw_price):
        """Set the price of a group's representative and fan it out."""
        group = self.group(key)
        if group is None:
            return None
        self.ledger = grouping.propagate_price(
            grouping.representative(group).id, raw_price, group, self.ledger
        )
        self._save_ledger()
        return group

    def reseed_group(self, key):
        group = self.group(key)
        if group is None:
            return None
        self.ledger = grouping.reseed_from_minimum(group, self.ledger)
        self._save_ledger()
        return group

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def total_inventory(self):
        return variant_ledger.total_inventory(self.ledger)

    def variant_rows(self, variants=None):
        rows = []
        for variant in self.variants if variants is None else variants:
            row = variant.to_dict()
            row.update(self.ledger[variant.id].to_dict())
            rows.append(row)
        return rows

    def group_rows(self, query=""):
        groups = self.groups(query)
        if groups is None:
            return None
        rows = []
        for key, members in groups.items():
            rep = grouping.representative(members)
            rows.append(
                {
                    "key": key,
                    "count": len(members),
                    "representative_id": rep.id,
                    "price": self.ledger[rep.id].price,
                    "price_display": grouping.price_display(members, self.ledger),
                    "editable": grouping.is_representative_editable(
                        members, self.ledger
                    ),
                    "availability": self.ledger[rep.id].availability,
                    "variants": self.variant_rows(members),
                }
            )
        return rows

    def snapshot(self, query=""):
        return {
            "options": [option.to_dict() for option in self.options],
            "can_add_option": not self.option_store.is_full,
            "group_by": self.group_by,
            "grouping_choices": grouping.grouping_choices(self.options),
            "variants": self.variant_rows(
                grouping.filter_variants(self.variants, query)
            ),
            "groups": self.group_rows(query),
            "total_inventory": self.total_inventory(),
        }
