"""Key-value persistence for the three variant records.

Options, prices and availability are saved as independent JSON records. A
missing or unreadable record loads as its empty default.
"""
import json
import logging

from variant_builder.models.option import Option
from variant_builder.models.variant import VariantState
from variant_builder.services.variant_ledger import coerce_availability

logger = logging.getLogger(__name__)


class MemoryRecordStore:
    """Process-local store for tests and development without a database."""

    def __init__(self):
        self._data = {}

    def load(self, key):
        return self._data.get(key)

    def save(self, key, value):
        self._data[key] = value

    def delete(self, key):
        self._data.pop(key, None)

    def ping(self):
        return True


class SqlRecordStore:
    """Records stored as rows of the ``variant_records`` table."""

    def load(self, key):
        from variant_builder.models.record import StoredRecord

        return StoredRecord.get(key)

    def save(self, key, value):
        from variant_builder.models.record import StoredRecord

        StoredRecord.set(key, value)

    def delete(self, key):
        from variant_builder.extensions import db
        from variant_builder.models.record import StoredRecord

        row = db.session.get(StoredRecord, key)
        if row:
            db.session.delete(row)
            db.session.commit()

    def ping(self):
        from variant_builder.extensions import db

        db.session.execute(db.text("SELECT 1"))
        return True


class RedisRecordStore:
    def __init__(self, client, prefix="variants:"):
        self.client = client
        self.prefix = prefix

    def load(self, key):
        value = self.client.get(self.prefix + key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def save(self, key, value):
        self.client.set(self.prefix + key, value)

    def delete(self, key):
        self.client.delete(self.prefix + key)

    def ping(self):
        return self.client.ping()


def _load_json(store, key, default):
    raw = store.load(key)
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Unreadable record %s, using empty default", key)
        return default


def load_options(store, key):
    data = _load_json(store, key, [])
    if not isinstance(data, list):
        logger.warning("Record %s is not a list, ignoring", key)
        return []
    options = []
    for item in data:
        try:
            options.append(Option.from_dict(item))
        except (KeyError, TypeError, AttributeError):
            logger.warning("Skipping malformed option in %s: %r", key, item)
    return options


def save_options(store, key, options):
    store.save(key, json.dumps([option.to_dict() for option in options]))


def _price_text(value):
    return "" if value is None else str(value)


def load_ledger(store, prices_key, availability_key):
    """Rebuild ledger entries from the separate price and availability maps."""
    prices = _load_json(store, prices_key, {})
    availability = _load_json(store, availability_key, {})
    if not isinstance(prices, dict):
        prices = {}
    if not isinstance(availability, dict):
        availability = {}

    ledger = {}
    for variant_id in list(prices) + [k for k in availability if k not in prices]:
        ledger[variant_id] = VariantState(
            price=_price_text(prices.get(variant_id)),
            availability=coerce_availability(availability.get(variant_id, 0)),
        )
    return ledger


def save_ledger(store, prices_key, availability_key, ledger):
    store.save(
        prices_key, json.dumps({vid: state.price for vid, state in ledger.items()})
    )
    store.save(
        availability_key,
        json.dumps({vid: state.availability for vid, state in ledger.items()}),
    )
