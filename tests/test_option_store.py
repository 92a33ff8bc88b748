"""Tests for the option store and its validation helpers."""
import pytest

from variant_builder.errors import ValidationError
from variant_builder.models.option import Option
from variant_builder.services.option_store import OptionStore
from variant_builder.services.validation import (
    are_values_unique,
    is_option_name_unique,
)


def test_name_unique_is_case_insensitive():
    options = [Option(id="opt-1", name="color", values=["Red"])]
    assert not is_option_name_unique("Color", options, exclude_id=None)
    assert is_option_name_unique("Color", options, exclude_id="opt-1")
    assert is_option_name_unique("Size", options)


def test_values_unique_ignores_blanks_and_trims():
    assert are_values_unique(["S", "M", "", "  "])
    assert not are_values_unique(["S", " S "])
    assert are_values_unique(["s", "S"])


def test_add_option_creates_blank_slot():
    store = OptionStore()
    option_id = store.add_option()

    option = store.get(option_id)
    assert option.name == ""
    assert option.values == [""]


def test_add_option_stops_at_three():
    store = OptionStore()
    ids = [store.add_option() for _ in range(3)]
    assert all(ids)

    assert store.add_option() is None
    assert len(store) == 3


def test_option_ids_are_not_reused():
    store = OptionStore()
    first = store.add_option()
    store.delete_option(first)
    second = store.add_option()
    assert first != second


def test_save_option_trims_and_drops_empty_values():
    store = OptionStore()
    option = store.save_option(None, "  Size ", [" S", "M ", "", "   "])

    assert option.name == "Size"
    assert option.values == ["S", "M"]
    assert store.get(option.id) is option


def test_save_option_updates_in_place():
    store = OptionStore()
    option_id = store.add_option()
    store.save_option(option_id, "Color", ["Red", "Blue"])

    assert len(store) == 1
    assert store.get(option_id).values == ["Red", "Blue"]


def test_save_option_rejects_duplicate_name_without_change():
    store = OptionStore([Option(id="opt-1", name="Color", values=["Red"])])
    option_id = store.add_option()

    with pytest.raises(ValidationError) as exc:
        store.save_option(option_id, "COLOR", ["Big"])

    assert exc.value.errors == {"name": "Option name must be unique"}
    assert store.get(option_id).name == ""
    assert store.get(option_id).values == [""]


def test_save_option_reports_every_failing_field():
    store = OptionStore()
    with pytest.raises(ValidationError) as exc:
        store.save_option(None, "  ", ["", " "])

    assert exc.value.errors == {
        "name": "Option name is required",
        "values": "At least one value is required",
    }
    assert len(store) == 0


def test_save_option_rejects_duplicate_values():
    store = OptionStore()
    with pytest.raises(ValidationError) as exc:
        store.save_option(None, "Size", ["S", "M", " S"])
    assert exc.value.errors == {"values": "Values must be unique"}


def test_save_option_keeps_own_name():
    store = OptionStore()
    option = store.save_option(None, "Size", ["S"])
    store.save_option(option.id, "size", ["S", "M"])
    assert store.get(option.id).name == "size"


def test_save_new_option_when_full_is_noop():
    store = OptionStore(
        [Option(id=f"opt-{i}", name=f"O{i}", values=["x"]) for i in range(3)]
    )
    assert store.save_option(None, "Extra", ["y"]) is None
    assert len(store) == 3


def test_delete_missing_option_returns_none():
    assert OptionStore().delete_option("nope") is None


def test_reorder_options():
    store = OptionStore(
        [
            Option(id="a", name="Color", values=["Red"]),
            Option(id="b", name="Size", values=["S"]),
        ]
    )
    store.reorder_options(["b", "a"])
    assert store.names() == ["Size", "Color"]

    with pytest.raises(ValidationError):
        store.reorder_options(["a"])


def test_reorder_option_values():
    store = OptionStore([Option(id="a", name="Size", values=["S", "M", "L"])])
    store.reorder_option_values("a", ["L", "S", "M"])
    assert store.get("a").values == ["L", "S", "M"]

    with pytest.raises(ValidationError):
        store.reorder_option_values("a", ["L", "S", "XL"])
    assert store.reorder_option_values("missing", []) is None
