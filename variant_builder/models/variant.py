from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Variant:
    """One combination of option values.

    ``id`` is positional (``variant-<index>`` in derivation order), so the same
    combination gets a different id when options or values are reordered.
    """

    id: str
    title: str
    values: Tuple[str, ...]

    def to_dict(self):
        return {"id": self.id, "title": self.title, "values": list(self.values)}


@dataclass
class VariantState:
    """Editable per-variant state. ``price`` stays raw text, e.g. "12."."""

    price: str = ""
    availability: int = 0

    def to_dict(self):
        return {"price": self.price, "availability": self.availability}
