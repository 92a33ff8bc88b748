"""Recoverable errors raised by the variant services."""


class ValidationError(ValueError):
    """Rejected input. ``errors`` maps each failing field to a message."""

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class InvalidPrice(ValidationError):
    """A group price that is not a non-negative number."""

    def __init__(self, raw_price):
        self.raw_price = raw_price
        super().__init__({"price": "Price must be a non-negative number"})
