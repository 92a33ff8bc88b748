"""Option store: the ordered options a merchant defines (Size, Color, ...)."""
import logging
import uuid

from variant_builder.errors import ValidationError
from variant_builder.models.option import Option
from variant_builder.services.validation import clean_values, validate_option

logger = logging.getLogger(__name__)

MAX_OPTIONS = 3


def new_option_id():
    return f"option-{uuid.uuid4().hex[:12]}"


class OptionStore:
    """Owns option order plus name and value uniqueness.

    Capacity and not-found conditions return ``None`` and leave the store
    unchanged; invalid input raises :class:`ValidationError`.
    """

    def __init__(self, options=None, max_options=MAX_OPTIONS):
        self.options = list(options or [])
        self.max_options = max_options

    def __len__(self):
        return len(self.options)

    def __iter__(self):
        return iter(self.options)

    @property
    def is_full(self):
        return len(self.options) >= self.max_options

    def get(self, option_id):
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def get_by_name(self, name):
        for option in self.options:
            if option.name == name:
                return option
        return None

    def names(self):
        return [option.name for option in self.options]

    def add_option(self):
        """Append a blank option (empty name, one empty value slot)."""
        if self.is_full:
            logger.warning("Option limit of %d reached", self.max_options)
            return None
        option = Option(id=new_option_id())
        self.options.append(option)
        return option.id

    def save_option(self, option_id, name, values):
        """Validate and upsert an option, replacing name and values together."""
        existing = self.get(option_id) if option_id is not None else None
        if existing is None and self.is_full:
            logger.warning("Option limit of %d reached", self.max_options)
            return None

        errors = validate_option(name, values, self.options, exclude_id=option_id)
        if errors:
            raise ValidationError(errors)

        name = name.strip()
        values = clean_values(values)
        if existing is not None:
            existing.name = name
            existing.values = values
            return existing

        option = Option(id=option_id or new_option_id(), name=name, values=values)
        self.options.append(option)
        return option

    def delete_option(self, option_id):
        option = self.get(option_id)
        if option is None:
            return None
        self.options.remove(option)
        return option

    def reorder_options(self, option_ids):
        """Reorder options to ``option_ids``, which must name each option once."""
        if sorted(option_ids) != sorted(o.id for o in self.options):
            raise ValidationError({"order": "Order must list every option exactly once"})
        by_id = {o.id: o for o in self.options}
        self.options = [by_id[option_id] for option_id in option_ids]
        return self.options

    def reorder_option_values(self, option_id, values):
        """Replace the value order of one option with a permutation of it."""
        option = self.get(option_id)
        if option is None:
            return None
        if sorted(values) != sorted(option.values):
            raise ValidationError({"values": "Order must list every value exactly once"})
        option.values = list(values)
        return option
