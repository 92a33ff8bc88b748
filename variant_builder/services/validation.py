"""Validation helpers shared by the option store and the editor."""


def clean_values(values):
    """Trim values and drop the empty ones, keeping order."""
    return [v.strip() for v in values if v and v.strip()]


def is_option_name_unique(name, options, exclude_id=None):
    """Case-insensitive check of ``name`` against every other option's name."""
    wanted = name.strip().lower()
    return not any(
        option.id != exclude_id and option.name.strip().lower() == wanted
        for option in options
    )


def are_values_unique(values):
    """Case-sensitive uniqueness, judged over the non-empty trimmed values."""
    cleaned = clean_values(values)
    return len(set(cleaned)) == len(cleaned)


def validate_option(name, values, options, exclude_id=None):
    """Return a ``{field: message}`` dict; empty when the option is valid."""
    errors = {}

    name = (name or "").strip()
    if not name:
        errors["name"] = "Option name is required"
    elif not is_option_name_unique(name, options, exclude_id):
        errors["name"] = "Option name must be unique"

    values = list(values or [])
    if not clean_values(values):
        errors["values"] = "At least one value is required"
    elif not are_values_unique(values):
        errors["values"] = "Values must be unique"

    return errors
