"""Shared parsing helpers for config and CLI value normalization."""

from __future__ import annotations

from collections.abc import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Args:
        value: Value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_name_list(value: object, field_name: str) -> tuple[str, ...]:
    """Parse a list of names from a comma-separated string or a sequence.

    Blank entries are dropped and each name is lower-cased.

    Raises:
        ValueError: If the value is neither a string nor a sequence of strings.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        raw_items: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple)):
        raw_items = value
    else:
        raise ValueError(
            f"`{field_name}` must be a list of names or a comma-separated string."
        )

    names: list[str] = []
    for item in raw_items:
        if item is not None and not isinstance(item, str):
            raise ValueError(f"`{field_name}` entries must be strings.")
        normalized = normalize_optional_string(item)
        if normalized is not None:
            names.append(normalized.lower())
    return tuple(names)
