"""Unit tests for shared config and CLI parsing helpers."""

import pytest

from safetext.parsing import (
    normalize_optional_string,
    parse_name_list,
    parse_permissive_boolean,
    parse_required_boolean,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: str, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the offending field."""

    with pytest.raises(
        ValueError,
        match=(
            r"`use_entities` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "use_entities")


def test_parse_name_list_accepts_comma_strings_and_sequences() -> None:
    """Names should be stripped, lower-cased, and blank entries dropped."""

    assert parse_name_list(" Strip-Undefined, ,translate ", "passes") == (
        "strip-undefined",
        "translate",
    )
    assert parse_name_list(["translate", " MARK-soft-hyphen "], "passes") == (
        "translate",
        "mark-soft-hyphen",
    )
    assert parse_name_list(None, "passes") == ()


@pytest.mark.parametrize("value", [42, {"a": "b"}, ["translate", 3]])
def test_parse_name_list_rejects_non_string_values(value: object) -> None:
    """Non-string payloads should raise with the field name."""

    with pytest.raises(ValueError, match="`passes`"):
        parse_name_list(value, "passes")
