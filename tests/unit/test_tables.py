"""Unit tests for the fixed translation tables."""

from __future__ import annotations

import pytest

from safetext.tables import ENTITY_TABLE, REFERENCE_TABLE, select_table


def test_tables_are_read_only() -> None:
    """Both tables should reject mutation."""

    with pytest.raises(TypeError):
        REFERENCE_TABLE["\x96"] = "-"  # type: ignore[index]
    with pytest.raises(TypeError):
        ENTITY_TABLE["\x96"] = "-"  # type: ignore[index]


def test_table_keys_are_single_legacy_bytes() -> None:
    """Every key should be one code point in the 8-bit range."""

    for key in (*REFERENCE_TABLE, *ENTITY_TABLE):
        assert len(key) == 1
        assert 0x80 <= ord(key) <= 0xFF


def test_reference_table_values_are_decimal_references() -> None:
    """Reference table values should all be `&#NNN;` tokens."""

    for value in REFERENCE_TABLE.values():
        assert value.startswith("&#")
        assert value.endswith(";")
        assert value[2:-1].isdigit()


def test_reference_table_covers_macroman_quotes_but_entity_table_does_not() -> None:
    """MacRoman quotes are only in the reference table."""

    for key in "\xd2\xd3\xd4\xd5":
        assert key in REFERENCE_TABLE
        assert key not in ENTITY_TABLE

    assert set(ENTITY_TABLE) == set(REFERENCE_TABLE) - set("\xd2\xd3\xd4\xd5")


def test_tables_exclude_undefined_gap_bytes() -> None:
    """Bytes removed by the undefined-range pass have no table entry."""

    for code in (0x8D, 0x8E, 0x8F, 0x90, 0x9D, 0x9E):
        assert chr(code) not in REFERENCE_TABLE
        assert chr(code) not in ENTITY_TABLE


@pytest.mark.parametrize(
    ("key", "reference", "entity"),
    [
        ("\x82", "&#8218;", "&sbquo;"),
        ("\x85", "&#8230;", "&hellip;"),
        ("\x91", "&#8216;", "&lsquo;"),
        ("\x94", "&#8221;", "&rdquo;"),
        ("\x96", "&#8211;", "&ndash;"),
        ("\x97", "&#8212;", "&mdash;"),
        ("\x99", "&#8482;", "&trade;"),
        ("\x9f", "&#376;", "&Yuml;"),
        ("\xa0", "&#173;", "&shy;"),
        ("\xad", "&#160;", "&nbsp;"),
    ],
)
def test_table_entries_match_between_modes(key: str, reference: str, entity: str) -> None:
    """Selected entries should map to the documented reference and entity."""

    assert REFERENCE_TABLE[key] == reference
    assert ENTITY_TABLE[key] == entity


def test_select_table_picks_mode() -> None:
    """`select_table` should return the entity table only when asked."""

    assert select_table(True) is ENTITY_TABLE
    assert select_table(False) is REFERENCE_TABLE
