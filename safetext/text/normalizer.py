"""Byte-range text normalizer for legacy MacRoman and Windows-1252 exports.

Responsibilities:
- Provide independent, order-sensitive passes that strip, mark, or replace
  legacy control-range bytes.
- Translate table bytes to decimal references or HTML named entities.

Text is expected as a `str` where each legacy byte appears as the code point of
the same value. No validation is performed: a valid UTF-8 multibyte sequence
decoded this way contains bytes in the same ranges and will be altered by these
passes. Callers who need a guard should run `codec.ensure_legacy_bytes` on the
raw input first.
"""

from __future__ import annotations

import re
from typing import Mapping

from ..tables import ENTITY_TABLE, REFERENCE_TABLE


SOFT_HYPHEN_MARKER = "<!-- shy -->"

WORD_CONTROL_CHARS = frozenset(chr(code) for code in range(0x82, 0xA0))
UNDEFINED_CHARS = frozenset(
    [chr(code) for code in range(0x8D, 0x91)] + [chr(code) for code in range(0x9D, 0x9F)]
)
MACROMAN_QUOTES = frozenset("\xd2\xd3\xd4\xd5")
WINDOWS_SMART_QUOTES = frozenset("\x91\x92\x93\x94")


class ByteRangeNormalizer:
    """Apply fixed byte-range passes to legacy text."""

    _WORD_CONTROL_RE = re.compile("[\x82-\x9f]")
    _SOFT_HYPHEN_RE = re.compile("\xa0")
    _UNDEFINED_RANGE_RES = (
        re.compile("[\x8d-\x90]"),
        re.compile("[\x9d-\x9e]"),
    )

    _MACROMAN_QUOTE_REFS = str.maketrans(
        {
            "\xd2": "&#8220;",
            "\xd3": "&#8221;",
            "\xd4": "&#8216;",
            "\xd5": "&#8217;",
        }
    )
    _WINDOWS_QUOTE_REFS = str.maketrans(
        {
            "\x93": "&#8220;",
            "\x94": "&#8221;",
            "\x91": "&#8216;",
            "\x92": "&#8217;",
        }
    )
    _MACROMAN_QUOTE_ASCII = str.maketrans(
        {
            "\xd2": '"',
            "\xd3": '"',
            "\xd4": "'",
            "\xd5": "'",
        }
    )

    def __init__(
        self,
        reference_table: Mapping[str, str] = REFERENCE_TABLE,
        entity_table: Mapping[str, str] = ENTITY_TABLE,
    ) -> None:
        """Build the per-table translation maps once."""

        self.reference_table = reference_table
        self.entity_table = entity_table
        self._reference_map = str.maketrans(dict(reference_table))
        self._entity_map = str.maketrans(dict(entity_table))

    def strip_word_control_chars(self, text: str) -> str:
        """Delete every code point in the Word special range `0x82`-`0x9F`."""

        return self._WORD_CONTROL_RE.sub("", text)

    def mark_soft_hyphen(self, text: str) -> str:
        """Replace each `0xA0` with the soft-hyphen marker comment.

        `0xAD` is left alone.
        """

        return self._SOFT_HYPHEN_RE.sub(SOFT_HYPHEN_MARKER, text)

    def fix_macroman_quotes(self, text: str) -> str:
        """Convert MacRoman curly quotes `0xD2`-`0xD5` to decimal references.

        Mapping (Apple ROMAN.TXT):
            0xD2 -> &#8220; LEFT DOUBLE QUOTATION MARK
            0xD3 -> &#8221; RIGHT DOUBLE QUOTATION MARK
            0xD4 -> &#8216; LEFT SINGLE QUOTATION MARK
            0xD5 -> &#8217; RIGHT SINGLE QUOTATION MARK
        """

        return text.translate(self._MACROMAN_QUOTE_REFS)

    def fix_windows_smart_quotes(self, text: str) -> str:
        """Convert Windows-1252 smart quotes `0x91`-`0x94` to decimal references.

        Mapping (Microsoft CP1252.TXT):
            0x91 -> &#8216;, 0x92 -> &#8217;, 0x93 -> &#8220;, 0x94 -> &#8221;
        """

        return text.translate(self._WINDOWS_QUOTE_REFS)

    def downconvert_macroman_quotes_to_ascii(self, text: str) -> str:
        """Replace MacRoman curly quotes with plain ASCII quotes (lossy)."""

        return text.translate(self._MACROMAN_QUOTE_ASCII)

    def strip_undefined_range(self, text: str) -> str:
        """Delete `0x8D`-`0x90` and `0x9D`-`0x9E`, which have no table mapping.

        Run before `translate` so undefined bytes do not leak into output.
        """

        for pattern in self._UNDEFINED_RANGE_RES:
            text = pattern.sub("", text)
        return text

    def translate(self, text: str, use_entities: bool = False) -> str:
        """Replace every table byte with its entity or decimal reference.

        Args:
            text: Legacy text.
            use_entities: Use HTML named entities instead of decimal numeric
                character references. Decimal references are portable to any
                XML/HTML target; entities only suit HTML.

        Returns:
            Text with table bytes replaced; all other code points unchanged.
        """

        translation = self._entity_map if use_entities else self._reference_map
        return text.translate(translation)

    def table_for(self, use_entities: bool) -> Mapping[str, str]:
        """Return the table `translate` uses for the given mode."""

        return self.entity_table if use_entities else self.reference_table
