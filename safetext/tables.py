"""Fixed translation tables for legacy word-processor bytes.

Responsibilities:
- Map single legacy byte values to web-safe replacement strings.
- Keep both tables immutable so they can be shared across threads.

Keys are legacy byte values expressed as the code point of the same value
(the latin-1 decoding of the raw bytes), not the Unicode characters those
bytes stand for. Bytes `0x82` and `0x91`-`0x94` are Windows-1252 punctuation,
while `0xD2`-`0xD5` are the MacRoman quotation marks. Both origins share one
reference table keyed purely by byte value, which is only correct when the
caller knows the input is a single encoding. Resolve the ambiguity by picking
passes, not by editing these tables.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


REFERENCE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        # MacRoman quotation marks
        "\xd2": "&#8220;",
        "\xd3": "&#8221;",
        "\xd4": "&#8216;",
        "\xd5": "&#8217;",
        "\x82": "&#8218;",
        "\x83": "&#402;",
        "\x84": "&#8222;",
        "\x85": "&#8230;",
        "\x86": "&#8224;",
        "\x87": "&#8225;",
        "\x88": "&#710;",
        "\x89": "&#8240;",
        "\x8a": "&#352;",
        "\x8b": "&#8249;",
        "\x8c": "&#338;",
        # Windows-1252 smart quotes
        "\x91": "&#8216;",
        "\x92": "&#8217;",
        "\x93": "&#8220;",
        "\x94": "&#8221;",
        "\x95": "&#8226;",
        "\x96": "&#8211;",
        "\x97": "&#8212;",
        "\x98": "&#732;",
        "\x99": "&#8482;",
        "\x9a": "&#353;",
        "\x9b": "&#8250;",
        "\x9c": "&#339;",
        "\x9f": "&#376;",
        "\xa0": "&#173;",
        "\xad": "&#160;",
    }
)

ENTITY_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "\x82": "&sbquo;",
        "\x83": "&fnof;",
        "\x84": "&bdquo;",
        "\x85": "&hellip;",
        "\x86": "&dagger;",
        "\x87": "&Dagger;",
        "\x88": "&circ;",
        "\x89": "&permil;",
        "\x8a": "&Scaron;",
        "\x8b": "&lsaquo;",
        "\x8c": "&OElig;",
        "\x91": "&lsquo;",
        "\x92": "&rsquo;",
        "\x93": "&ldquo;",
        "\x94": "&rdquo;",
        "\x95": "&bull;",
        "\x96": "&ndash;",
        "\x97": "&mdash;",
        "\x98": "&tilde;",
        "\x99": "&trade;",
        "\x9a": "&scaron;",
        "\x9b": "&rsaquo;",
        "\x9c": "&oelig;",
        "\x9f": "&Yuml;",
        "\xa0": "&shy;",
        "\xad": "&nbsp;",
    }
)


def select_table(use_entities: bool) -> Mapping[str, str]:
    """Return the entity table when `use_entities` is set, else the reference table."""

    return ENTITY_TABLE if use_entities else REFERENCE_TABLE
