"""Byte/text conversion at the I/O edge.

Responsibilities:
- Decode raw legacy bytes into the code-point-per-byte text the normalizer expects.
- Encode normalized text back to bytes without loss.
- Offer an opt-in guard against input that is already UTF-8.
"""

from __future__ import annotations

from pathlib import Path
import re

from .errors import LegacyEncodingError


LEGACY_CODEC = "latin-1"

_UTF8_MULTIBYTE_RE = re.compile(
    rb"[\xc2-\xdf][\x80-\xbf]"
    rb"|\xe0[\xa0-\xbf][\x80-\xbf]"
    rb"|[\xe1-\xec\xee\xef][\x80-\xbf]{2}"
    rb"|\xed[\x80-\x9f][\x80-\xbf]"
    rb"|\xf0[\x90-\xbf][\x80-\xbf]{2}"
    rb"|[\xf1-\xf3][\x80-\xbf]{3}"
    rb"|\xf4[\x80-\x8f][\x80-\xbf]{2}"
)


def decode_legacy(data: bytes) -> str:
    """Map every byte to the code point of the same value."""

    return data.decode(LEGACY_CODEC)


def encode_legacy(text: str) -> bytes:
    """Map code points back to bytes.

    Code points above `0xFF` cannot come from `decode_legacy`; they are written
    as decimal numeric character references.
    """

    return text.encode(LEGACY_CODEC, errors="xmlcharrefreplace")


def find_utf8_multibyte(data: bytes) -> int | None:
    """Return the offset of the first well-formed UTF-8 multibyte sequence.

    A MacRoman quote followed by a Windows-1252 byte can also match; this is a
    heuristic guard, not encoding detection.
    """

    match = _UTF8_MULTIBYTE_RE.search(data)
    if match is None:
        return None
    return match.start()


def ensure_legacy_bytes(data: bytes) -> None:
    """Raise `LegacyEncodingError` when `data` contains UTF-8 multibyte sequences."""

    offset = find_utf8_multibyte(data)
    if offset is not None:
        raise LegacyEncodingError(offset)


def write_legacy_text(path: Path, text: str) -> Path:
    """Write legacy text to `path`, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_legacy(text))
    return path
