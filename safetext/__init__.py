"""Top-level package for safetext.

This package normalizes legacy MacRoman and Windows-1252 word-processor text
into web-safe text. The core entry point is `ByteRangeNormalizer`; callers
chain its passes directly or through `TextCleaner`.
"""

from .tables import ENTITY_TABLE, REFERENCE_TABLE
from .text import ByteRangeNormalizer, TextCleaner, build_rules

__all__ = [
    "ByteRangeNormalizer",
    "TextCleaner",
    "build_rules",
    "ENTITY_TABLE",
    "REFERENCE_TABLE",
    "__version__",
]

__version__ = "0.1.0"
