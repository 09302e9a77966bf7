"""Legacy text normalization components.

This package provides the byte-range normalizer and the named passes callers
chain into a pipeline matching a document's provenance.
"""

from .cleaners import (
    PASS_NAMES,
    DowncodeMacRomanQuotes,
    FixMacRomanQuotes,
    FixWindowsSmartQuotes,
    MarkSoftHyphen,
    PassOutcome,
    StripUndefinedRange,
    StripWordControlChars,
    TextCleaner,
    TextCleaningReport,
    TranslateTable,
    build_rules,
    describe_passes,
)
from .normalizer import SOFT_HYPHEN_MARKER, ByteRangeNormalizer

__all__ = [
    "ByteRangeNormalizer",
    "SOFT_HYPHEN_MARKER",
    "TextCleaner",
    "TextCleaningReport",
    "PassOutcome",
    "PASS_NAMES",
    "build_rules",
    "describe_passes",
    "StripWordControlChars",
    "MarkSoftHyphen",
    "FixMacRomanQuotes",
    "FixWindowsSmartQuotes",
    "DowncodeMacRomanQuotes",
    "StripUndefinedRange",
    "TranslateTable",
]
