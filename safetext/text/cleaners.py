"""Composable normalization passes.

Responsibilities:
- Wrap each `ByteRangeNormalizer` operation as a named rule.
- Apply caller-chosen rules in caller-chosen order and report what they touched.

No pass order is enforced. A MacRoman-only export typically needs
`fix-macroman-quotes` then `translate`, a Windows-only export
`strip-undefined` then `translate`. `strip-word-control` is the coarse
alternative to the quote fixes; combining them is the caller's call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .normalizer import (
    MACROMAN_QUOTES,
    UNDEFINED_CHARS,
    WINDOWS_SMART_QUOTES,
    WORD_CONTROL_CHARS,
    ByteRangeNormalizer,
)


class CleanerRule(Protocol):
    """Protocol for normalization passes."""

    name: str
    targets: frozenset[str]

    def apply(self, text: str) -> str:
        """Apply a single normalization pass."""


class _NormalizerRule:
    """Base for rules delegating to a shared normalizer."""

    name = ""
    description = ""
    targets: frozenset[str] = frozenset()

    def __init__(self, normalizer: ByteRangeNormalizer | None = None) -> None:
        self.normalizer = normalizer or ByteRangeNormalizer()


class StripWordControlChars(_NormalizerRule):
    """Delete the whole Word special range `0x82`-`0x9F`."""

    name = "strip-word-control"
    description = "Delete every byte in 0x82-0x9F."
    targets = WORD_CONTROL_CHARS

    def apply(self, text: str) -> str:
        return self.normalizer.strip_word_control_chars(text)


class MarkSoftHyphen(_NormalizerRule):
    """Replace `0xA0` with a visible marker comment."""

    name = "mark-soft-hyphen"
    description = "Replace 0xA0 with <!-- shy -->."
    targets = frozenset("\xa0")

    def apply(self, text: str) -> str:
        return self.normalizer.mark_soft_hyphen(text)


class FixMacRomanQuotes(_NormalizerRule):
    """Convert MacRoman curly quotes to decimal references."""

    name = "fix-macroman-quotes"
    description = "Replace MacRoman quotes 0xD2-0xD5 with decimal references."
    targets = MACROMAN_QUOTES

    def apply(self, text: str) -> str:
        return self.normalizer.fix_macroman_quotes(text)


class FixWindowsSmartQuotes(_NormalizerRule):
    """Convert Windows-1252 smart quotes to decimal references."""

    name = "fix-windows-quotes"
    description = "Replace Windows-1252 quotes 0x91-0x94 with decimal references."
    targets = WINDOWS_SMART_QUOTES

    def apply(self, text: str) -> str:
        return self.normalizer.fix_windows_smart_quotes(text)


class DowncodeMacRomanQuotes(_NormalizerRule):
    """Replace MacRoman curly quotes with ASCII quotes."""

    name = "macroman-quotes-to-ascii"
    description = "Replace MacRoman quotes 0xD2-0xD5 with ASCII \" and '."
    targets = MACROMAN_QUOTES

    def apply(self, text: str) -> str:
        return self.normalizer.downconvert_macroman_quotes_to_ascii(text)


class StripUndefinedRange(_NormalizerRule):
    """Delete bytes that have no table mapping."""

    name = "strip-undefined"
    description = "Delete unmapped bytes 0x8D-0x90 and 0x9D-0x9E."
    targets = UNDEFINED_CHARS

    def apply(self, text: str) -> str:
        return self.normalizer.strip_undefined_range(text)


class TranslateTable(_NormalizerRule):
    """Replace every table byte with a reference or named entity."""

    name = "translate"
    description = "Replace table bytes with decimal references (or entities)."

    def __init__(
        self,
        normalizer: ByteRangeNormalizer | None = None,
        use_entities: bool = False,
    ) -> None:
        """Initialize with the table mode used by `apply`."""

        super().__init__(normalizer)
        self.use_entities = use_entities
        self.targets = frozenset(self.normalizer.table_for(use_entities))

    def apply(self, text: str) -> str:
        return self.normalizer.translate(text, use_entities=self.use_entities)


_RULE_TYPES: dict[str, type[_NormalizerRule]] = {
    rule_type.name: rule_type
    for rule_type in (
        StripWordControlChars,
        MarkSoftHyphen,
        FixMacRomanQuotes,
        FixWindowsSmartQuotes,
        DowncodeMacRomanQuotes,
        StripUndefinedRange,
        TranslateTable,
    )
}

PASS_NAMES: tuple[str, ...] = tuple(_RULE_TYPES)


def describe_passes() -> list[tuple[str, str]]:
    """Return `(name, description)` rows for every available pass."""

    return [(name, rule_type.description) for name, rule_type in _RULE_TYPES.items()]


def unknown_pass_names(pass_names: list[str] | tuple[str, ...]) -> list[str]:
    """Return pass names not present in the registry, in input order."""

    return [name for name in pass_names if name not in _RULE_TYPES]


def build_rules(
    pass_names: list[str] | tuple[str, ...],
    *,
    use_entities: bool = False,
    normalizer: ByteRangeNormalizer | None = None,
) -> list[CleanerRule]:
    """Build rules for the given pass names, preserving their order.

    Raises:
        ValueError: If any pass name is unknown.
    """

    unknown = unknown_pass_names(pass_names)
    if unknown:
        raise ValueError(
            f"Unknown pass name(s): {', '.join(unknown)}. "
            f"Available: {', '.join(PASS_NAMES)}."
        )

    shared = normalizer or ByteRangeNormalizer()
    rules: list[CleanerRule] = []
    for name in pass_names:
        rule_type = _RULE_TYPES[name]
        if rule_type is TranslateTable:
            rules.append(TranslateTable(shared, use_entities=use_entities))
        else:
            rules.append(rule_type(shared))
    return rules


@dataclass(frozen=True, slots=True)
class PassOutcome:
    """Number of target code points one pass found in its input."""

    name: str
    matched: int


@dataclass(frozen=True, slots=True)
class TextCleaningReport:
    """Structured output of a pass pipeline run."""

    cleaned_text: str
    passes: tuple[PassOutcome, ...]

    @property
    def total_matched(self) -> int:
        """Sum of matched code points across all passes."""

        return sum(outcome.matched for outcome in self.passes)


class TextCleaner:
    """Apply a sequence of normalization rules."""

    def __init__(self, rules: list[CleanerRule]) -> None:
        """Initialize with rules in application order."""

        self.rules = list(rules)

    def clean_with_report(self, text: str) -> TextCleaningReport:
        """Apply all configured rules and return cleaned text with per-pass counts."""

        current = text
        outcomes: list[PassOutcome] = []
        for rule in self.rules:
            matched = sum(1 for character in current if character in rule.targets)
            current = rule.apply(current)
            outcomes.append(PassOutcome(name=rule.name, matched=matched))
        return TextCleaningReport(cleaned_text=current, passes=tuple(outcomes))

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        return self.clean_with_report(text).cleaned_text
