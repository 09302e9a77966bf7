"""Domain exceptions for CLI diagnostics and optional input guards."""

from __future__ import annotations


class NormalizationStageError(RuntimeError):
    """Raised when a specific CLI stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class LegacyEncodingError(ValueError):
    """Raised when input expected as legacy 8-bit text looks like UTF-8."""

    def __init__(self, offset: int) -> None:
        """Initialize with the byte offset of the first UTF-8 multibyte sequence."""

        super().__init__(
            f"Input contains a UTF-8 multibyte sequence at byte offset {offset}."
        )
        self.offset = offset
