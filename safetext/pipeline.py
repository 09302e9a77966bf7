"""File-level normalization run built on the pass pipeline.

Responsibilities:
- Read raw legacy bytes, optionally guard against UTF-8 input, apply passes,
  and write the result.
- Map stage failures to `NormalizationStageError` with actionable hints.
- Emit stage and pass telemetry through `RunLogger`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .codec import decode_legacy, ensure_legacy_bytes, write_legacy_text
from .config import SafetextConfig
from .errors import LegacyEncodingError, NormalizationStageError
from .telemetry.logger import RunLogger
from .text.cleaners import TextCleaner, TextCleaningReport, build_rules
from .text.normalizer import ByteRangeNormalizer

_StageResult = TypeVar("_StageResult")


class NormalizationPipeline:
    """Run configured passes over one legacy text file."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        normalizer: ByteRangeNormalizer | None = None,
    ) -> None:
        """Initialize with optional telemetry sink and shared normalizer."""

        self._run_logger = run_logger
        self._normalizer = normalizer or ByteRangeNormalizer()

    def run(
        self,
        config: SafetextConfig,
        input_path: Path,
        output_path: Path | None = None,
    ) -> TextCleaningReport:
        """Normalize `input_path` and write to `output_path` when given."""

        data = self._run_stage("read", lambda: self._read(input_path))
        if config.reject_utf8:
            self._run_stage("validate", lambda: self._validate(data, input_path))
        report = self._run_stage("clean", lambda: self.clean_text(config, decode_legacy(data)))
        if output_path is not None:
            self._run_stage("write", lambda: self._write(output_path, report.cleaned_text))
        return report

    def clean_text(self, config: SafetextConfig, text: str) -> TextCleaningReport:
        """Apply the configured passes to already-decoded legacy text."""

        try:
            rules = build_rules(
                config.passes,
                use_entities=config.use_entities,
                normalizer=self._normalizer,
            )
        except ValueError as exc:
            raise NormalizationStageError(
                stage="clean",
                detail=str(exc),
                hint="Run `safetext passes` to list available pass names.",
            ) from exc

        report = TextCleaner(rules).clean_with_report(text)
        if self._run_logger is not None:
            for outcome in report.passes:
                self._run_logger.log_pass(outcome.name, outcome.matched)
        return report

    def _read(self, input_path: Path) -> bytes:
        """Read raw input bytes."""

        try:
            return input_path.read_bytes()
        except OSError as exc:
            raise NormalizationStageError(
                stage="read",
                detail=f"Failed to read input `{input_path}`: {exc.strerror or exc}",
                hint="Verify the input file exists and is readable.",
            ) from exc

    def _validate(self, data: bytes, input_path: Path) -> None:
        """Reject input that already contains UTF-8 multibyte sequences."""

        try:
            ensure_legacy_bytes(data)
        except LegacyEncodingError as exc:
            raise NormalizationStageError(
                stage="validate",
                detail=f"Input `{input_path}` does not look like legacy 8-bit text: {exc}",
                hint="Convert UTF-8 input with a Unicode-aware tool or rerun with `--allow-utf8`.",
            ) from exc

    def _write(self, output_path: Path, text: str) -> Path:
        """Write normalized output bytes."""

        try:
            return write_legacy_text(output_path, text)
        except OSError as exc:
            raise NormalizationStageError(
                stage="write",
                detail=f"Failed to write output `{output_path}`: {exc.strerror or exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)
        return result
