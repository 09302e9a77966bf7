"""CLI error-handling tests for concise stage diagnostics."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from safetext.cli import app
from safetext.errors import NormalizationStageError


def test_clean_reports_missing_input(tmp_path: Path) -> None:
    """Missing input should fail at the read stage with exit code 1."""

    runner = CliRunner()
    result = runner.invoke(app, ["clean", str(tmp_path / "missing.txt"), "--quiet"])

    assert result.exit_code == 1
    assert "clean failed at stage `read`" in result.output
    assert "Hint: Verify the input file exists and is readable." in result.output


def test_clean_reports_unknown_pass(legacy_file: Callable[..., Path]) -> None:
    """Unknown pass names should fail at the config stage."""

    runner = CliRunner()
    result = runner.invoke(
        app, ["clean", str(legacy_file(b"x")), "--pass", "smarten", "--quiet"]
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`" in result.output
    assert "unknown pass name(s): smarten" in result.output
    assert "Hint: Run `safetext passes` to list available pass names." in result.output


def test_clean_reports_missing_config_file(legacy_file: Callable[..., Path]) -> None:
    """A missing `--config` path should fail at the config stage."""

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["clean", str(legacy_file(b"x")), "--config", "missing-safetext.yaml", "--quiet"],
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`" in result.output
    assert "Config file not found: `missing-safetext.yaml`." in result.output


def test_clean_reports_invalid_environment(
    monkeypatch: MonkeyPatch, legacy_file: Callable[..., Path]
) -> None:
    """Invalid environment values should fail at the config stage."""

    monkeypatch.setenv("SAFETEXT_USE_ENTITIES", "maybe")
    runner = CliRunner()
    result = runner.invoke(app, ["clean", str(legacy_file(b"x")), "--quiet"])

    assert result.exit_code == 1
    assert "clean failed at stage `config`: Invalid environment configuration" in result.output


def test_clean_rejects_utf8_input_when_requested(legacy_file: Callable[..., Path]) -> None:
    """`--reject-utf8` should stop UTF-8 input before any pass runs."""

    source = legacy_file("“quoted”".encode("utf-8"))
    runner = CliRunner()

    rejected = runner.invoke(app, ["clean", str(source), "--reject-utf8", "--quiet"])
    allowed = runner.invoke(app, ["clean", str(source), "--allow-utf8", "--quiet"])

    assert rejected.exit_code == 1
    assert "clean failed at stage `validate`" in rejected.output
    assert "byte offset 0" in rejected.output
    assert allowed.exit_code == 0


def test_clean_reports_non_stage_error(
    monkeypatch: MonkeyPatch, legacy_file: Callable[..., Path]
) -> None:
    """Unexpected exceptions should still produce concise diagnostics."""

    def _failing_run(*_: object, **__: object) -> None:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected pipeline error")

    monkeypatch.setattr("safetext.cli.NormalizationPipeline.run", _failing_run)
    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(legacy_file(b"x")), "--quiet"])

    assert result.exit_code == 1
    assert "clean failed: unexpected pipeline error" in result.output


def test_clean_reports_stage_error_raised_by_pipeline(
    monkeypatch: MonkeyPatch, legacy_file: Callable[..., Path]
) -> None:
    """Stage errors from the pipeline should render stage and hint."""

    def _failing_run(*_: object, **__: object) -> None:
        """Raise a write-stage error."""

        raise NormalizationStageError(
            stage="write",
            detail="Failed to write output `out.txt`: Permission denied",
            hint="Verify the output directory is writable.",
        )

    monkeypatch.setattr("safetext.cli.NormalizationPipeline.run", _failing_run)
    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(legacy_file(b"x")), "--quiet"])

    assert result.exit_code == 1
    assert "clean failed at stage `write`" in result.output
    assert "Hint: Verify the output directory is writable." in result.output


def test_clean_rejects_blank_pass_instead_of_using_defaults(
    legacy_file: Callable[..., Path],
) -> None:
    """An explicitly blank `--pass` should fail rather than run the default passes."""

    runner = CliRunner()
    result = runner.invoke(
        app, ["clean", str(legacy_file(b"\x93x\x94")), "--pass", "", "--quiet"]
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`: `passes` must name at least one pass." in (
        result.output
    )
    assert "&#8220;" not in result.output


def test_clean_reports_empty_passes_in_config_file(
    tmp_path: Path, legacy_file: Callable[..., Path]
) -> None:
    """`passes: []` in a config file should fail at the config stage."""

    config_path = tmp_path / "safetext.yml"
    config_path.write_text("passes: []\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["clean", str(legacy_file(b"\x96")), "--config", str(config_path), "--quiet"],
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`" in result.output
    assert "must name at least one pass" in result.output
