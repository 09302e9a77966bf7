"""Command-line interface for safetext.

Responsibilities:
- Expose user-facing commands for normalizing legacy text files.
- Convert CLI arguments into `SafetextConfig` and run `NormalizationPipeline`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_pass_list, echo_table, exit_with_command_error
from .codec import encode_legacy
from .config import ConfigLoader, SafetextConfig
from .errors import NormalizationStageError
from .parsing import parse_name_list
from .pipeline import NormalizationPipeline
from .tables import select_table
from .telemetry.logger import RunLogger
from .text.cleaners import describe_passes

app = typer.Typer(
    name="safetext",
    no_args_is_help=True,
    help="Normalize legacy MacRoman/Windows-1252 text into web-safe text.",
)


def _load_base_config(config_path: Path | None) -> SafetextConfig:
    """Load YAML config when requested, else environment defaults, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise NormalizationStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `SAFETEXT_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise NormalizationStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise NormalizationStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise NormalizationStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    passes: list[str] | None,
    use_entities: bool | None,
    reject_utf8: bool | None,
) -> SafetextConfig:
    """Resolve effective config from file/environment defaults and explicit CLI overrides."""

    base_config = _load_base_config(config_file)
    resolved_passes = (
        parse_name_list(",".join(passes), "--pass") if passes else base_config.passes
    )

    config = SafetextConfig(
        passes=resolved_passes,
        use_entities=use_entities if use_entities is not None else base_config.use_entities,
        reject_utf8=reject_utf8 if reject_utf8 is not None else base_config.reject_utf8,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise NormalizationStageError(
            stage="config",
            detail=str(exc),
            hint="Run `safetext passes` to list available pass names.",
        ) from exc
    return config


@app.command("clean")
def clean_command(
    input_path: Annotated[Path, typer.Argument(help="Path to legacy text file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output file. Writes to stdout when omitted."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    passes: Annotated[
        list[str] | None,
        typer.Option(
            "--pass",
            "-p",
            help="Pass to apply, repeatable and applied in order (see `safetext passes`).",
        ),
    ] = None,
    use_entities: Annotated[
        bool | None,
        typer.Option(
            "--entities/--references",
            help="Translate to HTML named entities instead of decimal references.",
        ),
    ] = None,
    reject_utf8: Annotated[
        bool | None,
        typer.Option(
            "--reject-utf8/--allow-utf8",
            help="Fail when the input already contains UTF-8 multibyte sequences.",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log stage failures."),
    ] = False,
) -> None:
    """Apply normalization passes to one legacy text file."""

    try:
        run_logger = RunLogger(level="ERROR" if quiet else "INFO")
        config = _resolve_command_config(
            config_file=config_file,
            passes=passes,
            use_entities=use_entities,
            reject_utf8=reject_utf8,
        )
        pipeline = NormalizationPipeline(run_logger=run_logger)
        report = pipeline.run(config, input_path, output_path=out)
    except Exception as exc:
        exit_with_command_error("clean", exc)

    if out is None:
        typer.echo(encode_legacy(report.cleaned_text), nl=False)
        return

    typer.echo(f"Output: {out}")
    typer.echo(f"Passes: {', '.join(outcome.name for outcome in report.passes)}")
    typer.echo(f"Matched characters: {report.total_matched}")


@app.command("passes")
def passes_command() -> None:
    """List available normalization passes."""

    echo_pass_list(describe_passes())


@app.command("table")
def table_command(
    use_entities: Annotated[
        bool,
        typer.Option(
            "--entities/--references",
            help="Show the HTML entity table instead of the decimal reference table.",
        ),
    ] = False,
) -> None:
    """Print a translation table as `0xNN -> replacement` rows."""

    echo_table(select_table(use_entities))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
