"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
pass listings, and translation table rows.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .errors import NormalizationStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, NormalizationStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_pass_list(rows: list[tuple[str, str]]) -> None:
    """Print pass names with their one-line descriptions."""

    width = max((len(name) for name, _ in rows), default=0)
    for name, description in rows:
        typer.echo(f"{name.ljust(width)}  {description}")


def format_table_rows(table: Mapping[str, str]) -> list[str]:
    """Return `0xNN -> replacement` rows sorted by byte value."""

    return [f"0x{ord(key):02X} -> {table[key]}" for key in sorted(table, key=ord)]


def echo_table(table: Mapping[str, str]) -> None:
    """Print a translation table one byte per line."""

    for row in format_table_rows(table):
        typer.echo(row)
