"""Validate command for checking configuration files.

Loading problems (missing file, bad JSON, schema violations) and blocking
geometry errors exit with code 1. Per-compartment data that reconciliation
would prune or clamp is reported as warnings and exits with code 2.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.config import (
    ConfigError,
    ValidationResult,
    WardrobeConfiguration,
    config_to_wardrobe,
    load_config,
    validate_config,
)
from wardrobes.domain import CompartmentEnumerator


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a wardrobe configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        wardrobes validate my-wardrobe.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if result.is_valid:
        _display_summary(config)
    _display_validation_result(result)

    raise typer.Exit(code=result.exit_code)


def _echo_issue(path: str, message: str, note: str | None, err: bool) -> None:
    typer.echo(f"  {path}: {message}", err=err)
    if note:
        typer.echo(f"    {note}", err=err)


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, "
                f"Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            value = detail.get("value")
            note = None
            if value is not None and not isinstance(value, (dict, list)):
                note = f"Value: {value!r}"
            _echo_issue(
                detail.get("path", "unknown"),
                detail.get("message", "Unknown error"),
                note,
                err=True,
            )
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_summary(config: WardrobeConfiguration) -> None:
    """Print the outer size and the column and compartment counts."""
    wardrobe = config_to_wardrobe(config)
    columns = CompartmentEnumerator().columns(wardrobe.geometry)
    compartments = sum(len(column.compartments) for column in columns)
    geometry = wardrobe.geometry
    typer.echo(
        f"Wardrobe: {geometry.width_cm:g} x {geometry.height_cm:g} x "
        f"{wardrobe.depth_cm:g} cm, {len(columns)} column(s), "
        f"{compartments} compartment(s)"
    )
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            note = f"Value: {error.value!r}" if error.value is not None else None
            _echo_issue(error.path, error.message, note, err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            note = f"Suggestion: {warning.suggestion}" if warning.suggestion else None
            _echo_issue(warning.path, warning.message, note, err=False)
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
