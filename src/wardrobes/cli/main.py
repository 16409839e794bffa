"""Typer CLI for wardrobe cut lists."""

import json
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import (
    GenerateCutListCommand,
    ListCompartmentsCommand,
    ReconcileCommand,
)
from wardrobes.application.config import (
    ConfigError,
    WardrobeConfiguration,
    config_to_catalogs,
    config_to_wardrobe,
    load_catalog,
    load_config,
    wardrobe_to_document,
)
from wardrobes.cli.commands import validate_command
from wardrobes.infrastructure import (
    CompartmentFormatter,
    CutListFormatter,
    DoorSummaryFormatter,
    PriceBreakdownFormatter,
)
from wardrobes.infrastructure.exporters import ExporterRegistry

app = typer.Typer(
    name="wardrobes",
    help="Decompose wardrobes into compartments and priced cut lists.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _load_or_exit(config_file: Path) -> WardrobeConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _emit(text: str, output_file: Path | None) -> None:
    """Write text to the output file, or echo it when there is none."""
    if output_file is None:
        typer.echo(text)
        return
    output_file.write_text(text)
    typer.echo(f"Written to {output_file}")


@app.command()
def cutlist(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            help="Path to a material/handle catalog JSON file (overrides the config's catalog)",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: table, json, csv"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Generate the priced cut list for a wardrobe configuration."""
    config = _load_or_exit(config_file)
    catalog = config.catalog
    if catalog_file is not None:
        try:
            catalog = load_catalog(catalog_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    fmt = (output_format or config.output.format).lower()
    if fmt != "table" and not ExporterRegistry.is_registered(fmt):
        available = ", ".join(["table", *ExporterRegistry.available_formats()])
        typer.echo(
            f"Error: Unknown format '{fmt}'. Available formats: {available}", err=True
        )
        raise typer.Exit(code=1)
    if output_file is None and config.output.output_file:
        output_file = Path(config.output.output_file)

    materials, handles = config_to_catalogs(catalog)
    result = GenerateCutListCommand().execute(
        config_to_wardrobe(config), materials, handles
    )

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if fmt == "table":
        sections = [
            CutListFormatter().format(result.cut_list),
            PriceBreakdownFormatter().format(result.cut_list),
        ]
        if result.door_metrics is not None:
            sections.append(DoorSummaryFormatter().format(result.door_metrics))
        _emit("\n\n".join(sections), output_file)
        return

    exporter = ExporterRegistry.get(fmt)()
    _emit(exporter.export_string(result), output_file)


@app.command()
def compartments(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
) -> None:
    """List the compartments of a wardrobe configuration."""
    config = _load_or_exit(config_file)
    infos = ListCompartmentsCommand().execute(config_to_wardrobe(config))
    typer.echo(CompartmentFormatter().format(infos))


@app.command()
def reconcile(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the reconciled configuration here"),
    ] = None,
) -> None:
    """Prune and clamp per-compartment data against the wardrobe's geometry."""
    config = _load_or_exit(config_file)
    result = ReconcileCommand().execute(config_to_wardrobe(config))

    document = wardrobe_to_document(config, result.wardrobe)

    if result.changed:
        report = result.report
        for label, keys in (
            ("Dropped element configs", report.dropped_element_configs),
            ("Dropped extras", report.dropped_extras),
            ("Dropped door groups", report.dropped_door_groups),
            ("Dropped door selections", report.dropped_door_selections),
            ("Clamped drawers", report.clamped_drawers),
        ):
            if keys:
                typer.echo(f"{label}: {', '.join(str(k) for k in keys)}", err=True)
    else:
        typer.echo("Configuration already consistent.", err=True)

    _emit(json.dumps(document, indent=2), output_file)


if __name__ == "__main__":
    app()
