"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    PickerConfiguration,
    load_configuration,
    write_placeholder_configuration,
)
from field_catalog_picker.schema_sources import (
    FileSchemaProvider,
    SchemaError,
    build_catalog_from_provider,
)
from field_catalog_picker.selector_widget import display_name, visible_entries


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="field-catalog-picker")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity for catalog and cache diagnostics.",
)
def cli(log_level: str) -> None:
    """Custom-field catalog utility."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="build-catalog")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON/YAML field group export",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the catalog JSON; printed to stdout otherwise",
)
def build_catalog_command(schema_path: str, output_path: str | None) -> None:
    """Flatten a field group export into the catalog served to editors."""
    entries = _load_catalog(schema_path)
    payload = json.dumps([entry.to_payload() for entry in entries], indent=2, ensure_ascii=False)
    if output_path is None:
        click.echo(payload)
        return
    try:
        Path(output_path).write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="search-catalog")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON/YAML field group export",
)
@click.option("--kind", required=True, help="Context kind, e.g. all, subfield, repeater")
@click.option("--query", default="", help="Case-insensitive search text")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
def search_catalog(schema_path: str, kind: str, query: str, config_path: str | None) -> None:
    """Preview the grouped entries a selector shows for one context kind."""
    configuration = _load_optional_configuration(config_path)
    is_subfield = kind in configuration.dom.subfield_kinds
    buckets = visible_entries(
        _load_catalog(schema_path),
        kind,
        query,
        is_subfield=is_subfield,
        layout_only_kinds=configuration.dom.layout_only_kinds,
    )
    if not buckets:
        click.echo("No matching fields.")
        return
    for bucket in buckets:
        click.echo(bucket.title)
        for entry in bucket.entries:
            name = display_name(entry, is_subfield=is_subfield)
            click.echo(f"  {name}\t{entry.label}\t{entry.kind}")


def _load_catalog(schema_path: str) -> tuple[CatalogEntry, ...]:
    try:
        return build_catalog_from_provider(FileSchemaProvider(schema_path))
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _load_optional_configuration(config_path: str | None) -> PickerConfiguration:
    if config_path is None:
        return PickerConfiguration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
