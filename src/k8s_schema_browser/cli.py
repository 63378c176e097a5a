"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from k8s_schema_browser.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from k8s_schema_browser.schema_browsing import (
    BrowseError,
    BrowseRequest,
    list_definitions,
    list_versions,
    render_definition_view,
    select_version,
    show_definition,
)
from k8s_schema_browser.schema_export import export_schema_workbook

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


config_option = click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON browser configuration file",
)
api_version_option = click.option(
    "--api-version",
    "version",
    required=False,
    type=str,
    help="Kubernetes API version to browse (defaults to the selected or newest version)",
)
search_option = click.option(
    "--search",
    "search",
    required=False,
    type=str,
    help="Fuzzy search; characters must appear in order, case-insensitively",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="k8s-schema-browser")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Browse Kubernetes API definitions from versioned swagger documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)


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
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="versions")
@config_option
def versions(config_path: str) -> None:
    """List available API versions, newest first; the active one is starred."""
    try:
        listing = list_versions(config_path)
    except BrowseError as exc:
        raise CliError(str(exc)) from exc
    for version in listing.versions:
        marker = "*" if version == listing.active_version else " "
        click.echo(f"{marker} {version}")


@cli.command(name="use-version")
@click.argument("version")
@config_option
def use_version(version: str, config_path: str) -> None:
    """Remember VERSION as the API version used by later commands."""
    try:
        state_path = select_version(config_path, version)
    except BrowseError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"selected API version {version} ({state_path})")


@cli.command(name="definitions")
@config_option
@api_version_option
@search_option
@click.option(
    "--all",
    "include_all",
    is_flag=True,
    default=False,
    help="List every definition instead of top-level resources only.",
)
def definitions(
    config_path: str, version: str | None, search: str | None, include_all: bool
) -> None:
    """List definition display names of one API version."""
    try:
        listing = list_definitions(
            BrowseRequest(config_path=config_path, version=version),
            include_all=include_all,
            search=search,
        )
    except BrowseError as exc:
        raise CliError(str(exc)) from exc
    for name in listing.names:
        click.echo(name)


@cli.command(name="show")
@click.argument("name")
@config_option
@api_version_option
@search_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the resolved schema as JSON instead of an indented tree.",
)
def show(
    name: str, config_path: str, version: str | None, search: str | None, as_json: bool
) -> None:
    """Show the resolved property tree of definition NAME (e.g. core/v1/Pod)."""
    try:
        view = show_definition(
            BrowseRequest(config_path=config_path, version=version), name, search=search
        )
    except BrowseError as exc:
        raise CliError(str(exc)) from exc
    if as_json:
        click.echo(json.dumps(view.schema.to_dict(), indent=2))
        return
    for line in render_definition_view(view):
        click.echo(line)


@cli.command(name="export")
@click.argument("name")
@config_option
@api_version_option
@search_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the workbook to write",
)
def export(
    name: str, config_path: str, version: str | None, search: str | None, output_path: str
) -> None:
    """Export the resolved property tree of definition NAME to an Excel workbook."""
    try:
        view = show_definition(
            BrowseRequest(config_path=config_path, version=version), name, search=search
        )
        destination = export_schema_workbook(view, output_path)
    except (BrowseError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination))


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
