"""Command-line interface for papergrid."""

from __future__ import annotations

import csv
import logging
import sys
from typing import IO, Any

import click
import yaml

from .exceptions import PapergridError
from .grid import Grid
from .manifest import DEFAULT_FILL, GridManifest
from .models import Alignment

logger = logging.getLogger(__name__)

DELIMITER_ENV_VAR = "PAPERGRID_DELIMITER"
"""Environment variable for overriding the default field delimiter."""


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
        )


@click.group()
@click.version_option(package_name="papergrid")
def cli() -> None:
    """papergrid text table rendering CLI."""
    pass


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--delimiter",
    "-d",
    default=",",
    envvar=DELIMITER_ENV_VAR,
    show_default=True,
    help=f"Field delimiter (env: {DELIMITER_ENV_VAR})",
)
@click.option(
    "--align",
    "alignment",
    type=click.Choice([a.value for a in Alignment], case_sensitive=False),
    default=Alignment.CENTER.value,
    show_default=True,
    help="Horizontal alignment of every cell",
)
@click.option("--corner", default="+", show_default=True, help="Corner glyph")
@click.option(
    "--vertical-ident",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Blank lines above and below cell content",
)
@click.option(
    "--horizontal-ident",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Spaces before and after cell content",
)
@click.option(
    "--fill",
    default=DEFAULT_FILL,
    help="Content used for empty fields and missing trailing cells (default: a space)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log layout details to stderr")
def render(
    source: IO[str],
    delimiter: str,
    alignment: str,
    corner: str,
    vertical_ident: int,
    horizontal_ident: int,
    fill: str,
    verbose: bool,
) -> None:
    """Render delimited rows from SOURCE (default: stdin) as a table.

    Quoted fields may span several lines.
    """
    _configure_logging(verbose)

    if len(delimiter) != 1:
        click.echo("Error: --delimiter must be a single character", err=True)
        sys.exit(1)

    records = list(csv.reader(source, delimiter=delimiter))
    columns = max((len(record) for record in records), default=0)
    logger.debug("Read %d row(s) with up to %d field(s)", len(records), columns)

    grid = Grid(len(records), columns)
    for i, record in enumerate(records):
        for j in range(columns):
            content = record[j] if j < len(record) else ""
            (
                grid.cell(i, j)
                .set_content(content or fill)
                .set_alignment(Alignment(alignment.lower()))
                .set_corner(corner)
                .set_vertical_ident(vertical_ident)
                .set_horizontal_ident(horizontal_ident)
            )

    _echo_grid(grid)


@cli.command("render-manifest")
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True),
    help="YAML grid manifest.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log layout details to stderr")
def render_manifest(file_path: str, verbose: bool) -> None:
    """Render a grid described by a YAML manifest."""
    _configure_logging(verbose)

    manifest_data = _load_yaml(file_path)
    try:
        manifest = GridManifest.from_dict(manifest_data)
    except PapergridError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_grid(manifest.build())


def _echo_grid(grid: Grid) -> None:
    try:
        output = grid.render()
    except PapergridError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(output, nl=False)


def _load_yaml(file_path: str) -> dict[str, Any]:
    """Load and parse a YAML file."""
    with open(file_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            click.echo(f"Error: Invalid YAML: {e}", err=True)
            sys.exit(1)
    if not isinstance(data, dict):
        click.echo("Error: YAML file must contain a mapping", err=True)
        sys.exit(1)
    return data


if __name__ == "__main__":
    cli()
