"""
Main CLI entry point for cellwidths-gen.
"""

import sys
from pathlib import Path

import click

from cellwidths_gen import __version__
from cellwidths_gen.config.paths import DEFAULT_OUTPUT
from cellwidths_gen.core.errors import CellWidthsError
from cellwidths_gen.utils.logging import is_quiet, logger, set_verbosity

font_argument = click.argument(
    "font_path",
    metavar="FONT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
def cli(verbose, quiet):
    """Generate Vim setcellwidths() scripts from TrueType/OpenType fonts."""
    set_verbosity(verbose, quiet)


@cli.command()
@font_argument
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Path to output Vim script file.",
)
def generate(font_path, output_path):
    """Write a cell widths Vim script for FONT."""
    from cellwidths_gen.operations.generate import generate as do_generate

    if not is_quiet():
        click.secho("cellwidths-gen", fg="green", bold=True)

    try:
        do_generate(font_path, output_path)
    except CellWidthsError as e:
        logger.error(str(e))
        sys.exit(1)


@cli.command()
@font_argument
def inspect(font_path):
    """Show the tables decoded from FONT."""
    from cellwidths_gen.core.font import load_font
    from cellwidths_gen.operations.inspect import describe_font

    try:
        font = load_font(font_path)
    except CellWidthsError as e:
        logger.error(str(e))
        sys.exit(1)

    for line in describe_font(font):
        click.echo(line)


@cli.command()
@font_argument
def validate(font_path):
    """Compare the decoded tables of FONT with fontTools."""
    from cellwidths_gen.operations.validate import validate_font

    try:
        ok = validate_font(font_path)
    except CellWidthsError as e:
        logger.error(str(e))
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
