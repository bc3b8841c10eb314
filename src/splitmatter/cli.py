"""Command-line front end: print the segments of one document."""

from __future__ import annotations

import logging
import sys

import click

from splitmatter import __version__
from splitmatter.document import read_source
from splitmatter.errors import SourceReadError
from splitmatter.items import ItemType
from splitmatter.lexer import lex
from splitmatter.utils.logger import get_logger

logger = get_logger(__name__)


@click.command()
@click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="file to parse",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.version_option(__version__, prog_name="splitmatter")
def main(file_path: str, verbose: bool) -> None:
    """Split a document into frontmatter and content and print each segment."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = read_source(file_path)
    except SourceReadError as exc:
        logger.debug("%s", exc)
        click.echo("cannot open file provided", err=True)
        sys.exit(1)

    for item in lex(data, source_file=file_path):
        if item.type is ItemType.ERROR:
            click.echo(f"{item.location}: {item.text}", err=True)
            sys.exit(1)
        if item.type is ItemType.EOF:
            break
        click.echo(item.value)
