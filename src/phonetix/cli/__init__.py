"""Command-line interface for phonetix."""

import logging

import click

from phonetix import __version__
from phonetix.cli.convert import convert_cmd
from phonetix.cli.describe import describe_cmd


@click.group()
@click.version_option(version=__version__, prog_name="phonetix")
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr.")
def main(verbose: bool) -> None:
    """phonetix: Convert and describe phonetic transcriptions of syllables."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


main.add_command(convert_cmd, name="convert")
main.add_command(describe_cmd, name="describe")
