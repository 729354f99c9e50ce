"""phonetix describe: spell out the phones of a transcribed syllable."""

from __future__ import annotations

import json
import sys

import click

from phonetix import decode
from phonetix.cli.convert import NOTATIONS
from phonetix.errors import DecodingFailed
from phonetix.transcription.notation import Notation


@click.command()
@click.argument("text")
@click.option(
    "--notation", "-n",
    type=click.Choice(NOTATIONS),
    default=Notation.X_SAMPA.value,
    help="Notation of TEXT. Default: x-sampa.",
)
@click.option(
    "--format", "-F",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def describe_cmd(text: str, notation: str, output_format: str) -> None:
    """Describe each phone of TEXT, one syllable, in articulatory terms."""
    try:
        syllable = decode(text, notation)
    except DecodingFailed as exc:
        click.echo(f"Error: Cannot decode {notation} text: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        data = {"transcription": text, "notation": notation, **syllable.to_dict()}
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        click.echo(f"Syllable: {syllable.unicode()}")
        click.echo()
        click.echo(syllable.description())
