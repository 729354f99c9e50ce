"""phonetix convert: re-transcribe a syllable in another notation."""

from __future__ import annotations

import sys

import click

from phonetix import convert
from phonetix.errors import DecodingFailed, EncodingFailed
from phonetix.transcription.notation import Notation

NOTATIONS = [n.value for n in Notation]


@click.command()
@click.argument("text")
@click.option(
    "--from", "-f",
    "source",
    type=click.Choice(NOTATIONS),
    default=Notation.X_SAMPA.value,
    help="Notation of TEXT. Default: x-sampa.",
)
@click.option(
    "--to", "-t",
    "target",
    type=click.Choice(NOTATIONS),
    default=Notation.IPA.value,
    help="Notation to produce. Default: ipa.",
)
def convert_cmd(text: str, source: str, target: str) -> None:
    """Convert TEXT, one syllable, between IPA, Kirschenbaum and X-SAMPA."""
    try:
        result = convert(text, source, target)
    except DecodingFailed as exc:
        click.echo(f"Error: Cannot decode {source} text: {exc}", err=True)
        sys.exit(1)
    except EncodingFailed as exc:
        click.echo(f"Error: Cannot encode as {target}: {exc}", err=True)
        sys.exit(1)

    click.echo(result)
