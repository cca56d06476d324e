"""Command Line Interface"""

from typing import Optional, TextIO

import click
from marshmallow import ValidationError

from chartclip.clipboard import COMPRESSION_LEVEL, decode, encode, inspect
from chartclip.errors import ClipboardError
from chartclip.selection_json import dumps_selection, loads_selection

from .helpers import read_payload


@click.group()
def chartclip() -> None:
    """Convert between ChartClip clipboard data and JSON note selections"""


@chartclip.command("encode")
@click.argument("src", type=click.File("r"))
@click.option(
    "--compression-level",
    "compression_level",
    type=click.IntRange(min=0, max=9),
    default=COMPRESSION_LEVEL,
    show_default=True,
    help="zlib compression level used for the clipboard data",
)
def encode_command(src: TextIO, compression_level: int) -> None:
    """Print the clipboard data for the JSON selection in SRC (- for stdin)"""
    try:
        notes = loads_selection(src.read())
    except ValidationError as e:
        raise click.ClickException(f"Invalid selection file : {e.messages}")

    try:
        payload = encode(notes, compression_level=compression_level)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(payload)


@chartclip.command("decode")
@click.argument("payload", required=False)
@click.option("--indent", type=click.IntRange(min=0), help="Pretty-print the JSON")
def decode_command(payload: Optional[str], indent: Optional[int]) -> None:
    """Print the notes contained in PAYLOAD (read from stdin if omitted) as
    JSON"""
    text = read_payload(payload)
    try:
        notes = decode(text)
    except ClipboardError as e:
        raise click.ClickException(f"{type(e).__name__} : {e}")

    click.echo(dumps_selection(notes, indent=indent))


@chartclip.command("inspect")
@click.argument("payload", required=False)
def inspect_command(payload: Optional[str]) -> None:
    """Describe PAYLOAD (read from stdin if omitted) without printing the
    notes"""
    text = read_payload(payload)
    try:
        info = inspect(text)
    except ClipboardError as e:
        raise click.ClickException(f"{type(e).__name__} : {e}")

    click.echo(f"version : {info.version}")
    click.echo(f"compressed size : {info.compressed_size} bytes")
    click.echo(f"decompressed size : {info.decompressed_size} bytes")
    click.echo(f"records : {info.record_count}")


if __name__ == "__main__":
    chartclip()
