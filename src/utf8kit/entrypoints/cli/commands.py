"""Text commands of the UTF8KIT CLI.

Each command reads its input as raw bytes (a FILE argument, ``-`` for stdin)
so malformed sequences reach the engine untouched. Byte results are written to
binary stdout; counts and code points are printed as text lines.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import click

from utf8kit.engine import clean, is_utf8
from utf8kit.errors import Utf8KitError
from utf8kit.text.bom import add_bom, file_has_bom
from utf8kit.text.codepoints import char_range, codepoints, html_encode
from utf8kit.text.hashing import random_hash
from utf8kit.text.measure import length
from utf8kit.text.ordering import reverse, sort
from utf8kit.text.slug import url_slug

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

INPUT_ARGUMENT = click.argument("source", type=click.File("rb"), default="-")


def _write(data: bytes) -> None:
    stream = click.get_binary_stream("stdout")
    stream.write(data)
    stream.flush()


def _read(source: BinaryIO) -> bytes:
    data = source.read()
    logger.debug("Read %d byte(s) from %s", len(data), getattr(source, "name", "?"))
    return data


@click.command()
@INPUT_ARGUMENT
@click.pass_context
def check(ctx: click.Context, source: BinaryIO) -> None:
    """Exit 0 if SOURCE is well-formed UTF-8, 1 otherwise."""
    if is_utf8(_read(source)):
        success("Input is well-formed UTF-8.")
        return
    error("Input is not well-formed UTF-8.")
    ctx.exit(1)


@click.command(name="clean")
@INPUT_ARGUMENT
def clean_cmd(source: BinaryIO) -> None:
    """Write SOURCE with malformed bytes removed."""
    data = _read(source)
    cleaned = clean(data)
    if dropped := len(data) - len(cleaned):
        warn(f"Dropped {dropped} malformed byte(s).")
    _write(cleaned)


@click.command(name="length")
@INPUT_ARGUMENT
def length_cmd(source: BinaryIO) -> None:
    """Print the number of characters in SOURCE."""
    click.echo(length(_read(source)))


@click.command(name="reverse")
@INPUT_ARGUMENT
def reverse_cmd(source: BinaryIO) -> None:
    """Write the characters of SOURCE in reverse order."""
    _write(reverse(_read(source)))


@click.command(name="sort")
@INPUT_ARGUMENT
@click.option("--unique", is_flag=True, help="Keep one of each character.")
@click.option("--desc", is_flag=True, help="Sort in descending order.")
def sort_cmd(source: BinaryIO, unique: bool, desc: bool) -> None:
    """Write the characters of SOURCE sorted by code point."""
    _write(sort(_read(source), unique=unique, desc=desc))


@click.command(name="codepoints")
@INPUT_ARGUMENT
@click.option("--u-style", is_flag=True, help="Print U+XXXX notation.")
def codepoints_cmd(source: BinaryIO, u_style: bool) -> None:
    """Print the code point of each character of SOURCE, one per line."""
    for value in codepoints(_read(source), u_style=u_style):
        click.echo(value)


@click.command(name="html")
@INPUT_ARGUMENT
def html_cmd(source: BinaryIO) -> None:
    """Write SOURCE as HTML numeric entities."""
    _write(html_encode(_read(source)))


@click.command()
@click.argument("text")
@click.option(
    "--max-length",
    type=int,
    default=None,
    help="Maximum number of characters in the slug.",
)
@click.option(
    "--transliterate/--no-transliterate",
    default=None,
    help="Fold to ASCII first. Defaults to the UTF8KIT_TRANSLITERATE setting.",
)
def slug(text: str, max_length: int | None, transliterate: bool | None) -> None:
    """Print the URL slug of TEXT."""
    try:
        result = url_slug(text, max_length=max_length, transliterate=transliterate)
    except Utf8KitError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result.decode("utf-8"))


@click.command(name="range")
@click.argument("start")
@click.argument("end")
def range_cmd(start: str, end: str) -> None:
    """Write every character from START to END.

    Endpoints are code points in ASCII decimal digits, U+XXXX notation, or
    single characters.
    """
    chars = char_range(start, end)
    if not chars:
        raise click.ClickException(f"Invalid range endpoints: {start!r}, {end!r}")
    _write(b"".join(chars))


@click.command(name="hash")
@click.option(
    "--length",
    "length_",
    type=int,
    default=None,
    help="Number of characters. Defaults to the UTF8KIT_HASH_LENGTH setting.",
)
def hash_cmd(length_: int | None) -> None:
    """Print a random string of letters and digits."""
    try:
        result = random_hash(length_)
    except Utf8KitError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result.decode("utf-8"))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--add", is_flag=True, help="Write the file content with a BOM.")
def bom(path: Path, add: bool) -> None:
    """Report whether PATH starts with a byte-order mark."""
    try:
        if add:
            _write(add_bom(path.read_bytes()))
            return
        found = file_has_bom(path)
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror}") from e
    click.echo("true" if found else "false")


COMMANDS = (
    check,
    clean_cmd,
    length_cmd,
    reverse_cmd,
    sort_cmd,
    codepoints_cmd,
    html_cmd,
    slug,
    range_cmd,
    hash_cmd,
    bom,
)
