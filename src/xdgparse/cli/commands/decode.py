from __future__ import annotations

import re

import typer

from xdgparse.cli.ui import get_ui
from xdgparse.core.errors import ExitCode
from xdgparse.core.logger import configure_logging
from xdgparse.parsers import InvalidEncodingError, ValueKind, decode

_HEX_ESCAPE_RE = re.compile(r"\\x([0-9a-fA-F]{2})")


def value_to_bytes(value: str) -> bytes:
    r"""
    Encode a command-line value as UTF-8, turning `\xNN` escapes into raw
    bytes so invalid sequences can be typed in a shell.
    """
    out = bytearray()
    pos = 0
    for m in _HEX_ESCAPE_RE.finditer(value):
        out += value[pos:m.start()].encode("utf-8")
        out.append(int(m.group(1), 16))
        pos = m.end()
    out += value[pos:].encode("utf-8")
    return bytes(out)


def decode_cmd(
    value: str = typer.Argument(..., help=r"Raw value; \xNN escapes become bytes."),
    kind: ValueKind = typer.Option(
        ValueKind.STRING, "--kind", "-k", case_sensitive=False, help="Declared value type."
    ),
    strict_ascii: bool = typer.Option(
        False, "--strict-ascii/--no-strict-ascii", help="Reject non-ASCII bytes in string values."
    ),
) -> None:
    """Decode a single string, localestring or iconstring value."""
    ui = get_ui()
    configure_logging()

    if not kind.is_string:
        raise typer.BadParameter(f"{kind.value} is not a string kind", param_hint="--kind")

    try:
        text = decode(value_to_bytes(value), kind, strict_ascii=strict_ascii)
    except InvalidEncodingError as e:
        ui.console.print(str(e), style="warn", markup=False)
        raise typer.Exit(code=int(ExitCode.ISSUES))

    typer.echo(text)
