from __future__ import annotations

import typer
from rich.console import Console

from xdgparse import __version__
from xdgparse.cli.commands.check import check_cmd
from xdgparse.cli.commands.decode import decode_cmd
from xdgparse.cli.commands.init import init_cmd
from xdgparse.cli.commands.show import show_cmd

app = typer.Typer(
    name="xdgparse",
    help="Parse XDG Desktop Entry (.desktop) files and check their values.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"xdgparse {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("show")(show_cmd)
app.command("check")(check_cmd)
app.command("decode")(decode_cmd)
app.command("init")(init_cmd)
