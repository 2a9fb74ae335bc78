from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from xdgparse.cli.ui import EntryRenderOptions, get_ui, render_entry
from xdgparse.core.config import load_config
from xdgparse.core.errors import ExitCode
from xdgparse.core.logger import configure_logging
from xdgparse.parsers import DesktopParseError, load_desktop_entry


def show_cmd(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Desktop file to parse."
    ),
    group: Optional[str] = typer.Option(
        None, "--group", "-g", help="Only show this group (e.g. 'Desktop Entry')."
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Resolve localized keys for this locale (e.g. de_DE)."
    ),
    strict_ascii: Optional[bool] = typer.Option(
        None,
        "--strict-ascii/--no-strict-ascii",
        help="Reject non-ASCII bytes in string values (overrides config if set).",
    ),
    raw: Optional[bool] = typer.Option(
        None, "--raw/--no-raw", help="Show raw bytes of string values."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print the parsed contents of a desktop file, one table per group."""
    ui = get_ui(verbose=verbose)
    console = ui.console
    configure_logging(verbose=verbose)

    cli_overrides = {"parser": {}, "ui": {}}
    if strict_ascii is not None:
        cli_overrides["parser"]["strict_ascii"] = bool(strict_ascii)
    if raw is not None:
        cli_overrides["ui"]["show_raw"] = bool(raw)

    loaded = load_config(start_dir=Path.cwd(), cli_overrides=cli_overrides)

    try:
        entry = load_desktop_entry(path, strict_ascii=loaded.parser.strict_ascii)
    except DesktopParseError as e:
        console.print(f"{path}: {e}", style="warn", markup=False)
        raise typer.Exit(code=int(ExitCode.ERROR))

    render_entry(
        console,
        entry,
        opts=EntryRenderOptions(
            group=group,
            locale=locale,
            max_value_width=loaded.ui.max_value_width,
            show_raw=loaded.ui.show_raw,
        ),
    )

    for issue in entry.issues:
        console.print(f"line {issue.line}: {issue.message}", style="warn", markup=False)

    if entry.issues:
        raise typer.Exit(code=int(ExitCode.ISSUES))
