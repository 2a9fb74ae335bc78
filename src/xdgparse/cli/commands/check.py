from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from xdgparse.cli.ui import get_ui, render_check_summary, render_errors, render_issues_table
from xdgparse.core.config import load_config
from xdgparse.core.engine import run_check
from xdgparse.core.errors import ExitCode
from xdgparse.core.logger import configure_logging


def _expand(paths: List[Path]) -> List[Path]:
    # directories contribute their *.desktop files (non-recursive)
    out: List[Path] = []
    for p in paths:
        if p.is_dir():
            out.extend(sorted(p.glob("*.desktop")))
        else:
            out.append(p)
    return out


def check_cmd(
    paths: List[Path] = typer.Argument(
        ..., exists=True, help="Desktop files or directories holding *.desktop files."
    ),
    fail: bool = typer.Option(
        True, "--fail/--no-fail", help="Exit 1 if any value fails to parse (CI mode)."
    ),
    ignore_errors: bool = typer.Option(
        False, "--ignore-errors", help="Exit 0/1 even if some files can't be parsed."
    ),
    strict_ascii: Optional[bool] = typer.Option(
        None,
        "--strict-ascii/--no-strict-ascii",
        help="Reject non-ASCII bytes in string values (overrides config if set).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse desktop files and report every value that fails to decode."""
    ui = get_ui(verbose=verbose)
    console = ui.console
    configure_logging(verbose=verbose)

    cli_overrides = {"parser": {}}
    if strict_ascii is not None:
        cli_overrides["parser"]["strict_ascii"] = bool(strict_ascii)

    loaded = load_config(start_dir=Path.cwd(), cli_overrides=cli_overrides)

    if ui.verbose:
        console.print("[bold]Config sources:[/bold]")
        console.print(f"  global:  {loaded.global_path or '-'}", markup=False)
        console.print(f"  project: {loaded.project_path or '-'}", markup=False)
        console.print(f"  strict_ascii: {loaded.parser.strict_ascii}")
        console.print()

    result = run_check(paths=_expand(paths), config=loaded.parser)

    render_issues_table(console, result.issues)
    render_errors(console, result.errors, verbose=ui.verbose)
    if ui.verbose:
        render_check_summary(console, result, header="Summary")

    if result.errors and not ignore_errors:
        raise typer.Exit(code=int(ExitCode.ERROR))

    if result.issues and fail:
        raise typer.Exit(code=int(ExitCode.ISSUES))

    raise typer.Exit(code=int(ExitCode.OK))
