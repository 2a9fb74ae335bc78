from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from xdgparse.cli.ui.formatters import (
    EntryRenderOptions,
    render_check_summary,
    render_entry,
    render_errors,
    render_issues_table,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "muted": "dim",
        "path": "cyan",
        "group": "bold magenta",
        "key": "bold",
        "kind.string": "white",
        "kind.localestring": "green",
        "kind.iconstring": "blue",
        "kind.boolean": "yellow",
        "kind.numeric": "cyan",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(console=Console(theme=THEME), verbose=verbose)


__all__ = [
    "THEME",
    "UI",
    "EntryRenderOptions",
    "get_ui",
    "render_check_summary",
    "render_entry",
    "render_errors",
    "render_issues_table",
]
