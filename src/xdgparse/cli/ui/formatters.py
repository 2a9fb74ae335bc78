from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from xdgparse.core.models import CheckError, CheckIssue, CheckResult
from xdgparse.parsers import DesktopEntry, DesktopValue, ListValue, TypedStringValue
from xdgparse.parsers.common import strip_locale


def kind_value(kind: object) -> str:
    # kind could be Enum or str
    return getattr(kind, "value", str(kind)).lower()


def kind_style(kind: object) -> str:
    return f"kind.{kind_value(kind)}"


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def describe_kind(value: DesktopValue) -> str:
    if isinstance(value, ListValue):
        return f"{kind_value(value.kind)}[]"
    return kind_value(value.kind)


# ----------------------------
# Entry tables
# ----------------------------

@dataclass(frozen=True)
class EntryRenderOptions:
    group: Optional[str] = None     # only this group
    locale: Optional[str] = None    # collapse localized keys to this locale
    max_value_width: int = 80
    show_raw: bool = False


def _raw_repr(value: DesktopValue) -> str:
    if isinstance(value, TypedStringValue):
        return repr(value.raw)
    return ""


def render_entry(
    console: Console,
    entry: DesktopEntry,
    *,
    opts: Optional[EntryRenderOptions] = None,
) -> None:
    opts = opts or EntryRenderOptions()

    names = entry.group_names()
    if opts.group is not None:
        names = [n for n in names if n == opts.group]

    if not names:
        console.print("[warn]No matching groups.[/warn]")
        return

    for name in names:
        table = Table(title=Text(f"[{name}]", style="group"), show_lines=False)
        table.add_column("Key", style="key", no_wrap=True)
        table.add_column("Type", no_wrap=True)
        table.add_column("Value")
        if opts.show_raw:
            table.add_column("Raw", style="muted")

        keys = entry.keys(name)
        if opts.locale:
            # one row per base key, resolved for the requested locale
            seen: List[str] = []
            for k in keys:
                base = strip_locale(k)
                if base not in seen:
                    seen.append(base)
            keys = seen

        for k in keys:
            value = entry.get(k, name, locale=opts.locale)
            if value is None:
                continue
            row = [
                Text(k),
                Text(describe_kind(value), style=kind_style(value.kind)),
                Text(_short(str(value), opts.max_value_width)),
            ]
            if opts.show_raw:
                row.append(Text(_raw_repr(value)))
            table.add_row(*row)

        console.print(table)


# ----------------------------
# Issues / errors
# ----------------------------

def render_issues_table(
    console: Console,
    issues: Sequence[CheckIssue],
    *,
    title: Optional[str] = None,
) -> None:
    if not issues:
        console.print("[ok]✅ No issues.[/ok]")
        return

    table = Table(title=title or f"Issues ({len(issues)})", show_lines=False)
    table.add_column("File", style="path")
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Group", style="group")
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Message")

    for i in issues:
        table.add_row(
            Text(i.file),
            str(i.line),
            Text(i.group or ""),
            Text(i.key or ""),
            Text(_short(i.message, 120)),
        )

    console.print(table)


def render_errors(
    console: Console,
    errors: Sequence[CheckError],
    *,
    max_items: int = 25,
    verbose: bool = False,
) -> None:
    if not errors:
        return

    console.print(f"[warn]⚠️  {len(errors)} file(s) could not be parsed.[/warn]")

    if not verbose:
        console.print("[muted]Run with --verbose to see error details.[/muted]")
        return

    shown = list(errors)[:max_items]
    for e in shown:
        msg = f"- {e.message}"
        if e.detail:
            msg += f" ({_short(e.detail, 160)})"
        console.print(msg, markup=False)

    if len(errors) > len(shown):
        console.print(f"[muted]… and {len(errors) - len(shown)} more[/muted]")


# ----------------------------
# Summary
# ----------------------------

def render_check_summary(
    console: Console,
    result: CheckResult,
    *,
    header: str = "Summary",
) -> None:
    s = result.stats

    cols = ["files", "parsed", "groups", "keys", "issues", "errors", "duration_ms"]
    vals = [
        str(s.files_considered),
        str(s.files_parsed),
        str(s.groups),
        str(s.keys),
        str(len(result.issues)),
        str(len(result.errors)),
        str(s.duration_ms),
    ]

    table = Table(title=header, show_header=True, show_lines=False)
    for c in cols:
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(*vals)

    console.print()
    console.print(table)
