from __future__ import annotations

from pathlib import Path

import typer

from xdgparse.cli.utils.files import ensure_dir, write_file


DEFAULT_CONFIG_TOML = """\
[parser]
# reject non-ASCII bytes in `string` values (Exec, Type, Categories, ...)
strict_ascii = false

[ui]
max_value_width = 80
# show raw bytes next to decoded string values
show_raw = false
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Project directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files."),
) -> None:
    """Write a default .xdgparse/config.toml."""
    root = path.resolve()
    cfg_dir = root / ".xdgparse"
    ensure_dir(cfg_dir)

    cfg_file = cfg_dir / "config.toml"
    written = write_file(cfg_file, DEFAULT_CONFIG_TOML, force=force)

    if written:
        typer.echo(f"Initialized {cfg_file}")
    else:
        typer.echo(f"{cfg_file} already exists (use --force to overwrite)")
