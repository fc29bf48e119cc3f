# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envious list`` command."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from envious.cli import _display_path, _mask, _read, _resolve_paths, cli, console, files_argument


@cli.command("list")
@files_argument
@click.option("--show", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, files: tuple[str, ...], show: bool) -> None:
    """List variables with the file that sets them."""
    paths = _resolve_paths(ctx, files)
    if not paths:
        console.print("[yellow]No .env files found.[/yellow]")
        return

    # later files win, as when loading
    rows: dict[str, tuple[str, str]] = {}
    for path in paths:
        for key, value in _read(ctx, path).items():
            rows[key] = (value, _display_path(path))

    table = Table(title="Variables")
    table.add_column("Key", style="white", no_wrap=True)
    table.add_column("Value" if show else "Value (masked)", style="dim")
    table.add_column("Source", style="cyan")
    if not rows:
        table.add_row("(empty)", "(empty)", "")
    for key in sorted(rows):
        value, source = rows[key]
        table.add_row(key, escape(value if show else _mask(value)), escape(source))
    console.print(table)
