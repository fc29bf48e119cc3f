# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envious check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from envious.api import ParseFailure, parse
from envious.cli import _display_path, _resolve_paths, cli, console, files_argument


@cli.command()
@files_argument
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Validate .env files and report the first unparsable position in each."""
    paths = _resolve_paths(ctx, files)
    if not paths:
        console.print("[yellow]No .env files found.[/yellow]")
        return

    failed = 0
    for path in paths:
        outcome = parse(path.read_text(encoding=ctx.obj["config"].encoding))
        if isinstance(outcome, ParseFailure):
            failed += 1
            console.print(f"[red]FAIL[/red] {_display_path(path)}: {escape(outcome.message)}", soft_wrap=True)
            continue
        console.print(f"[green]OK[/green]   {_display_path(path)} ({len(outcome.values)} variable(s))", soft_wrap=True)
        if ctx.obj["verbose"]:
            for key in sorted(outcome.values):
                console.print(f"[dim]       {key}[/dim]")

    if failed:
        ctx.exit(1)
