# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envious get`` command."""

from __future__ import annotations

import click

from envious.cli import _load_values, cli


@cli.command()
@click.argument("key")
@click.option(
    "--file", "-f", "files",
    multiple=True,
    type=click.Path(dir_okay=False),
    help="File to read (repeatable). Default: files from .envious.toml, else .env.",
)
@click.pass_context
def get(ctx: click.Context, key: str, files: tuple[str, ...]) -> None:
    """Print a single value."""
    values = _load_values(ctx, files)
    value = values.get(key)
    if value is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(value)
