# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envious CLI -- inspect, validate and convert .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group, shared helpers (``console``, ``files_argument``,
``_load_values``, etc.) live here so every command module can import them.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from envious import __version__
from envious.api import EnvParseError
from envious.config import load_config
from envious.sdk import read_file, resolve_files

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _display_path(path: Path) -> str:
    """Path relative to cwd when it lies below it."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _resolve_paths(ctx: click.Context, files: tuple[str, ...]) -> list[Path]:
    """Explicit FILES arguments, else the files configured in .envious.toml."""
    cfg = ctx.obj["config"]
    env_name = ctx.obj["env_name"]
    if files:
        paths = resolve_files(files, env_name, cfg)
        for path in paths:
            if not path.is_file():
                raise click.BadParameter(f"File not found: {path}", param_hint="FILES")
        return paths
    return [p for p in cfg.resolve_files(env_name) if p.is_file()]


def _read(ctx: click.Context, path: Path) -> dict[str, str]:
    try:
        values = read_file(path, ctx.obj["config"].encoding)
    except EnvParseError as e:
        raise click.ClickException(str(e))
    if ctx.obj["verbose"]:
        console.print(f"[dim]Loaded {len(values)} variable(s) from {_display_path(path)}[/dim]")
    return values


def _load_values(ctx: click.Context, files: tuple[str, ...]) -> dict[str, str]:
    """Merge the selected files, later files overriding earlier ones."""
    paths = _resolve_paths(ctx, files)
    if not paths:
        console.print("[yellow]No .env files found.[/yellow]")
    merged: dict[str, str] = {}
    for path in paths:
        merged.update(_read(ctx, path))
    return merged


def files_argument(f: object) -> object:
    """Add the optional FILES... argument to a command."""
    return click.argument("files", nargs=-1, type=click.Path(dir_okay=False))(f)


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--env", "-e", "env_name", default=None, help="Environment name (resolves {env} in file names).")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, env_name: str | None, verbose: bool) -> None:
    """Inspect, validate and convert .env files."""
    try:
        cfg = load_config()
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["env_name"] = env_name
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envious.cli import (  # noqa: E402, F401
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
)
