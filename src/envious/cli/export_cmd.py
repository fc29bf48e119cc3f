"""``envious export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from envious.cli import HAS_YAML, _load_values, cli, console, files_argument
from envious.writer import format_line

if HAS_YAML:
    import yaml


@cli.command("export")
@files_argument
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, files: tuple[str, ...], fmt: str, output: str | None) -> None:
    """Export the merged variables to stdout or a file.

    Default format is dotenv (KEY=value, no "export"), quoted where needed so
    the output parses back to the same values. Use --format unix for shell
    sourcing: eval "$(envious export --format unix)". Use --format win for
    PowerShell: envious export --format win | Invoke-Expression (or iex).
    """
    pairs = _load_values(ctx, files)

    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install 'envious[yaml]'")

    if output:
        path = Path(output)
        with path.open("w", encoding="utf-8") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=True)
            else:
                for line in _format_export_lines(pairs, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]")
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=True)
        else:
            for line in _format_export_lines(pairs, fmt):
                out.print(line)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}*?<>~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
        else:
            lines.append(format_line(key, value))
    return lines
