"""Tests for CLI commands via click.testing.CliRunner."""

from __future__ import annotations

import importlib.metadata
import json
import sys

import pytest
import yaml
from click.testing import CliRunner

from envious import parse_strict
from envious.__main__ import main
from envious.cli import cli


def test_version():
    """Version output must match the package version from the project."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    expected_version = importlib.metadata.version("envious")
    assert expected_version in result.output


def test_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("check", "list", "get", "export"):
        assert command in result.output


def test_check_ok(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(sample_env)])
    assert result.exit_code == 0
    assert "OK" in result.output
    assert "8 variable(s)" in result.output


def test_check_default_file(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_reports_failure(isolated_cwd):
    bad = isolated_cwd / "bad.env"
    bad.write_text("GOOD=1\nKEY = value\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(bad)])
    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "line 2, column 0" in result.output


def test_check_missing_file(isolated_cwd):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "nope.env"])
    assert result.exit_code != 0
    assert "File not found" in result.output


def test_check_no_files(isolated_cwd):
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 0
    assert "No .env files found" in result.output


def test_list_masks_values(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert "TWILIO_API_SID" in result.output
    assert "ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx" not in result.output
    assert "ACx****xxx" in result.output


def test_list_show(isolated_cwd):
    (isolated_cwd / ".env").write_text("SHORT=abc\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["list", "--show"])
    assert result.exit_code == 0
    assert "abc" in result.output


def test_get(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "TWILIO_AUTH_TOKEN"])
    assert result.exit_code == 0
    assert result.output.strip() == "my secret token"


def test_get_missing(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "NOPE"])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_get_parse_error(isolated_cwd):
    (isolated_cwd / ".env").write_text('A="unclosed\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "A"])
    assert result.exit_code != 0
    assert "could not parse remaining input" in result.output


def test_get_with_env_cascade(isolated_cwd):
    (isolated_cwd / ".envious.toml").write_text('[envious]\nfiles = [".env", ".env.{env}"]\n')
    (isolated_cwd / ".env").write_text("WHERE=base\n")
    (isolated_cwd / ".env.prod").write_text("WHERE=prod\n")
    runner = CliRunner()
    assert runner.invoke(cli, ["get", "WHERE"]).output.strip() == "base"
    assert runner.invoke(cli, ["-e", "prod", "get", "WHERE"]).output.strip() == "prod"


def test_export_dotenv_round_trips(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["export"])
    assert result.exit_code == 0
    assert "TWILIO_API_SID=ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx" in result.output
    assert 'MULTILINE="line one\\nline two"' in result.output
    assert parse_strict(result.output) == parse_strict(sample_env.read_text())


def test_export_json(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["TWILIO_AUTH_TOKEN"] == "my secret token"


def test_export_yaml(isolated_cwd, sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "yaml"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert data["SINGLE_QUOTED"] == "hello world"


def test_export_unix_and_win(isolated_cwd):
    (isolated_cwd / ".env").write_text("TOKEN=\"it's secret\"\nPLAIN=abc\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "unix"])
    assert result.exit_code == 0
    assert "export PLAIN=abc" in result.output
    assert "export TOKEN='it'\\''s secret'" in result.output

    result = runner.invoke(cli, ["export", "--format", "win"])
    assert "$env:TOKEN = 'it''s secret'" in result.output


def test_export_to_file(isolated_cwd, sample_env):
    runner = CliRunner()
    out = isolated_cwd / "out.env"
    result = runner.invoke(cli, ["export", "-o", str(out)])
    assert result.exit_code == 0
    assert "Exported 8 variable(s)" in result.output
    assert parse_strict(out.read_text()) == parse_strict(sample_env.read_text())


def test_invalid_config(isolated_cwd):
    (isolated_cwd / ".envious.toml").write_text("[envious\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code != 0
    assert "Invalid configuration" in result.output


def test_main_entry_point(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["envious", "--help"])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 0
    assert "check" in capsys.readouterr().out
