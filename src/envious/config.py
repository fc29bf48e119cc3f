""".envious.toml configuration loading.

Searches upward from cwd for ``.envious.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envious.toml"
ENV_PLACEHOLDER = "{env}"
DEFAULT_FILES = [".env"]


@dataclass
class EnviousConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    env: str | None = None
    override: bool = False
    encoding: str = "utf-8"
    config_path: Path | None = None

    def resolve_env(self, env_name: str | None = None) -> str | None:
        """Pick the environment name: argument, then ``ENVIOUS_ENV``, then config."""
        return env_name or os.environ.get("ENVIOUS_ENV") or self.env

    def resolve_files(self, env_name: str | None = None) -> list[Path]:
        """Expand ``{env}`` in the configured files relative to the config directory.

        Patterns with a placeholder are dropped when no environment is known.
        """
        env = self.resolve_env(env_name)
        base = self.config_path.parent if self.config_path is not None else Path.cwd()
        paths: list[Path] = []
        for pattern in self.files:
            if ENV_PLACEHOLDER in pattern:
                if not env:
                    continue
                pattern = pattern.replace(ENV_PLACEHOLDER, env)
            path = Path(pattern).expanduser()
            paths.append(path if path.is_absolute() else base / path)
        return paths


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envious.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnviousConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnviousConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    section = raw.get("envious", {})

    files = section.get("files", DEFAULT_FILES)
    if isinstance(files, str):
        files = [files]
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ValueError(f"{path}: 'envious.files' must be a string or a list of strings")

    return EnviousConfig(
        files=list(files),
        env=section.get("env"),
        override=bool(section.get("override", False)),
        encoding=section.get("encoding", "utf-8"),
        config_path=path,
    )
