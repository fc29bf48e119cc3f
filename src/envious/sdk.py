"""SDK for reading .env files and loading them into the environment (python-dotenv style)."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from envious.api import EnvParseError, parse_strict
from envious.config import EnviousConfig, load_config

PathLike = str | os.PathLike[str]


def resolve_files(
    path: PathLike | Iterable[PathLike] | None = None,
    env_name: str | None = None,
    config: EnviousConfig | None = None,
) -> list[Path]:
    """Return the files to read, in precedence order (later wins).

    Explicit *path* arguments are used as given, with ``{env}`` expanded;
    otherwise the ``files`` list from ``.envious.toml`` (default ``.env``).
    """
    cfg = config or load_config()
    if path is None:
        return cfg.resolve_files(env_name)
    patterns = [path] if isinstance(path, (str, os.PathLike)) else list(path)
    explicit = EnviousConfig(
        files=[os.fspath(p) for p in patterns],
        env=cfg.env,
        config_path=None,
    )
    return explicit.resolve_files(env_name)


def read_file(path: PathLike, encoding: str = "utf-8") -> dict[str, str]:
    """Parse a single file; :class:`EnvParseError` carries the file path."""
    text = Path(path).read_text(encoding=encoding)
    try:
        return parse_strict(text)
    except EnvParseError as e:
        raise e.with_path(path) from None


def dotenv_values(
    path: PathLike | Iterable[PathLike] | None = None,
    *,
    env_name: str | None = None,
    encoding: str | None = None,
) -> dict[str, str]:
    """Return the merged values of every existing file without touching os.environ.

    Parameters
    ----------
    path : str or list of str, optional
        File or files to read. ``{env}`` is replaced by the environment
        name. Defaults to the ``files`` list of ``.envious.toml``, else
        ``.env``.
    env_name : str, optional
        Environment name. Defaults from ENVIOUS_ENV, then config.
    encoding : str, optional
        Text encoding. Defaults from config, else ``utf-8``.

    Returns
    -------
    dict[str, str]
        Later files override earlier ones; missing files are skipped.

    Raises
    ------
    EnvParseError
        When a file holds text that cannot be parsed. Nothing is merged.
    """
    return _merge(path, env_name, encoding, load_config())


def _merge(
    path: PathLike | Iterable[PathLike] | None,
    env_name: str | None,
    encoding: str | None,
    cfg: EnviousConfig,
) -> dict[str, str]:
    merged: dict[str, str] = {}
    for file in resolve_files(path, env_name, cfg):
        if not file.is_file():
            continue
        merged.update(read_file(file, encoding or cfg.encoding))
    return merged


def load_dotenv(
    path: PathLike | Iterable[PathLike] | None = None,
    *,
    override: bool | None = None,
    env_name: str | None = None,
    encoding: str | None = None,
) -> bool:
    """Load .env values into os.environ (python-dotenv compatible API).

    Parameters
    ----------
    path, env_name, encoding
        As for :func:`dotenv_values`.
    override : bool, optional
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set. Defaults from config, else False.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envious import load_dotenv
    >>> load_dotenv()  # .env, or the files named in .envious.toml
    True
    >>> load_dotenv(".env.{env}", env_name="prod")
    True
    """
    cfg = load_config()
    values = _merge(path, env_name, encoding, cfg)
    should_override = cfg.override if override is None else override
    count = 0
    for key, value in values.items():
        if key in os.environ and not should_override:
            continue
        os.environ[key] = value
        count += 1
    return count > 0
