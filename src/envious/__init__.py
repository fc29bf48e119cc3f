# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envious -- a side-effect-free parser for .env files."""

from envious.api import EnvParseError, ParseFailure, ParseSuccess, parse, parse_entries, parse_strict
from envious.grammar import Entry
from envious.sdk import dotenv_values, load_dotenv
from envious.writer import dumps

__all__ = [
    "__version__",
    "Entry",
    "EnvParseError",
    "ParseFailure",
    "ParseSuccess",
    "dotenv_values",
    "dumps",
    "load_dotenv",
    "parse",
    "parse_entries",
    "parse_strict",
]
__version__ = "0.1.0"
