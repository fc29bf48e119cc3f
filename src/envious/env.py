"""Helpers for reading and converting environment variables.

Lookups read ``os.environ`` unless another mapping (for example the result
of :func:`envious.parse_strict`) is passed as *environ*. Converters take the
string value and raise ``ValueError`` when it does not convert, so bad
configuration fails at startup:

    >>> from envious.env import integer, optional
    >>> integer(optional("POOL_SIZE", "10"))
    10

An empty string is a value: it never triggers a default or a
:class:`MissingEnvError`.
"""

from __future__ import annotations

import ipaddress
import os
import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import SplitResult, urlsplit

E = TypeVar("E", bound=Enum)

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})

_INTERVAL_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)(ms|s|m|h|d)?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

_MS_PER_SUFFIX = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

_MS_PER_UNIT = {
    "milliseconds": 1,
    "seconds": 1000,
    "minutes": 60 * 1000,
    "hours": 60 * 60 * 1000,
    "days": 24 * 60 * 60 * 1000,
}


class MissingEnvError(KeyError):
    """A required environment variable is not set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f'could not fetch environment variable "{self.key}" because it is not set'


def _not_none(value: str | None, kind: str) -> str:
    if value is None:
        raise ValueError(f"cannot convert None to {kind}")
    return value


def optional(key: str, default: str | None = None, *, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of *key*, or *default* when it is not set."""
    source = os.environ if environ is None else environ
    return source.get(key, default)


def required(key: str, *, environ: Mapping[str, str] | None = None) -> str:
    """Return the value of *key*, raising :class:`MissingEnvError` when it is not set."""
    source = os.environ if environ is None else environ
    value = source.get(key)
    if value is None:
        raise MissingEnvError(key)
    return value


def integer(value: str | None) -> int:
    """Plain ASCII decimal with an optional sign; no padding or underscores."""
    value = _not_none(value, "integer")
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f'could not convert "{value}" to integer')
    return int(value)


def float_(value: str | None) -> float:
    value = _not_none(value, "float")
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f'could not convert "{value}" to float')
    return float(value)


def boolean(value: str | None) -> bool:
    """Accepts true/false, 1/0, yes/no and on/off in any case."""
    value = _not_none(value, "boolean")
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f'could not convert "{value}" to boolean')


def member(value: str | None, enum_cls: type[E]) -> E:
    """Return the existing member of *enum_cls* named *value*; never creates one."""
    value = _not_none(value, "member")
    try:
        return enum_cls[value]
    except KeyError:
        raise ValueError(f'{enum_cls.__name__} has no member "{value}"') from None


def list_(
    value: str | None,
    transform: Callable[[str], Any] | None = None,
    *,
    delimiter: str = ",",
    trim: bool = True,
) -> list[Any]:
    """Split *value* on *delimiter*, optionally trimming and transforming each part.

    >>> list_("1, 2, 3", integer)
    [1, 2, 3]
    """
    value = _not_none(value, "list")
    parts = value.split(delimiter)
    if trim:
        parts = [p.strip() for p in parts]
    if transform is None:
        return parts
    return [transform(p) for p in parts]


def interval(value: str | None, unit: str = "milliseconds") -> int:
    """Parse ``300``, ``500ms``, ``30s``, ``5m``, ``2h`` or ``1d`` into *unit*.

    A bare number is milliseconds. Results are truncated toward zero.

    >>> interval("5m", "seconds")
    300
    """
    value = _not_none(value, "interval")
    if unit not in _MS_PER_UNIT:
        raise ValueError(f"unsupported interval unit: {unit!r}")
    m = _INTERVAL_RE.fullmatch(value)
    if m is None:
        raise ValueError(f'could not parse interval "{value}"')
    number, suffix = m.groups()
    milliseconds = int(float(number) * _MS_PER_SUFFIX[suffix or "ms"])
    return milliseconds // _MS_PER_UNIT[unit]


def uri(value: str | None) -> SplitResult:
    value = _not_none(value, "URI")
    try:
        parts = urlsplit(value)
        # port is validated lazily
        parts.port
    except ValueError:
        raise ValueError(f'could not parse URI "{value}"') from None
    if not parts.scheme:
        raise ValueError(f'could not parse URI "{value}"')
    return parts


def ip(value: str | None) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    value = _not_none(value, "IP address")
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        raise ValueError(f'could not parse IP address "{value}"') from None
