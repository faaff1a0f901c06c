"""
Converter table: cast kinds and the functions that turn raw tokens into values.

The declaration layer only relies on the table's keys (to validate `cast`
and to generate the CommandBuilder declaration methods); the conversion
functions are used by whichever parser consumes the finalized commands.

Kinds
- boolean / bool   → bool ("true"/"yes"/"on"/"1" and their negatives)
- string           → str
- integer / int    → int
- float            → float
- file             → pathlib.Path (no existence check)
- date             → datetime.date (ISO 8601)
"""
import datetime
import pathlib
from types import MappingProxyType

from .faults import ConfigurationError

_TRUTHY = frozenset({"true", "yes", "on", "y", "1"})
_FALSY = frozenset({"false", "no", "off", "n", "0"})


def _boolean(value, /):
    if isinstance(value, bool):
        return value
    if (lowered := str(value).strip().lower()) in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{value!r} is not a boolean")


CONVERSIONS = MappingProxyType({
    "boolean": _boolean,
    "bool": _boolean,
    "string": str,
    "integer": int,
    "int": int,
    "float": float,
    "file": pathlib.Path,
    "date": datetime.date.fromisoformat,
})

# Alias → canonical kind; finalized options always carry the canonical name.
_CANONICAL = MappingProxyType({
    "bool": "boolean",
    "int": "integer",
})

BOOLEAN = "boolean"
STRING = "string"


def kinds():
    """
    Every registered kind tag, aliases included, in registration order.
    """
    return tuple(CONVERSIONS)


def resolve(kind, /):
    """
    Validate a kind tag and return its canonical form.

    Raises ConfigurationError for anything not in the table.
    """
    if not isinstance(kind, str) or kind not in CONVERSIONS:
        raise ConfigurationError(f"unknown cast kind {kind!r}", cast=kind)
    return _CANONICAL.get(kind, kind)


def is_boolean(kind, /):
    return isinstance(kind, str) and kind in CONVERSIONS and resolve(kind) == BOOLEAN


def convert(kind, value, /):
    """
    Convert one raw token with the function registered for `kind`.
    """
    return CONVERSIONS[resolve(kind)](value)


__all__ = (
    "CONVERSIONS",
    "BOOLEAN",
    "STRING",
    "kinds",
    "resolve",
    "is_boolean",
    "convert",
)
