# phkit:header:start
#
#   project      : PHKit
#   file         : values.py
#   file_relpath : src/phkit/template/values.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Placeholder keys, values and their text formatting.

A placeholder value is one of ``str``, ``int``, ``float``, ``bool``, ``None``
or a *modifier*: a callable taking the resolved text of another placeholder
and returning the text to insert.

Formatting rules (see [`format_value`][phkit.template.values.format_value]):

| Value                | Text                                  |
| -------------------- | ------------------------------------- |
| ``str``              | itself                                |
| ``int``              | decimal form                          |
| ``float``            | ``3.0`` -> ``3``, ``nan`` -> ``NaN``  |
| ``True`` / ``False`` | ``true`` / ``false``                  |
| ``None``             | ``NULL``                              |
| modifier, unset      | no text (caller falls back to the key)|
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final, TypeGuard

from phkit.errors import TemplateValueError

Key = str | int
Modifier = Callable[[str], str]
Value = str | int | float | bool | None | Modifier

NULL_TEXT: Final[str] = "NULL"

# Beyond this magnitude integral floats are printed in exponent form
_MAX_PLAIN_FLOAT: Final[float] = 1e21


def is_modifier(value: object) -> TypeGuard[Modifier]:
    """Return True if ``value`` is a modifier (any callable)."""
    return callable(value)


def normalize_key(key: Key) -> str:
    """Return the table key for ``key``; numeric keys become their decimal string.

    Raises:
        TemplateValueError: If ``key`` is neither a ``str`` nor an ``int``.
    """
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise TemplateValueError(f"Placeholder keys must be str or int, got {type(key).__name__}")
    return str(key)


def check_value(value: object) -> Value:
    """Return ``value`` unchanged if it is a supported placeholder value.

    Raises:
        TemplateValueError: If ``value`` is not a supported type.
    """
    if value is None or isinstance(value, (str, int, float)) or is_modifier(value):
        return value  # type: ignore[return-value]
    raise TemplateValueError(
        f"Unsupported placeholder value of type {type(value).__name__}; "
        "expected str, int, float, bool, None or a callable"
    )


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
        return str(int(value))
    return repr(value)


def format_value(value: Value) -> str | None:
    """Format a resolved placeholder value as text.

    Args:
        value (Value): The stored value.

    Returns:
        str | None: The text to insert, or None when the value has no textual
            form (modifiers); callers then fall back to the literal key.
    """
    if value is None:
        return NULL_TEXT
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return None
