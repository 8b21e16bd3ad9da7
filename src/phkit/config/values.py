# phkit:header:start
#
#   project      : PHKit
#   file         : values.py
#   file_relpath : src/phkit/config/values.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Load template placeholder values from TOML sources.

A values file is a TOML document whose scalar entries become placeholder values:

```toml
name = "World"
age = 30
verbose = true
```

When the document has a ``[values]`` table, that table is used instead of the
top level, so values can live next to unrelated settings:

```toml
title = "ignored"

[values]
name = "World"
```

Parsing is done with `tomlkit` and returned as a plain `dict`. Only strings,
integers, floats and booleans are accepted; arrays, nested tables and TOML
date/time values raise [`ValuesFileError`][phkit.errors.ValuesFileError].

Inline ``KEY=VALUE`` assignments (as given on the command line) are parsed by
[`parse_assignment`][phkit.config.values.parse_assignment] and always stay strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from phkit.config.logging import get_logger
from phkit.constants import VALUES_TABLE_NAME
from phkit.errors import ValuesFileError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from phkit.config.logging import PhkitLogger

ScalarValue = str | int | float | bool
ValuesTable = dict[str, ScalarValue]

logger: PhkitLogger = get_logger(__name__)


def parse_values_text(text: str, *, source: str = "<string>") -> ValuesTable:
    """Parse TOML text into a flat placeholder values table.

    Args:
        text (str): TOML document text.
        source (str): Name of the document, used in error messages and logs.

    Returns:
        ValuesTable: Mapping of placeholder keys to scalar values.

    Raises:
        ValuesFileError: If the text is not valid TOML, if ``[values]`` is not a
            table, or if an entry is not a supported scalar.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise ValuesFileError(f"{source}: invalid TOML: {exc}") from exc

    data: dict[str, Any] = cast("dict[str, Any]", doc.unwrap())

    table_any: Any = data.get(VALUES_TABLE_NAME, data)
    if not isinstance(table_any, dict):
        raise ValuesFileError(f"{source}: '{VALUES_TABLE_NAME}' must be a table")
    table: dict[str, Any] = cast("dict[str, Any]", table_any)

    values: ValuesTable = {}
    for key, value in table.items():
        # bool is a subclass of int, so the check also covers it
        if not isinstance(value, (str, int, float)):
            raise ValuesFileError(
                f"{source}: value for '{key}' must be a string, number or boolean "
                f"(got {type(value).__name__})"
            )
        values[key] = value

    logger.debug("Loaded %d value(s) from %s", len(values), source)
    return values


def load_values_file(path: Path) -> ValuesTable:
    """Load and parse a TOML values file from the filesystem.

    Encoding is assumed to be UTF-8. Filesystem errors (`OSError`) propagate
    to the caller unchanged.

    Args:
        path (Path): Path to the TOML values file.

    Returns:
        ValuesTable: Mapping of placeholder keys to scalar values.
    """
    text: str = path.read_text(encoding="utf-8")
    return parse_values_text(text, source=str(path))


def parse_assignment(assignment: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` assignment at the first ``=``.

    Args:
        assignment (str): The raw assignment text.

    Returns:
        tuple[str, str]: The stripped key and the (unstripped) value.

    Raises:
        ValueError: If there is no ``=`` or the key is empty.
    """
    key, sep, value = assignment.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"Expected KEY=VALUE, got {assignment!r}")
    return key, value


def merge_values(layers: Iterable[Mapping[str, ScalarValue]]) -> ValuesTable:
    """Merge value tables; later layers override earlier ones."""
    merged: ValuesTable = {}
    for layer in layers:
        merged.update(layer)
    return merged
