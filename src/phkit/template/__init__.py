# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit template engine package.

The public API is [`Template`][phkit.template.engine.Template] together with the
value helpers in [`phkit.template.values`][phkit.template.values].
"""

from __future__ import annotations

from phkit.template.engine import TOKEN_PATTERN, Template, find_tokens
from phkit.template.values import Key, Modifier, Value, format_value

__all__ = [
    "TOKEN_PATTERN",
    "Key",
    "Modifier",
    "Template",
    "Value",
    "find_tokens",
    "format_value",
]
