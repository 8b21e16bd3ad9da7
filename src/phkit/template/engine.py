# phkit:header:start
#
#   project      : PHKit
#   file         : engine.py
#   file_relpath : src/phkit/template/engine.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""A lightweight template engine for string interpolation with modifiers.

Placeholders take two forms:

- ``{{key}}``: replaced by the formatted value of ``key``, or by the literal
  text ``key`` when nothing usable is set.
- ``{{modifier:key}}``: ``key`` is resolved as above, then passed through the
  callable stored under ``modifier``. If ``modifier`` is not a callable, the
  resolved text is inserted unmodified.

```python
from phkit.template import Template

template = (
    Template.create("{{upper:person}} is {{age}} years old{{twice:!}}")
    .set("person", "Jamie")
    .set("age", 30)
    .set("upper", str.upper)
    .set("twice", lambda s: s * 2)
)
template.render()  # 'JAMIE is 30 years old!!'
```

Identifiers are ``[A-Za-z0-9_]+``; the second segment is any non-empty run of
characters other than ``}``. Anything else between braces (``{{}}``, ``{{*}}``,
``{{name:}}``) is not a placeholder and is left verbatim. Only the part of the
second segment before any further ``:`` is the value key, so ``{{wrap:a:b}}``
wraps the value of ``a``; an empty value key (``{{wrap::b}}``) falls back to a
plain ``{{wrap}}`` lookup. Substituted text is never scanned again.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from phkit.config.logging import get_logger
from phkit.template.values import check_value, format_value, is_modifier, normalize_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from phkit.config.logging import PhkitLogger
    from phkit.template.values import Key, Value

logger: PhkitLogger = get_logger(__name__)

TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{([A-Za-z0-9_]+)(?::([^}]+))?\}\}")


def find_tokens(text: str) -> list[str]:
    """Return the distinct placeholder tokens of ``text`` in order of first appearance."""
    return list(dict.fromkeys(match.group(0) for match in TOKEN_PATTERN.finditer(text)))


class Template:
    """A template string bound to a mutable placeholder table.

    Instances are created with [`Template.create`][phkit.template.engine.Template.create].
    Rendering is non-destructive and always reflects the latest ``set`` calls.
    """

    __slots__ = ("_placeholders", "_text")

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._placeholders: dict[str, Value] = {}

    @classmethod
    def create(cls, text: str) -> Template:
        """Create a new Template instance.

        Args:
            text (str): The template string containing placeholders.

        Returns:
            Template: A new Template with an empty placeholder table.
        """
        return cls(text)

    @property
    def text(self) -> str:
        """The template string."""
        return self._text

    @property
    def placeholders(self) -> Mapping[str, Value]:
        """Read-only view of the placeholder table."""
        return MappingProxyType(self._placeholders)

    def set(self, key: Key, value: Value) -> Template:
        """Set a value for a placeholder or modifier, overwriting any previous one.

        Args:
            key (Key): The key to set; ``int`` keys are stored as their decimal string.
            value (Value): The value to associate with the key.

        Returns:
            Template: This instance, for chaining.

        Raises:
            TemplateValueError: If the key or value type is not supported.
        """
        self._placeholders[normalize_key(key)] = check_value(value)
        return self

    def update(self, values: Mapping[Key, Value]) -> Template:
        """Set every item of ``values``; returns this instance, for chaining."""
        for key, value in values.items():
            self.set(key, value)
        return self

    def render(self) -> str:
        """Render the template by replacing all placeholders and applying modifiers.

        Returns:
            str: The rendered string.
        """
        substitutions: dict[str, str] = {}

        def _substitute(match: re.Match[str]) -> str:
            token: str = match.group(0)
            if token not in substitutions:
                substitutions[token] = self._resolve(match.group(1), match.group(2))
            return substitutions[token]

        result: str = TOKEN_PATTERN.sub(_substitute, self._text)
        logger.trace("Rendered %d distinct placeholder(s)", len(substitutions))
        return result

    def _lookup(self, key: str) -> str:
        if key not in self._placeholders:
            logger.trace("Placeholder '%s' is not set; using the key itself", key)
            return key
        text: str | None = format_value(self._placeholders[key])
        return key if text is None else text

    def _resolve(self, mod_key: str, second: str | None) -> str:
        # Segments after the value key are ignored: {{mod:val:extra}}
        val_key: str = second.split(":", 1)[0] if second else ""
        if not val_key:
            return self._lookup(mod_key)

        text: str = self._lookup(val_key)
        modifier: Value = self._placeholders.get(mod_key)
        if is_modifier(modifier):
            return modifier(text)
        return text

    def __repr__(self) -> str:
        return f"Template({self._text!r}, keys={sorted(self._placeholders)!r})"
