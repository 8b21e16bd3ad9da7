# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit CLI package.

This package groups all Click command definitions and supporting utilities
for the PHKit command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        phkit = "phkit.cli.main:cli"

All subcommands live in [`phkit.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
