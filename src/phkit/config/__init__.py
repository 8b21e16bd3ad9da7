# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit configuration package.

Holds the logging setup ([`phkit.config.logging`][phkit.config.logging]) and the
TOML values-file loader ([`phkit.config.values`][phkit.config.values]) used by
the CLI to feed template placeholders.
"""

from __future__ import annotations
