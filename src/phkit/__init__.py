# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit package.

PHKit bundles two small, independent building blocks: a job pipeline runner
that executes units of work in sequence or in parallel, and a string template
engine with modifier support. A thin CLI combines both to render template files.
"""

from __future__ import annotations
