# phkit:header:start
#
#   project      : PHKit
#   file         : __main__.py
#   file_relpath : src/phkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Module entry point for running PHKit via ``python -m phkit``.

It delegates directly to :func:`phkit.cli.main.cli`, so the module interface and
the ``phkit`` console script share a single entry point.

Examples:
    Render a template using the module interface::

        python -m phkit render greeting.txt --set name=World
"""

from __future__ import annotations

from phkit.cli.main import cli

if __name__ == "__main__":
    cli()
