# phkit:header:start
#
#   project      : PHKit
#   file         : version.py
#   file_relpath : src/phkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit `version` command.

Prints the current PHKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from phkit.cli.options import get_effective_verbosity
from phkit.constants import PHKIT_VERSION

if TYPE_CHECKING:
    from phkit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PHKit.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "markdown"]),
    default="text",
    help="Output format (text, json, markdown).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of PHKit.

    Args:
        output_format (str): One of ``text`` (default), ``json`` or ``markdown``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)

    if output_format == "json":
        console.print(json.dumps({"version": PHKIT_VERSION}))
    elif output_format == "markdown":
        console.print("# PHKit Version\n")
        console.print(f"**PHKit version: {PHKIT_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("PHKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PHKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(PHKIT_VERSION, bold=True))
