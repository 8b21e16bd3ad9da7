# phkit:header:start
#
#   project      : PHKit
#   file         : render.py
#   file_relpath : src/phkit/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit `render` command.

Renders one or more template files (or STDIN via ``-``) with placeholder values
taken from TOML values files (``--values``) and inline assignments (``--set``).

Each template is a job in a [`Pipeline`][phkit.pipeline.Pipeline]. By default the
jobs run in sequence; ``--parallel`` runs them concurrently. Printed output always
follows the order of the arguments. With the global ``-q`` nothing is printed;
templates are still rendered and written to ``--output-dir``.

Examples:
    Render a template with an inline value::

        phkit render greeting.txt --set name=World

    Render several templates concurrently into a directory::

        phkit render a.txt b.txt --values site.toml --parallel --output-dir out/
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from phkit.cli.errors import PhkitUsageError, from_exception
from phkit.cli.jobs import RenderJob
from phkit.cli.options import get_effective_verbosity
from phkit.config.logging import get_logger
from phkit.config.values import load_values_file, merge_values, parse_assignment
from phkit.constants import STDIN_SENTINEL
from phkit.errors import ValuesFileError
from phkit.pipeline import Pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from phkit.cli.console import ConsoleLike
    from phkit.config.logging import PhkitLogger
    from phkit.config.values import ScalarValue, ValuesTable

logger: PhkitLogger = get_logger(__name__)


def collect_values(
    values_files: Sequence[Path],
    assignments: Sequence[str],
) -> ValuesTable:
    """Merge values files (in order) and then inline assignments into one table.

    Raises:
        PhkitUsageError: If an assignment is not of the form ``KEY=VALUE``.
        PhkitCliError: If a values file is missing or invalid.
    """
    layers: list[dict[str, ScalarValue]] = []
    for path in values_files:
        try:
            layers.append(load_values_file(path))
        except (OSError, ValuesFileError) as exc:
            raise from_exception(exc, subject=str(path)) from exc

    inline: dict[str, ScalarValue] = {}
    for assignment in assignments:
        try:
            key, value = parse_assignment(assignment)
        except ValueError as exc:
            raise PhkitUsageError(f"--set: {exc}") from exc
        inline[key] = value
    layers.append(inline)

    return merge_values(layers)


def read_stdin_text() -> str:
    """Read the whole of STDIN as text, mapping decode and I/O errors to CLI errors."""
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise from_exception(exc, subject="<stdin>") from exc


def build_jobs(
    templates: Sequence[str],
    values: ValuesTable,
    *,
    output_dir: Path | None,
    stdin_filename: str,
) -> list[RenderJob]:
    """Create one `RenderJob` per template argument (``-`` reads STDIN once).

    Raises:
        PhkitUsageError: If ``-`` is given more than once, or if two templates
            would be written to the same file in ``output_dir``.
    """
    if list(templates).count(STDIN_SENTINEL) > 1:
        raise PhkitUsageError("STDIN ('-') may be given at most once.")

    jobs: list[RenderJob] = []
    for template in templates:
        if template == STDIN_SENTINEL:
            jobs.append(
                RenderJob(
                    name=stdin_filename,
                    values=values,
                    text=read_stdin_text(),
                    output_dir=output_dir,
                )
            )
        else:
            path = Path(template)
            jobs.append(RenderJob(name=path.name, values=values, path=path, output_dir=output_dir))

    if output_dir is not None:
        seen: set[str] = set()
        for job in jobs:
            if job.name in seen:
                raise PhkitUsageError(
                    f"--output-dir: more than one template would be written to '{job.name}'."
                )
            seen.add(job.name)
    return jobs


def run_jobs(jobs: Sequence[RenderJob], *, parallel: bool) -> None:
    """Run the render jobs through a pipeline, translating failures to CLI errors."""
    pipeline = Pipeline(jobs)
    try:
        asyncio.run(pipeline.parallel() if parallel else pipeline.sequence())
    except Exception as exc:
        failed: RenderJob | None = next((job for job in jobs if job.rendered is None), None)
        subject: str = str(failed.path or failed.name) if failed is not None else "render"
        logger.error("Render failed for %s: %s", subject, exc)
        raise from_exception(exc, subject=subject) from exc


@click.command(
    name="render",
    help="Render template files (or STDIN via '-') with placeholder values.",
)
@click.argument("templates", nargs=-1, type=str)
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a placeholder value (repeatable; overrides --values).",
)
@click.option(
    "--values",
    "values_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read placeholder values from a TOML file (repeatable; later files win).",
)
@click.option(
    "--parallel",
    is_flag=True,
    default=False,
    help="Render templates concurrently instead of one after another.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write each rendered template into this directory instead of printing it.",
)
@click.option(
    "--stdin-filename",
    default="stdin",
    show_default=True,
    help="Output file name for a template read from STDIN (with --output-dir).",
)
def render_command(
    *,
    templates: tuple[str, ...],
    assignments: tuple[str, ...],
    values_files: tuple[Path, ...],
    parallel: bool,
    output_dir: Path | None,
    stdin_filename: str,
) -> None:
    """Render templates with values from ``--values`` files and ``--set`` assignments.

    Args:
        templates (tuple[str, ...]): Template paths; ``-`` (or no argument) reads STDIN.
        assignments (tuple[str, ...]): Inline ``KEY=VALUE`` values.
        values_files (tuple[Path, ...]): TOML values files.
        parallel (bool): Run the render jobs in parallel.
        output_dir (Path | None): Directory for rendered files; print when None.
        stdin_filename (str): Output name used for the STDIN template.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    values: ValuesTable = collect_values(values_files, assignments)
    logger.debug("Rendering with %d value(s)", len(values))

    jobs: list[RenderJob] = build_jobs(
        templates or (STDIN_SENTINEL,),
        values,
        output_dir=output_dir,
        stdin_filename=stdin_filename,
    )

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    run_jobs(jobs, parallel=parallel)

    if vlevel < 0:
        # Quiet: render (and write) only; the exit code reports the outcome
        return

    for job in jobs:
        if job.written_to is not None:
            if vlevel > 0:
                console.print(f"{job.name} -> {job.written_to}")
        elif job.rendered is not None:
            console.print(job.rendered, nl=False)

