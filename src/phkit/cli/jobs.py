# phkit:header:start
#
#   project      : PHKit
#   file         : jobs.py
#   file_relpath : src/phkit/cli/jobs.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Pipeline jobs used by the ``render`` command.

Each [`RenderJob`][phkit.cli.jobs.RenderJob] renders one template source with a
shared set of placeholder values. File reads and writes run in a worker thread
so that ``Pipeline.parallel()`` overlaps them.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from phkit.config.logging import get_logger
from phkit.template import Template

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from phkit.config.logging import PhkitLogger
    from phkit.config.values import ScalarValue

logger: PhkitLogger = get_logger(__name__)


@dataclass
class RenderJob:
    """Render a single template source.

    Attributes:
        name: Display name; also the output file name when ``output_dir`` is set.
        values: Placeholder values applied before rendering.
        path: File to read the template from. Ignored when ``text`` is given.
        text: Template text already in memory (e.g. read from STDIN).
        output_dir: Directory to write the rendered result to, or None to keep
            it in memory only.
        rendered: The rendered text, available once the job has run.
        written_to: The file written, if any.
    """

    name: str
    values: Mapping[str, ScalarValue]
    path: Path | None = None
    text: str | None = None
    output_dir: Path | None = None
    rendered: str | None = field(default=None, init=False)
    written_to: Path | None = field(default=None, init=False)

    async def run(self) -> None:
        """Render in a worker thread and store the result on the job."""
        self.rendered = await asyncio.to_thread(self.render)

    def render(self) -> str:
        """Load, render and optionally write the template; return the rendered text."""
        source: str = self._load()
        rendered: str = Template.create(source).update(self.values).render()
        logger.debug("Rendered %s (%d chars)", self.name, len(rendered))

        if self.output_dir is not None:
            target: Path = self.output_dir / self.name
            target.write_text(rendered, encoding="utf-8")
            self.written_to = target
            logger.info("Wrote %s", target)
        return rendered

    def _load(self) -> str:
        if self.text is not None:
            return self.text
        if self.path is None:
            raise ValueError(f"RenderJob {self.name!r} has neither text nor path")
        return self.path.read_text(encoding="utf-8")
