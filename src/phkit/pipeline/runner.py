# phkit:header:start
#
#   project      : PHKit
#   file         : runner.py
#   file_relpath : src/phkit/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Run an ordered list of jobs sequentially or in parallel.

```python
import asyncio

from phkit.pipeline import Pipeline


class Greet:
    def __init__(self, name: str, delay: float) -> None:
        self.name = name
        self.delay = delay

    async def run(self) -> None:
        await asyncio.sleep(self.delay)
        print(self.name)


pipeline = Pipeline([Greet("A", 0.03), Greet("B", 0.01)])
asyncio.run(pipeline.sequence())  # prints A, then B
asyncio.run(pipeline.parallel())  # prints B, then A
```

The runner does not lock, deduplicate, retry or isolate anything: overlapping
calls on the same pipeline interleave freely, and jobs sharing mutable state must
be serialized by the caller.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING

from phkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable, Iterator

    from phkit.config.logging import PhkitLogger

    from .contracts import Job

logger: PhkitLogger = get_logger(__name__)


def describe_job(job: Job) -> str:
    """Return a short label for a job, used in log messages."""
    name: object = getattr(job, "name", None)
    if isinstance(name, str) and name:
        return f"{type(job).__name__}({name})"
    return type(job).__name__


class Pipeline:
    """An immutable, ordered collection of jobs.

    Args:
        jobs (Iterable[Job]): Jobs to execute, in order. May be empty.

    Attributes:
        jobs (tuple[Job, ...]): The jobs, in the order given at construction.
    """

    __slots__ = ("_jobs",)

    def __init__(self, jobs: Iterable[Job]) -> None:
        self._jobs: tuple[Job, ...] = tuple(jobs)

    @property
    def jobs(self) -> tuple[Job, ...]:
        """The jobs, in the order given at construction."""
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __repr__(self) -> str:
        return f"Pipeline([{', '.join(describe_job(job) for job in self._jobs)}])"

    async def sequence(self) -> None:
        """Execute jobs one after another in list order.

        Each job starts only after the previous one has fully completed. The first
        exception raised by a job stops the sequence: later jobs are never started
        and the exception propagates unchanged.
        """
        logger.debug("Running %d job(s) in sequence", len(self._jobs))
        for index, job in enumerate(self._jobs):
            logger.trace("sequence: starting job #%d %s", index, describe_job(job))
            result: Awaitable[None] | None = job.run()
            if inspect.isawaitable(result):
                await result
            logger.trace("sequence: finished job #%d %s", index, describe_job(job))
        logger.debug("Sequence of %d job(s) completed", len(self._jobs))

    async def parallel(self) -> None:
        """Execute all jobs simultaneously and wait until every job has settled.

        Every job is started without waiting for the others; completion order is
        determined by each job's own latency. A synchronous job that raises while
        being started is recorded as settled and the remaining jobs still start.

        Once all jobs have settled, the exception of the first failing job *in list
        order* is re-raised unchanged. Other failures are logged and dropped.
        """
        logger.debug("Running %d job(s) in parallel", len(self._jobs))

        failures: list[tuple[int, BaseException]] = []
        pending: list[tuple[int, Awaitable[None]]] = []

        for index, job in enumerate(self._jobs):
            logger.trace("parallel: starting job #%d %s", index, describe_job(job))
            try:
                result: Awaitable[None] | None = job.run()
            except Exception as exc:
                failures.append((index, exc))
                continue
            if inspect.isawaitable(result):
                pending.append((index, result))

        outcomes: list[object] = await asyncio.gather(
            *(awaitable for _, awaitable in pending),
            return_exceptions=True,
        )
        for (index, _), outcome in zip(pending, outcomes):
            if isinstance(outcome, BaseException):
                failures.append((index, outcome))

        if failures:
            failures.sort(key=lambda item: item[0])
            for index, exc in failures[1:]:
                logger.debug("parallel: job #%d also failed: %r", index, exc)
            index, first = failures[0]
            logger.debug(
                "Parallel run of %d job(s) failed at job #%d (%d failure(s))",
                len(self._jobs),
                index,
                len(failures),
            )
            raise first

        logger.debug("Parallel run of %d job(s) completed", len(self._jobs))


def run_sequence(jobs: Iterable[Job]) -> None:
    """Blocking helper: run ``jobs`` in sequence on a fresh event loop.

    Must not be called from inside a running event loop; use
    `Pipeline.sequence` there instead.
    """
    asyncio.run(Pipeline(jobs).sequence())


def run_parallel(jobs: Iterable[Job]) -> None:
    """Blocking helper: run ``jobs`` in parallel on a fresh event loop."""
    asyncio.run(Pipeline(jobs).parallel())
