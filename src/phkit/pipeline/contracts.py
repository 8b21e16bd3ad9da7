# phkit:header:start
#
#   project      : PHKit
#   file         : contracts.py
#   file_relpath : src/phkit/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Type contracts for pipeline jobs (runner-facing).

This module defines the minimal protocol that every job must implement. The
runner holds jobs by reference and never inspects them beyond calling ``run()``.

Lifecycle
---------
1) The runner calls ``job.run()``.
2) If the call returns an awaitable, the runner awaits it (sequence) or
   schedules it alongside the other jobs (parallel).
3) A job signals failure by raising; the runner propagates the exception as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable


@runtime_checkable
class Job(Protocol):
    """Protocol for a single unit of work.

    Any object with a ``run()`` method satisfies it: a plain method doing its
    work synchronously, or an ``async def run()`` coroutine method.
    """

    def run(self) -> Awaitable[None] | None:
        """Perform the job's side effects.

        Returns:
            Awaitable[None] | None: ``None`` when the work completed synchronously,
                otherwise an awaitable that completes when the work is done.
        """
        ...
