# phkit:header:start
#
#   project      : PHKit
#   file         : test_failures.py
#   file_relpath : tests/pipeline/test_failures.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Failure propagation for sequence() and parallel().

Errors are never wrapped: the exception object raised by the job is the one
seen by the caller.
"""

from __future__ import annotations

import pytest

from phkit.pipeline import Pipeline
from tests.pipeline.conftest import (
    DataPool,
    DelayedJob,
    FailingJob,
    JobError,
    SyncFailingJob,
)

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


@pytest.mark.asyncio
async def test_sequence_stops_at_first_failure(data_pool: DataPool) -> None:
    """Jobs after the failing one never start and the job's exception propagates."""
    error = JobError("step X failed")
    pipeline = Pipeline(
        [
            DelayedJob(data_pool, "A", 0.01),
            FailingJob(data_pool, "X", 0.01, error),
            DelayedJob(data_pool, "C", 0.0),
        ]
    )

    with pytest.raises(JobError) as excinfo:
        await pipeline.sequence()

    assert excinfo.value is error
    assert data_pool.get() == ["A", "failed:X"]


@pytest.mark.asyncio
async def test_sequence_propagates_sync_failure(data_pool: DataPool) -> None:
    """A synchronous job raising inside sequence() stops the run too."""
    error = ValueError("bad input")
    pipeline = Pipeline(
        [
            SyncFailingJob(data_pool, "S", error),
            DelayedJob(data_pool, "A", 0.0),
        ]
    )

    with pytest.raises(ValueError) as excinfo:
        await pipeline.sequence()

    assert excinfo.value is error
    assert data_pool.get() == ["failed:S"]


@pytest.mark.asyncio
async def test_parallel_waits_for_all_jobs_before_raising(data_pool: DataPool) -> None:
    """A fast failure does not orphan slower jobs."""
    error = JobError("fast failure")
    pipeline = Pipeline(
        [
            FailingJob(data_pool, "X", 0.0, error),
            DelayedJob(data_pool, "A", 0.04),
        ]
    )

    with pytest.raises(JobError) as excinfo:
        await pipeline.parallel()

    assert excinfo.value is error
    assert data_pool.get() == ["failed:X", "A"]


@pytest.mark.asyncio
async def test_parallel_surfaces_first_failure_in_list_order(data_pool: DataPool) -> None:
    """With several failures, the earliest job in the list wins, not the earliest to fail."""
    slow_error = JobError("slow")
    fast_error = JobError("fast")
    pipeline = Pipeline(
        [
            FailingJob(data_pool, "slow", 0.04, slow_error),
            DelayedJob(data_pool, "B", 0.01),
            FailingJob(data_pool, "fast", 0.0, fast_error),
        ]
    )

    with pytest.raises(JobError) as excinfo:
        await pipeline.parallel()

    assert excinfo.value is slow_error
    assert data_pool.get() == ["failed:fast", "B", "failed:slow"]


@pytest.mark.asyncio
async def test_parallel_keeps_starting_jobs_after_sync_failure(data_pool: DataPool) -> None:
    """A synchronous failure while starting jobs does not prevent later jobs from running."""
    error = JobError("sync")
    pipeline = Pipeline(
        [
            SyncFailingJob(data_pool, "S", error),
            DelayedJob(data_pool, "A", 0.01),
        ]
    )

    with pytest.raises(JobError) as excinfo:
        await pipeline.parallel()

    assert excinfo.value is error
    assert data_pool.get() == ["failed:S", "A"]


@pytest.mark.asyncio
async def test_parallel_sync_failure_later_in_list_loses_to_earlier_async_failure(
    data_pool: DataPool,
) -> None:
    """The list-order tie-break applies across sync and async failures alike."""
    async_error = JobError("async")
    sync_error = JobError("sync")
    pipeline = Pipeline(
        [
            FailingJob(data_pool, "X", 0.01, async_error),
            SyncFailingJob(data_pool, "S", sync_error),
        ]
    )

    with pytest.raises(JobError) as excinfo:
        await pipeline.parallel()

    assert excinfo.value is async_error
