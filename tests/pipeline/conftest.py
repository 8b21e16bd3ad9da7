# phkit:header:start
#
#   project      : PHKit
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Shared jobs and fixtures for pipeline runner tests.

Jobs record their side effects into a `DataPool` that each test creates
explicitly (via the ``data_pool`` fixture), so tests never share state.

Delays are given in seconds. The canonical trio used across tests is
A=60ms, B=20ms, C=40ms: list order is A, B, C while delay order is B, C, A.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from phkit.pipeline import Pipeline
from tests.conftest import fixture

DELAY_A: float = 0.06
DELAY_B: float = 0.02
DELAY_C: float = 0.04


@dataclass
class DataPool:
    """Append-only record of job side effects."""

    data: list[str] = field(default_factory=list)

    def add(self, value: str) -> None:
        self.data.append(value)

    def get(self) -> list[str]:
        return list(self.data)

    def clear(self) -> None:
        self.data.clear()


class JobError(RuntimeError):
    """Error raised by `FailingJob`."""


@dataclass
class DelayedJob:
    """Asynchronous job: sleep for ``delay`` seconds, then record ``name``."""

    pool: DataPool
    name: str
    delay: float

    async def run(self) -> None:
        await asyncio.sleep(self.delay)
        self.pool.add(self.name)


@dataclass
class TracedJob:
    """Asynchronous job recording both its start and its end."""

    pool: DataPool
    name: str
    delay: float

    async def run(self) -> None:
        self.pool.add(f"start:{self.name}")
        await asyncio.sleep(self.delay)
        self.pool.add(f"end:{self.name}")


@dataclass
class SyncJob:
    """Synchronous job recording ``name`` immediately."""

    pool: DataPool
    name: str

    def run(self) -> None:
        self.pool.add(self.name)


@dataclass
class FailingJob:
    """Asynchronous job that sleeps, records ``name`` as settled, then raises ``error``."""

    pool: DataPool
    name: str
    delay: float
    error: BaseException = field(default_factory=lambda: JobError("boom"))

    async def run(self) -> None:
        await asyncio.sleep(self.delay)
        self.pool.add(f"failed:{self.name}")
        raise self.error


@dataclass
class SyncFailingJob:
    """Synchronous job raising ``error`` as soon as it is started."""

    pool: DataPool
    name: str
    error: BaseException = field(default_factory=lambda: JobError("sync boom"))

    def run(self) -> None:
        self.pool.add(f"failed:{self.name}")
        raise self.error


@fixture()
def data_pool() -> DataPool:
    """Return a fresh, empty data pool."""
    return DataPool()


@fixture()
def abc_pipeline(data_pool: DataPool) -> Pipeline:
    """Pipeline of three delayed jobs: A (60ms), B (20ms), C (40ms)."""
    return Pipeline(
        [
            DelayedJob(data_pool, "A", DELAY_A),
            DelayedJob(data_pool, "B", DELAY_B),
            DelayedJob(data_pool, "C", DELAY_C),
        ]
    )
