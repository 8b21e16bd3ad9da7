# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit job pipeline package.

The public API is the [`Job`][phkit.pipeline.contracts.Job] protocol and the
[`Pipeline`][phkit.pipeline.runner.Pipeline] runner with its two execution
strategies, ``sequence()`` and ``parallel()``.
"""

from __future__ import annotations

from phkit.pipeline.contracts import Job
from phkit.pipeline.runner import Pipeline, run_parallel, run_sequence

__all__ = [
    "Job",
    "Pipeline",
    "run_parallel",
    "run_sequence",
]
