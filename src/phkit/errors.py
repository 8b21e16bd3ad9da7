# phkit:header:start
#
#   project      : PHKit
#   file         : errors.py
#   file_relpath : src/phkit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Library exceptions for PHKit.

These exceptions are raised by the library layers (template, configuration).
They carry no presentation concerns; the CLI maps them to
[`phkit.cli.errors`][phkit.cli.errors] exceptions and exit codes.

Errors raised by pipeline jobs are never wrapped in these types: the pipeline
runner propagates the job's own exception unchanged.
"""

from __future__ import annotations


class PhkitError(Exception):
    """Base class for all PHKit library errors."""


class TemplateValueError(PhkitError, TypeError):
    """Raised when a placeholder value is not a supported template value type."""


class ValuesFileError(PhkitError, ValueError):
    """Raised when a TOML values file cannot be turned into placeholder values."""
