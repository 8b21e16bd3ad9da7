# phkit:header:start
#
#   project      : PHKit
#   file         : errors.py
#   file_relpath : src/phkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""Exceptions for PHKit CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library exceptions are translated by
    [`from_exception`][phkit.cli.errors.from_exception].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from phkit.cli.exit_codes import ExitCode
from phkit.errors import ValuesFileError


class PhkitCliError(click.ClickException):
    """Base class for all PHKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class PhkitUsageError(PhkitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PhkitConfigError(PhkitCliError):
    """Error for invalid values files."""

    exit_code = ExitCode.CONFIG_ERROR


class PhkitFileNotFoundError(PhkitCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PhkitPermissionDeniedError(PhkitCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class PhkitIOError(PhkitCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class PhkitEncodingError(PhkitCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class PhkitPipelineError(PhkitCliError):
    """Error for a render job failing in an unexpected way."""

    exit_code = ExitCode.PIPELINE_ERROR


def from_exception(exc: Exception, *, subject: str) -> PhkitCliError:
    """Map a library or filesystem exception to the matching CLI error.

    Args:
        exc (Exception): The exception raised while processing ``subject``.
        subject (str): What was being processed (usually a path), for the message.

    Returns:
        PhkitCliError: The CLI error to raise (chain it with ``from exc``).
    """
    if isinstance(exc, ValuesFileError):
        return PhkitConfigError(str(exc))
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return PhkitFileNotFoundError(f"{subject}: file not found")
    if isinstance(exc, PermissionError):
        return PhkitPermissionDeniedError(f"{subject}: permission denied")
    if isinstance(exc, UnicodeDecodeError):
        return PhkitEncodingError(f"{subject}: cannot decode as UTF-8 ({exc.reason})")
    if isinstance(exc, OSError):
        return PhkitIOError(f"{subject}: {exc}")
    return PhkitPipelineError(f"{subject}: {exc}")
