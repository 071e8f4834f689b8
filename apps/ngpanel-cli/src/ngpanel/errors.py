"""Custom exceptions for ngpanel operations."""

from __future__ import annotations

from ngpanel_common import CommandResult


class PanelError(Exception):
    """Base exception for all ngpanel operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class InvalidNameError(PanelError):
    """A path-derived input failed its name pattern."""


class NotFoundError(PanelError):
    """Referenced site, version, backup, template or log is absent."""


class AlreadyExistsError(PanelError):
    """Target file already exists."""


class AlreadyEnabledError(PanelError):
    """Site already has an enabled link."""


class NotEnabledError(PanelError):
    """Site has no enabled link to remove."""


class ValidationFailedError(PanelError):
    """NGINX rejected the candidate configuration.

    The write is reverted unless ``rollback_error`` says the restore failed,
    in which case the rejected content is still on disk.
    """

    def __init__(self, result: CommandResult, *, rollback_error: str | None = None):
        if rollback_error:
            headline = f"nginx -t failed. Rollback failed, the rejected config is still in place: {rollback_error}"
        else:
            headline = "nginx -t failed. Changes reverted."
        super().__init__(f"{headline}\n\nSTDOUT:\n{result.stdout}\n\nSTDERR:\n{result.stderr}")
        self.result = result
        self.rollback_error = rollback_error


class IOFailureError(PanelError):
    """Filesystem read/write failed."""


class ProcessFailureError(PanelError):
    """External utility errored or timed out."""


class CorruptIndexError(PanelError):
    """A JSON index file could not be parsed."""
