"""Structured error handling for xattr subprocess operations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    XATTR_NOT_FOUND = "XATTR_NOT_FOUND"
    LAUNCH_FAILED = "LAUNCH_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    SUBPROCESS_CRASHED = "SUBPROCESS_CRASHED"
    SUBPROCESS_FAILED = "SUBPROCESS_FAILED"
    UNKNOWN = "UNKNOWN"


class LaunchError(Exception):
    """Raised when the xattr process cannot be started at all."""

    def __init__(self, command: list[str], error: OSError) -> None:
        self.command = command
        self.error = error
        description = error.strerror or str(error)
        super().__init__(f"Could not launch {command[0]}: {description}")


class SubprocessError(Exception):
    """Raised when xattr exits with a non-zero code."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Command {' '.join(command)!r} exited with code {returncode}"
        )


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    error: str
    category: str
    hint: str
    retryable: bool = False


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, LaunchError):
        if isinstance(error.error, FileNotFoundError):
            return (
                ErrorCategory.XATTR_NOT_FOUND,
                "xattr binary not found — this tool only works on macOS",
            )
        return (
            ErrorCategory.LAUNCH_FAILED,
            "xattr could not be started — check its permissions",
        )

    if isinstance(error, SubprocessError):
        stderr = error.stderr.lower()

        if "permission denied" in stderr or "operation not permitted" in stderr:
            return (
                ErrorCategory.PERMISSION_DENIED,
                "Permission denied — the bundle may be owned by another user or protected by SIP",
            )
        if "no such file" in stderr:
            return (
                ErrorCategory.PATH_NOT_FOUND,
                "Path not found — the item was moved or deleted after the drop",
            )
        if error.returncode < 0:
            return (
                ErrorCategory.SUBPROCESS_CRASHED,
                f"xattr was killed by signal {-error.returncode}",
            )
        return (
            ErrorCategory.SUBPROCESS_FAILED,
            f"xattr failed (exit {error.returncode}) — check the message for details",
        )

    if isinstance(error, PermissionError):
        return (ErrorCategory.PERMISSION_DENIED, str(error))
    if isinstance(error, FileNotFoundError):
        return (ErrorCategory.PATH_NOT_FOUND, str(error))
    if isinstance(error, ValueError):
        return (
            ErrorCategory.CONFIG_INVALID,
            "Invalid ENABLE_APP_* setting — fix the environment or ~/.config/enable-app-mcp/.env",
        )

    return (ErrorCategory.UNKNOWN, str(error))


def make_tool_error(error: Exception) -> dict:
    """Create a serialisable ToolError dict from an exception."""
    cat, hint = categorize_error(error)
    return ToolError(
        error=str(error),
        category=cat.value,
        hint=hint,
        retryable=cat == ErrorCategory.SUBPROCESS_CRASHED,
    ).model_dump()
