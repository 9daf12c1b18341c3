"""Subprocess executor for the macOS ``xattr`` command."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from .errors import LaunchError, SubprocessError

logger = logging.getLogger(__name__)

XATTR_BINARY = "/usr/bin/xattr"
# -c clears every attribute, -r recurses into bundle contents.
CLEAR_FLAGS = "-cr"


@dataclass(frozen=True)
class SubprocessResult:
    """Immutable result of an xattr execution."""

    stderr: str
    returncode: int
    duration_seconds: float
    command: list[str]


def _decode_stderr(data: bytes | None) -> str:
    """Decode and trim stderr; undecodable output counts as empty."""
    if not data:
        return ""
    try:
        return data.decode("utf-8").strip()
    except UnicodeDecodeError:
        logger.debug("Discarding %d byte(s) of non-UTF-8 stderr", len(data))
        return ""


async def clear_attributes(path: str) -> SubprocessResult:
    """Recursively clear all extended attributes on *path*.

    Runs ``xattr -cr <path>`` with an argument list (never shell=True) and
    waits for it to exit. There is no timeout: a hung xattr blocks the caller.
    The path is passed through unchecked, so a missing path surfaces as a
    non-zero exit.

    Args:
        path: Absolute or relative filesystem path.

    Returns:
        SubprocessResult with trimmed stderr, returncode and duration.

    Raises:
        LaunchError: When the xattr process cannot be spawned.
        SubprocessError: On non-zero exit code.
    """
    cmd = [XATTR_BINARY, CLEAR_FLAGS, path]
    logger.info("Running: %s", " ".join(cmd))
    start = time.monotonic()

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        logger.error("Could not launch %s: %s", XATTR_BINARY, exc)
        raise LaunchError(cmd, exc) from exc

    _, stderr_bytes = await proc.communicate()
    elapsed = time.monotonic() - start

    result = SubprocessResult(
        stderr=_decode_stderr(stderr_bytes),
        returncode=proc.returncode or 0,
        duration_seconds=round(elapsed, 2),
        command=cmd,
    )

    if result.returncode != 0:
        logger.error(
            "xattr failed (exit %d): %s\nstderr: %s",
            result.returncode,
            " ".join(cmd),
            result.stderr[:500],
        )
        raise SubprocessError(cmd, result.returncode, result.stderr)

    logger.info("xattr completed in %.2fs", elapsed)
    return result
