"""Item-processing pipeline: dropped path in, one result log entry out."""

from __future__ import annotations

import logging
import os
import re
from urllib.parse import unquote, urlparse

from .config import get_config
from .errors import LaunchError, SubprocessError, categorize_error
from .history import ResultLog, get_result_log
from .models.result import DropReport, ResultEntry
from .runner import clear_attributes

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def resolve_drop_item(item: str) -> str | None:
    """Resolve a drop payload (``file://`` URL or plain path) to a local path.

    Bare paths are returned unchanged apart from ``~`` expansion; only a
    leading URL scheme marks the item as a URL.

    Returns:
        The local path, or None when the item does not name a local file.
    """
    stripped = item.strip()
    if not stripped:
        return None

    if not _URL_SCHEME.match(stripped):
        return os.path.expanduser(item)

    parsed = urlparse(stripped)
    if parsed.scheme != "file" or parsed.netloc not in ("", "localhost"):
        return None
    return unquote(parsed.path) or None


def display_name(path: str) -> str:
    """Return the last path component, ignoring a trailing separator."""
    return os.path.basename(path.rstrip(os.sep)) or path


async def process_path(
    path: str,
    name: str | None = None,
    *,
    log: ResultLog | None = None,
    confirmation: str | None = None,
) -> ResultEntry:
    """Clear attributes on *path* and prepend the outcome to the result log.

    Never raises once xattr has been started: launch errors and non-zero
    exits become failure entries so later items keep processing. Config is
    read before xattr runs, so an invalid config fails with no side effect.

    Args:
        path: Filesystem path handed to xattr unchanged.
        name: Display name. Defaults to the last path component.
        log: Target log. Defaults to the process-wide log.
        confirmation: Success message. Defaults to the configured one.

    Returns:
        The entry that was inserted at the head of the log.
    """
    if name is None:
        name = display_name(path)
    if log is None:
        log = get_result_log()
    if confirmation is None:
        confirmation = get_config().confirmation

    try:
        await clear_attributes(path)
    except LaunchError as exc:
        entry = ResultEntry(name=name, success=False, message=str(exc))
        _log_failure(name, exc)
    except SubprocessError as exc:
        entry = ResultEntry(name=name, success=False, message=exc.stderr or UNKNOWN_ERROR)
        _log_failure(name, exc)
    else:
        entry = ResultEntry(name=name, success=True, message=confirmation)
        logger.info("Cleared attributes on %s", name)

    log.prepend(entry)
    return entry


def _log_failure(name: str, exc: Exception) -> None:
    category, hint = categorize_error(exc)
    logger.warning("Failed to clear %s [%s]: %s", name, category.value, hint)


async def process_drop(
    items: list[str],
    *,
    log: ResultLog | None = None,
) -> DropReport:
    """Process every item of one drop gesture, one at a time, in order.

    Items that do not resolve to a local path are skipped and never reach
    the log. Config is resolved once up front: if it is invalid the whole
    drop is rejected before any item runs.
    """
    confirmation = get_config().confirmation
    report = DropReport()
    for item in items:
        path = resolve_drop_item(item)
        if path is None:
            logger.warning("Skipping drop item that is not a local file: %r", item)
            report.skipped.append(item)
            continue
        report.entries.append(
            await process_path(path, log=log, confirmation=confirmation)
        )
    return report
