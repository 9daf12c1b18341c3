"""Unquarantine tools: drop items, list results, check prerequisites."""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..config import get_config
from ..errors import make_tool_error
from ..history import get_result_log
from ..pipeline import process_drop
from ..prereqs import check_prereqs
from ..types import DropItems, ResultsLimit

logger = logging.getLogger(__name__)
unquarantine_server = FastMCP("unquarantine")


@unquarantine_server.tool(annotations=ToolAnnotations(readOnlyHint=False, openWorldHint=False))
async def unquarantine_drop(items: DropItems) -> dict:
    """Clear quarantine and other extended attributes on dropped app bundles.

    Each item runs ``xattr -cr`` once, in order. Failures are reported per
    item and never stop the remaining items.

    Args:
        items: Local paths or file:// URLs.

    Returns:
        Dict with the new entries (processing order), skipped items, and the
        total log size.
    """
    try:
        report = await process_drop(items)
    except Exception as exc:
        logger.exception("Drop processing failed")
        return make_tool_error(exc)
    return {
        "entries": [e.model_dump() for e in report.entries],
        "skipped": report.skipped,
        "log_size": len(get_result_log()),
    }


@unquarantine_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
async def unquarantine_results(limit: ResultsLimit = None) -> dict:
    """List processing results, most recent first.

    Args:
        limit: Max entries to return.

    Returns:
        Dict with entries and the total number of results recorded.
    """
    log = get_result_log()
    if limit is None:
        limit = get_config().results_limit
    return {
        "entries": [e.model_dump() for e in log.entries(limit)],
        "total": len(log),
    }


@unquarantine_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
async def unquarantine_prereqs() -> dict:
    """Check that this host is macOS with a usable xattr binary."""
    return check_prereqs().model_dump()
