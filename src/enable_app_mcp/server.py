"""Main FastMCP server, mounts all sub-servers."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from .history import get_result_log
from .tools.unquarantine import unquarantine_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    """Startup/shutdown hook."""
    yield {}
    logger.info("Lifespan shutdown: enable-app-mcp (%d result(s) recorded)", len(get_result_log()))


app = FastMCP(
    "enable-app",
    instructions=(
        "Fix macOS apps reported as damaged or blocked by Gatekeeper. "
        "Drop .app bundles to clear their quarantine attributes with "
        "xattr -cr, then list the per-item results."
    ),
    lifespan=_lifespan,
)

app.mount(unquarantine_server)


def main() -> None:
    """Entry-point for ``enable-app-mcp`` console script."""
    app.run()


if __name__ == "__main__":
    main()
