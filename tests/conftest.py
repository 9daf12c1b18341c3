"""Shared test fixtures for enable-app-mcp."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

import enable_app_mcp.config as cfg_mod
import enable_app_mcp.history as history_mod


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function.
    """
    return getattr(tool, "fn", tool)


@pytest.fixture(autouse=True)
def _clean_config():
    """Reset the config singleton between tests."""
    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture(autouse=True)
def _clean_result_log():
    """Give every test a fresh process-wide result log."""
    history_mod._log = None
    yield
    history_mod._log = None


@pytest.fixture(autouse=True)
def _isolate_dotenv(tmp_path, monkeypatch):
    """Prevent tests from loading the user's real .env file."""
    monkeypatch.setattr(
        "enable_app_mcp.dotenv.DEFAULT_ENV_PATH",
        tmp_path / "nonexistent.env",
    )


@pytest.fixture()
def mock_subprocess():
    """Create a configurable mock async subprocess.

    Returns a factory that produces process mocks.
    """
    def _factory(returncode: int = 0, stderr: bytes = b""):
        proc = AsyncMock()
        proc.returncode = returncode
        proc.communicate = AsyncMock(return_value=(None, stderr))
        return proc

    return _factory
