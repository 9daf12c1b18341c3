"""Read ``ENABLE_APP_*`` settings from the user config file.

MCP hosts do not always forward environment variables, so the same settings
can live in ``~/.config/enable-app-mcp/.env``. The file only supplies
fallbacks: :meth:`ServerConfig.from_env` prefers the process environment.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENV_PATH = Path.home() / ".config" / "enable-app-mcp" / ".env"
SETTINGS_PREFIX = "ENABLE_APP_"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def is_placeholder(key: str, value: str) -> bool:
    """Return True for an unresolved self-reference such as ``${KEY}``.

    Some MCP hosts pass ``"env": {"KEY": "${KEY}"}`` through verbatim when
    the variable is not set on their side.
    """
    value = _unquote(value.strip()).strip()
    return value in {f"${key}", f"${{{key}}}"} or (
        value.startswith(f"${{{key}:-") and value.endswith("}")
    )


def read_settings(path: Path | None = None) -> dict[str, str]:
    """Parse ``ENABLE_APP_*`` assignments from *path*.

    Accepts ``KEY=value`` lines with optional ``export`` prefix and quotes.
    Keys without the prefix are ignored with a warning, so a shared ``.env``
    cannot leak unrelated variables into this server.

    Returns:
        Dict of setting name to raw string value. Empty when the file is
        missing.
    """
    if path is None:
        path = DEFAULT_ENV_PATH
    settings: dict[str, str] = {}
    if not path.is_file():
        return settings

    for lineno, raw in enumerate(path.read_text().splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.removeprefix("export ").partition("=")
        key = key.strip()
        if not sep or not key:
            logger.warning("%s:%d: not a KEY=value line, ignored", path, lineno)
            continue
        if not key.startswith(SETTINGS_PREFIX):
            logger.warning("%s:%d: %s is not an %s* setting, ignored", path, lineno, key, SETTINGS_PREFIX)
            continue
        settings[key] = _unquote(value.strip())

    if settings:
        logger.info("Read %d setting(s) from %s: %s", len(settings), path, ", ".join(settings))
    return settings
