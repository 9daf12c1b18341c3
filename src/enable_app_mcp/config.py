"""Server configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from .dotenv import is_placeholder, read_settings

DEFAULT_SUCCESS_MESSAGE = "Attributes cleared"


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment.

    An empty ``success_message`` means successful entries carry no message.
    The xattr command itself is not configurable.
    """

    success_message: str = Field(default=DEFAULT_SUCCESS_MESSAGE)
    results_limit: int = Field(default=50)

    @field_validator("results_limit")
    @classmethod
    def validate_positive_int(cls, value: int) -> int:
        if value < 1:
            raise ValueError("results_limit must be >= 1")
        return value

    @field_validator("success_message")
    @classmethod
    def strip_success_message(cls, value: str) -> str:
        return value.strip()

    @property
    def confirmation(self) -> str | None:
        """Message attached to successful entries, or None when disabled."""
        return self.success_message or None

    @classmethod
    def from_env(cls, file_settings: dict[str, str] | None = None) -> ServerConfig:
        """Build config from environment variables.

        *file_settings* (from :func:`dotenv.read_settings`) fill in values the
        process environment leaves unset, blank, or as a ``${KEY}`` placeholder.
        """
        file_settings = file_settings or {}

        def _setting(key: str, default: str) -> str:
            value = os.environ.get(key)
            if value is None or is_placeholder(key, value) or (not value.strip() and key in file_settings):
                return file_settings.get(key, default)
            return value

        return cls(
            success_message=_setting("ENABLE_APP_SUCCESS_MESSAGE", DEFAULT_SUCCESS_MESSAGE),
            results_limit=int(_setting("ENABLE_APP_RESULTS_LIMIT", "50")),
        )


# Singleton, initialised once on first access.
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Return the global config singleton, creating it on first access.

    Reads ``~/.config/enable-app-mcp/.env`` as a fallback for env vars.
    Process environment always takes precedence over the config file.

    Raises:
        ValueError: When a setting is invalid (pydantic ``ValidationError``
            or a non-integer limit). Nothing is cached in that case.
    """
    global _config
    if _config is None:
        _config = ServerConfig.from_env(read_settings())
    return _config


def update_config(**overrides: object) -> ServerConfig:
    """Patch the live config."""
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    _config = ServerConfig(**data)
    return _config
