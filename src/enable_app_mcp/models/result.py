"""Result log entry model."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class ResultEntry(BaseModel):
    """Outcome of clearing attributes on one dropped item.

    Immutable once created. ``message`` is always set on failure; on success
    it holds the configured confirmation, or None when that is disabled.
    """

    model_config = ConfigDict(frozen=True)

    identity: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Unique entry ID, never reused",
    )
    name: str = Field(description="Display name (last path component)")
    success: bool = Field(description="True when xattr exited 0")
    message: str | None = Field(default=None, description="Confirmation or error detail")


class DropReport(BaseModel):
    """Entries produced by one drop gesture, in processing order."""

    entries: list[ResultEntry] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list, description="Items that were not local files")
