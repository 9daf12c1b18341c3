"""Shared type aliases for tool parameters."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Annotated aliases ────────────────────────────────────────────────────────

DropItems = Annotated[list[str], Field(
    min_length=1,
    description="Dropped items: local paths or file:// URLs, in delivery order",
)]

ResultsLimit = Annotated[int | None, Field(
    ge=1,
    description="Max entries to return, newest first (defaults to ENABLE_APP_RESULTS_LIMIT)",
)]
