"""Prerequisite checks for clearing attributes on this host."""

from __future__ import annotations

import os
import platform

from pydantic import BaseModel, Field

from .runner import XATTR_BINARY


class PrereqStatus(BaseModel):
    """Result of checking a single prerequisite."""

    name: str
    available: bool
    path: str = ""
    message: str = ""


class PrereqReport(BaseModel):
    """Aggregated prerequisite check results."""

    all_ok: bool = False
    checks: list[PrereqStatus] = Field(default_factory=list)


def check_prereqs() -> PrereqReport:
    """Check that the host can run ``xattr -cr``.

    Checks: the platform is macOS, and the xattr binary exists and is
    executable.

    Returns:
        PrereqReport with per-check availability.
    """
    checks: list[PrereqStatus] = []

    system = platform.system()
    is_macos = system == "Darwin"
    checks.append(PrereqStatus(
        name="platform",
        available=is_macos,
        path=system,
        message="" if is_macos else f"Quarantine attributes only exist on macOS (running on {system})",
    ))

    xattr_ok = os.path.isfile(XATTR_BINARY) and os.access(XATTR_BINARY, os.X_OK)
    checks.append(PrereqStatus(
        name="xattr",
        available=xattr_ok,
        path=XATTR_BINARY,
        message="" if xattr_ok else f"{XATTR_BINARY} is missing or not executable",
    ))

    return PrereqReport(
        all_ok=all(c.available for c in checks),
        checks=checks,
    )
