"""
Lodown configuration -- all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import os

LOG_LEVELS: set[str] = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings:
    """Library settings from environment variables."""

    # Logging; None leaves the level to the application
    LOG_LEVEL: str | None = os.environ.get("LODOWN_LOG_LEVEL") or None


def validate_settings(s: Settings) -> Settings:
    """
    Check and normalize settings. Raises RuntimeError on bad values so a
    misconfigured environment fails at import rather than mid-call.
    """
    if s.LOG_LEVEL is not None:
        s.LOG_LEVEL = s.LOG_LEVEL.upper()
        if s.LOG_LEVEL not in LOG_LEVELS:
            raise RuntimeError(f"LODOWN_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {s.LOG_LEVEL!r}")

    return s


# Singleton instance
settings = validate_settings(Settings())
