"""Internal helpers for development-time feature flags.

Centralizes how opt-in debugging toggles are read from the environment so
semantics stay consistent across modules and tests can override them.
"""

from __future__ import annotations

import os

__all__ = ["trace_caught_enabled"]

TRACE_CAUGHT_ENV = "OKERR_TRACE_CAUGHT"


def trace_caught_enabled(*, override: bool | None = None) -> bool:
    """Return True when caught exceptions should be logged with tracebacks.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``OKERR_TRACE_CAUGHT`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(TRACE_CAUGHT_ENV) == "1"
