"""Pytest configuration and fixtures.

Provides environment isolation and small callables shared across suites.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_okerr_env(request, monkeypatch):
    """Clear OKERR_* env vars so developer toggles never leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("OKERR_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def raiser():
    """Return a factory for zero-argument callables that raise ``exc``.

    Not autouse: request it explicitly.
    """

    def make(exc: BaseException):
        def callback():
            raise exc

        return callback

    return make
