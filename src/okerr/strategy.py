"""Let callers choose who handles a function's Err case.

A function that produces a result can take a ``strategy`` argument: with
``Strategy.RETURN`` the caller receives the result and deals with it, with
``Strategy.HANDLE`` the function unwraps it and the caller only ever sees
the Ok case (or an exception).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from okerr.unwrap import unwrap, unwrap_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from okerr.result import Err, Result

__all__ = ["Strategy", "resolve", "resolve_async"]


class Strategy(str, Enum):
    """How a result-producing function hands its outcome back."""

    RETURN = "Return"  # Receive the result and handle it
    HANDLE = "Handle"  # Handle any errors and return the Ok result


def resolve(
    result: Result,
    strategy: Strategy | str = Strategy.RETURN,
    on_failure: Callable[[Err], object] | None = None,
) -> Result:
    """Apply ``strategy`` to ``result``.

    Raises:
        ValueError: ``strategy`` is not a known Strategy value.
    """
    if Strategy(strategy) is Strategy.HANDLE:
        return unwrap(result, on_failure)
    return result


async def resolve_async(
    result: Result,
    strategy: Strategy | str = Strategy.RETURN,
    on_failure: Callable[[Err], Awaitable[object] | object] | None = None,
) -> Result:
    if Strategy(strategy) is Strategy.HANDLE:
        return await unwrap_async(result, on_failure)
    return result
