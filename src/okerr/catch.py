"""Adapt exception-raising callables into Caught results.

These are the only sanctioned bridge from exception control flow back to
Result values. A ``test`` predicate decides which exceptions become
``Err(caught=...)``; anything it rejects is re-raised untouched so unrelated
failures (programming errors, for instance) are never masked as domain
errors. Only ``Exception`` subclasses are eligible: cancellation and
interpreter-exit signals always propagate.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from okerr._dev_flags import trace_caught_enabled
from okerr.errors import ResultTypeError
from okerr.result import err, ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from okerr.result import Caught

__all__ = ["catch_err", "catch_err_sync"]

log = logging.getLogger(__name__)


def _describe(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def _caught(
    exc: Exception,
    callback: Callable[..., Any],
    test: Callable[[Exception], object] | None,
) -> Caught:
    """Return ``Err(caught=exc)`` when the filter accepts ``exc``, else re-raise."""
    if test is not None and not test(exc):
        log.debug(
            "%s raised %s; rejected by filter, re-raising",
            _describe(callback),
            type(exc).__name__,
        )
        raise exc
    log.debug(
        "%s raised %s; converted to Err",
        _describe(callback),
        type(exc).__name__,
        exc_info=exc if trace_caught_enabled() else None,
    )
    return err(caught=exc)


async def catch_err(
    callback: Callable[[], Awaitable[Any] | Any],
    test: Callable[[Exception], object] | None = None,
) -> Caught:
    """Run ``callback`` and capture what it raises as a result.

    Args:
        callback: Zero-argument callable. If it returns an awaitable (a
            coroutine function, say) that awaitable is awaited.
        test: Optional filter. When given, only exceptions for which it
            returns a truthy value are captured; others are re-raised.
            When omitted, every ``Exception`` is captured.

    Returns:
        ``Ok(value=<return value>)`` or ``Err(caught=<exception>)``.
    """
    try:
        value = callback()
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        return _caught(exc, callback, test)
    return ok(value=value)


def catch_err_sync(
    callback: Callable[[], Any],
    test: Callable[[Exception], object] | None = None,
) -> Caught:
    """Synchronous form of ``catch_err``.

    Raises:
        ResultTypeError: ``callback`` returned an awaitable; use ``catch_err``.
    """
    try:
        value = callback()
    except Exception as exc:
        return _caught(exc, callback, test)
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise ResultTypeError(
            f"{_describe(callback)} returned an awaitable",
            hint="Use 'await catch_err(...)' for asynchronous callbacks.",
        )
    return ok(value=value)
