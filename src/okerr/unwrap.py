"""Turn Err results into raised exceptions.

``unwrap``/``unwrap_async``/``assert_ok`` are the explicit, opt-in crossing
from Result values to exception control flow. The Ok path is the identity;
the Err path always raises and the exception always reaches the caller.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from okerr.errors import AssertError, ResultTypeError, SignalError, UnwrapError
from okerr.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from okerr.result import Result

__all__ = ["assert_ok", "unwrap", "unwrap_async"]

log = logging.getLogger(__name__)


def _check(result: object, op: str) -> bool:
    if isinstance(result, Ok):
        return True
    if isinstance(result, Err):
        return False
    raise ResultTypeError(
        f"{op}() expects an Ok or Err result, got {type(result).__name__}",
        hint="Build results with okerr.ok(), okerr.err() or okerr.when().",
    )


def _as_exception(
    produced: object, result: Err, default: type[UnwrapError]
) -> BaseException:
    """Normalize a failure producer's return value into something raisable."""
    if produced is None:
        return default(result=result)
    if isinstance(produced, BaseException):
        return produced
    if isinstance(produced, type) and issubclass(produced, BaseException):
        return produced()
    return SignalError(produced)


def unwrap(result: Result, on_failure: Callable[[Err], object] | None = None) -> Ok:
    """Return ``result`` if it is Ok, otherwise raise.

    Args:
        result: The result to check.
        on_failure: Called with the Err; its return value is raised. When
            omitted (or when it returns None) ``UnwrapError`` is raised.

    Raises:
        UnwrapError: Default failure signal, carrying the Err on ``result``.
        SignalError: ``on_failure`` returned a value that is not an exception.
    """
    if _check(result, "unwrap"):
        return result
    produced = on_failure(result) if on_failure is not None else None
    exc = _as_exception(produced, result, UnwrapError)
    log.debug("Unwrapped %r; raising %s", result, type(exc).__name__)
    raise exc


async def unwrap_async(
    result: Result,
    on_failure: Callable[[Err], Awaitable[object] | object] | None = None,
) -> Ok:
    """Async form of ``unwrap``; ``on_failure`` may be a coroutine function."""
    if _check(result, "unwrap_async"):
        return result
    produced = on_failure(result) if on_failure is not None else None
    if inspect.isawaitable(produced):
        produced = await produced
    exc = _as_exception(produced, result, UnwrapError)
    log.debug("Unwrapped %r; raising %s", result, type(exc).__name__)
    raise exc


def assert_ok(
    result: Result, on_failure: Callable[[Err], object] | None = None
) -> None:
    """Raise unless ``result`` is Ok; same failure rules as ``unwrap``.

    The default failure signal is ``AssertError`` ("Error was asserted").
    """
    if _check(result, "assert_ok"):
        return
    produced = on_failure(result) if on_failure is not None else None
    exc = _as_exception(produced, result, AssertError)
    log.debug("Asserted %r; raising %s", result, type(exc).__name__)
    raise exc
