"""Exception hierarchy for okerr."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from okerr.result import Err


class OkerrError(Exception):
    """Base exception for all okerr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(OkerrError):
    """An Err result was unwrapped without a custom failure signal.

    The offending result is kept on ``result`` so the payload stays
    inspectable after the raise.
    """

    def __init__(
        self,
        message: str = "Error was unwrapped",
        *,
        result: Err | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.result = result


class AssertError(UnwrapError):
    """An Err result failed ``assert_ok``."""

    def __init__(
        self,
        message: str = "Error was asserted",
        *,
        result: Err | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, result=result, hint=hint)


class SignalError(OkerrError):
    """A failure producer returned something that cannot be raised."""

    def __init__(self, value: Any, *, hint: str | None = None) -> None:
        super().__init__(f"Failure signal is not an exception: {value!r}", hint=hint)
        self.value = value


class ResultTypeError(OkerrError, TypeError):
    """The API was called with a value of the wrong kind."""
