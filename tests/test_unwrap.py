"""unwrap / unwrap_async / assert_ok: identity on Ok, raise on Err."""

from __future__ import annotations

import logging

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from okerr import (
    AssertError,
    ResultTypeError,
    SignalError,
    UnwrapError,
    assert_ok,
    err,
    ok,
    unwrap,
    unwrap_async,
)

pytestmark = pytest.mark.unit


class NotFound(Exception):
    """Domain exception produced from an Err payload."""


@given(count=st.integers())
@settings(
    max_examples=25,
    deadline=None,
    derandomize=True,
)
def test_unwrap_is_identity_on_ok(count: int) -> None:
    result = ok(count=count)
    assert unwrap(result) is result


def test_unwrap_err_raises_default_signal() -> None:
    failed = err(reason="missing")

    with pytest.raises(UnwrapError) as exc_info:
        unwrap(failed)

    assert str(exc_info.value) == "Error was unwrapped"
    assert exc_info.value.result is failed
    assert exc_info.value.result.reason == "missing"


def test_unwrap_raises_what_the_producer_returns() -> None:
    failed = err(key="user:1")
    seen = []

    def producer(result):
        seen.append(result)
        return NotFound(result.key)

    with pytest.raises(NotFound, match="user:1"):
        unwrap(failed, producer)
    assert seen == [failed]


def test_unwrap_producer_is_not_called_on_ok() -> None:
    def producer(result):  # pragma: no cover - must not run
        raise AssertionError("producer called on Ok")

    assert unwrap(ok(), producer) == ok()


def test_unwrap_producer_returning_none_falls_back_to_default() -> None:
    with pytest.raises(UnwrapError):
        unwrap(err(), lambda _result: None)


def test_unwrap_producer_may_return_an_exception_class() -> None:
    with pytest.raises(NotFound):
        unwrap(err(), lambda _result: NotFound)


def test_unwrap_wraps_non_exception_signal() -> None:
    """Only exceptions are raisable; other values are carried by SignalError."""
    with pytest.raises(SignalError) as exc_info:
        unwrap(err(), lambda _result: "boom")

    assert exc_info.value.value == "boom"


def test_unwrap_rejects_non_results() -> None:
    with pytest.raises(ResultTypeError) as exc_info:
        unwrap({"ok": True})  # type: ignore[arg-type]

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.hint


def test_unwrap_logs_the_raise_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="okerr"), pytest.raises(UnwrapError):
        unwrap(err(reason="x"))

    assert any("UnwrapError" in r.getMessage() for r in caplog.records)


class TestUnwrapAsync:
    """Async form: same contract, awaited producer."""

    @pytest.mark.asyncio
    async def test_identity_on_ok(self) -> None:
        result = ok(count=1)
        assert await unwrap_async(result) is result

    @pytest.mark.asyncio
    async def test_default_signal(self) -> None:
        failed = err()
        with pytest.raises(UnwrapError) as exc_info:
            await unwrap_async(failed)
        assert exc_info.value.result is failed

    @pytest.mark.asyncio
    async def test_awaits_async_producer(self) -> None:
        async def producer(result):
            return NotFound(result.key)

        with pytest.raises(NotFound, match="k"):
            await unwrap_async(err(key="k"), producer)

    @pytest.mark.asyncio
    async def test_accepts_sync_producer(self) -> None:
        with pytest.raises(NotFound):
            await unwrap_async(err(), lambda _result: NotFound())

    @pytest.mark.asyncio
    async def test_async_producer_returning_none_falls_back(self) -> None:
        async def producer(_result):
            return None

        with pytest.raises(UnwrapError):
            await unwrap_async(err(), producer)


class TestAssertOk:
    def test_returns_none_on_ok(self) -> None:
        assert assert_ok(ok(count=1)) is None

    def test_default_signal_is_assert_error(self) -> None:
        failed = err()
        with pytest.raises(AssertError) as exc_info:
            assert_ok(failed)
        assert str(exc_info.value) == "Error was asserted"
        assert exc_info.value.result is failed
        # Callers catching UnwrapError also see assertion failures.
        assert isinstance(exc_info.value, UnwrapError)

    def test_raises_producer_signal(self) -> None:
        with pytest.raises(NotFound):
            assert_ok(err(), lambda _result: NotFound())

    def test_rejects_non_results(self) -> None:
        with pytest.raises(ResultTypeError, match="assert_ok"):
            assert_ok(None)  # type: ignore[arg-type]
