"""Result values: tagged Ok/Err mappings with flattened payloads.

A result is an immutable mapping holding a boolean ``ok`` discriminant plus
whatever fields the caller attached. Fields sit next to the discriminant
rather than under a ``value`` key, so results compare equal to plain dicts
of the same shape:

    >>> ok(count=3) == {"ok": True, "count": 3}
    True
    >>> when(2 > 5, reason="too small")
    Err({'reason': 'too small'})
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, ClassVar

__all__ = [
    "Caught",
    "Err",
    "Ok",
    "Result",
    "case_err",
    "case_ok",
    "err",
    "is_err",
    "is_ok",
    "ok",
    "when",
]


class _Case(Mapping[str, Any]):
    """Shared immutable mapping behind both variants.

    Attribute access only reaches payload fields whose names are not already
    attributes: ``ok``, ``payload`` and the ``Mapping`` methods (``items``,
    ``keys``, ``values``, ``get``) win, as do names starting with an
    underscore. Item access (``result["items"]``) always reaches the field.
    """

    __slots__ = ("_fields",)

    ok: ClassVar[bool]

    def __init__(self, payload: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        merged: dict[str, Any] = dict(payload) if payload is not None else {}
        merged.update(fields)
        # The discriminant always reflects the class, whatever the payload says.
        merged["ok"] = self.ok
        object.__setattr__(self, "_fields", merged)

    @property
    def payload(self) -> dict[str, Any]:
        """Caller fields without the discriminant."""
        return {k: v for k, v in self._fields.items() if k != "ok"}

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} result has no field {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} results are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} results are immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.payload,))

    def __repr__(self) -> str:
        payload = self.payload
        if not payload:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({payload!r})"


class Ok(_Case):
    """Success variant; ``ok`` is always ``True``."""

    __slots__ = ()
    ok: ClassVar[bool] = True


class Err(_Case):
    """Failure variant; ``ok`` is always ``False``."""

    __slots__ = ()
    ok: ClassVar[bool] = False


Result = Ok | Err

# Shape produced by the catch adapters: Ok(value=...) or Err(caught=...).
Caught = Result


def ok(payload: Mapping[str, Any] | None = None, /, **fields: Any) -> Ok:
    """Create an Ok result carrying ``payload`` and ``fields``."""
    return Ok(payload, **fields)


def err(payload: Mapping[str, Any] | None = None, /, **fields: Any) -> Err:
    """Create an Err result carrying ``payload`` and ``fields``."""
    return Err(payload, **fields)


def when(
    condition: object, payload: Mapping[str, Any] | None = None, /, **fields: Any
) -> Result:
    """Return ``ok(...)`` if ``condition`` is truthy, otherwise ``err(...)``.

    The same payload is attached to whichever variant is produced, so it
    should read sensibly on both branches (or be omitted).
    """
    return ok(payload, **fields) if condition else err(payload, **fields)


def is_ok(result: object) -> bool:
    return isinstance(result, Ok)


def is_err(result: object) -> bool:
    return isinstance(result, Err)


def case_ok(result: Result) -> Ok | None:
    """Return ``result`` if it is the Ok variant, else ``None``."""
    return result if isinstance(result, Ok) else None


def case_err(result: Result) -> Err | None:
    """Return ``result`` if it is the Err variant, else ``None``."""
    return result if isinstance(result, Err) else None
