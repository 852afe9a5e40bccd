"""okerr: tagged Ok/Err results and the bridge to exceptions.

Public API:
    - ok(), err(), when(): Build results
    - unwrap(), unwrap_async(), assert_ok(): Results to exceptions
    - catch_err(), catch_err_sync(): Exceptions to results
    - Strategy, resolve(), resolve_async(): Caller-selected handling
"""

from __future__ import annotations

import logging

from okerr.catch import catch_err, catch_err_sync
from okerr.errors import (
    AssertError,
    OkerrError,
    ResultTypeError,
    SignalError,
    UnwrapError,
)
from okerr.result import (
    Caught,
    Err,
    Ok,
    Result,
    case_err,
    case_ok,
    err,
    is_err,
    is_ok,
    ok,
    when,
)
from okerr.strategy import Strategy, resolve, resolve_async
from okerr.unwrap import assert_ok, unwrap, unwrap_async

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("okerr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("okerr").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Results
    "Ok",
    "Err",
    "Result",
    "Caught",
    "ok",
    "err",
    "when",
    "is_ok",
    "is_err",
    "case_ok",
    "case_err",
    # Results to exceptions
    "unwrap",
    "unwrap_async",
    "assert_ok",
    # Exceptions to results
    "catch_err",
    "catch_err_sync",
    # Strategy
    "Strategy",
    "resolve",
    "resolve_async",
    # Errors
    "OkerrError",
    "UnwrapError",
    "AssertError",
    "SignalError",
    "ResultTypeError",
]
