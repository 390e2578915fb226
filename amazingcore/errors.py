"""Error wrappers carrying protocol codes, HTTP statuses and operation names."""

from __future__ import annotations

import traceback
from http import HTTPStatus
from typing import Callable, TypeVar

__all__ = [
    "GSFError",
    "HTTPStatusError",
    "OperationError",
    "PanicError",
    "catch_panic",
    "http_status",
    "if_err",
    "with_gsf_error",
    "with_http_status",
]

T = TypeVar("T")


class _WrappingError(Exception):
    """Exception that wraps another one and shows its message."""

    def __init__(self, err: BaseException) -> None:
        super().__init__(str(err))
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)


class GSFError(_WrappingError):
    """An error carrying a game protocol result code and application code."""

    def __init__(self, err: BaseException, result_code: int, app_code: int) -> None:
        super().__init__(err)
        self.result_code = result_code
        self.app_code = app_code


class HTTPStatusError(_WrappingError):
    """An error carrying the HTTP status to answer with."""

    def __init__(self, err: BaseException, status: int) -> None:
        super().__init__(err)
        self.status = status


class OperationError(_WrappingError):
    """An error prefixed with the name of the operation that failed."""

    def __init__(self, op: str, err: BaseException) -> None:
        super().__init__(err)
        self.op = op

    def __str__(self) -> str:
        return f"{self.op}: {self.err}"


class PanicError(Exception):
    """An unexpected failure caught at a boundary, with its stack trace."""

    def __init__(self, err: BaseException, stack: str) -> None:
        super().__init__(f"panic: {err}")
        self.err = err
        self.stack = stack
        self.__cause__ = err


def with_gsf_error(err: BaseException, result_code: int, app_code: int) -> GSFError:
    """Wrap ``err`` with protocol result and application codes."""
    return GSFError(err, result_code, app_code)


def with_http_status(err: BaseException, status: int) -> HTTPStatusError:
    """Wrap ``err`` with an HTTP status."""
    return HTTPStatusError(err, status)


def http_status(err: BaseException) -> int:
    """Return the HTTP status found in the cause chain of ``err``, or 500."""
    current: BaseException | None = err
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if isinstance(current, HTTPStatusError):
            return current.status
        seen.add(id(current))
        current = current.__cause__
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def if_err(op: str, err: BaseException | None) -> OperationError | None:
    """Prefix ``err`` with ``op``; pass ``None`` through unchanged."""
    if err is None:
        return None
    return OperationError(op, err)


def catch_panic(fn: Callable[[], T]) -> T:
    """Run ``fn`` and re-raise anything it raises as a :class:`PanicError`."""
    try:
        return fn()
    except Exception as exc:
        raise PanicError(exc, traceback.format_exc()) from exc