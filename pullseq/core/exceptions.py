"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class CursorError(Exception):
    """Base exception for all library errors."""

    pass


class ProtocolViolation(CursorError):
    """A producer returned something that is not an iteration result.

    Raised when a step function, an early-stop or abort handler, an
    end-of-iteration callback, or a wrapped source returns a value that does
    not have the shape of an iteration result.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        result: Any = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.result = result


class AbortSignal(CursorError):
    """Carrier raised into a native generator when a cursor is aborted.

    Generators only accept exceptions through ``throw()``. When the abort value
    is not an exception it is wrapped here and exposed as ``payload``.
    """

    def __init__(self, payload: Any = None) -> None:
        super().__init__("cursor aborted" if payload is None else f"cursor aborted: {payload!r}")
        self.payload = payload
