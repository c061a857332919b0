"""Error hierarchy for the diffy library.

Every public error class inherits from DiffyError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

All of these signal programmer error (bad arguments) or a corrupted edit
script.  None of them are retried or recovered inside the library.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the library can raise."""

    NULL_ARGUMENT = "NULL_ARGUMENT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_OPERATION = "INVALID_OPERATION"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class DiffyError(Exception):
    """Base exception for all diffy errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class DiffyNullArgumentError(DiffyError):
    """A required sequence, predicate, or script argument was ``None``.

    Context keys: ``param``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.NULL_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )


class DiffyInvalidArgumentError(DiffyError):
    """A numeric range bound was negative.

    Context keys: ``param``, ``value``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )


class DiffyOutOfRangeError(DiffyError):
    """A range end exceeds the length of the sequence it indexes.

    Context keys: ``param``, ``value``, ``limit``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_RANGE,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Script errors
# ---------------------------------------------------------------------------

class DiffyInvalidOperationError(DiffyError):
    """The script applier met a section whose type is not copy, insert or
    delete.  This means the script was corrupted or fabricated.

    Context keys: ``section``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_OPERATION,
            message=message,
            context=context,
            cause=cause,
        )
