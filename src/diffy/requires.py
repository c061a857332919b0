"""Lightweight precondition checks used at every public entry point.

Each helper is a no-op when its condition holds and raises the matching
:class:`~diffy.errors.DiffyError` subclass otherwise.
"""

from __future__ import annotations

from typing import Any

from diffy.errors import (
    DiffyInvalidArgumentError,
    DiffyNullArgumentError,
    DiffyOutOfRangeError,
)


def not_none(value: Any, param: str) -> None:
    """Raise :class:`DiffyNullArgumentError` if *value* is ``None``."""
    if value is None:
        raise DiffyNullArgumentError(
            f"{param} must not be None",
            context={"param": param},
        )


def condition(
    ok: bool,
    param: str,
    message: str | None = None,
    value: Any = None,
) -> None:
    """Raise :class:`DiffyInvalidArgumentError` unless *ok* is true."""
    if not ok:
        raise DiffyInvalidArgumentError(
            message or "A precondition was not met.",
            context={"param": param, "value": value},
        )


def in_range(
    ok: bool,
    param: str,
    message: str | None = None,
    value: Any = None,
    limit: Any = None,
) -> None:
    """Raise :class:`DiffyOutOfRangeError` unless *ok* is true."""
    if not ok:
        raise DiffyOutOfRangeError(
            message or f"{param} is out of range.",
            context={"param": param, "value": value, "limit": limit},
        )


def non_negative(value: int, param: str) -> None:
    """Shorthand for the ``value >= 0`` bound check."""
    condition(value >= 0, param, f"{param} must be >= 0, got {value}", value=value)


def within(end: int, length: int, param: str, name: str) -> None:
    """Check that range *end* does not run past a sequence of *length*."""
    in_range(
        end <= length,
        param,
        f"Range end must be inside of the {name} collection ({param}={end}, length={length}).",
        value=end,
        limit=length,
    )
