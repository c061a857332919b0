"""Diff engine: split two sequences into an ordered COPY/INSERT/DELETE script.

The engine finds the longest common run of the two ranges, emits the
script for everything before it, a single COPY for the run itself, and
then the script for everything after it.  A range pair with no common
element becomes one DELETE (if the first range is non-empty) followed by
one INSERT (if the second range is non-empty).

The script is produced lazily.  The split tree is walked depth-first with
an explicit work stack, so a caller can stop pulling sections at any time
without paying for the rest, and long inputs never hit the interpreter's
recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from diffy import requires
from diffy.models import DiffSection, DiffSectionType

from .lcs import EqualityPredicate, _search, check_ranges, resolve_equals

T = TypeVar("T")

# A pending range pair (first_start, first_end, second_start, second_end)
# or a section that is ready to be emitted.
_Task = tuple[int, int, int, int] | DiffSection


def compute(
    first: Sequence[T],
    second: Sequence[T],
    equals: EqualityPredicate | None = None,
) -> Iterator[DiffSection]:
    """Compute the edit script that turns *first* into *second*.

    Parameters
    ----------
    first:
        The source sequence.
    second:
        The destination sequence.
    equals:
        Binary equality predicate.  Defaults to ``==``.

    Returns
    -------
    Iterator[DiffSection]
        A lazy, single-use iterator over the script's sections in
        left-to-right order.
    """
    requires.not_none(first, "first")
    requires.not_none(second, "second")
    return compute_range(first, 0, len(first), second, 0, len(second), equals)


def compute_range(
    first: Sequence[T], first_start: int, first_end: int,
    second: Sequence[T], second_start: int, second_end: int,
    equals: EqualityPredicate | None = None,
) -> Iterator[DiffSection]:
    """Compute the edit script between two ``[start, end)`` ranges.

    Arguments are validated before this function returns, so malformed
    ranges raise immediately and no partial script is ever produced.
    Errors raised by *equals* surface unchanged while the iterator is
    being consumed.

    Raises
    ------
    DiffyNullArgumentError
        If either sequence is ``None``.
    DiffyInvalidArgumentError
        If any bound is negative.
    DiffyOutOfRangeError
        If an end bound exceeds the length of its sequence.
    """
    check_ranges(first, first_start, first_end, second, second_start, second_end)
    return _walk(
        first, second,
        (first_start, first_end, second_start, second_end),
        resolve_equals(equals),
    )


def _walk(
    first: Sequence[T],
    second: Sequence[T],
    root: tuple[int, int, int, int],
    equals: EqualityPredicate,
) -> Iterator[DiffSection]:
    stack: list[_Task] = [root]

    while stack:
        task = stack.pop()
        if isinstance(task, DiffSection):
            yield task
            continue

        first_start, first_end, second_start, second_end = task
        lcs = _search(
            first, first_start, first_end,
            second, second_start, second_end,
            equals,
        )

        if lcs.is_success:
            p1 = lcs.position_in_first
            p2 = lcs.position_in_second
            # Pushed in reverse: before, copy, after pop in that order.
            stack.append((p1 + lcs.length, first_end, p2 + lcs.length, second_end))
            stack.append(DiffSection(DiffSectionType.COPY, lcs.length))
            stack.append((first_start, p1, second_start, p2))
            continue

        if first_start < first_end:
            yield DiffSection(DiffSectionType.DELETE, first_end - first_start)
        if second_start < second_end:
            yield DiffSection(DiffSectionType.INSERT, second_end - second_start)
