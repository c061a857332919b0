"""Longest common run search over two sequence ranges.

This is the leaf primitive of the diff engine.  It scans every index pair
of the two half-open ranges and measures the run of pairwise-equal
elements starting there, keeping the longest one.  The search is
quadratic in the range sizes (times the run length) and is meant for
small-to-medium lists, not documents.

Ties are resolved in favour of the run found first: ascending index in
the first sequence, then ascending index in the second.  A later run only
replaces the current best when it is strictly longer.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from diffy import requires
from diffy.models import LongestCommonSubsequenceResult

T = TypeVar("T")

EqualityPredicate = Callable[[Any, Any], bool]


def resolve_equals(equals: EqualityPredicate | None) -> EqualityPredicate:
    """Return *equals*, or natural ``==`` equality when it is ``None``."""
    return operator.eq if equals is None else equals


def check_ranges(
    first: Sequence[T], first_start: int, first_end: int,
    second: Sequence[T], second_start: int, second_end: int,
) -> None:
    """Validate a pair of ``[start, end)`` ranges against their sequences.

    Raises
    ------
    DiffyNullArgumentError
        If either sequence is ``None``.
    DiffyInvalidArgumentError
        If any bound is negative.
    DiffyOutOfRangeError
        If an end bound exceeds the length of its sequence.
    """
    requires.not_none(first, "first")
    requires.not_none(second, "second")
    requires.non_negative(first_start, "first_start")
    requires.non_negative(first_end, "first_end")
    requires.non_negative(second_start, "second_start")
    requires.non_negative(second_end, "second_end")
    requires.within(first_end, len(first), "first_end", "first")
    requires.within(second_end, len(second), "second_end", "second")


def count_equal(
    first: Sequence[T], first_position: int, first_end: int,
    second: Sequence[T], second_position: int, second_end: int,
    equals: EqualityPredicate | None = None,
) -> int:
    """Count pairwise-equal elements starting at the two positions.

    Both positions advance together until an element pair differs or
    either range is exhausted.
    """
    check_ranges(first, first_position, first_end, second, second_position, second_end)
    return _run_length(
        first, first_position, first_end,
        second, second_position, second_end,
        resolve_equals(equals),
    )


def find_longest_common_subsequence(
    first: Sequence[T], first_start: int, first_end: int,
    second: Sequence[T], second_start: int, second_end: int,
    equals: EqualityPredicate | None = None,
) -> LongestCommonSubsequenceResult:
    """Find the longest run of equal elements shared by two ranges.

    Parameters
    ----------
    first, second:
        Random-access sequences to search.
    first_start, first_end:
        Half-open range ``[first_start, first_end)`` within *first*.
    second_start, second_end:
        Half-open range ``[second_start, second_end)`` within *second*.
    equals:
        Binary equality predicate.  Defaults to ``==``.  Exceptions it
        raises propagate unchanged.

    Returns
    -------
    LongestCommonSubsequenceResult
        The first-found longest run, or
        :meth:`LongestCommonSubsequenceResult.not_found` when no element
        of one range equals any element of the other.
    """
    check_ranges(first, first_start, first_end, second, second_start, second_end)
    return _search(
        first, first_start, first_end,
        second, second_start, second_end,
        resolve_equals(equals),
    )


def _search(
    first: Sequence[T], first_start: int, first_end: int,
    second: Sequence[T], second_start: int, second_end: int,
    equals: EqualityPredicate,
) -> LongestCommonSubsequenceResult:
    """Unchecked search; callers have already validated the ranges."""
    result = LongestCommonSubsequenceResult.not_found()

    for index1 in range(first_start, first_end):
        for index2 in range(second_start, second_end):
            if not equals(first[index1], second[index2]):
                continue
            length = _run_length(
                first, index1, first_end,
                second, index2, second_end,
                equals,
            )
            # Strictly longer only: the earliest run wins ties.
            if length > result.length:
                result = LongestCommonSubsequenceResult.found(index1, index2, length)

    return result


def _run_length(
    first: Sequence[T], first_position: int, first_end: int,
    second: Sequence[T], second_position: int, second_end: int,
    equals: EqualityPredicate,
) -> int:
    length = 0
    while first_position < first_end and second_position < second_end:
        if not equals(first[first_position], second[second_position]):
            break
        first_position += 1
        second_position += 1
        length += 1
    return length
