"""Tests for the diff engine.

Covers the fixed scenarios, laziness of the section stream, and argument
validation at call time.
"""

from __future__ import annotations

import pytest

from diffy.core.engine import compute, compute_range
from diffy.errors import (
    DiffyInvalidArgumentError,
    DiffyNullArgumentError,
    DiffyOutOfRangeError,
)
from diffy.models import DiffSection, DiffSectionType


def copy(n):
    return DiffSection(DiffSectionType.COPY, n)


def insert(n):
    return DiffSection(DiffSectionType.INSERT, n)


def delete(n):
    return DiffSection(DiffSectionType.DELETE, n)


def _lengths(script, *types):
    return sum(section.length for section in script if section.type in types)


# =========================================================================
# Fixed scenarios
# =========================================================================

class TestScenarios:

    def test_empty_vs_empty(self):
        assert list(compute([], [])) == []

    def test_insert_into_empty(self):
        assert list(compute([], [1, 2, 3])) == [insert(3)]

    def test_delete_everything(self):
        assert list(compute([1, 2, 3], [])) == [delete(3)]

    def test_identical(self):
        assert list(compute([1, 2, 3], [1, 2, 3])) == [copy(3)]

    def test_total_replacement_is_delete_then_insert(self):
        assert list(compute([1, 2, 3], [4, 5])) == [delete(3), insert(2)]

    def test_insert_in_middle(self):
        assert list(compute([1, 2, 4, 5], [1, 2, 3, 4, 5])) == [copy(2), insert(1), copy(2)]

    def test_delete_in_middle(self):
        assert list(compute([1, 2, 3, 4, 5], [1, 2, 4, 5])) == [copy(2), delete(1), copy(2)]

    def test_replace_in_middle(self):
        assert list(compute("abXcd", "abYcd")) == [copy(2), delete(1), insert(1), copy(2)]

    def test_mixed_letters_script(self):
        first = ["A", "B", "C", "A", "B", "B", "A"]
        second = ["C", "B", "A", "B", "A", "C"]
        script = list(compute(first, second))

        assert script == [insert(2), copy(2), insert(1), copy(1), delete(4)]
        assert _lengths(script, DiffSectionType.COPY, DiffSectionType.DELETE) == len(first)
        assert _lengths(script, DiffSectionType.COPY, DiffSectionType.INSERT) == len(second)

    def test_no_zero_length_sections(self):
        script = list(compute([1, 2, 3, 1, 2], [2, 3, 9, 1]))
        assert all(section.length > 0 for section in script)

    def test_custom_predicate(self):
        script = list(compute(["A", "b"], ["a", "B", "c"], lambda x, y: x.lower() == y.lower()))
        assert script == [copy(2), insert(1)]


# =========================================================================
# Range form
# =========================================================================

class TestComputeRange:

    def test_subrange(self):
        script = list(compute_range([0, 1, 2, 3], 1, 3, [9, 1, 2], 1, 3))
        assert script == [copy(2)]

    def test_start_after_end_treated_as_empty(self):
        assert list(compute_range([1, 2, 3], 2, 1, [1], 0, 1)) == [insert(1)]

    def test_empty_ranges_inside_non_empty_sequences(self):
        assert list(compute_range([1, 2], 1, 1, [1, 2], 2, 2)) == []


# =========================================================================
# Laziness
# =========================================================================

class TestLaziness:

    def test_no_comparison_before_first_pull(self):
        calls = []

        def equals(a, b):
            calls.append((a, b))
            return a == b

        sections = compute([1, 2, 3], [3, 2, 1], equals)
        assert calls == []
        next(sections)
        assert calls

    def test_stopping_early_skips_remaining_work(self):
        calls = []

        def equals(a, b):
            calls.append((a, b))
            return a == b

        first = [0, 1, 2, 3, 4, 5, 6, 7]
        second = [9, 1, 2, 3, 4, 5, 6, 8]
        list(compute(first, second, equals))
        full_calls = len(calls)

        calls.clear()
        sections = compute(first, second, equals)
        assert next(sections) == delete(1)
        assert len(calls) < full_calls

    def test_iterator_is_single_use(self):
        sections = compute([1], [2])
        assert list(sections) == [delete(1), insert(1)]
        assert list(sections) == []

    def test_reinvocation_is_deterministic(self):
        first, second = [3, 1, 4, 1, 5], [1, 4, 3, 5]
        assert list(compute(first, second)) == list(compute(first, second))


# =========================================================================
# Failure semantics
# =========================================================================

class TestFailures:

    def test_out_of_range_raises_before_iteration(self):
        with pytest.raises(DiffyOutOfRangeError):
            compute_range([1], 0, 5, [1], 0, 1)

    def test_negative_bound_raises_before_iteration(self):
        with pytest.raises(DiffyInvalidArgumentError):
            compute_range([1], 0, 1, [1], -2, 1)

    def test_none_sequence(self):
        with pytest.raises(DiffyNullArgumentError):
            compute(None, [1])
        with pytest.raises(DiffyNullArgumentError):
            compute([1], None)

    def test_predicate_error_propagates_on_iteration(self):
        def boom(a, b):
            raise RuntimeError("predicate exploded")

        sections = compute([1], [1], boom)
        with pytest.raises(RuntimeError, match="predicate exploded"):
            list(sections)
