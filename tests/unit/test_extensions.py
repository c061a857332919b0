"""Tests for the iterable / key-selector adapters and transform_to."""

from __future__ import annotations

from collections import UserList

import pytest

from diffy import DiffyConfig, diff, diff_by, transform_to
from diffy.errors import DiffyNullArgumentError
from diffy.models import DiffSection, DiffSectionType, TransformResult


def _types(script):
    return [(section.type, section.length) for section in script]


class SpyList(list):
    """A built-in list subclass that records which mutators were used."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.calls: list[str] = []

    def insert(self, index, item) -> None:
        self.calls.append("insert")
        super().insert(index, item)

    def __setitem__(self, index, value) -> None:
        self.calls.append("setitem_slice" if isinstance(index, slice) else "setitem")
        super().__setitem__(index, value)

    def __delitem__(self, index) -> None:
        self.calls.append("delitem_slice" if isinstance(index, slice) else "delitem")
        super().__delitem__(index)


# =========================================================================
# diff
# =========================================================================

class TestDiff:

    def test_generators_are_materialised(self):
        script = list(diff((n for n in [1, 2, 3]), iter([1, 3])))
        assert _types(script) == [
            (DiffSectionType.COPY, 1),
            (DiffSectionType.DELETE, 1),
            (DiffSectionType.COPY, 1),
        ]

    def test_strings_diff_by_character(self):
        assert list(diff("abc", "abc")) == [DiffSection(DiffSectionType.COPY, 3)]

    def test_custom_predicate(self):
        script = list(diff(["X"], ["x"], equals=lambda a, b: a.lower() == b.lower()))
        assert script == [DiffSection(DiffSectionType.COPY, 1)]

    def test_none_inputs(self):
        with pytest.raises(DiffyNullArgumentError):
            diff(None, [])
        with pytest.raises(DiffyNullArgumentError):
            diff([], None)


# =========================================================================
# diff_by
# =========================================================================

class TestDiffBy:

    def test_projects_through_key(self):
        old = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]
        new = [{"id": 1, "v": "changed"}, {"id": 3, "v": "c"}]
        script = list(diff_by(old, new, key=lambda item: item["id"]))
        assert _types(script) == [
            (DiffSectionType.COPY, 1),
            (DiffSectionType.DELETE, 1),
            (DiffSectionType.INSERT, 1),
        ]

    def test_equals_compares_projected_values(self):
        script = list(diff_by(
            ["Apple", "berry"], ["avocado", "Banana"],
            key=lambda s: s[0], equals=lambda a, b: a.lower() == b.lower(),
        ))
        assert script == [DiffSection(DiffSectionType.COPY, 2)]

    def test_key_is_required(self):
        with pytest.raises(DiffyNullArgumentError) as exc_info:
            diff_by([1], [1], key=None)
        assert exc_info.value.context["param"] == "key"


# =========================================================================
# transform_to
# =========================================================================

class TestTransformTo:

    def test_transforms_list_in_place(self):
        source = ["A", "B", "C", "A", "B", "B", "A"]
        destination = ["C", "B", "A", "B", "A", "C"]
        result = transform_to(source, destination)
        assert source == destination
        assert isinstance(result, TransformResult)
        assert destination == ["C", "B", "A", "B", "A", "C"]

    def test_builtin_list_uses_slice_batching(self):
        source = SpyList([1, 2, 3, 4, 5])
        transform_to(source, [9, 8, 7])
        assert source == [9, 8, 7]
        assert source.calls == ["delitem_slice", "setitem_slice"]

    def test_single_element_runs_use_element_operations(self):
        source = SpyList([1, 2, 3])
        transform_to(source, [1, 9, 3])
        assert source == [1, 9, 3]
        assert source.calls == ["delitem", "insert"]

    def test_non_list_sequence_falls_back_to_single_steps(self):
        source = UserList([1, 2])
        result = transform_to(source, [3, 4, 5])
        assert list(source) == [3, 4, 5]
        assert result.batched_calls == 0
        assert result.elements_inserted == 3
        assert result.elements_deleted == 2

    def test_explicit_callbacks_take_precedence(self):
        events = []
        source = [1]

        def insert_range(index, items):
            events.append(("insert_range", index, list(items)))
            source[index:index] = items

        transform_to(source, [1, 2, 3], insert_range=insert_range)
        assert source == [1, 2, 3]
        assert events == [("insert_range", 1, [2, 3])]

    def test_equal_elements_keep_source_identity(self):
        source = ["A", "b"]
        transform_to(source, ["a", "B", "c"], equals=lambda x, y: x.lower() == y.lower())
        assert source == ["A", "b", "c"]

    def test_config_is_forwarded(self):
        source = SpyList([])
        result = transform_to(source, [1, 2, 3, 4, 5], config=DiffyConfig(max_batch_size=2))
        assert source == [1, 2, 3, 4, 5]
        assert result.batched_calls == 3

    def test_empty_to_empty(self):
        source = []
        assert transform_to(source, []) == TransformResult()
        assert source == []

    def test_none_inputs(self):
        with pytest.raises(DiffyNullArgumentError):
            transform_to(None, [])
        with pytest.raises(DiffyNullArgumentError):
            transform_to([], None)
