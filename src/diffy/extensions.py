"""Convenience entry points that adapt arbitrary inputs to the diff engine.

The engine needs two random-access sequences.  These helpers materialise
plain iterables, project elements through a key function, and pair the
diff with the script applier for the common "make this list look like
that one" case.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any, TypeVar

from diffy import requires
from diffy.config import DiffyConfig
from diffy.core.applier import InsertRangeCallback, RemoveRangeCallback, ScriptApplier
from diffy.core.engine import compute
from diffy.core.lcs import EqualityPredicate
from diffy.models import DiffSection, TransformResult

T = TypeVar("T")
K = TypeVar("K")


def _as_sequence(items: Iterable[T]) -> Sequence[T]:
    if isinstance(items, Sequence):
        return items
    return list(items)


def diff(
    source: Iterable[T],
    destination: Iterable[T],
    equals: EqualityPredicate | None = None,
) -> Iterator[DiffSection]:
    """Compute the edit script between two iterables.

    Inputs that are not already sequences (generators, sets, dict views,
    ...) are materialised into lists first.
    """
    requires.not_none(source, "source")
    requires.not_none(destination, "destination")
    return compute(_as_sequence(source), _as_sequence(destination), equals)


def diff_by(
    source: Iterable[T],
    destination: Iterable[T],
    key: Callable[[T], K],
    equals: EqualityPredicate | None = None,
) -> Iterator[DiffSection]:
    """Compute the edit script after projecting every element through *key*.

    *equals*, when given, compares the projected values.
    """
    requires.not_none(source, "source")
    requires.not_none(destination, "destination")
    requires.not_none(key, "key")
    projected_source = [key(item) for item in source]
    projected_destination = [key(item) for item in destination]
    return compute(projected_source, projected_destination, equals)


def transform_to(
    source: MutableSequence[T],
    destination: Sequence[T],
    equals: EqualityPredicate | None = None,
    insert_range: InsertRangeCallback | None = None,
    remove_range: RemoveRangeCallback | None = None,
    *,
    config: DiffyConfig | None = None,
) -> TransformResult:
    """Mutate *source* in place until it equals *destination*.

    When neither callback is given and *source* is a built-in ``list``,
    slice assignment is used to insert and remove whole runs at once.

    Returns
    -------
    TransformResult
        Summary of the applied script.
    """
    requires.not_none(source, "source")
    requires.not_none(destination, "destination")

    if insert_range is None and remove_range is None and isinstance(source, list):
        insert_range, remove_range = _list_range_ops(source)

    # The script is computed against source, so it is fully materialised
    # before source starts to change.
    sections = list(compute(source, destination, equals))
    return ScriptApplier(config).apply(
        source, destination, sections, insert_range, remove_range,
    )


def _list_range_ops(target: list[Any]) -> tuple[InsertRangeCallback, RemoveRangeCallback]:
    def insert_range(index: int, items: Sequence[Any]) -> None:
        target[index:index] = items

    def remove_range(index: int, count: int) -> None:
        del target[index : index + count]

    return insert_range, remove_range
