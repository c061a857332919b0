"""Script applier: replay an edit script against a mutable sequence.

Takes the section stream produced by :func:`diffy.core.engine.compute` and
mutates the *source* sequence until it matches *destination*.  INSERT and
DELETE runs longer than one element can be routed through optional
range callbacks, so observable containers fire one notification per run
instead of one per element.
"""

from __future__ import annotations

import sys
import time
from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

from diffy import requires
from diffy.config import DiffyConfig
from diffy.errors import DiffyInvalidOperationError
from diffy.models import DiffSection, DiffSectionType, TransformResult
from diffy.observability import NoopMetricsHook, get_logger
from diffy.utils.chunk import chunk_items, chunk_lengths

T = TypeVar("T")

InsertRangeCallback = Callable[[int, Sequence[Any]], Any]
RemoveRangeCallback = Callable[[int, int], Any]

log = get_logger("diffy.applier")


class _ApplyState:
    """Cursors and counters shared across section handlers."""

    __slots__ = ("dest_index", "result", "section_counts", "source_index")

    def __init__(self) -> None:
        self.source_index = 0
        self.dest_index = 0
        self.result = TransformResult()
        self.section_counts: Counter[str] = Counter()


class ScriptApplier:
    """Applies edit scripts to mutable sequences.

    Parameters
    ----------
    config:
        Library configuration.  Defaults to ``DiffyConfig()``.
    """

    def __init__(self, config: DiffyConfig | None = None) -> None:
        self._config = config if config is not None else DiffyConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def apply(
        self,
        source: MutableSequence[T],
        destination: Sequence[T],
        diff: Iterable[DiffSection],
        insert_range: InsertRangeCallback | None = None,
        remove_range: RemoveRangeCallback | None = None,
    ) -> TransformResult:
        """Mutate *source* in place by replaying *diff*.

        COPY sections only advance both cursors; the elements they cover
        are trusted to match and are not compared.  INSERT copies elements
        from *destination*; DELETE removes elements from *source*.

        *diff* is consumed once, section by section.  It must not be a
        lazy script computed from *source* itself, because the mutations
        would shift the indices the engine is still reading.

        Parameters
        ----------
        source:
            The sequence to transform.
        destination:
            The read-only target sequence the script was computed against.
        diff:
            The edit script.
        insert_range:
            Optional ``insert_range(index, items)`` callback used for
            INSERT runs longer than one element.
        remove_range:
            Optional ``remove_range(index, count)`` callback used for
            DELETE runs longer than one element.

        Returns
        -------
        TransformResult
            Summary of what was done.

        Raises
        ------
        DiffyNullArgumentError
            If *source*, *destination* or *diff* is ``None``.
        DiffyInvalidOperationError
            If a section has an unknown type.
        """
        requires.not_none(source, "source")
        requires.not_none(destination, "destination")
        requires.not_none(diff, "diff")

        if self._config.debug_dump_diff:
            diff = list(diff)
            print(
                "[diffy] Edit script:",
                ", ".join(str(section) for section in diff),
                file=sys.stderr,
            )

        started = time.perf_counter()
        state = _ApplyState()

        for section in diff:
            if section.type == DiffSectionType.COPY:
                state.source_index += section.length
                state.dest_index += section.length
                state.result.elements_copied += section.length

            elif section.type == DiffSectionType.INSERT:
                self._exec_insert(source, destination, section.length, insert_range, state)

            elif section.type == DiffSectionType.DELETE:
                self._exec_delete(source, section.length, remove_range, state)

            else:
                raise DiffyInvalidOperationError(
                    f"DiffSectionType value was invalid: {section.type!r}",
                    context={"section": section},
                )

            state.result.sections_applied += 1
            state.section_counts[getattr(section.type, "value", str(section.type))] += 1

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        _emit_apply_metrics(self._metrics, state, elapsed_ms)
        log.debug(
            "edit script applied",
            extra={
                "extra_fields": {
                    "op": "apply",
                    "sections": state.result.sections_applied,
                    "copied": state.result.elements_copied,
                    "inserted": state.result.elements_inserted,
                    "deleted": state.result.elements_deleted,
                    "batched_calls": state.result.batched_calls,
                    "duration_ms": round(elapsed_ms, 3),
                }
            },
        )
        return state.result

    def _exec_insert(
        self,
        source: MutableSequence[T],
        destination: Sequence[T],
        length: int,
        insert_range: InsertRangeCallback | None,
        state: _ApplyState,
    ) -> None:
        """Insert ``destination[dest_index:dest_index + length]`` at the source cursor."""
        if length > 1 and insert_range is not None:
            items = [destination[state.dest_index + i] for i in range(length)]
            offset = 0
            for batch in chunk_items(items, self._config.max_batch_size):
                insert_range(state.source_index + offset, batch)
                offset += len(batch)
                state.result.batched_calls += 1
                self._metrics.increment(
                    "diffy.batched_calls_total", 1, tags={"op": "insert"},
                )
            state.source_index += length
            state.dest_index += length
        else:
            for _ in range(length):
                source.insert(state.source_index, destination[state.dest_index])
                state.source_index += 1
                state.dest_index += 1
        state.result.elements_inserted += max(length, 0)

    def _exec_delete(
        self,
        source: MutableSequence[T],
        length: int,
        remove_range: RemoveRangeCallback | None,
        state: _ApplyState,
    ) -> None:
        """Remove *length* elements at the source cursor; only the source is consumed."""
        if length > 1 and remove_range is not None:
            for count in chunk_lengths(length, self._config.max_batch_size):
                remove_range(state.source_index, count)
                state.result.batched_calls += 1
                self._metrics.increment(
                    "diffy.batched_calls_total", 1, tags={"op": "remove"},
                )
        else:
            for _ in range(length):
                del source[state.source_index]
        state.result.elements_deleted += max(length, 0)


def apply_diff(
    source: MutableSequence[T],
    destination: Sequence[T],
    diff: Iterable[DiffSection],
    insert_range: InsertRangeCallback | None = None,
    remove_range: RemoveRangeCallback | None = None,
    *,
    config: DiffyConfig | None = None,
) -> TransformResult:
    """Functional shortcut for ``ScriptApplier(config).apply(...)``."""
    return ScriptApplier(config).apply(source, destination, diff, insert_range, remove_range)


def _emit_apply_metrics(metrics: Any, state: _ApplyState, elapsed_ms: float) -> None:
    """Emit per-type section and element counters plus the apply timing."""
    elements = {
        DiffSectionType.COPY.value: state.result.elements_copied,
        DiffSectionType.INSERT.value: state.result.elements_inserted,
        DiffSectionType.DELETE.value: state.result.elements_deleted,
    }
    for section_type, count in state.section_counts.items():
        metrics.increment(
            "diffy.sections_total", count, tags={"section_type": section_type},
        )
        metrics.increment(
            "diffy.elements_total",
            elements.get(section_type, 0),
            tags={"section_type": section_type},
        )
    metrics.timing("diffy.apply_duration_ms", elapsed_ms)
