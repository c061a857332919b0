"""Data models shared by the diff engine and the script applier.

All public result types are plain dataclasses.  :class:`DiffSection` and
:class:`LongestCommonSubsequenceResult` are frozen so they behave as
immutable values and can be compared, hashed, and used in sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DiffSectionType(str, Enum):
    """Operation kinds emitted by the diff engine."""

    COPY = "copy"
    """Elements are present in both sequences -- nothing to change."""

    INSERT = "insert"
    """Elements exist only in the destination and must be inserted."""

    DELETE = "delete"
    """Elements exist only in the source and must be removed."""


# ---------------------------------------------------------------------------
# Edit script
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiffSection:
    """A single contiguous operation in an edit script.

    Attributes
    ----------
    type:
        The kind of operation (copy, insert, delete).
    length:
        Number of elements the operation spans.  Always positive for
        sections produced by :func:`diffy.core.engine.compute`.
    """

    type: DiffSectionType
    length: int

    def __str__(self) -> str:
        name = getattr(self.type, "value", str(self.type))
        return f"{name.capitalize()} {self.length}"


@dataclass(frozen=True)
class LongestCommonSubsequenceResult:
    """Outcome of one longest-common-run search over a pair of ranges.

    Attributes
    ----------
    is_success:
        ``False`` when no pair of equal elements exists in the ranges.
    position_in_first:
        Start index of the run in the first sequence, ``None`` if not found.
    position_in_second:
        Start index of the run in the second sequence, ``None`` if not found.
    length:
        Run length; ``0`` when not found.
    """

    is_success: bool
    position_in_first: int | None
    position_in_second: int | None
    length: int

    @classmethod
    def found(cls, position_in_first: int, position_in_second: int, length: int) -> LongestCommonSubsequenceResult:
        return cls(True, position_in_first, position_in_second, length)

    @classmethod
    def not_found(cls) -> LongestCommonSubsequenceResult:
        return cls(False, None, None, 0)

    def __str__(self) -> str:
        if not self.is_success:
            return "LCS -"
        return f"LCS ({self.position_in_first}, {self.position_in_second}, {self.length})"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class TransformResult:
    """Summary of one :meth:`ScriptApplier.apply` call.

    Attributes
    ----------
    sections_applied:
        Number of sections consumed from the edit script.
    elements_copied:
        Elements left in place by COPY sections.
    elements_inserted:
        Elements inserted into the source sequence.
    elements_deleted:
        Elements removed from the source sequence.
    batched_calls:
        Number of calls made to the range-insert/range-remove callbacks.
    """

    sections_applied: int = 0
    elements_copied: int = 0
    elements_inserted: int = 0
    elements_deleted: int = 0
    batched_calls: int = 0
