"""diffy — LCS-based list diffing and in-place list transformation.

Public re-exports
-----------------

* **Diff engine:** :func:`compute`, :func:`compute_range`,
  :func:`find_longest_common_subsequence`, :func:`count_equal`
* **Script applier:** :class:`ScriptApplier`, :func:`apply_diff`
* **Adapters:** :func:`diff`, :func:`diff_by`, :func:`transform_to`
* **Configuration:** :class:`DiffyConfig`
* **Errors:** Every :class:`DiffyError` subclass and :class:`ErrorCode`
* **Models:** :class:`DiffSection`, :class:`DiffSectionType`,
  :class:`LongestCommonSubsequenceResult`, :class:`TransformResult`

Usage::

    from diffy import diff, transform_to

    list(diff([1, 2, 3], [1, 3, 4]))
    # [DiffSection(type=<DiffSectionType.COPY: 'copy'>, length=1), ...]

    items = ["a", "b", "c"]
    transform_to(items, ["c", "a", "d"])
    assert items == ["c", "a", "d"]
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from diffy.config import DiffyConfig

# ── Diff engine / applier ───────────────────────────────────────────────
from diffy.core import (
    ScriptApplier,
    apply_diff,
    compute,
    compute_range,
    count_equal,
    find_longest_common_subsequence,
)

# ── Errors ──────────────────────────────────────────────────────────────
from diffy.errors import (
    DiffyError,
    DiffyInvalidArgumentError,
    DiffyInvalidOperationError,
    DiffyNullArgumentError,
    DiffyOutOfRangeError,
    ErrorCode,
)

# ── Adapters ────────────────────────────────────────────────────────────
from diffy.extensions import diff, diff_by, transform_to

# ── Models ──────────────────────────────────────────────────────────────
from diffy.models import (
    DiffSection,
    DiffSectionType,
    LongestCommonSubsequenceResult,
    TransformResult,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Diff engine
    "compute",
    "compute_range",
    "find_longest_common_subsequence",
    "count_equal",
    # Script applier
    "ScriptApplier",
    "apply_diff",
    # Adapters
    "diff",
    "diff_by",
    "transform_to",
    # Configuration
    "DiffyConfig",
    # Errors
    "DiffyError",
    "ErrorCode",
    "DiffyNullArgumentError",
    "DiffyInvalidArgumentError",
    "DiffyOutOfRangeError",
    "DiffyInvalidOperationError",
    # Models
    "DiffSection",
    "DiffSectionType",
    "LongestCommonSubsequenceResult",
    "TransformResult",
]
