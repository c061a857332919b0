"""Diff engine and script applier.

Exports
-------
compute
    Lazily compute the edit script between two sequences.
compute_range
    Same as :func:`compute`, restricted to a pair of ``[start, end)`` ranges.
find_longest_common_subsequence
    Find the first-found longest common run of two ranges.
count_equal
    Length of the run of equal elements starting at two positions.
ScriptApplier
    Replays an edit script against a mutable sequence.
apply_diff
    Functional shortcut for :meth:`ScriptApplier.apply`.
"""

from .applier import ScriptApplier, apply_diff
from .engine import compute, compute_range
from .lcs import count_equal, find_longest_common_subsequence

__all__ = [
    "ScriptApplier",
    "apply_diff",
    "compute",
    "compute_range",
    "count_equal",
    "find_longest_common_subsequence",
]
