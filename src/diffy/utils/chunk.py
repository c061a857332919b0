"""Split a run of elements into batches of bounded size.

Used by the script applier when :attr:`DiffyConfig.max_batch_size` caps
how many elements a single range-insert callback may receive.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk_items(items: Sequence[T], size: int | None = None) -> list[Sequence[T]]:
    """Split *items* into consecutive slices of at most ``size`` elements.

    Parameters
    ----------
    items:
        The run to partition.
    size:
        Maximum number of elements per slice.  ``None`` returns the whole
        run as a single slice.

    Returns
    -------
    list
        A list of slices.  An empty input returns an empty list (not
        ``[[]]``).

    Raises
    ------
    ValueError
        If *size* is less than 1.

    Examples
    --------
    >>> chunk_items([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]
    """
    if size is not None and size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    if not items:
        return []

    if size is None:
        return [items]

    return [items[i : i + size] for i in range(0, len(items), size)]


def chunk_lengths(total: int, size: int | None = None) -> list[int]:
    """Return the chunk lengths that :func:`chunk_items` would produce for
    a run of *total* elements.

    >>> chunk_lengths(5, 2)
    [2, 2, 1]
    """
    if size is not None and size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    if total <= 0:
        return []

    if size is None:
        return [total]

    full, rest = divmod(total, size)
    return [size] * full + ([rest] if rest else [])
