"""Configuration for diffy.

:class:`DiffyConfig` captures the tuneable knobs of the script applier.
The diff engine itself is a pure function and takes no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class DiffyConfig:
    """Complete configuration for a :class:`~diffy.core.applier.ScriptApplier`.

    Every parameter has a default, so ``DiffyConfig()`` is always valid.

    Parameters
    ----------
    max_batch_size:
        Upper bound on the number of elements handed to a single
        range-insert or range-remove callback.  Longer runs are split into
        consecutive chunks.  ``None`` (the default) passes every run in a
        single call.
    metrics:
        A :class:`~diffy.observability.MetricsHook` implementation.  When
        ``None`` a :class:`~diffy.observability.NoopMetricsHook` is used.
    debug_dump_diff:
        Write the edit script to *stderr* before it is applied.
    """

    # ── Batching ────────────────────────────────────────────────────────
    max_batch_size: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_batch_size is not None and self.max_batch_size < 1:
            raise ValueError(f"max_batch_size must be >= 1, got {self.max_batch_size}")
