"""In-process metrics for record construction."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict


@dataclass
class BuildMetrics:
    """Counters describing record construction."""

    records_built: int = 0 # The total number of records built
    arguments_dropped: Dict[str, int] | None = None # Dropped arguments by category
    derived_evaluated: int = 0 # Derived defaults invoked
    default_errors: int = 0 # Derived defaults that raised

    def as_dict(self) -> dict[str, object]:
        """Return the metrics as a dictionary."""

        return {
            "records_built": self.records_built,
            "arguments_dropped": dict(self.arguments_dropped or {}),
            "derived_evaluated": self.derived_evaluated,
            "default_errors": self.default_errors,
        }


_LOCK = threading.RLock()
_METRICS = BuildMetrics(arguments_dropped={})


def record_build() -> None:
    """Record a finished record."""

    with _LOCK:
        _METRICS.records_built += 1


def record_argument_drop(category: str) -> None:
    """Record an argument discarded because its slot was already filled."""

    with _LOCK:
        dropped = _METRICS.arguments_dropped or {}
        dropped[category] = dropped.get(category, 0) + 1
        _METRICS.arguments_dropped = dropped


def record_derived(*, failed: bool = False) -> None:
    """Record the evaluation of a derived default."""

    with _LOCK:
        _METRICS.derived_evaluated += 1
        if failed:
            _METRICS.default_errors += 1


def reset_metrics() -> None:
    """Reset the metrics."""

    with _LOCK:
        _METRICS.records_built = 0
        _METRICS.arguments_dropped = {}
        _METRICS.derived_evaluated = 0
        _METRICS.default_errors = 0


def get_metrics() -> BuildMetrics:
    """Get a snapshot of the metrics."""

    with _LOCK:
        return BuildMetrics(**_METRICS.as_dict())
