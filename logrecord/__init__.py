"""Public API for the structured record builder."""

from __future__ import annotations

from .builder import (
    RecordBuilder,
    build_record,
    configure_builder,
    get_builder,
    reset_builder,
)
from .classify import ArgumentKind, ClassifiedArgument, classify_argument
from .config import RecordSettings, configure_settings, get_settings, load_settings
from .context import (
    capture_context,
    clear_context,
    get_context,
    pop_context,
    push_context,
    record_context,
    run_with_context,
)
from .defaults import Derived, Literal, apply_defaults
from .exceptions import DefaultEvaluationError, RecordError
from .initializer import describe_error, initialize_record
from .metrics import get_metrics

__all__ = [
    "configure",
    "build_record",
    "initialize_record",
    "apply_defaults",
    "describe_error",
    "classify_argument",
    "ArgumentKind",
    "ClassifiedArgument",
    "Literal",
    "Derived",
    "RecordBuilder",
    "get_builder",
    "reset_builder",
    "RecordSettings",
    "load_settings",
    "get_settings",
    "get_metrics",
    "push_context",
    "pop_context",
    "get_context",
    "clear_context",
    "record_context",
    "capture_context",
    "run_with_context",
    "RecordError",
    "DefaultEvaluationError",
]


def configure(settings: RecordSettings | None = None, **overrides) -> RecordSettings:
    """Configure settings and rebind the shared builder."""

    resolved = configure_settings(settings, **overrides)
    configure_builder(resolved)

    return resolved
