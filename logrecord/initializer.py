"""Initial record construction from call-site arguments."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, Sequence

from .classify import ArgumentKind, classify_argument
from .metrics import record_argument_drop

LOGGER = logging.getLogger("logrecord.initializer")

DEFAULT_ERROR_KEY = "error"


def describe_error(exc: BaseException, *, limit: int | None = None) -> Dict[str, str]:
    """Extract the ``message``/``name``/``stack`` triple from an exception."""

    stack = "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__, limit=limit or None)
    )

    return {
        "message": _safe_str(exc),
        "name": type(exc).__name__,
        "stack": stack,
    }


def _safe_str(exc: BaseException) -> str:
    try:
        return str(exc)
    except Exception:
        return f"<unprintable {type(exc).__name__} object>"


def initialize_record(
    level: str,
    args: Sequence[Any],
    error_key: str | None = None,
    *,
    stack_limit: int | None = None,
) -> Dict[str, Any]:
    """Build the base record for ``level`` out of the call-site ``args``.

    The first exception fills ``record[error_key]``, the first mapping (or
    dataclass instance) is merged into the record and the first remaining
    value becomes ``message``. Anything arriving after its slot is filled is
    dropped.
    """

    record: Dict[str, Any] = {"level": level}
    error_key = error_key or DEFAULT_ERROR_KEY

    has_error = False
    has_object = False
    has_message = False

    for argument in args:
        classified = classify_argument(argument)
        kind = classified.kind

        if kind is ArgumentKind.ERROR:
            if has_error:
                _drop("error", argument)
                continue
            record[error_key] = describe_error(argument, limit=stack_limit)
            has_error = True

        elif kind is ArgumentKind.OBJECT and not has_object:
            # Record keys are always strings
            record.update({str(key): value for key, value in classified.fields.items()})
            has_object = True

        elif not has_message:
            record["message"] = argument
            has_message = True

        else:
            _drop("object" if kind is ArgumentKind.OBJECT else "message", argument)

    return record


def _drop(category: str, argument: Any) -> None:
    record_argument_drop(category)
    LOGGER.debug("Dropped %s argument of type %s", category, type(argument).__name__)


__all__ = ["DEFAULT_ERROR_KEY", "describe_error", "initialize_record"]
