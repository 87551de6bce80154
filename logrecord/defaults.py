"""Default field application for structured records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, MutableMapping, Union

from .exceptions import DefaultEvaluationError
from .metrics import record_derived

LOGGER = logging.getLogger("logrecord.defaults")

Record = MutableMapping[str, Any]


@dataclass(frozen=True)
class Literal:
    """A default stored as-is."""

    value: Any


@dataclass(frozen=True)
class Derived:
    """A default computed from the record being built."""

    fn: Callable[[Record], Any]


Default = Union[Literal, Derived]


def as_default(value: Any) -> Default:
    """Normalise a raw defaults value into a ``Literal`` or ``Derived``."""

    if isinstance(value, (Literal, Derived)):
        return value

    if callable(value):
        return Derived(value)

    return Literal(value)


def apply_defaults(
    record: Record,
    defaults: Mapping[str, Any] | None = None,
    *,
    strict: bool = False,
) -> Record:
    """Fill fields missing from ``record`` using ``defaults``.

    Defaults are visited in mapping order. Fields already present are never
    overwritten, and derived defaults observe every default applied before
    them. A derived default that raises leaves its field unset (logged),
    or raises ``DefaultEvaluationError`` when ``strict`` is set. The record
    is updated in place and returned.
    """

    if not defaults:
        return record

    for name, raw in defaults.items():
        if name in record:
            continue

        default = as_default(raw)

        if isinstance(default, Derived):
            try:
                value = default.fn(record)
            except Exception as exc:
                record_derived(failed=True)
                if strict:
                    raise DefaultEvaluationError(name, exc) from exc
                LOGGER.exception("Derived default for %s failed", name)
                continue
            record_derived()
            record[name] = value
        else:
            record[name] = default.value

    return record


def merge_defaults(*sources: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Combine default sources so that earlier sources take precedence."""

    merged: Dict[str, Any] = {}

    for source in sources:
        if not source:
            continue
        for name, value in source.items():
            merged.setdefault(name, value)

    return merged


__all__ = [
    "Default",
    "Derived",
    "Literal",
    "apply_defaults",
    "as_default",
    "merge_defaults",
]
