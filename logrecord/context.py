"""Context-bound default fields."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Callable, Iterator, Mapping

_CONTEXT: ContextVar[Mapping[str, Any]] = ContextVar("logrecord_context", default={})


Context = Mapping[str, Any]


def push_context(**fields: Any) -> Token:
    """Merge ``fields`` into the current scope and return a reset token."""

    current = dict(_CONTEXT.get())
    current.update(fields)
    return _CONTEXT.set(current)


def pop_context(token: Token) -> None:
    _CONTEXT.reset(token)


def get_context() -> dict[str, Any]:
    return dict(_CONTEXT.get())


def clear_context() -> None:
    _CONTEXT.set({})


@contextmanager
def record_context(**fields: Any) -> Iterator[None]:
    """Bind default fields for the duration of the block."""

    token = push_context(**fields)
    try:
        yield
    finally:
        pop_context(token)


def capture_context(extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return a shallow copy of the current context defaults."""

    payload = get_context()
    if extra:
        payload.update(extra)
    return payload


def run_with_context(
    context: Context,
    func: Callable[..., Any],
    *args: Any,
    **kwargs: Any,
) -> Any:
    """Execute ``func`` with the provided context defaults bound."""

    token = push_context(**context)
    try:
        return func(*args, **kwargs)
    finally:
        pop_context(token)


__all__ = [
    "Context",
    "capture_context",
    "clear_context",
    "get_context",
    "pop_context",
    "push_context",
    "record_context",
    "run_with_context",
]
