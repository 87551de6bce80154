"""Configuration utilities for record construction."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping


def _bool_env(value: str | None, default: bool) -> bool:
    """Convert a string to a boolean."""

    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _int_env(value: str | None, default: int) -> int:
    if value is None:
        return default

    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _fields_env(value: str | None) -> Mapping[str, str]:
    """Parse ``key=value`` pairs separated by commas."""

    if not value:
        return MappingProxyType({})

    fields: dict[str, str] = {}

    for part in value.split(","):
        key, sep, item = part.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        fields[key] = item.strip()

    return MappingProxyType(fields)


@dataclass(frozen=True)
class RecordSettings:
    """Immutable runtime configuration."""

    error_key: str
    default_fields: Mapping[str, Any]
    include_context: bool
    strict_defaults: bool
    stack_limit: int

    def with_overrides(self, **kwargs: Any) -> "RecordSettings":
        return replace(self, **kwargs)


_SETTINGS_LOCK = threading.RLock()
_SETTINGS: RecordSettings | None = None


def load_settings(env: Mapping[str, str] | None = None) -> RecordSettings:
    source = env if env is not None else os.environ

    return RecordSettings(
        error_key=(source.get("LOG_ERROR_KEY") or "").strip() or "error",
        default_fields=_fields_env(source.get("LOG_DEFAULT_FIELDS")),
        include_context=_bool_env(source.get("LOG_INCLUDE_CONTEXT"), True),
        strict_defaults=_bool_env(source.get("LOG_STRICT_DEFAULTS"), False),
        stack_limit=max(0, _int_env(source.get("LOG_STACK_LIMIT"), 0)),
    )


def configure_settings(
    settings: RecordSettings | None = None, **overrides: Any
) -> RecordSettings:
    with _SETTINGS_LOCK:
        resolved = settings or load_settings()
        if overrides:
            resolved = resolved.with_overrides(**overrides)
        global _SETTINGS
        _SETTINGS = resolved
        return _SETTINGS


def get_settings() -> RecordSettings:
    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            return configure_settings()
        return _SETTINGS


def reset_settings() -> None:
    """Forget configured settings so the next lookup reloads the environment."""

    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = None
