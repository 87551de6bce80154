"""Record builder entry points."""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Mapping, Sequence

from .config import RecordSettings, get_settings
from .context import get_context
from .defaults import apply_defaults, merge_defaults
from .initializer import initialize_record
from .metrics import record_build


def build_record(
    level: str,
    args: Sequence[Any],
    defaults: Mapping[str, Any] | None = None,
    error_key: str | None = None,
    *,
    strict: bool = False,
    stack_limit: int | None = None,
) -> Dict[str, Any]:
    """Create a new record from call-site ``args`` and ``defaults``."""

    record = initialize_record(level, args, error_key, stack_limit=stack_limit)
    apply_defaults(record, defaults, strict=strict)
    record_build()

    return record


class RecordBuilder:
    """Builder bound to settings and the context-scoped defaults."""

    def __init__(self, settings: RecordSettings | None = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> RecordSettings:
        """Get the settings, loading them lazily."""

        settings = self._settings

        if settings is None:
            settings = get_settings()
            self._settings = settings

        return settings

    def build(
        self,
        level: str,
        *args: Any,
        defaults: Mapping[str, Any] | None = None,
        error_key: str | None = None,
    ) -> Dict[str, Any]:
        """Build a record; call-site defaults beat context and settings defaults."""

        settings = self.settings
        context = get_context() if settings.include_context else None

        return build_record(
            level,
            args,
            merge_defaults(defaults, context, settings.default_fields),
            error_key or settings.error_key,
            strict=settings.strict_defaults,
            stack_limit=settings.stack_limit,
        )

    def debug(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        return self.build("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        return self.build("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        return self.build("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        return self.build("error", *args, **kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        return self.build("critical", *args, **kwargs)


_LOCK = RLock()
_BUILDER: RecordBuilder | None = None


def configure_builder(settings: RecordSettings) -> RecordBuilder:
    """Replace the shared builder with one bound to ``settings``."""

    global _BUILDER
    with _LOCK:
        _BUILDER = RecordBuilder(settings)
        return _BUILDER


def get_builder() -> RecordBuilder:
    """Get the shared builder."""

    global _BUILDER
    with _LOCK:
        if _BUILDER is None:
            _BUILDER = RecordBuilder()
        return _BUILDER


def reset_builder() -> None:
    """Drop the shared builder."""

    global _BUILDER
    with _LOCK:
        _BUILDER = None
