"""Top-level pytest configuration for logrecord tests."""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:  # pragma: no cover - Pytest hook
    """Ensure sensible default markers based on collection context."""

    for item in items:
        if "/unit/" in item.path.as_posix():
            item.add_marker(pytest.mark.unit)
