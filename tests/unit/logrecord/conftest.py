"""Fixtures for logrecord unit tests."""

from __future__ import annotations

import pytest

from logrecord.builder import RecordBuilder, reset_builder
from logrecord.config import load_settings, reset_settings
from logrecord.context import clear_context

from tests.utils.logrecord import reset_record_metrics


def pytest_collection_modifyitems(config, items):  # pragma: no cover - Pytest hook
    """Tag every test in this directory with the `logrecord` marker."""

    for item in items:
        item.add_marker(pytest.mark.logrecord)


@pytest.fixture(autouse=True)
def _reset_record_state():
    """Reset module globals (settings, builder, context, metrics) around each test."""

    reset_settings()
    reset_builder()
    clear_context()
    reset_record_metrics()
    yield
    reset_record_metrics()
    clear_context()
    reset_builder()
    reset_settings()


@pytest.fixture
def record_settings():
    """Provide deterministic settings independent of the process environment."""

    return load_settings({})


@pytest.fixture
def builder(record_settings):
    """Builder bound to deterministic settings."""

    return RecordBuilder(record_settings)
