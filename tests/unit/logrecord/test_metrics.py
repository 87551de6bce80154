"""Tests for record construction metrics."""

from __future__ import annotations

from logrecord.builder import build_record
from logrecord.metrics import get_metrics, record_argument_drop, reset_metrics

from tests.utils.logrecord import capture_record_metrics


def test_metrics_snapshot_is_detached():
    """Test that snapshots do not change when counters move."""

    record_argument_drop("message")
    snapshot = get_metrics()
    record_argument_drop("message")

    assert snapshot.arguments_dropped == {"message": 1}
    assert get_metrics().arguments_dropped == {"message": 2}


def test_metrics_track_builds_and_derived_defaults():
    """Test that building records updates the counters."""

    with capture_record_metrics() as snapshot:
        build_record("info", ["a", "b"], {"host": lambda _rec: "web-1"})
        metrics = snapshot()

    assert metrics == {
        "records_built": 1,
        "arguments_dropped": {"message": 1},
        "derived_evaluated": 1,
        "default_errors": 0,
    }
    assert get_metrics().records_built == 0


def test_reset_metrics_clears_counters():
    """Test that reset_metrics zeroes every counter."""

    build_record("info", ["a", "b"])
    reset_metrics()

    assert get_metrics().as_dict() == {
        "records_built": 0,
        "arguments_dropped": {},
        "derived_evaluated": 0,
        "default_errors": 0,
    }
