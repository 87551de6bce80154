"""Tests for context-bound default propagation and reset."""

from __future__ import annotations

from logrecord.context import (
    capture_context,
    clear_context,
    get_context,
    pop_context,
    push_context,
    record_context,
    run_with_context,
)


def test_record_context_scopes_defaults(builder) -> None:
    """Context manager should attach and remove defaults per block."""

    with record_context(request_id="req-1", tenant="acme"):
        assert get_context()["request_id"] == "req-1"
        inside = builder.info("within-context")

    outside = builder.info("outside-context")

    assert inside["request_id"] == "req-1"
    assert inside["tenant"] == "acme"
    assert "request_id" not in outside
    assert get_context() == {}


def test_nested_contexts_layer_and_unwind() -> None:
    """Inner scopes override outer values and restore them on exit."""

    with record_context(tenant="acme", region="eu"):
        with record_context(tenant="globex"):
            assert get_context() == {"tenant": "globex", "region": "eu"}
        assert get_context() == {"tenant": "acme", "region": "eu"}


def test_manual_context_tokens_can_be_cleared(builder) -> None:
    """Manual push/pop of context tokens should be reversible without leaks."""

    token = push_context(trace_id="trace-123")
    assert builder.info("with-token")["trace_id"] == "trace-123"
    pop_context(token)

    push_context(trace_id="leaked")
    clear_context()

    assert get_context() == {}
    assert "trace_id" not in builder.info("after-clear")


def test_capture_context_returns_copy() -> None:
    """Captured context should be detached from the live scope."""

    with record_context(tenant="acme"):
        captured = capture_context({"job": "sync"})
        captured["tenant"] = "mutated"
        assert get_context() == {"tenant": "acme"}

    assert captured == {"tenant": "mutated", "job": "sync"}


def test_run_with_context_binds_for_call(builder) -> None:
    """run_with_context should bind defaults only for the wrapped call."""

    record = run_with_context({"job": "nightly"}, builder.info, "started")

    assert record["job"] == "nightly"
    assert get_context() == {}
