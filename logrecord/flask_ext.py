"""Flask integration helpers for logrecord."""

from __future__ import annotations

import uuid
from typing import Any

from flask import Flask, Response, g, has_request_context, request

from .context import pop_context, push_context


def register_flask_context(app: Flask, *, request_id_header: str = "X-Request-Id") -> None:
    """Bind request metadata as record defaults for every request."""

    @app.before_request
    def _record_before_request() -> None:  # type: ignore[override]
        rid = (request.headers.get(request_id_header) or "").strip()
        if not rid:
            rid = uuid.uuid4().hex[:16]
        g.request_id = rid

        g._record_token = push_context(
            request_id=rid,
            method=request.method,
            path=request.path,
            ip=_client_ip_default,
        )

    @app.after_request
    def _record_after_request(response: Response) -> Response:  # type: ignore[override]
        rid = g.get("request_id")
        if rid:
            response.headers.setdefault(request_id_header, rid)
        return response

    @app.teardown_request
    def _record_teardown(_exc: Any) -> None:  # type: ignore[override]
        token = g.pop("_record_token", None)
        if token is not None:
            pop_context(token)


def _client_ip_default(_record: Any) -> str | None:
    if not has_request_context():
        return None
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr


__all__ = ["register_flask_context"]
