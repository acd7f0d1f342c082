"""Flask request and Flask-SQLAlchemy integration for RawQueryPaginator."""

from __future__ import annotations

from typing import Any

from flask import Flask, current_app, has_request_context
from flask import request as current_request
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import NotFound

from raw_query_paginator import (
    PageOutOfRangeError,
    PaginationConfig,
    QueryExecutor,
    RawQueryPaginator,
    SessionExecutor,
)
from raw_query_paginator.types import SessionLike


def _request_or_current(request: Any | None) -> Any:
    if request is not None:
        return request
    if not has_request_context():
        raise RuntimeError(
            "FlaskRawQueryPaginator needs a request. "
            "Pass request=... or create it inside a request context."
        )
    return current_request


class FlaskRawQueryPaginator(RawQueryPaginator):
    """RawQueryPaginator wired to the active Flask request.

    - Page number and link template come from ``request.path``.
    - Links are absolute, rooted at ``request.url_root``.
    - Without an explicit executor, rows are read through ``db.session``, the
      given ``session``, the class-level provider, or finally the
      Flask-SQLAlchemy extension registered on ``current_app``.
    """

    def __init__(
        self,
        request: Any | None = None,
        *,
        db: SQLAlchemy | None = None,
        session: SessionLike | None = None,
        config: PaginationConfig | None = None,
        executor: QueryExecutor | None = None,
    ) -> None:
        request = _request_or_current(request)
        if executor is None and session is not None:
            executor = SessionExecutor(session)
        if executor is None and db is not None:
            executor = SessionExecutor(session_provider=lambda: db.session)
        super().__init__(
            request.path, request.url_root, config=config, executor=executor
        )

    def _resolve_executor(self) -> QueryExecutor:
        if self._executor is not None or type(self).session_provider is not None:
            return super()._resolve_executor()
        db = current_app.extensions.get("sqlalchemy")
        if db is None:
            return super()._resolve_executor()
        return SessionExecutor(session_provider=lambda: db.session)


def init_app(app: Flask) -> None:
    """Answer ``PageOutOfRangeError`` raised by a view with a 404."""

    def _page_out_of_range(error: PageOutOfRangeError):
        return app.handle_http_exception(NotFound(description=str(error)))

    app.register_error_handler(PageOutOfRangeError, _page_out_of_range)
