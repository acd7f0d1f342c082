"""Raw query containers, LIMIT/OFFSET augmentation and the SQLAlchemy executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from sqlalchemy import text

from .config import PaginationConfig
from .errors import ConfigurationError
from .state import page_offset
from .types import (
    NamedParams,
    ParamsInput,
    PositionalParams,
    QueryParams,
    SessionLike,
    SessionProvider,
    coerce_params,
)


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Raw SQL text together with the parameters it binds."""

    text: str
    params: QueryParams = field(default_factory=NamedParams)

    @classmethod
    def build(cls, text: str, params: ParamsInput = None) -> "QuerySpec":
        if not isinstance(text, str) or not text.strip():
            raise ConfigurationError("SQL query can't be empty. Please add query")
        return cls(text, coerce_params(params))

    @property
    def is_positional(self) -> bool:
        return isinstance(self.params, PositionalParams)


def _strip_terminator(sql: str) -> str:
    return sql.rstrip().rstrip(";").rstrip()


def check_reserved_params(query: QuerySpec, config: PaginationConfig) -> None:
    """Reject named parameters that would collide with the LIMIT/OFFSET binds."""
    if isinstance(query.params, PositionalParams):
        return
    clashes = {config.offset_param, config.limit_param} & set(query.params.values)
    if clashes:
        raise ConfigurationError(
            f"Query parameters {sorted(clashes)} are reserved for pagination"
        )


def augment_query(
    query: QuerySpec,
    page: int,
    items_per_page: int,
    config: PaginationConfig | None = None,
) -> QuerySpec:
    """Return ``query`` restricted to one page with ``LIMIT ... OFFSET ...``.

    Named queries bind ``config.limit_param``/``config.offset_param``;
    positional queries append the limit and offset values after the caller's
    own parameters.
    """
    config = config or PaginationConfig()
    offset = page_offset(page, items_per_page)
    limit = items_per_page
    sql = _strip_terminator(query.text)

    if isinstance(query.params, PositionalParams):
        marker = config.positional_marker
        return QuerySpec(
            f"{sql} LIMIT {marker} OFFSET {marker}",
            PositionalParams(query.params.values + (limit, offset)),
        )

    check_reserved_params(query, config)
    values = query.params.as_dict()
    values[config.limit_param] = limit
    values[config.offset_param] = offset
    return QuerySpec(
        f"{sql} LIMIT :{config.limit_param} OFFSET :{config.offset_param}",
        NamedParams(values),
    )


def count_query(query: QuerySpec) -> QuerySpec:
    """Wrap the unmodified query so the database returns only its row count."""
    sql = _strip_terminator(query.text)
    return QuerySpec(
        f"SELECT COUNT(*) FROM ({sql}) AS raw_paginator_count", query.params
    )


class QueryExecutor(Protocol):
    def count(self, query: QuerySpec) -> int: ...

    def fetch(self, query: QuerySpec) -> list[Any]: ...


class SessionExecutor:
    """Run raw queries through a SQLAlchemy session.

    Accepts either a session or a zero-argument provider returning one, so
    request-scoped sessions (e.g. Flask-SQLAlchemy's ``db.session``) are looked
    up at execution time. Errors raised by SQLAlchemy are not caught here.
    """

    __slots__ = ("_session", "_provider")

    def __init__(
        self,
        session: SessionLike | None = None,
        *,
        session_provider: SessionProvider | None = None,
    ) -> None:
        if session is None and session_provider is None:
            raise ConfigurationError(
                "SessionExecutor needs a session or a session_provider"
            )
        self._session = session
        self._provider = session_provider

    @property
    def session(self) -> SessionLike:
        if self._session is not None:
            return self._session
        assert self._provider is not None
        return self._provider()

    def _run(self, query: QuerySpec):
        session = self.session
        if isinstance(query.params, PositionalParams):
            return session.connection().exec_driver_sql(
                query.text, query.params.values
            )
        return session.execute(text(query.text), query.params.as_dict())

    def count(self, query: QuerySpec) -> int:
        return int(self._run(count_query(query)).scalar_one())

    def fetch(self, query: QuerySpec) -> list[Any]:
        return list(self._run(query).all())

    def __repr__(self) -> str:
        return f"SessionExecutor({self._session or self._provider!r})"
