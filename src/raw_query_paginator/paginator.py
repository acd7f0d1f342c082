"""Request-scoped paginator tying page resolution, execution and rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Self

from markupsafe import Markup

from .config import PaginationConfig, check_positive
from .errors import ConfigurationError, PageOutOfRangeError
from .query import (
    QueryExecutor,
    QuerySpec,
    SessionExecutor,
    augment_query,
    check_reserved_params,
)
from .render import NavItem, build_nav_items, generate_pages_list, render_pages_list
from .resolver import resolve_page
from .state import PaginationState
from .template import UrlTemplate
from .types import ErrorLogger, ParamsInput, SessionProvider

_error_logger: ErrorLogger = logging.getLogger("RawQueryPaginator").error


class RawQueryPaginator:
    """Paginate the rows of a raw SQL query for a single request.

    - The current page and the default link template come from the request
      path (``/items/list/7`` is page 7, linked as ``<domain>/items/list/%``).
    - ``execute()`` counts the unmodified query, then fetches one page of it
      with ``LIMIT``/``OFFSET`` appended.
    - Setters return the instance so configuration can be chained.

    Instances are request-scoped and not safe for concurrent use.
    """

    session_provider: SessionProvider | None = None

    def __init__(
        self,
        path: str,
        domain: str = "",
        *,
        config: PaginationConfig | None = None,
        executor: QueryExecutor | None = None,
    ) -> None:
        self._domain = domain.rstrip("/")
        self._config = config or PaginationConfig()
        self._executor = executor

        resolved = resolve_page(path, self._domain)
        self._current_page: int = resolved.page
        self._derived_template: UrlTemplate = resolved.template
        self._template: UrlTemplate | None = None

        self._query: QuerySpec | None = None
        self._state: PaginationState | None = None
        self.records: list[Any] = []

    @classmethod
    def configure(
        cls,
        *,
        session_provider: SessionProvider | None = None,
        error_logger: ErrorLogger | None = None,
    ) -> None:
        """Set the class-wide session provider and error logger."""
        if session_provider is not None:
            cls.session_provider = session_provider
        if error_logger is not None:
            global _error_logger
            _error_logger = error_logger

    # configuration ---------------------------------------------------------

    def set_uri(self, path: str) -> Self:
        """Link pages to ``domain + path``; ``path`` holds the page placeholder.

        Only ``path`` is searched for the placeholder. A path that needs the
        placeholder text elsewhere (e.g. percent-encoded segments with the
        default ``%``) must be built with a different ``config.placeholder``.
        """
        template = UrlTemplate.parse(path, self._config.placeholder)
        self._template = UrlTemplate(self._domain + template.prefix, template.suffix)
        return self

    def set_titles(self, labels: Mapping[str, str]) -> Self:
        self._config = self._config.with_labels(labels)
        return self

    def set_query(self, text: str, params: ParamsInput = None) -> Self:
        query = QuerySpec.build(text, params)
        check_reserved_params(query, self._config)
        self._query = query
        return self

    def set_page_options(
        self, items_per_page: int | None = None, page: int | None = None
    ) -> Self:
        """Override the page size and/or the current page; omitted values stay."""
        if items_per_page is not None:
            check_positive("items_per_page", items_per_page)
        if page is not None:
            check_positive("page", page)
        if items_per_page is not None:
            self._config = self._config.with_items_per_page(items_per_page)
        if page is not None:
            self._current_page = page
        return self

    # execution -------------------------------------------------------------

    def _resolve_executor(self) -> QueryExecutor:
        if self._executor is not None:
            return self._executor
        provider = type(self).session_provider
        if provider is None:
            raise ConfigurationError(
                "RawQueryPaginator executor is not configured. Pass executor=... "
                "or call RawQueryPaginator.configure(session_provider=...)."
            )
        return SessionExecutor(session_provider=provider)

    def execute(self) -> Self:
        """Count and fetch the current page.

        Nothing is stored until every step succeeds, so a failed call leaves
        the results of the previous successful call in place.
        """
        if self._query is None:
            raise ConfigurationError("SQL query can't be empty. Please add query")
        check_reserved_params(self._query, self._config)
        executor = self._resolve_executor()
        page = self._current_page
        per_page = self._config.items_per_page

        try:
            total_items = executor.count(self._query)
            state = PaginationState.compute(total_items, per_page, page)
            paged = augment_query(self._query, page, per_page, self._config)
            records = executor.fetch(paged)
        except Exception as exc:
            _error_logger(
                f"RawQueryPaginator: <catch: {exc!r}> <page: {page}> "
                f"<per_page: {per_page}>"
            )
            raise

        if records and state.is_out_of_range:
            raise PageOutOfRangeError(page, state.total_pages)

        self._state = state
        self.records = records
        return self

    # accessors -------------------------------------------------------------

    @property
    def config(self) -> PaginationConfig:
        return self._config

    @property
    def query(self) -> QuerySpec | None:
        return self._query

    @property
    def state(self) -> PaginationState | None:
        return self._state

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def items_per_page(self) -> int:
        return self._config.items_per_page

    @property
    def total_items(self) -> int | None:
        return self._state.total_items if self._state else None

    @property
    def total_pages(self) -> int | None:
        return self._state.total_pages if self._state else None

    @property
    def next_page(self) -> int | None:
        """Next available page; the current page when already on the last one."""
        return self._state.next_page if self._state else None

    @property
    def url_template(self) -> UrlTemplate:
        return self._template or self._derived_template

    def is_first_or_last_page(self, first: bool = False) -> bool:
        if first:
            return self._current_page == 1
        return self._current_page == self.total_pages

    def build_url(self, page: int) -> str:
        return self.url_template.build(page)

    # rendering -------------------------------------------------------------

    def _executed_state(self) -> PaginationState:
        if self._state is None:
            raise ConfigurationError("Call execute() before rendering the page list")
        return self._state

    def nav_items(self) -> list[NavItem]:
        return build_nav_items(
            self._executed_state(), self.build_url, self._config.labels
        )

    def render_pages_list(self) -> Markup | None:
        return render_pages_list(
            self._executed_state(), self.build_url, self._config.labels
        )

    def generate_pages_list(self) -> Markup:
        return generate_pages_list(
            self._executed_state(), self.build_url, self._config.labels
        )

    def __repr__(self) -> str:
        return (
            f"RawQueryPaginator(page={self._current_page}, "
            f"per_page={self.items_per_page}, total_items={self.total_items})"
        )
