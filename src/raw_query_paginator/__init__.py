"""Public entry points for the raw_query_paginator package."""

from .config import DEFAULT_LABELS, PaginationConfig
from .errors import ConfigurationError, PageOutOfRangeError, RawPaginatorError
from .paginator import RawQueryPaginator
from .query import QueryExecutor, QuerySpec, SessionExecutor, augment_query
from .render import NavItem
from .resolver import ResolvedPage, resolve_page
from .state import PaginationState
from .template import UrlTemplate
from .types import NamedParams, PositionalParams

__all__ = [
    "RawQueryPaginator",
    "PaginationConfig",
    "PaginationState",
    "DEFAULT_LABELS",
    "QuerySpec",
    "QueryExecutor",
    "SessionExecutor",
    "NamedParams",
    "PositionalParams",
    "NavItem",
    "UrlTemplate",
    "ResolvedPage",
    "augment_query",
    "resolve_page",
    "RawPaginatorError",
    "ConfigurationError",
    "PageOutOfRangeError",
]
