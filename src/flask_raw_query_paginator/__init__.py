from raw_query_paginator import (
    ConfigurationError,
    PageOutOfRangeError,
    PaginationConfig,
    RawPaginatorError,
)

from .core import FlaskRawQueryPaginator, init_app

__all__ = [
    "FlaskRawQueryPaginator",
    "init_app",
    "PaginationConfig",
    "RawPaginatorError",
    "ConfigurationError",
    "PageOutOfRangeError",
]
