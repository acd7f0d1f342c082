"""Exception hierarchy raised by the paginator."""

from __future__ import annotations


class RawPaginatorError(Exception):
    """Base class for every paginator error."""


class ConfigurationError(RawPaginatorError):
    """The paginator was used with missing or invalid configuration."""


class PageOutOfRangeError(RawPaginatorError):
    """The requested page lies past the last page of the result set."""

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(f"Page {page} does not exist (last page is {total_pages})")
        self.page = page
        self.total_pages = total_pages
