"""Pagination arithmetic."""

from __future__ import annotations

from dataclasses import dataclass


def total_pages_for(total_items: int, items_per_page: int) -> int:
    """Ceiling division; a partially filled last page still counts."""
    if total_items <= 0:
        return 0
    return (total_items + items_per_page - 1) // items_per_page


def page_offset(page: int, items_per_page: int) -> int:
    return (page - 1) * items_per_page


@dataclass(frozen=True, slots=True)
class PaginationState:
    """Snapshot of one executed page."""

    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    next_page: int

    @classmethod
    def compute(
        cls, total_items: int, items_per_page: int, current_page: int
    ) -> "PaginationState":
        total_pages = total_pages_for(total_items, items_per_page)
        next_page = current_page if current_page == total_pages else current_page + 1
        return cls(
            current_page=current_page,
            items_per_page=items_per_page,
            total_items=total_items,
            total_pages=total_pages,
            next_page=next_page,
        )

    @property
    def offset(self) -> int:
        return page_offset(self.current_page, self.items_per_page)

    @property
    def limit(self) -> int:
        return self.items_per_page

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.total_pages

    @property
    def is_out_of_range(self) -> bool:
        return self.current_page > self.total_pages

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0
