"""Navigation fragment rendering.

The ordering of the items and their disabled/active flags are the stable
contract; the Bootstrap classes used by the HTML helpers are presentation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Literal

from markupsafe import Markup

from .state import PaginationState

NavRole = Literal["first", "previous", "page", "current", "next", "last"]
UrlBuilder = Callable[[int], str]

_ARROWS: dict[str, str] = {
    "first": "&lt;&lt;",
    "previous": "&lt;",
    "next": "&gt;",
    "last": "&gt;&gt;",
}


@dataclass(frozen=True, slots=True)
class NavItem:
    role: NavRole
    page: int
    url: str | None
    title: str
    disabled: bool = False

    @property
    def is_current(self) -> bool:
        return self.role == "current"


def build_page_items(
    state: PaginationState, build_url: UrlBuilder, labels: Mapping[str, str]
) -> list[NavItem]:
    items: list[NavItem] = []
    for page in range(1, state.total_pages + 1):
        if page == state.current_page:
            items.append(NavItem("current", page, None, labels["current"]))
        else:
            items.append(
                NavItem("page", page, build_url(page), f"{labels['page']} {page}")
            )
    return items


def build_nav_items(
    state: PaginationState, build_url: UrlBuilder, labels: Mapping[str, str]
) -> list[NavItem]:
    """Return first, previous, every page, next and last in display order.

    An empty result has no navigation at all.
    """
    if state.is_empty:
        return []
    at_start = state.is_first_page
    at_end = state.is_last_page
    current = state.current_page
    last = state.total_pages
    return [
        NavItem("first", 1, build_url(1), labels["first"], at_start),
        NavItem(
            "previous",
            current - 1,
            build_url(current - 1),
            labels["previous"],
            at_start,
        ),
        *build_page_items(state, build_url, labels),
        NavItem(
            "next", current + 1, build_url(current + 1), labels["next"], at_end
        ),
        NavItem("last", last, build_url(last), labels["last"], at_end),
    ]


def _render_item(item: NavItem) -> Markup:
    if item.is_current:
        return Markup(
            '<li class="page-item active">'
            '<a class="page-link" href="" title="{title}">{page}'
            '<span class="sr-only"></span></a></li>'
        ).format(title=item.title, page=item.page)

    classes = "page-item disabled" if item.disabled else "page-item"
    text = Markup(_ARROWS[item.role]) if item.role in _ARROWS else item.page
    return Markup(
        '<li class="{classes}">'
        '<a class="page-link" href="{url}" title="{title}">{text}</a></li>'
    ).format(classes=classes, url=item.url or "", title=item.title, text=text)


def generate_pages_list(
    state: PaginationState, build_url: UrlBuilder, labels: Mapping[str, str]
) -> Markup:
    """Render only the numbered page links."""
    return Markup("\n").join(
        _render_item(item) for item in build_page_items(state, build_url, labels)
    )


def render_pages_list(
    state: PaginationState, build_url: UrlBuilder, labels: Mapping[str, str]
) -> Markup | None:
    """Render the whole ``<nav>`` block, or ``None`` for an empty result."""
    if state.is_empty:
        return None
    body = Markup("\n").join(
        _render_item(item) for item in build_nav_items(state, build_url, labels)
    )
    return (
        Markup('<nav class="pagination-nav">\n<ul class="pagination">\n')
        + body
        + Markup("\n</ul>\n</nav>")
    )
