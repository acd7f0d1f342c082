"""Current page resolution from a request path."""

from __future__ import annotations

import re
from typing import NamedTuple

from .template import UrlTemplate

_PAGE_SEGMENT = re.compile(r"[0-9]+")


class ResolvedPage(NamedTuple):
    page: int
    template: UrlTemplate


def resolve_page(path: str, domain: str = "") -> ResolvedPage:
    """Read the page number from the trailing segment of ``path``.

    The trailing segment is always treated as the page slot: it is dropped
    from the derived link template even when it is not numeric, e.g.
    ``/items/list/7`` gives page 7 and ``<domain>/items/list/%`` while
    ``/items/list`` gives page 1 and ``<domain>/items/%``.
    """
    segments = path.strip("/").split("/")
    trailing = segments.pop() if segments else ""

    page = int(trailing) if _PAGE_SEGMENT.fullmatch(trailing) else 1
    # "0" is a numeric segment but pages are 1-based
    page = max(page, 1)

    base = "/".join(segments)
    prefix = f"{domain.rstrip('/')}/{base}/" if base else f"{domain.rstrip('/')}/"
    return ResolvedPage(page, UrlTemplate(prefix))
