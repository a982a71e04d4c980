"""Pagination helpers based on ``meta.cursors.after``."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from .errors import GoCardlessProtocolError
from .models import Page

T = TypeVar("T")

DEFAULT_MAX_PAGES = 10_000


def iterate_pages(
    fetch_page: Callable[[str | None], Page[T]],
    *,
    start_after: str | None = None,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> Iterator[Page[T]]:
    """Yield pages lazily until a page arrives without an ``after`` cursor."""

    current = start_after
    seen_cursors: set[str] = set()

    for _ in range(max_pages):
        page = fetch_page(current)
        yield page

        next_cursor = page.after
        if not next_cursor:
            return
        if next_cursor in seen_cursors or next_cursor == current:
            raise GoCardlessProtocolError("after cursor loop detected")
        seen_cursors.add(next_cursor)
        current = next_cursor

    raise GoCardlessProtocolError("Exceeded pagination guardrail (max_pages)")


__all__ = [
    "DEFAULT_MAX_PAGES",
    "iterate_pages",
]
