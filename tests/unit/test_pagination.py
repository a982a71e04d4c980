from __future__ import annotations

import pytest

from gocardless_pro.core.errors import GoCardlessProtocolError
from gocardless_pro.core.models import Cursors, Page
from gocardless_pro.core.pagination import iterate_pages


def _page(*items: str, after: str | None = None) -> Page[str]:
    return Page(items=items, cursors=Cursors(after=after))


def test_iterate_pages_until_no_after_cursor():
    pages = {
        None: _page("a", "b", after="B"),
        "B": _page("c", after="C"),
        "C": _page("d"),
    }
    requested: list[str | None] = []

    def fetch(after):
        requested.append(after)
        return pages[after]

    visited = [list(page) for page in iterate_pages(fetch)]
    assert visited == [["a", "b"], ["c"], ["d"]]
    assert requested == [None, "B", "C"]


def test_iterate_pages_is_lazy():
    requested: list[str | None] = []

    def fetch(after):
        requested.append(after)
        return _page("x", after="next")

    iterator = iterate_pages(fetch)
    assert requested == []
    next(iterator)
    assert requested == [None]


def test_iterate_pages_starts_from_given_cursor():
    requested: list[str | None] = []

    def fetch(after):
        requested.append(after)
        return _page("x")

    list(iterate_pages(fetch, start_after="CUR"))
    assert requested == ["CUR"]


def test_iterate_pages_detects_cursor_loop():
    pages = {
        None: _page("a", after="A"),
        "A": _page("b", after="B"),
        "B": _page("c", after="A"),
    }
    with pytest.raises(GoCardlessProtocolError, match="loop"):
        list(iterate_pages(lambda after: pages[after]))


def test_iterate_pages_enforces_guardrail():
    counter = iter(range(100))

    def fetch(after):
        return _page("x", after=f"c{next(counter)}")

    with pytest.raises(GoCardlessProtocolError, match="max_pages"):
        list(iterate_pages(fetch, max_pages=3))
