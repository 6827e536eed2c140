"""
Tests for mangopay_sdk.pagination.

Tests cover:
- Pagination request validation
- PaginationResult and ListPaginated
- SyncPaginator and AsyncPaginator iteration
"""
from __future__ import annotations

from typing import List

import pytest

from mangopay_sdk.pagination import (
    AsyncPaginator,
    ListPaginated,
    Pagination,
    PaginationResult,
    Sort,
    SortDirection,
    SyncPaginator,
)


def _page(items: List[int], total_pages: int = 0, next_link: str | None = None) -> ListPaginated[int]:
    result = PaginationResult(total_pages=total_pages, total_items=0)
    if next_link:
        result.set_link("next", next_link)
    return ListPaginated(items=items, pagination=result)


class TestPagination:
    """Tests for the Pagination request."""

    def test_defaults(self):
        """Should default to the first page of 10 items."""
        pagination = Pagination()
        assert pagination.page == 1
        assert pagination.items_per_page == 10

    @pytest.mark.parametrize("page,per_page", [(0, 10), (-1, 10), (1, 0)])
    def test_reject_non_positive_values(self, page, per_page):
        """Should reject pages and sizes below 1."""
        with pytest.raises(ValueError):
            Pagination(page=page, items_per_page=per_page)

    def test_next_page(self):
        """Should keep the page size when moving forward."""
        assert Pagination(page=2, items_per_page=25).next_page() == Pagination(page=3, items_per_page=25)


class TestSort:
    """Tests for Sort."""

    def test_query_value(self):
        assert Sort("CreationDate", SortDirection.DESC).to_query_value() == "CreationDate:DESC"

    def test_default_direction(self):
        assert Sort("CreationDate").to_query_value() == "CreationDate:ASC"


class TestListPaginated:
    """Tests for ListPaginated."""

    def test_defaults(self):
        """Should start empty with zeroed metadata."""
        result: ListPaginated[int] = ListPaginated()

        assert len(result) == 0
        assert result.is_empty
        assert result.total_pages == 0
        assert result.total_items == 0
        assert result.links.first is None
        assert result.links.previous is None
        assert result.links.next is None
        assert result.links.last is None

    def test_sequence_protocol(self):
        """Should keep item order and support indexing."""
        result = ListPaginated(items=[3, 1, 2])

        assert list(result) == [3, 1, 2]
        assert result[0] == 3
        assert len(result) == 3

    def test_links_indexed_by_relation(self):
        """Should store links in first/previous/next/last order."""
        result = PaginationResult()
        result.set_link("next", "n")
        result.set_link("first", "f")

        assert result.links == ["f", None, "n", None]


class TestSyncPaginator:
    """Tests for SyncPaginator."""

    def test_iterate_until_total_pages(self):
        """Should stop after the last page announced by the server."""
        pages = {1: _page([1, 2], total_pages=2), 2: _page([3], total_pages=2)}
        requested: List[Pagination] = []

        def fetch(pagination: Pagination) -> ListPaginated[int]:
            requested.append(pagination)
            return pages[pagination.page]

        assert SyncPaginator(fetch, items_per_page=2).all() == [1, 2, 3]
        assert requested == [Pagination(1, 2), Pagination(2, 2)]

    def test_follow_next_link_without_counts(self):
        """Should use the next link when no page count is returned."""
        pages = {1: _page([1], next_link="page2"), 2: _page([2])}

        items = list(SyncPaginator(lambda p: pages[p.page]))

        assert items == [1, 2]

    def test_stop_on_empty_page(self):
        """Should stop when a page comes back empty."""
        calls = []

        def fetch(pagination: Pagination) -> ListPaginated[int]:
            calls.append(pagination.page)
            return _page([], total_pages=10)

        assert SyncPaginator(fetch).all() == []
        assert calls == [1]

    def test_respect_max_pages(self):
        """Should not fetch more than max_pages."""
        paginator = SyncPaginator(lambda p: _page([p.page], total_pages=100), max_pages=3)

        assert paginator.all() == [1, 2, 3]

    def test_iterate_pages(self):
        """Should yield whole pages."""
        pages = {1: _page([1, 2], total_pages=2), 2: _page([3], total_pages=2)}

        result = list(SyncPaginator(lambda p: pages[p.page]).pages())

        assert [page.items for page in result] == [[1, 2], [3]]


class TestAsyncPaginator:
    """Tests for AsyncPaginator."""

    async def test_iterate_all_items(self):
        """Should iterate items across pages."""
        pages = {1: _page([1, 2], total_pages=2), 2: _page([3], total_pages=2)}

        async def fetch(pagination: Pagination) -> ListPaginated[int]:
            return pages[pagination.page]

        items = [item async for item in AsyncPaginator(fetch, items_per_page=2)]

        assert items == [1, 2, 3]

    async def test_all(self):
        """Should collect all items."""
        async def fetch(pagination: Pagination) -> ListPaginated[int]:
            return _page([pagination.page], total_pages=2)

        assert await AsyncPaginator(fetch).all() == [1, 2]

    async def test_respect_max_pages(self):
        """Should stop after max_pages."""
        async def fetch(pagination: Pagination) -> ListPaginated[int]:
            return _page([pagination.page], total_pages=50)

        assert await AsyncPaginator(fetch, max_pages=2).all() == [1, 2]
