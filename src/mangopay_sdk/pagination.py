"""
Pagination utilities for the MangoPay SDK.

MangoPay paginates collections by page number. The caller asks for a page with
:class:`Pagination`; the server answers with a JSON array and describes the
collection in response headers (``X-Number-Of-Pages``, ``X-Number-Of-Items`` and
``Link``), which end up in the :class:`PaginationResult` embedded in every
:class:`ListPaginated`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    TypeVar,
)

T = TypeVar("T")

# Slot order of PaginationResult.links
LINK_RELATIONS = ("first", "previous", "next", "last")


@dataclass(frozen=True)
class Pagination:
    """Page request sent as ``page`` / ``per_page`` query parameters.

    Attributes:
        page: Page number (1-indexed)
        items_per_page: Number of items per page
    """

    page: int = 1
    items_per_page: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be a positive integer")
        if self.items_per_page < 1:
            raise ValueError("items_per_page must be a positive integer")

    def next_page(self) -> "Pagination":
        return Pagination(page=self.page + 1, items_per_page=self.items_per_page)


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Sort:
    """Sort order for list endpoints, e.g. ``Sort=CreationDate:DESC``."""

    field: str
    direction: SortDirection = SortDirection.ASC

    def to_query_value(self) -> str:
        return f"{self.field}:{SortDirection(self.direction).value}"


@dataclass
class PaginationResult:
    """Collection metadata read from response headers.

    Attributes:
        total_pages: Value of the number-of-pages header
        total_items: Value of the number-of-items header
        links: URLs indexed first, previous, next, last (None when absent)
    """

    total_pages: int = 0
    total_items: int = 0
    links: List[Optional[str]] = field(default_factory=lambda: [None] * len(LINK_RELATIONS))

    def set_link(self, relation: str, url: str) -> None:
        self.links[LINK_RELATIONS.index(relation)] = url

    @property
    def first(self) -> Optional[str]:
        return self.links[0]

    @property
    def previous(self) -> Optional[str]:
        return self.links[1]

    @property
    def next(self) -> Optional[str]:
        return self.links[2]

    @property
    def last(self) -> Optional[str]:
        return self.links[3]


@dataclass
class ListPaginated(Generic[T]):
    """An ordered page of results plus its pagination metadata.

    Items keep the order of the server response. ``pagination`` stays at its
    defaults until response headers are read into it.
    """

    items: List[T] = field(default_factory=list)
    pagination: PaginationResult = field(default_factory=PaginationResult)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages

    @property
    def total_items(self) -> int:
        return self.pagination.total_items

    @property
    def links(self) -> PaginationResult:
        return self.pagination

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0


def _has_more(page: ListPaginated[Any], requested: Pagination) -> bool:
    if page.is_empty:
        return False
    if page.total_pages:
        return requested.page < page.total_pages
    return page.pagination.next is not None


class AsyncPaginator(Generic[T]):
    """Async iterator over every item of a paginated collection.

    Example:
        ```python
        paginator = api.paginate(api.users.get_all, items_per_page=50)

        async for user in paginator:
            print(user.id)
        ```
    """

    def __init__(
        self,
        fetch_page: Callable[[Pagination], Awaitable[ListPaginated[T]]],
        items_per_page: int = 10,
        max_pages: Optional[int] = None,
    ):
        """Initialize the paginator.

        Args:
            fetch_page: Coroutine function fetching one page
            items_per_page: Page size requested from the API
            max_pages: Maximum number of pages to fetch (None for unlimited)
        """
        self._fetch_page = fetch_page
        self._items_per_page = items_per_page
        self._max_pages = max_pages

    async def __aiter__(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.items:
                yield item

    async def pages(self) -> AsyncIterator[ListPaginated[T]]:
        """Async iterator over pages."""
        request = Pagination(page=1, items_per_page=self._items_per_page)
        fetched = 0

        while self._max_pages is None or fetched < self._max_pages:
            page = await self._fetch_page(request)
            fetched += 1
            yield page

            if not _has_more(page, request):
                break
            request = request.next_page()

    async def all(self) -> List[T]:
        """Fetch all items across all pages."""
        return [item async for item in self]


class SyncPaginator(Generic[T]):
    """Iterator over every item of a paginated collection.

    Example:
        ```python
        for wallet in api.paginate(api.users.get_wallets, "user_1"):
            print(wallet.balance)
        ```
    """

    def __init__(
        self,
        fetch_page: Callable[[Pagination], ListPaginated[T]],
        items_per_page: int = 10,
        max_pages: Optional[int] = None,
    ):
        self._fetch_page = fetch_page
        self._items_per_page = items_per_page
        self._max_pages = max_pages

    def __iter__(self) -> Iterator[T]:
        for page in self.pages():
            yield from page.items

    def pages(self) -> Iterator[ListPaginated[T]]:
        """Iterator over pages."""
        request = Pagination(page=1, items_per_page=self._items_per_page)
        fetched = 0

        while self._max_pages is None or fetched < self._max_pages:
            page = self._fetch_page(request)
            fetched += 1
            yield page

            if not _has_more(page, request):
                break
            request = request.next_page()

    def all(self) -> List[T]:
        """Fetch all items across all pages."""
        return list(self)


__all__ = [
    "LINK_RELATIONS",
    "Pagination",
    "Sort",
    "SortDirection",
    "PaginationResult",
    "ListPaginated",
    "AsyncPaginator",
    "SyncPaginator",
]
