"""Parsing of the pagination headers returned with MangoPay collections.

A list response carries::

    X-Number-Of-Pages: 5
    X-Number-Of-Items: 42
    Link: <https://.../users?page=1&per_page=10>; rel="first", <https://.../users?page=3&per_page=10>; rel="next"
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from .models.errors import HeaderParseError
from .pagination import LINK_RELATIONS, PaginationResult

logger = logging.getLogger(__name__)

NUMBER_OF_PAGES_HEADER = "x-number-of-pages"
NUMBER_OF_ITEMS_HEADER = "x-number-of-items"
LINK_HEADER = "link"


def parse_link_header(value: str) -> Dict[str, str]:
    """Map relation names to URLs from a ``Link`` header value.

    Only ``first``, ``previous``, ``next`` and ``last`` are kept. Entries
    without a semicolon or without a quoted relation are dropped.
    """
    links: Dict[str, str] = {}

    for entry in value.split(","):
        url_part, separator, rel_part = entry.partition(";")
        if not separator:
            continue

        start = rel_part.find('"')
        end = rel_part.find('"', start + 1) if start != -1 else -1
        if end == -1:
            continue

        relation = rel_part[start + 1:end]
        if relation not in LINK_RELATIONS:
            continue

        url = url_part.strip()
        if url.startswith("<") and url.endswith(">"):
            url = url[1:-1].strip()
        links[relation] = url

    return links


def _parse_count(name: str, value: str) -> int:
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise HeaderParseError(name, value)
    return int(text)


def read_pagination_headers(
    headers: Iterable[Tuple[str, str]],
    result: PaginationResult,
) -> PaginationResult:
    """Fill ``result`` from response headers.

    Header names are matched case-insensitively by substring and the first
    header of each family wins. Link slots without a match keep their value.

    Raises:
        HeaderParseError: If a count header is not a non-negative integer
    """
    seen_pages = seen_items = seen_link = False

    for name, value in headers:
        lowered = name.lower()

        if NUMBER_OF_PAGES_HEADER in lowered:
            if not seen_pages:
                result.total_pages = _parse_count(name, value)
                seen_pages = True
            continue

        if NUMBER_OF_ITEMS_HEADER in lowered:
            if not seen_items:
                result.total_items = _parse_count(name, value)
                seen_items = True
            continue

        if LINK_HEADER in lowered and not seen_link:
            seen_link = True
            for relation, url in parse_link_header(value).items():
                result.set_link(relation, url)

    logger.debug(
        "Pagination headers: %d pages, %d items",
        result.total_pages,
        result.total_items,
    )
    return result
