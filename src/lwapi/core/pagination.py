from __future__ import annotations

import logging
from typing import Iterator, Optional, TypeVar
from urllib.parse import urlsplit

from .errors import MalformedCursorError
from .ports.paging_port import Pageable
from .ports.request_port import RequestDecoderPort

logger = logging.getLogger(__name__)

PageableT = TypeVar("PageableT", bound=Pageable)


def parse_page_locator(locator: str) -> str:
    """Turn a next-page locator (usually an absolute URL) into a request path.

    The query string is kept; scheme and host are dropped since the next
    request goes to the same server the client already talks to.
    """
    try:
        parts = urlsplit(locator.strip())
    except ValueError as e:
        raise MalformedCursorError(f"unable to parse next page locator {locator!r}: {e}") from e
    if not parts.path or parts.path == "/":
        raise MalformedCursorError(f"next page locator {locator!r} has no path")
    path = parts.path
    if parts.query:
        path = f"{path}?{parts.query}"
    return path


def next_page(requester: RequestDecoderPort, pageable: Optional[Pageable]) -> bool:
    """Fetch the next page into ``pageable`` in place.

    Returns False, without touching the response, when there is no next page:
    the response is None, it carries no paging metadata, or its next-page
    locator is empty. Otherwise the response is reset, overwritten with the
    next page and True is returned.

    Callers must copy the rows they want to keep before calling, the reset
    drops them.

    Raises:
        MalformedCursorError: the locator cannot be parsed into a path.
        Any transport or decode error raised by ``requester``.
    """
    if pageable is None:
        return False

    paging = pageable.page_info()
    if paging is None:
        logger.debug("No paging information found in response, nothing to walk")
        return False

    locator = paging.next_page_url
    if not locator:
        return False

    path = parse_page_locator(locator)
    pageable.reset_paging()
    logger.debug(f"Fetching next page: {path}")
    requester.request_decoder("GET", path, pageable)
    return True


def iter_pages(requester: RequestDecoderPort, pageable: PageableT) -> Iterator[PageableT]:
    """Yield ``pageable`` for the current page and after each next page.

    The same object is yielded every time; consume its data before advancing.
    """
    yield pageable
    while next_page(requester, pageable):
        yield pageable


def fetch_all_pages(requester: RequestDecoderPort, pageable: PageableT) -> PageableT:
    """Walk every page and leave the union of all rows in ``pageable.data``.

    The returned object carries no paging metadata afterwards.
    """
    collected: list = []
    pages = 0
    for page in iter_pages(requester, pageable):
        pages += 1
        collected.extend(page.data)  # type: ignore[attr-defined]
    pageable.reset_paging()
    pageable.data = collected  # type: ignore[attr-defined]
    logger.debug(f"Collected {len(collected)} rows over {pages} page(s)")
    return pageable
