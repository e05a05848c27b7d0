from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Protocol

from ..domain.models import TimeFilter


class PageCursor(Protocol):
    rows: int
    total_rows: int

    @property
    def next_page_url(self) -> Optional[str]:
        """Locator of the next page, or None/empty on the last page."""
        ...


class Pageable(Protocol):
    def page_info(self) -> Optional[PageCursor]:
        """Return paging metadata, or None when the endpoint sent none."""
        ...

    def reset_paging(self) -> None:
        """Clear paging metadata and the data of the current page."""

    def load_json(self, payload: dict) -> None:
        """Overwrite this object in place from a decoded JSON body."""


class SearchResponse(Protocol):
    def data_length(self) -> int:
        """Number of items in the current result."""
        ...


class SearchableFilter(Protocol):
    def get_time_filter(self) -> Optional[TimeFilter]:
        ...

    def set_start_time(self, t: Optional[datetime]) -> None:
        ...

    def set_end_time(self, t: Optional[datetime]) -> None:
        ...


# One bounded-time query: populate the response for the given filter.
SearchFunc = Callable[[Any, Any], None]
