"""Paginated, time-windowed search protocol."""

from .pagination import fetch_all_pages, iter_pages, next_page
from .windowed_search import (
    V2_API_MAX_SEARCH_HISTORY_DAYS,
    V2_API_MAX_SEARCH_WINDOW_DAYS,
    windowed_search,
)

__all__ = [
    "next_page",
    "iter_pages",
    "fetch_all_pages",
    "windowed_search",
    "V2_API_MAX_SEARCH_WINDOW_DAYS",
    "V2_API_MAX_SEARCH_HISTORY_DAYS",
]
