from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from .errors import WindowConfigError
from .ports.clock_port import ClockPort, SystemClock
from .ports.paging_port import SearchableFilter, SearchFunc, SearchResponse
from ..shared.utils import as_utc, days_between, format_rfc3339_milli

logger = logging.getLogger(__name__)

V2_API_MAX_SEARCH_WINDOW_DAYS = 7
V2_API_MAX_SEARCH_HISTORY_DAYS = 92


def windowed_search(
    search: SearchFunc,
    window_size_days: int,
    max_history_days: int,
    response: SearchResponse,
    filters: SearchableFilter,
    *,
    clock: Optional[ClockPort] = None,
) -> None:
    """Slide the filter's time window back from now until ``search`` finds data.

    The backend accepts at most ``window_size_days`` per request and keeps
    ``max_history_days`` of history. Each empty result moves both ends of the
    window back by one window size; the last window is clipped so it never
    reaches further back than ``max_history_days``.

    Returns normally both when data is found and when history is exhausted;
    in the latter case ``response`` holds the empty result and ``filters`` the
    last window set.

    Raises:
        WindowConfigError: window_size_days > max_history_days. No search is made.
        Whatever ``search`` raises, on the first failure.
    """
    if window_size_days > max_history_days:
        raise WindowConfigError("window size cannot be greater than max history")

    clock = clock or SystemClock()
    time_filter = filters.get_time_filter()
    end = time_filter.end_time if time_filter else None
    start = time_filter.start_time if time_filter else None
    # naive bounds are UTC; all arithmetic below is against an aware "now"
    end = as_utc(end) if end is not None else as_utc(clock.now())
    start = as_utc(start) if start is not None else end
    filters.set_start_time(start)
    filters.set_end_time(end)

    offset = days_between(start, end)
    if offset == 0:
        # zero-width range, give the first request a full window
        filters.set_start_time(start - timedelta(days=window_size_days))

    step = timedelta(days=window_size_days)
    while offset < max_history_days:
        current = filters.get_time_filter()
        logger.debug(
            f"Windowed search: {format_rfc3339_milli(current.start_time)} -> "
            f"{format_rfc3339_milli(current.end_time)} (offset {offset}/{max_history_days} days)"
        )
        search(response, filters)
        if response.data_length() > 0:
            logger.info(f"Windowed search found {response.data_length()} item(s) at offset {offset} days")
            return

        new_start = current.start_time - step
        new_end = current.end_time - step

        now = as_utc(clock.now())
        if days_between(new_start, now) > max_history_days:
            new_start = now - timedelta(days=max_history_days)
            if new_end < new_start:
                new_end = new_start

        filters.set_start_time(new_start)
        filters.set_end_time(new_end)
        offset += window_size_days

    logger.info(f"Windowed search exhausted {max_history_days} days of history without data")
