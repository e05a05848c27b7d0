from __future__ import annotations

import logging

from ..domain.enums import InventoryType
from ..domain.models import InventorySearch
from ..domain.responses import InventoryResponse, InventoryScanResponse
from ..pagination import fetch_all_pages
from ..ports.clock_port import ClockPort, SystemClock
from ..ports.request_port import RequestDecoderPort
from ..ports.search_port import InventoryPort
from ..windowed_search import (
    V2_API_MAX_SEARCH_HISTORY_DAYS,
    V2_API_MAX_SEARCH_WINDOW_DAYS,
    windowed_search,
)

logger = logging.getLogger(__name__)


class SearchInventoryUseCase:
    """Find the most recent inventory window with data and return all of its pages.

    Inventory search only accepts a limited time range per request, so the
    window is slid back through the retained history first and the pages of
    the first non-empty window are walked afterwards.
    """

    def __init__(
        self,
        inventory: InventoryPort,
        requester: RequestDecoderPort,
        clock: ClockPort | None = None,
        window_size_days: int = V2_API_MAX_SEARCH_WINDOW_DAYS,
        max_history_days: int = V2_API_MAX_SEARCH_HISTORY_DAYS,
    ) -> None:
        self._inventory = inventory
        self._requester = requester
        self._clock = clock or SystemClock()
        self._window_size_days = window_size_days
        self._max_history_days = max_history_days

    def execute(self, filters: InventorySearch) -> InventoryResponse:
        logger.info(
            f"Searching inventory: csp={filters.csp.value}, window={self._window_size_days}d, "
            f"history={self._max_history_days}d"
        )
        response = InventoryResponse()
        windowed_search(
            self._inventory.search,
            self._window_size_days,
            self._max_history_days,
            response,
            filters,
            clock=self._clock,
        )
        if response.data_length() == 0:
            logger.info("No inventory found within the search history")
            return response

        fetch_all_pages(self._requester, response)
        logger.info(f"Fetched {response.data_length()} inventory resources")
        return response

    def scan(self, csp: InventoryType) -> InventoryScanResponse:
        logger.info(f"Triggering inventory scan: csp={csp.value}")
        return self._inventory.scan(csp)
