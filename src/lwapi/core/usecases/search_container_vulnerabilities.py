from __future__ import annotations

import logging

from ..domain.models import SearchFilter, TimeFilter
from ..domain.responses import ContainerVulnerabilitiesResponse
from ..pagination import fetch_all_pages
from ..ports.clock_port import ClockPort, SystemClock
from ..ports.request_port import RequestDecoderPort
from ..ports.search_port import ContainerVulnerabilitiesPort

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 7


class SearchContainerVulnerabilitiesUseCase:
    def __init__(
        self,
        vulnerabilities: ContainerVulnerabilitiesPort,
        requester: RequestDecoderPort,
        clock: ClockPort | None = None,
    ) -> None:
        self._vulnerabilities = vulnerabilities
        self._requester = requester
        self._clock = clock or SystemClock()

    def execute(self, filters: SearchFilter | None = None) -> ContainerVulnerabilitiesResponse:
        if filters is None:
            filters = SearchFilter(time_filter=TimeFilter.last_days(self._clock.now(), DEFAULT_LOOKBACK_DAYS))
        logger.info(f"Searching container vulnerabilities: filters={filters.to_payload()}")

        response = ContainerVulnerabilitiesResponse()
        self._vulnerabilities.search(response, filters)
        fetch_all_pages(self._requester, response)
        logger.info(f"Fetched {response.data_length()} container vulnerabilities")
        return response
