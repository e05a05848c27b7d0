from __future__ import annotations

import logging

from ..domain.models import SearchFilter, TimeFilter
from ..domain.responses import MachineDetailsResponse
from ..pagination import fetch_all_pages
from ..ports.clock_port import ClockPort, SystemClock
from ..ports.request_port import RequestDecoderPort
from ..ports.search_port import MachineDetailsPort

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 7


class ListMachineDetailsUseCase:
    def __init__(self, entities: MachineDetailsPort, requester: RequestDecoderPort, clock: ClockPort | None = None) -> None:
        self._entities = entities
        self._requester = requester
        self._clock = clock or SystemClock()

    def execute(self, filters: SearchFilter | None = None) -> MachineDetailsResponse:
        if filters is None:
            filters = SearchFilter(time_filter=TimeFilter.last_days(self._clock.now(), DEFAULT_LOOKBACK_DAYS))
        logger.info(f"Listing machine details: filters={filters.to_payload()}")

        response = MachineDetailsResponse()
        self._entities.search_machine_details(response, filters)
        fetch_all_pages(self._requester, response)
        logger.info(f"Fetched {response.data_length()} machine details")
        return response
