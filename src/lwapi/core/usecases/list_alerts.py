from __future__ import annotations

import logging
from datetime import datetime, timedelta

from ..domain.responses import AlertsResponse
from ..pagination import fetch_all_pages
from ..ports.alerts_port import AlertsPort
from ..ports.clock_port import ClockPort, SystemClock
from ..ports.request_port import RequestDecoderPort

logger = logging.getLogger(__name__)


class ListAlertsUseCase:
    def __init__(self, alerts: AlertsPort, requester: RequestDecoderPort, clock: ClockPort | None = None) -> None:
        self._alerts = alerts
        self._requester = requester
        self._clock = clock or SystemClock()

    def execute(self, *, start: datetime | None = None, end: datetime | None = None) -> AlertsResponse:
        """Return every alert across all pages.

        Without bounds the server default range is used. With only one bound
        the other is derived: end defaults to now, start to 24h before end.
        """
        response = AlertsResponse()
        if start is None and end is None:
            logger.info("Listing alerts (server default range)")
            self._alerts.list(response)
        else:
            end = end or self._clock.now()
            start = start or end - timedelta(days=1)
            logger.info(f"Listing alerts: start={start}, end={end}")
            self._alerts.list_by_time(response, start, end)

        fetch_all_pages(self._requester, response)
        logger.info(f"Fetched {response.data_length()} alerts")
        return response
