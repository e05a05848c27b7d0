from __future__ import annotations

from datetime import datetime

from ..config.urls import API_ALERTS, API_ALERTS_BY_TIME
from ..shared.utils import format_rfc3339_milli
from .http_client import HttpClient
from ..core.domain.responses import AlertsResponse


class AlertsAdapter:
    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def list(self, response: AlertsResponse) -> None:
        self._http.request_decoder("GET", API_ALERTS, response)

    def list_by_time(self, response: AlertsResponse, start: datetime, end: datetime) -> None:
        path = API_ALERTS_BY_TIME.format(
            start=format_rfc3339_milli(start),
            end=format_rfc3339_milli(end),
        )
        self._http.request_decoder("GET", path, response)
