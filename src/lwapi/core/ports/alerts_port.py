from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..domain.responses import AlertsResponse


class AlertsPort(Protocol):
    def list(self, response: AlertsResponse) -> None:
        """Populate response with the first page of alerts."""

    def list_by_time(self, response: AlertsResponse, start: datetime, end: datetime) -> None:
        """Populate response with the first page of alerts raised between start and end."""
