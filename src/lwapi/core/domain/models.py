from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional

from .enums import InventoryType
from ...shared.utils import format_rfc3339_milli


@dataclass
class TimeFilter:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def to_payload(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        if self.start_time is not None:
            payload["startTime"] = format_rfc3339_milli(self.start_time)
        if self.end_time is not None:
            payload["endTime"] = format_rfc3339_milli(self.end_time)
        return payload

    @staticmethod
    def last_days(now: datetime, days: int) -> "TimeFilter":
        return TimeFilter(start_time=now - timedelta(days=days), end_time=now)


@dataclass
class Filter:
    field: str
    expression: str
    value: Optional[str] = None
    values: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"field": self.field, "expression": self.expression}
        if self.value is not None:
            payload["value"] = self.value
        if self.values:
            payload["values"] = list(self.values)
        return payload


@dataclass
class SearchFilter:
    """Request body of the v2 ``*/search`` endpoints.

    Only the time filter is interpreted by the windowed search; predicates and
    the ``returns`` projection are passed through to the server untouched.
    """

    time_filter: Optional[TimeFilter] = None
    filters: list[Filter] = field(default_factory=list)
    returns: list[str] = field(default_factory=list)

    def get_time_filter(self) -> Optional[TimeFilter]:
        return self.time_filter

    def set_start_time(self, t: Optional[datetime]) -> None:
        if self.time_filter is None:
            self.time_filter = TimeFilter()
        self.time_filter.start_time = t

    def set_end_time(self, t: Optional[datetime]) -> None:
        if self.time_filter is None:
            self.time_filter = TimeFilter()
        self.time_filter.end_time = t

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.time_filter is not None:
            payload["timeFilter"] = self.time_filter.to_payload()
        if self.filters:
            payload["filters"] = [f.to_payload() for f in self.filters]
        if self.returns:
            payload["returns"] = list(self.returns)
        return payload


@dataclass
class InventorySearch(SearchFilter):
    csp: InventoryType = InventoryType.AWS

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["csp"] = self.csp.value
        return payload
