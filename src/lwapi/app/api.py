from __future__ import annotations

from datetime import datetime
from typing import Optional

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import InventoryType
from ..core.domain.models import InventorySearch, SearchFilter
from ..core.domain.responses import (
    AlertsResponse,
    ContainerVulnerabilitiesResponse,
    InventoryResponse,
    InventoryScanResponse,
    MachineDetailsResponse,
)
from ..core.pagination import next_page
from ..core.ports.paging_port import Pageable


class LwApiClient:
    """Client for the v2 API of a cloud-security account.

    The container and its HTTP connection are created once and reused across calls.

    Example:
        # Using default configuration (from LW_* environment variables)
        client = LwApiClient()
        alerts = client.list_alerts()
        client.close()

        # Using context manager (recommended)
        with LwApiClient(account="acme", api_key="KEY", api_secret="SECRET") as client:
            machines = client.list_machine_details()

        # Find the latest inventory window with data
        with LwApiClient(account="acme", api_token="TOKEN") as client:
            resources = client.search_inventory(InventorySearch(csp=InventoryType.GCP))
    """

    def __init__(
        self,
        *,
        account: str | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
        api_token: str | None = None,
        subaccount: str | None = None,
        base_url: str | None = None,
        org_access: bool | None = None,
        timeout_seconds: float | None = None,
        max_search_window_days: int | None = None,
        max_search_history_days: int | None = None,
    ):
        """Initialize the client.

        Every argument left as None falls back to the matching LW_* environment
        variable, then to the AppConfig default.

        Raises:
            ValueError: no account/base_url, or window larger than history.
        """
        self._container = Container()

        # Build config dict with only provided values
        overrides = {
            "account": account,
            "api_key": api_key,
            "api_secret": api_secret,
            "api_token": api_token,
            "subaccount": subaccount,
            "base_url": base_url,
            "org_access": org_access,
            "timeout_seconds": timeout_seconds,
            "max_search_window_days": max_search_window_days,
            "max_search_history_days": max_search_history_days,
        }
        config_dict = {k: v for k, v in overrides.items() if v is not None}

        # Environment is read now, not when the container class was defined
        config = AppConfig(**config_dict)
        self._container.config.from_pydantic(config)

        self._container.init_resources()

    def list_alerts(self, *, start: datetime | None = None, end: datetime | None = None) -> AlertsResponse:
        """Return all alerts, walking every page.

        Args:
            start: Optional start of the range. Defaults to 24h before end.
            end: Optional end of the range. Defaults to now.
                 When both are None the server's default range is used.
        """
        uc = self._container.list_alerts_uc()
        return uc.execute(start=start, end=end)

    def list_machine_details(self, filters: SearchFilter | None = None) -> MachineDetailsResponse:
        """Return machine details matching filters (default: last 7 days), all pages."""
        uc = self._container.list_machines_uc()
        return uc.execute(filters)

    def search_inventory(self, filters: InventorySearch) -> InventoryResponse:
        """Return every page of the most recent inventory window that has data.

        The filter's time range is slid back through the search history until
        resources are found; ``filters.time_filter`` reflects the window used.
        An empty response means nothing was found within the history.
        """
        uc = self._container.search_inventory_uc()
        return uc.execute(filters)

    def scan_inventory(self, csp: InventoryType) -> InventoryScanResponse:
        """Trigger a resource inventory scan for a cloud provider."""
        uc = self._container.search_inventory_uc()
        return uc.scan(csp)

    def search_container_vulnerabilities(
        self, filters: SearchFilter | None = None
    ) -> ContainerVulnerabilitiesResponse:
        """Return container vulnerabilities matching filters (default: last 7 days), all pages."""
        uc = self._container.search_vulnerabilities_uc()
        return uc.execute(filters)

    def next_page(self, response: Optional[Pageable]) -> bool:
        """Replace response with its next page in place. False when there is none.

        Example:
            rows = []
            while True:
                rows.extend(response.data)
                if not client.next_page(response):
                    break
        """
        return next_page(self._container.http_client(), response)

    def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        self._container.shutdown_resources()

    def __enter__(self) -> LwApiClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "LwApiClient",
    "AppConfig",
]
