from __future__ import annotations

from ..config.urls import API_INVENTORY_SCAN_CSP, API_INVENTORY_SEARCH
from ..core.domain.enums import InventoryType
from ..core.domain.models import InventorySearch
from .http_client import HttpClient
from ..core.domain.responses import InventoryResponse, InventoryScanResponse


class InventoryAdapter:
    """Resource inventory of the cloud integrations (VMs, buckets, security groups, ...).

    ``search`` has the SearchFunc shape and can be handed to ``windowed_search``.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def search(self, response: InventoryResponse, filters: InventorySearch) -> None:
        self._http.request_decoder("POST", API_INVENTORY_SEARCH, response, body=filters.to_payload())

    def scan(self, csp: InventoryType) -> InventoryScanResponse:
        response = InventoryScanResponse()
        self._http.request_decoder("POST", API_INVENTORY_SCAN_CSP.format(csp=csp.value), response)
        return response
