from __future__ import annotations

from ..config.urls import API_ENTITIES_MACHINE_DETAILS_SEARCH
from ..core.domain.models import SearchFilter
from .http_client import HttpClient
from ..core.domain.responses import MachineDetailsResponse


class EntitiesAdapter:
    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def search_machine_details(self, response: MachineDetailsResponse, filters: SearchFilter) -> None:
        self._http.request_decoder(
            "POST", API_ENTITIES_MACHINE_DETAILS_SEARCH, response, body=filters.to_payload()
        )
