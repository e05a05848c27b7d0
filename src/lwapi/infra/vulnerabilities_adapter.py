from __future__ import annotations

from ..config.urls import API_VULNERABILITIES_CONTAINERS_SEARCH
from ..core.domain.models import SearchFilter
from .http_client import HttpClient
from ..core.domain.responses import ContainerVulnerabilitiesResponse


class ContainerVulnerabilitiesAdapter:
    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def search(self, response: ContainerVulnerabilitiesResponse, filters: SearchFilter) -> None:
        self._http.request_decoder(
            "POST", API_VULNERABILITIES_CONTAINERS_SEARCH, response, body=filters.to_payload()
        )
