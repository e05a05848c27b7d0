from __future__ import annotations

from typing import Protocol

from ..domain.enums import InventoryType
from ..domain.models import InventorySearch, SearchFilter
from ..domain.responses import (
    ContainerVulnerabilitiesResponse,
    InventoryResponse,
    InventoryScanResponse,
    MachineDetailsResponse,
)


class MachineDetailsPort(Protocol):
    def search_machine_details(self, response: MachineDetailsResponse, filters: SearchFilter) -> None:
        ...


class InventoryPort(Protocol):
    def search(self, response: InventoryResponse, filters: InventorySearch) -> None:
        """Run one bounded-time inventory query (first page only)."""

    def scan(self, csp: InventoryType) -> InventoryScanResponse:
        """Trigger a resource inventory scan for a cloud provider."""
        ...


class ContainerVulnerabilitiesPort(Protocol):
    def search(self, response: ContainerVulnerabilitiesResponse, filters: SearchFilter) -> None:
        ...
