from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import Severity


class PageUrls(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    next_page: Optional[str] = Field(None, alias="nextPage")


class V2Pagination(BaseModel):
    """Cursor metadata sent in the ``paging`` field of v2 list/search responses."""
    model_config = ConfigDict(populate_by_name=True)

    rows: int = 0
    total_rows: int = Field(0, alias="totalRows")
    urls: Optional[PageUrls] = None

    @property
    def next_page_url(self) -> Optional[str]:
        if self.urls is None:
            return None
        return self.urls.next_page


ItemT = TypeVar("ItemT")


class PagedResponse(BaseModel, Generic[ItemT]):
    """``{"data": [...], "paging": {...}}`` envelope shared by v2 endpoints.

    Satisfies the Pageable and SearchResponse contracts so any subclass can be
    walked by ``next_page`` and driven by ``windowed_search``.
    """
    model_config = ConfigDict(populate_by_name=True)

    data: list[ItemT] = Field(default_factory=list)
    paging: Optional[V2Pagination] = None

    def page_info(self) -> Optional[V2Pagination]:
        return self.paging

    def reset_paging(self) -> None:
        self.paging = None
        self.data = []

    def data_length(self) -> int:
        return len(self.data)

    def load_json(self, payload: dict) -> None:
        fresh = type(self).model_validate(payload)
        for name in type(self).model_fields:
            setattr(self, name, getattr(fresh, name))


class AlertInfo(BaseModel):
    subject: Optional[str] = None
    description: Optional[str] = None


class Alert(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="alertId")
    name: Optional[str] = Field(None, alias="alertName")
    type: Optional[str] = Field(None, alias="alertType")
    severity: Optional[str] = None
    status: Optional[str] = None
    info: Optional[AlertInfo] = Field(None, alias="alertInfo")
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    update_time: Optional[str] = Field(None, alias="lastUserUpdateTime")
    policy_id: Optional[str] = Field(None, alias="policyId")
    reachability: Optional[str] = None


class AlertsResponse(PagedResponse[Alert]):
    def sort_by_id(self) -> None:
        """Sort alerts by id, newest (highest) first."""
        self.data.sort(key=lambda a: a.id, reverse=True)

    def sort_by_severity(self) -> None:
        """Sort alerts from critical to info; unknown severities go last."""
        def rank(a: Alert) -> int:
            sev = Severity.from_str(a.severity or "")
            return sev.rank if sev is not None else len(Severity)

        self.data.sort(key=rank)


class MachineDetailEntity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mid: Optional[int] = None
    hostname: Optional[str] = None
    aws_instance_id: Optional[str] = Field(None, alias="awsInstanceId")
    aws_zone: Optional[str] = Field(None, alias="awsZone")
    created_time: Optional[datetime] = Field(None, alias="createdTime")
    domain: Optional[str] = None
    kernel: Optional[str] = None
    kernel_release: Optional[str] = Field(None, alias="kernelRelease")
    os: Optional[str] = None
    os_version: Optional[str] = Field(None, alias="osVersion")
    tags: dict[str, Any] = Field(default_factory=dict)


class MachineDetailsResponse(PagedResponse[MachineDetailEntity]):
    pass


class InventoryResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[str] = Field(None, alias="apiKey")
    csp: Optional[str] = None
    start_time: Optional[datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime] = Field(None, alias="endTime")
    resource_id: Optional[str] = Field(None, alias="resourceId")
    resource_region: Optional[str] = Field(None, alias="resourceRegion")
    resource_type: Optional[str] = Field(None, alias="resourceType")
    service: Optional[str] = None
    urn: Optional[str] = None
    cloud_details: dict[str, Any] = Field(default_factory=dict, alias="cloudDetails")
    resource_config: dict[str, Any] = Field(default_factory=dict, alias="resourceConfig")


class InventoryResponse(PagedResponse[InventoryResource]):
    pass


class InventoryScanStatus(BaseModel):
    status: Optional[str] = None
    details: Optional[str] = None


class InventoryScanResponse(BaseModel):
    data: InventoryScanStatus = Field(default_factory=InventoryScanStatus)

    def load_json(self, payload: dict) -> None:
        self.data = type(self).model_validate(payload).data


class VulnerabilityContainer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_id: Optional[str] = Field(None, alias="imageId")
    vuln_id: Optional[str] = Field(None, alias="vulnId")
    severity: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[datetime] = Field(None, alias="startTime")
    feature_key: dict[str, Any] = Field(default_factory=dict, alias="featureKey")
    fix_info: dict[str, Any] = Field(default_factory=dict, alias="fixInfo")


class ContainerVulnerabilitiesResponse(PagedResponse[VulnerabilityContainer]):
    pass


