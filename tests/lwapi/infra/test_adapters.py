from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from lwapi.core.domain.enums import InventoryType
from lwapi.core.domain.models import Filter, InventorySearch, SearchFilter, TimeFilter
from lwapi.core.domain.responses import (
    AlertsResponse,
    ContainerVulnerabilitiesResponse,
    InventoryResponse,
    MachineDetailsResponse,
)
from lwapi.core.pagination import next_page
from lwapi.infra.alerts_adapter import AlertsAdapter
from lwapi.infra.entities_adapter import EntitiesAdapter
from lwapi.infra.http_client import HttpClient
from lwapi.infra.inventory_adapter import InventoryAdapter
from lwapi.infra.vulnerabilities_adapter import ContainerVulnerabilitiesAdapter

BASE = "https://acme.lacework.net/api/v2"


@pytest.fixture
def http(mock_httpx_client):
    with HttpClient(account="acme", token="TOKEN") as client:
        yield client


def test_machine_details_search_then_next_page(mock_httpx_client, http, machine_page):
    mock_httpx_client(
        f"{BASE}/Entities/MachineDetails/search",
        method="POST",
        json_payload=machine_page(["mock-1-hostname"], f"{BASE}/NextPage/abc123", total_rows=2),
    )
    mock_httpx_client(f"{BASE}/NextPage/abc123", json_payload=machine_page(["mock-2-hostname"], None, total_rows=2))

    resp = MachineDetailsResponse()
    filters = SearchFilter(filters=[Filter(field="hostname", expression="eq", value="mock-1-hostname")])
    EntitiesAdapter(http).search_machine_details(resp, filters)

    assert [m.hostname for m in resp.data] == ["mock-1-hostname"]
    assert next_page(http, resp) is True
    assert [m.hostname for m in resp.data] == ["mock-2-hostname"]
    assert next_page(http, resp) is False

    assert mock_httpx_client.calls == [
        ("POST", f"{BASE}/Entities/MachineDetails/search"),
        ("GET", f"{BASE}/NextPage/abc123"),
    ]
    search_req = mock_httpx_client.requests[0]
    assert search_req.headers["Authorization"] == "TOKEN"
    assert json.loads(search_req.content) == {
        "filters": [{"field": "hostname", "expression": "eq", "value": "mock-1-hostname"}]
    }


def test_alerts_list(mock_httpx_client, http):
    mock_httpx_client(f"{BASE}/Alerts", json_payload={"data": [{"alertId": 11, "severity": "High"}]})

    resp = AlertsResponse()
    AlertsAdapter(http).list(resp)

    assert resp.data[0].id == 11
    assert resp.data[0].severity == "High"


def test_alerts_list_by_time_sends_range_in_query(mock_httpx_client, http):
    url = f"{BASE}/Alerts?startTime=2024-05-31T12:00:00.000Z&endTime=2024-06-01T12:00:00.000Z"
    mock_httpx_client(str(httpx.URL(url)), json_payload={"data": []})

    start = datetime(2024, 5, 31, 12, tzinfo=timezone.utc)
    end = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
    resp = AlertsResponse()
    AlertsAdapter(http).list_by_time(resp, start, end)

    req = mock_httpx_client.requests[0]
    assert req.url.params["startTime"] == "2024-05-31T12:00:00.000Z"
    assert req.url.params["endTime"] == "2024-06-01T12:00:00.000Z"
    assert resp.data_length() == 0


def test_inventory_search_posts_csp_and_time_filter(mock_httpx_client, http):
    mock_httpx_client(
        f"{BASE}/Inventory/search",
        method="POST",
        json_payload={"data": [{"urn": "arn:aws:s3:::bucket", "resourceType": "s3:bucket", "csp": "AWS"}]},
    )
    filters = InventorySearch(
        time_filter=TimeFilter(
            start_time=datetime(2024, 5, 25, tzinfo=timezone.utc),
            end_time=datetime(2024, 6, 1, tzinfo=timezone.utc),
        ),
        csp=InventoryType.AWS,
    )

    resp = InventoryResponse()
    InventoryAdapter(http).search(resp, filters)

    assert resp.data[0].resource_type == "s3:bucket"
    body = json.loads(mock_httpx_client.requests[0].content)
    assert body == {
        "timeFilter": {"startTime": "2024-05-25T00:00:00.000Z", "endTime": "2024-06-01T00:00:00.000Z"},
        "csp": "AWS",
    }


def test_inventory_scan(mock_httpx_client, http):
    mock_httpx_client(
        f"{BASE}/Inventory/scan?csp=GCP",
        method="POST",
        json_payload={"data": {"status": "scanning", "details": "Scan Started"}},
    )

    resp = InventoryAdapter(http).scan(InventoryType.GCP)

    assert resp.data.status == "scanning"
    assert resp.data.details == "Scan Started"


def test_container_vulnerabilities_search(mock_httpx_client, http):
    mock_httpx_client(
        f"{BASE}/Vulnerabilities/Containers/search",
        method="POST",
        json_payload={"data": [{"vulnId": "CVE-2024-1234", "severity": "Critical", "imageId": "sha256:abc"}]},
    )

    resp = ContainerVulnerabilitiesResponse()
    ContainerVulnerabilitiesAdapter(http).search(resp, SearchFilter())

    assert resp.data[0].vuln_id == "CVE-2024-1234"
    assert resp.data[0].image_id == "sha256:abc"


def test_server_error_propagates(mock_httpx_client, http):
    mock_httpx_client(f"{BASE}/Inventory/search", method="POST", status_code=503, json_payload={"message": "down"})

    with pytest.raises(httpx.HTTPStatusError):
        InventoryAdapter(http).search(InventoryResponse(), InventorySearch())
