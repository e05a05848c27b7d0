"""tests/lwapi/conftest.py

Common fixtures for the entire test suite.
"""

import json
import os
from datetime import datetime, timezone

import httpx
import pytest
from typer.testing import CliRunner


NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    def __init__(self, now: datetime = NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


class FakeRequester:
    """RequestDecoderPort that serves canned JSON bodies keyed by path."""

    def __init__(self, pages: dict[str, dict] | None = None) -> None:
        self.pages = dict(pages or {})
        self.calls: list[tuple[str, str, dict | None]] = []

    def request_decoder(self, method, path, target, body=None) -> None:
        self.calls.append((method, path, body))
        target.load_json(self.pages[path])


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LW_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("LW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    """
    responses = {}
    calls_log: list[tuple[str, str]] = []
    requests_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json_payload: dict | list | None = None,
        content: bytes | None = None,
    ):
        """Register a mock response for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        method = request.method
        url = str(request.url)
        key = (method, url)
        calls_log.append((method, url))
        requests_log.append(request)
        if key in responses:
            status, body = responses[key]
            headers = {"Content-Length": str(len(body)), "Content-Type": "application/json"}
            return httpx.Response(status, content=body, headers=headers)

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    # Patch httpx.Client to always use our mock transport
    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    # expose call logs on the returned function
    add_response.calls = calls_log  # type: ignore[attr-defined]
    add_response.requests = requests_log  # type: ignore[attr-defined]
    return add_response


def machine_page(hostnames: list[str], next_page: str | None, total_rows: int = 0) -> dict:
    """Machine details search body with the given hosts and paging cursor."""
    return {
        "data": [{"mid": i + 1, "hostname": h, "os": "Ubuntu"} for i, h in enumerate(hostnames)],
        "paging": {
            "rows": len(hostnames),
            "totalRows": total_rows or len(hostnames),
            "urls": {"nextPage": next_page},
        },
    }


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def fake_requester():
    """Factory for FakeRequester instances."""
    return FakeRequester


@pytest.fixture(name="machine_page")
def machine_page_fixture():
    return machine_page
