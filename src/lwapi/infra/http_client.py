from __future__ import annotations

import logging
from typing import Mapping, Optional, TYPE_CHECKING

import httpx

from ..version import __version__
from ..config.urls import API_TOKENS, api_path, get_base_url
from ..core.errors import AuthError
from ..shared.utils import hash_token_for_namespace
from .schemas import TokenResponse

if TYPE_CHECKING:
    from ..core.ports.paging_port import Pageable

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_EXPIRY_SECONDS = 3600


class HttpClient:
    def __init__(
        self,
        account: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        token: Optional[str] = None,
        subaccount: Optional[str] = None,
        org_access: bool = False,
        token_expiry_seconds: int = DEFAULT_TOKEN_EXPIRY_SECONDS,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 60.0,
    ) -> None:
        self._base_url = get_base_url(account, base_url)
        headers = {
            "Accept": "application/json",
            "User-Agent": f"lwapi-python/{__version__}",
        }
        if subaccount:
            headers["Account-Name"] = subaccount
        if org_access:
            headers["Org-Access"] = "true"
        headers.update(base_headers or {})

        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=timeout_seconds,
            headers=headers,
            follow_redirects=True,
            max_redirects=10
        )
        self._api_key = api_key
        self._api_secret = api_secret
        self._token = token or ""
        self._token_expiry = token_expiry_seconds
        logger.info(f"API client created: url={self._base_url}, timeout={timeout_seconds}s")

    @property
    def url(self) -> str:
        return self._base_url

    def generate_token(self) -> str:
        """Exchange the API key/secret for an access token and keep it for later requests."""
        if not self._api_key or not self._api_secret:
            raise AuthError("unable to generate access token: auth keys missing")

        resp = self._client.post(
            api_path(API_TOKENS),
            json={"keyId": self._api_key, "expiryTime": self._token_expiry},
            headers={"X-LW-UAKS": self._api_secret},
        )
        raise_for_api_status("POST", resp)
        token = TokenResponse.model_validate(resp.json()).token()
        if not token:
            raise AuthError("unable to generate access token: empty token in response")
        self._token = token
        logger.debug(f"Access token generated: {hash_token_for_namespace(token)}")
        return token

    def _auth_headers(self) -> dict[str, str]:
        if not self._token:
            self.generate_token()
        return {"Authorization": self._token}

    def _send(self, method: str, path: str, payload: Optional[dict] = None) -> httpx.Response:
        url = api_path(path)
        logger.debug(f"request: method={method} url={self._base_url} endpoint={url}")
        resp = self._client.request(method, url, json=payload, headers=self._auth_headers())
        logger.debug(f"response: code={resp.status_code} from={url}")
        raise_for_api_status(method, resp)
        return resp

    def _decode_object(self, resp: httpx.Response) -> dict:
        data = resp.json()
        if not isinstance(data, dict):
            raise TypeError("HttpClient invariant violated: expected JSON object")
        return data

    def request_decoder(
        self,
        method: str,
        path: str,
        target: "Pageable",
        body: Optional[dict] = None,
    ) -> None:
        data = self._decode_object(self._send(method, path, body))
        target.load_json(data)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# fields of an error body's "data" object that carry a message for humans
ERROR_MESSAGE_FIELDS = ("message", "statusMessage", "Message", "ErrorMsg")


def error_message(resp: httpx.Response) -> str:
    """Best message for a failed response, falling back to the HTTP reason phrase."""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        data = body.get("data")
        if isinstance(data, dict):
            for key in ERROR_MESSAGE_FIELDS:
                if data.get(key):
                    return str(data[key])
        elif "data" not in body and body.get("message"):
            return str(body["message"])
    return resp.reason_phrase or "Unknown"


def raise_for_api_status(method: str, resp: httpx.Response) -> None:
    """Like ``Response.raise_for_status`` but the error text carries the server's message.

    Format: ``[GET] https://acme.lacework.net/api/v2/Alerts: [401] Invalid token``
    """
    if resp.is_success:
        return
    message = f"[{method}] {resp.request.url}: [{resp.status_code}] {error_message(resp)}"
    logger.debug(f"request failed: {message}")
    raise httpx.HTTPStatusError(message, request=resp.request, response=resp)
