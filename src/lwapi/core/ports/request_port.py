from __future__ import annotations

from typing import Optional, Protocol

from .paging_port import Pageable


class RequestDecoderPort(Protocol):
    def request_decoder(
        self,
        method: str,
        path: str,
        target: Pageable,
        body: Optional[dict] = None,
    ) -> None:
        """Issue a request against an API path and decode the JSON body into target.

        Raises whatever the transport raises; nothing is retried.
        """
