"""httpx engine for hosts that only offer fetch-style HTTP."""

import logging

import httpx

from dymo_connect.errors import TransportError
from dymo_connect.transport.base import BaseTransport, TransportResponse

logger = logging.getLogger(__name__)


class FetchTransport(BaseTransport):
    """Requests over httpx without a custom trust anchor.

    Used where the runtime gives no control over TLS sockets. The host
    platform's own TLS policy decides whether the service certificate is
    accepted.
    """

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(base_url)
        self._transport = transport

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> TransportResponse:
        """Send a request and read the whole body."""
        url = self.url_for(path)
        content = body.encode() if body is not None else None
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                resp = await client.request(method, url, headers=headers, content=content)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {path} -> {resp.status_code}")
        return TransportResponse(status=resp.status_code, body=resp.text)
