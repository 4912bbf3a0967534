"""aiohttp engine that pins the service certificate."""

import logging

import aiohttp

from dymo_connect.certificate import CertificateBootstrapper, fingerprint_sha256
from dymo_connect.errors import TransportError
from dymo_connect.transport.base import BaseTransport, TransportResponse

logger = logging.getLogger(__name__)

# Callers impose their own deadlines
NO_TIMEOUT = aiohttp.ClientTimeout(total=None)


class PinnedTransport(BaseTransport):
    """Requests over aiohttp with the bootstrapped certificate as sole trust root.

    CA and hostname validation are skipped; instead each connection must
    present exactly the pinned certificate (``aiohttp.Fingerprint``). The
    relaxation applies to this engine's requests only.
    """

    def __init__(self, base_url: str, bootstrapper: CertificateBootstrapper) -> None:
        super().__init__(base_url)
        self.bootstrapper = bootstrapper

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> TransportResponse:
        """Send a request pinned to the service certificate."""
        # CertificateUnavailable propagates as-is
        trust_anchor = await self.bootstrapper.get_trust_anchor()
        pin = aiohttp.Fingerprint(fingerprint_sha256(trust_anchor))

        url = self.url_for(path)
        data = body.encode() if body is not None else None
        try:
            async with aiohttp.ClientSession(timeout=NO_TIMEOUT) as session:
                async with session.request(
                    method,
                    url,
                    headers=headers,
                    data=data,
                    ssl=pin,
                ) as resp:
                    text = await resp.text()
                    logger.debug(f"{method} {path} -> {resp.status}")
                    return TransportResponse(status=resp.status, body=text)
        except (aiohttp.ClientError, OSError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
