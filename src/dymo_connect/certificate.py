"""Trust anchor bootstrap for the DYMO Connect service.

The service presents a self-signed certificate that no trust store knows
about. Instead of disabling verification, the client fetches the
certificate once, on first use, and pins it for every later request.

Trust model: whatever certificate the service presents at bootstrap is
trusted. If an attacker swapped the certificate before that first handshake
it would be pinned without any warning. This is accepted because the
service normally listens on loopback only. The pin is never refreshed; if
the service restarts with a new certificate, build a new client.
"""

import asyncio
import hashlib
import logging
import ssl

from dymo_connect.errors import CertificateUnavailable

logger = logging.getLogger(__name__)


def fingerprint_sha256(pem: str) -> bytes:
    """SHA-256 digest of the DER form of a PEM certificate."""
    return hashlib.sha256(ssl.PEM_cert_to_DER_cert(pem)).digest()


def _handshake_context() -> ssl.SSLContext:
    """TLS context used only for the bootstrap handshake."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class CertificateBootstrapper:
    """Fetches and memoizes the service certificate as a PEM trust anchor."""

    def __init__(self, hostname: str, port: int) -> None:
        self.hostname = hostname
        self.port = port
        self._trust_anchor: str = ""
        self._lock = asyncio.Lock()

    @property
    def trust_anchor(self) -> str | None:
        """The pinned certificate, or None before bootstrap."""
        return self._trust_anchor or None

    async def get_trust_anchor(self) -> str:
        """Return the pinned certificate, fetching it on first use.

        Raises:
            CertificateUnavailable: If the handshake fails or the service
                presents no certificate.
        """
        if self._trust_anchor:
            return self._trust_anchor

        async with self._lock:
            # Another caller may have finished the handshake while we waited
            if not self._trust_anchor:
                pem = await self._fetch_certificate()
                self._trust_anchor = pem
                logger.info(
                    f"Pinned certificate for {self.hostname}:{self.port} "
                    f"(sha256 {fingerprint_sha256(pem).hex()})"
                )
        return self._trust_anchor

    async def _fetch_certificate(self) -> str:
        """Open an unverified TLS connection and read the peer certificate."""
        logger.debug(f"Fetching certificate from {self.hostname}:{self.port}")
        try:
            _reader, writer = await asyncio.open_connection(
                self.hostname,
                self.port,
                ssl=_handshake_context(),
            )
        except OSError as e:
            raise CertificateUnavailable(
                f"Failed to connect to {self.hostname}:{self.port}: {e}"
            ) from e

        try:
            ssl_object = writer.get_extra_info("ssl_object")
            der = ssl_object.getpeercert(binary_form=True) if ssl_object else None
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                pass

        if not der:
            raise CertificateUnavailable(
                f"Service at {self.hostname}:{self.port} presented no certificate"
            )
        return ssl.DER_cert_to_PEM_cert(der)
