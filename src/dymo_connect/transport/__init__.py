"""Transport engines for the DYMO Connect client."""

import importlib.util
import logging
import sys

from dymo_connect.certificate import CertificateBootstrapper
from dymo_connect.config import DymoOptions
from dymo_connect.transport.base import BaseTransport, TransportResponse
from dymo_connect.transport.fetch import FetchTransport
from dymo_connect.transport.pinned import PinnedTransport

__all__ = [
    "BaseTransport",
    "FetchTransport",
    "PinnedTransport",
    "TransportResponse",
    "create_transport",
    "supports_custom_trust_anchor",
]

logger = logging.getLogger(__name__)

# Runtimes without raw TLS sockets (browser/WASM builds)
FETCH_ONLY_PLATFORMS = frozenset({"emscripten", "wasi"})


def supports_custom_trust_anchor() -> bool:
    """Whether this runtime can open TLS sockets with a custom trust root."""
    if sys.platform in FETCH_ONLY_PLATFORMS:
        return False
    return importlib.util.find_spec("ssl") is not None


def create_transport(options: DymoOptions, bootstrapper: CertificateBootstrapper) -> BaseTransport:
    """Factory function to pick the transport engine for this runtime."""
    if supports_custom_trust_anchor():
        return PinnedTransport(options.base_url, bootstrapper)
    logger.info("Runtime has no TLS socket support, using fetch-style transport")
    return FetchTransport(options.base_url)
