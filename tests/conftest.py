"""Pytest configuration and fixtures."""

import asyncio
import ssl
from pathlib import Path

import pytest

from dymo_connect.client import DymoClient
from dymo_connect.errors import TransportError
from dymo_connect.transport.base import BaseTransport, TransportResponse

CERTS_DIR = Path(__file__).parent / "certs"

SERVICE_PRINTERS_XML = (
    "<Printers><LabelWriterPrinter>"
    "<Name>LabelWriter</Name>"
    "<ModelName>DYMO LabelWriter 550</ModelName>"
    "<IsConnected>True</IsConnected>"
    "<IsLocal>True</IsLocal>"
    "<IsTwinTurbo>False</IsTwinTurbo>"
    "</LabelWriterPrinter></Printers>"
)


class FakeTransport(BaseTransport):
    """In-memory transport that records requests and replays canned bodies."""

    def __init__(self, body: str = "", status: int = 200, error: Exception | None = None):
        super().__init__("https://127.0.0.1:41951/DYMO/DLS/Printing")
        self.body = body
        self.status = status
        self.error = error
        self.calls: list[dict] = []

    async def request(self, path, method="GET", headers=None, body=None) -> TransportResponse:
        self.calls.append({"path": path, "method": method, "headers": headers, "body": body})
        if self.error:
            raise self.error
        return TransportResponse(status=self.status, body=self.body)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Transport answering with an empty 200 response."""
    return FakeTransport()


@pytest.fixture
def client(fake_transport: FakeTransport) -> DymoClient:
    """Client wired to the fake transport."""
    dymo = DymoClient()
    dymo._transport = fake_transport
    return dymo


@pytest.fixture
def failing_client() -> DymoClient:
    """Client whose transport cannot reach the service."""
    dymo = DymoClient()
    dymo._transport = FakeTransport(error=TransportError("Connection refused"))
    return dymo


async def _serve_printers(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    """Answer one HTTP request with a fixed printer listing."""
    try:
        await reader.readuntil(b"\r\n\r\n")
        body = SERVICE_PRINTERS_XML.encode()
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/xml; charset=utf-8\r\n"
            + f"Content-Length: {len(body)}\r\n".encode()
            + b"Connection: close\r\n\r\n"
            + body
        )
        await writer.drain()
    except (asyncio.IncompleteReadError, OSError):
        # Certificate bootstrap and rejected clients hang up without a request
        pass
    finally:
        writer.close()


@pytest.fixture
async def tls_service():
    """Local HTTPS service with a self-signed certificate; yields its port."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(CERTS_DIR / "service.pem", CERTS_DIR / "service-key.pem")
    server = await asyncio.start_server(_serve_printers, "127.0.0.1", 0, ssl=context)
    port = server.sockets[0].getsockname()[1]
    yield port
    server.close()
    await server.wait_closed()
