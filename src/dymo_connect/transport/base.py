"""Abstract base class for transport engines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TransportResponse:
    """Engine-independent HTTP response with the body fully read."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    def text(self) -> str:
        """The response body."""
        return self.body


class BaseTransport(ABC):
    """Issues requests against the printing service base URL."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        """Absolute URL for a path relative to the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    @abstractmethod
    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> TransportResponse:
        """Send a request and collect the whole response.

        Args:
            path: Path below the base URL, optionally with a query string.
            method: HTTP method.
            headers: Extra request headers.
            body: Request body, sent as UTF-8.

        Raises:
            TransportError: If the service cannot be reached.
        """
        pass
