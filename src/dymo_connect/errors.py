"""Exceptions raised inside the DYMO Connect client.

None of these cross the public boundary of DymoClient; every operation
catches them and returns them as the data of a failed OperationResult.
"""


class DymoError(Exception):
    """Base class for all client errors."""

    pass


class CertificateUnavailable(DymoError):
    """The service certificate could not be fetched during bootstrap."""

    pass


class TransportError(DymoError):
    """A request to the service failed at the connection level."""

    pass


class ParseError(DymoError):
    """A service response could not be interpreted at all."""

    pass


class ServiceFailure(DymoError):
    """The service answered, but reported that the operation did not succeed."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body
