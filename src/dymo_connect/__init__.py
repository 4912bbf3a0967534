"""Async client for the DYMO Connect label printing web service."""

from dymo_connect.client import DymoClient
from dymo_connect.config import DymoOptions, load_options
from dymo_connect.errors import (
    CertificateUnavailable,
    DymoError,
    ParseError,
    ServiceFailure,
    TransportError,
)
from dymo_connect.models import (
    ConsumableInfo,
    FlowDirection,
    LabelParameters,
    OperationResult,
    Printer,
    PrintQuality,
    Rotation,
    TwinTurboRoll,
)

__all__ = [
    "CertificateUnavailable",
    "ConsumableInfo",
    "DymoClient",
    "DymoError",
    "DymoOptions",
    "FlowDirection",
    "LabelParameters",
    "OperationResult",
    "ParseError",
    "Printer",
    "PrintQuality",
    "Rotation",
    "ServiceFailure",
    "TransportError",
    "TwinTurboRoll",
    "load_options",
]
