"""Domain models for the DYMO Connect client."""

from dymo_connect.models.params import (
    FlowDirection,
    LabelParameters,
    PrintQuality,
    Rotation,
    TwinTurboRoll,
)
from dymo_connect.models.printer import ConsumableInfo, Printer
from dymo_connect.models.result import OperationResult

__all__ = [
    "ConsumableInfo",
    "FlowDirection",
    "LabelParameters",
    "OperationResult",
    "Printer",
    "PrintQuality",
    "Rotation",
    "TwinTurboRoll",
]
