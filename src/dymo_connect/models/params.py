"""Print job parameter models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class FlowDirection(StrEnum):
    """Direction in which label content flows."""

    LEFT_TO_RIGHT = "LeftToRight"
    TOP_TO_BOTTOM = "TopToBottom"


class PrintQuality(StrEnum):
    """Print quality hint passed to the printer driver."""

    TEXT = "Text"
    BARCODE = "Barcode"
    GRAPHICS = "Graphics"


class TwinTurboRoll(StrEnum):
    """Roll selection on TwinTurbo printers."""

    NONE = "None"
    LEFT = "Left"
    RIGHT = "Right"


class Rotation(StrEnum):
    """Label rotation."""

    ROTATION_0 = "Rotation0"
    ROTATION_90 = "Rotation90"
    ROTATION_180 = "Rotation180"
    ROTATION_270 = "Rotation270"


class LabelParameters(BaseModel):
    """Options for a single print job.

    Only ``copies`` always reaches the service. Every other field is sent
    only when it has been set.
    """

    copies: int = Field(default=1, ge=1)
    job_title: str | None = None
    flow_direction: FlowDirection | None = None
    print_quality: PrintQuality | None = None
    twin_turbo_roll: TwinTurboRoll | None = None
    rotation: Rotation | None = None
    is_twin_turbo: bool | None = None
    is_auto_cut: bool | None = None
