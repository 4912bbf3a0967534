"""Printer and consumable models."""

from pydantic import BaseModel, ConfigDict


class Printer(BaseModel):
    """A LabelWriter printer as reported by the service."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    model: str = ""
    connected: bool = False
    local: bool = False
    twin_turbo: bool = False


class ConsumableInfo(BaseModel):
    """Label stock reported by a LabelWriter 550 series printer."""

    sku: str | None = None
    labels_remaining: int = 0
