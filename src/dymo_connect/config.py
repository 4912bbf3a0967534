"""Configuration for the DYMO Connect client."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME = "127.0.0.1"
DEFAULT_PORT = 41951
SERVICE_PATH = "/DYMO/DLS/Printing"


class DymoOptions(BaseModel):
    """Endpoint of the DYMO Connect web service.

    Frozen: a client keeps the endpoint it was constructed with.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = DEFAULT_HOSTNAME
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    @property
    def base_url(self) -> str:
        """Base URL for all printing operations."""
        return f"https://{self.hostname}:{self.port}{SERVICE_PATH}"


def load_options(config_path: Path) -> DymoOptions:
    """Load client options from a YAML file.

    A missing file or an empty document yields the defaults.
    """
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return DymoOptions()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return DymoOptions.model_validate(data)
