"""Parsing of the GetConsumableInfoIn550Printer response."""

import json
from typing import Any

from pydantic import ValidationError

from dymo_connect.errors import ParseError
from dymo_connect.models.printer import ConsumableInfo

# Substring probed before any decoding is attempted
DATA_MARKER = "sku"


def parse_consumable_info(text: str) -> ConsumableInfo:
    """Parse consumable info, tolerating replies that carry no data.

    Printers without queryable stock make the service answer with something
    other than JSON, so the body is probed for the ``sku`` marker first and
    only decoded when it is present. No marker means an empty result, not
    an error.

    Raises:
        ParseError: If the body carries the marker but is not a JSON object,
            or its values do not fit ConsumableInfo.
    """
    if DATA_MARKER not in text:
        return ConsumableInfo()

    try:
        parsed: Any = json.loads(text)
        # Some service builds send the object as a JSON-encoded string
        if isinstance(parsed, str):
            parsed = json.loads(parsed)
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed consumable info: {e}") from e

    if not isinstance(parsed, dict):
        raise ParseError(f"Unexpected consumable info payload: {type(parsed).__name__}")

    try:
        return ConsumableInfo(
            sku=parsed.get("sku"),
            labels_remaining=parsed.get("labelsRemaining") or 0,
        )
    except ValidationError as e:
        raise ParseError(f"Unexpected consumable info values: {e}") from e
