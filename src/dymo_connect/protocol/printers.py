"""Parsing of the GetPrinters response."""

import json
import xml.etree.ElementTree as ET

from dymo_connect.errors import ParseError
from dymo_connect.models.printer import Printer

PRINTER_TAG = "LabelWriterPrinter"


def _unquote(text: str) -> str:
    """Undo JSON string quoting if the service wrapped the document in it."""
    stripped = text.strip()
    if len(stripped) >= 2 and stripped.startswith('"') and stripped.endswith('"'):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid quoted printer listing: {e}") from e
    return stripped


def _flag(element: ET.Element, tag: str) -> bool:
    # Only the exact literal "True" counts
    return element.findtext(tag) == "True"


def parse_printers(xml_text: str) -> list[Printer]:
    """Parse a ``<Printers>`` document into Printer records.

    Zero, one or many ``<LabelWriterPrinter>`` entries all come back as a
    list. Missing fields default to an empty string or False.

    Raises:
        ParseError: If the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(_unquote(xml_text))
    except ET.ParseError as e:
        raise ParseError(f"Malformed printer listing: {e}") from e

    printers = []
    for entry in root.iter(PRINTER_TAG):
        printers.append(
            Printer(
                name=entry.findtext("Name") or "",
                model=entry.findtext("ModelName") or "",
                connected=_flag(entry, "IsConnected"),
                local=_flag(entry, "IsLocal"),
                twin_turbo=_flag(entry, "IsTwinTurbo"),
            )
        )
    return printers
