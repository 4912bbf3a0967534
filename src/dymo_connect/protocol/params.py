"""Encoding of print parameters into the LabelWriterPrintParams dialect."""

import xml.etree.ElementTree as ET
from enum import Enum

from dymo_connect.models.params import LabelParameters

ROOT_TAG = "LabelWriterPrintParams"

# Wire tag -> LabelParameters field, in the order the service expects
PARAMETER_TAGS: list[tuple[str, str]] = [
    ("JobTitle", "job_title"),
    ("FlowDirection", "flow_direction"),
    ("PrintQuality", "print_quality"),
    ("TwinTurboRoll", "twin_turbo_roll"),
    ("Rotation", "rotation"),
    ("IsTwinTurbo", "is_twin_turbo"),
    ("IsAutoCut", "is_auto_cut"),
]


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_print_params(parameters: LabelParameters | None = None) -> str:
    """Serialize print parameters to XML.

    ``Copies`` is always present. Other tags appear only for fields that
    are set; unset fields are left out rather than sent empty.
    """
    if parameters is None:
        parameters = LabelParameters()

    root = ET.Element(ROOT_TAG)
    ET.SubElement(root, "Copies").text = str(parameters.copies)

    for tag, field_name in PARAMETER_TAGS:
        value = getattr(parameters, field_name)
        if value is not None:
            ET.SubElement(root, tag).text = _format_value(value)

    return ET.tostring(root, encoding="unicode")
