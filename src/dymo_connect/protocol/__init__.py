"""Wire format parsing and encoding for the DYMO Connect service."""

from dymo_connect.protocol.consumables import parse_consumable_info
from dymo_connect.protocol.params import encode_print_params
from dymo_connect.protocol.printers import parse_printers

__all__ = [
    "encode_print_params",
    "parse_consumable_info",
    "parse_printers",
]
