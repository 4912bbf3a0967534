"""Client for the DYMO Connect label printing service."""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from dymo_connect.certificate import CertificateBootstrapper
from dymo_connect.config import DymoOptions
from dymo_connect.errors import ServiceFailure
from dymo_connect.models.params import LabelParameters
from dymo_connect.models.printer import ConsumableInfo, Printer
from dymo_connect.models.result import OperationResult
from dymo_connect.protocol import encode_print_params, parse_consumable_info, parse_printers
from dymo_connect.transport import BaseTransport, create_transport

logger = logging.getLogger(__name__)

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}
PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class DymoClient:
    """Async client for one DYMO Connect service endpoint.

    Every public operation returns an OperationResult and never raises.
    """

    def __init__(self, options: DymoOptions | Mapping[str, Any] | None = None) -> None:
        if options is None:
            options = DymoOptions()
        elif not isinstance(options, DymoOptions):
            options = DymoOptions.model_validate(dict(options))
        self.options = options
        self._bootstrapper = CertificateBootstrapper(options.hostname, options.port)
        self._transport: BaseTransport = create_transport(options, self._bootstrapper)

    @property
    def base_url(self) -> str:
        """Base URL of the printing service."""
        return self.options.base_url

    async def get_printers(self) -> OperationResult[list[Printer]]:
        """List the printers known to the service."""
        try:
            response = await self._transport.request("/GetPrinters")
            printers = parse_printers(response.text())
            logger.debug(f"Service reported {len(printers)} printer(s)")
            return OperationResult.ok(printers)
        except Exception as e:
            logger.warning(f"get_printers failed: {e}")
            return OperationResult.fail(e)

    async def get_consumable_info(self, printer_name: str) -> OperationResult[ConsumableInfo]:
        """Query label stock of a LabelWriter 550 series printer.

        A printer without queryable stock yields an empty ConsumableInfo,
        not a failure.
        """
        try:
            path = f"/GetConsumableInfoIn550Printer?printerName={quote(printer_name, safe='')}"
            response = await self._transport.request(path)
            return OperationResult.ok(parse_consumable_info(response.text()))
        except Exception as e:
            logger.warning(f"get_consumable_info for {printer_name} failed: {e}")
            return OperationResult.fail(e)

    async def render_label(self, label_xml: str) -> OperationResult[str]:
        """Render a label preview as a PNG data URI.

        The service answers with a quoted base64 string. Exactly the first
        and last characters are dropped, so any other shape is rejected
        instead of being reinterpreted.
        """
        try:
            response = await self._transport.request(
                "/RenderLabel",
                method="POST",
                headers=FORM_HEADERS,
                body=urlencode({"labelXml": label_xml}),
            )
            data = response.text()
            if len(data) < 2 or not (data.startswith('"') and data.endswith('"')):
                raise ServiceFailure(f"Unexpected render response: {data!r}", body=data)
            return OperationResult.ok(f"{PNG_DATA_URI_PREFIX}{data[1:-1]}")
        except Exception as e:
            logger.warning(f"render_label failed: {e}")
            return OperationResult.fail(e)

    async def print_label(
        self,
        printer_name: str,
        label_xml: str,
        parameters: LabelParameters | None = None,
    ) -> OperationResult[bool]:
        """Submit a print job.

        Only a response body of exactly ``true`` counts as success; any
        other body is returned as the failure detail.
        """
        try:
            body = urlencode(
                {
                    "printerName": printer_name,
                    "labelXml": label_xml,
                    "printParamsXml": encode_print_params(parameters),
                }
            )
            response = await self._transport.request(
                "/PrintLabel",
                method="POST",
                headers=FORM_HEADERS,
                body=body,
            )
            result = response.text()
            if result != "true":
                raise ServiceFailure(result, body=result)
            return OperationResult.ok(True)
        except Exception as e:
            logger.warning(f"print_label on {printer_name} failed: {e}")
            return OperationResult.fail(e)
