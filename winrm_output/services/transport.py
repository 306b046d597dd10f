"""HTTP transport for WS-Man SOAP requests."""

import logging
import xml.etree.ElementTree as ET

import httpx

from winrm_output.errors import WinRMHTTPTransportError, WSManFault
from winrm_output.services.document import ResponseDocument

logger = logging.getLogger(__name__)

SOAP_CONTENT_TYPE = "application/soap+xml;charset=UTF-8"


class HttpTransport:
    """Posts built SOAP envelopes to a WinRM endpoint.

    Authentication is whatever ``httpx.Auth`` the caller supplies.

    Example:
        >>> transport = HttpTransport("http://host:5985/wsman", timeout=30)
        >>> doc = transport.send_request(message.build())
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        auth: httpx.Auth | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            endpoint: WS-Man endpoint URL
            timeout: HTTP read timeout, must exceed the WS-Man OperationTimeout
            auth: Optional httpx authentication flow
            client: Pre-built client (tests inject one with a MockTransport)
        """
        self.endpoint = endpoint
        self._client = client or httpx.Client(timeout=timeout, auth=auth)

    def send_request(self, message: str) -> ResponseDocument:
        """Send a built message and parse the response.

        Raises:
            WSManFault: If the response body carries a WSManFault
            WinRMHTTPTransportError: On any other non-200 response, or when
                the request fails before a response arrives
        """
        try:
            response = self._client.post(
                self.endpoint,
                content=message.encode("utf-8"),
                headers={"Content-Type": SOAP_CONTENT_TYPE},
            )
        except httpx.HTTPError as e:
            logger.error("POST %s failed: %s", self.endpoint, e)
            raise WinRMHTTPTransportError(f"Cannot reach {self.endpoint}: {e}") from e
        logger.debug("POST %s -> %d (%d bytes)", self.endpoint, response.status_code, len(response.content))

        document = self._parse(response)
        if document is not None:
            fault = document.fault()
            if fault is not None:
                code, description = fault
                raise WSManFault(code, description)

        if response.status_code != 200:
            raise WinRMHTTPTransportError(
                "Bad HTTP response returned from server",
                response.status_code,
                response.text,
            )
        if document is None:
            raise WinRMHTTPTransportError(
                "Unparseable SOAP response returned from server",
                response.status_code,
                response.text,
            )
        return document

    def _parse(self, response: httpx.Response) -> ResponseDocument | None:
        if not response.content:
            return None
        try:
            return ResponseDocument.from_string(response.content)
        except ET.ParseError as e:
            logger.warning("Response from %s is not XML: %s", self.endpoint, e)
            return None

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
