"""Read-only view over a parsed WS-Man response envelope."""

import xml.etree.ElementTree as ET

from winrm_output.constants import NAMESPACES, NS_WIN_SHELL, NS_WSMAN_FAULT


class ResponseDocument:
    """Parsed Receive response.

    Only walks the element tree; parsing happens in ``from_string``.
    """

    def __init__(self, root: ET.Element):
        self.root = root

    @classmethod
    def from_string(cls, xml_text: str | bytes) -> "ResponseDocument":
        """Parse a SOAP envelope.

        Raises:
            xml.etree.ElementTree.ParseError: If the text is not well-formed
        """
        return cls(ET.fromstring(xml_text))

    def streams(self) -> list[tuple[str, str | None]]:
        """Return every rsp:Stream element as ``(name, text)``."""
        return [
            (stream.get("Name", ""), stream.text)
            for stream in self.root.iter(f"{{{NS_WIN_SHELL}}}Stream")
        ]

    def exit_code(self) -> str | None:
        """Return the first rsp:ExitCode text, or None if absent."""
        element = self.root.find(".//rsp:ExitCode", NAMESPACES)
        if element is None:
            return None
        return element.text

    def has_state(self, state_uri: str) -> bool:
        """Check whether any element has a State attribute equal to state_uri."""
        return any(element.get("State") == state_uri for element in self.root.iter())

    def fault(self) -> tuple[str, str] | None:
        """Return ``(code, message)`` of an embedded WSManFault, if any."""
        element = self.root.find(f".//{{{NS_WSMAN_FAULT}}}WSManFault")
        if element is None:
            return None
        message = element.find("f:Message", NAMESPACES)
        text = "".join(message.itertext()).strip() if message is not None else ""
        return element.get("Code", ""), text
