"""WS-Man Receive message construction."""

import uuid
import xml.etree.ElementTree as ET

from winrm_output.constants import (
    ACTION_RECEIVE,
    ANONYMOUS_ADDRESS,
    NAMESPACES,
)
from winrm_output.models import ConnectionOptions, OutputOptions

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"

for _prefix, _uri in NAMESPACES.items():
    ET.register_namespace(_prefix, _uri)


def _qname(prefix: str, tag: str) -> str:
    return f"{{{NAMESPACES[prefix]}}}{tag}"


def _add(parent: ET.Element, prefix: str, tag: str, text: str | None = None, **attrs: str) -> ET.Element:
    element = ET.SubElement(parent, _qname(prefix, tag), attrs)
    if text is not None:
        element.text = text
    return element


def _must_understand(element: ET.Element) -> ET.Element:
    element.set(_qname("env", "mustUnderstand"), "true")
    return element


class CommandOutputMessage:
    """Receive request for the output of one command in a remote shell."""

    def __init__(
        self,
        connection_options: ConnectionOptions,
        shell_id: str,
        command_id: str,
        options: OutputOptions | None = None,
    ):
        """Initialize the message.

        Args:
            connection_options: Endpoint-wide header values
            shell_id: Remote shell id
            command_id: Command id inside the shell

        Raises:
            ValueError: If shell_id or command_id is empty
        """
        if not shell_id:
            raise ValueError("shell_id is required")
        if not command_id:
            raise ValueError("command_id is required")
        self.connection_options = connection_options
        self.shell_id = shell_id
        self.command_id = command_id
        self.options = options or OutputOptions()

    def build(self) -> str:
        """Serialize the SOAP envelope with a fresh MessageID."""
        envelope = ET.Element(_qname("env", "Envelope"))
        self._build_header(_add(envelope, "env", "Header"))
        self._build_body(_add(envelope, "env", "Body"))
        return ET.tostring(envelope, encoding="unicode")

    def _build_header(self, header: ET.Element) -> None:
        opts = self.connection_options
        _add(header, "a", "To", opts.endpoint)
        reply_to = _add(header, "a", "ReplyTo")
        _must_understand(_add(reply_to, "a", "Address", ANONYMOUS_ADDRESS))
        _must_understand(_add(header, "w", "MaxEnvelopeSize", str(opts.max_envelope_size)))
        _add(header, "a", "MessageID", f"uuid:{str(uuid.uuid4()).upper()}")
        for prefix, tag in (("w", "Locale"), ("p", "DataLocale")):
            locale = _add(header, prefix, tag)
            locale.set(XML_LANG, opts.locale)
            locale.set(_qname("env", "mustUnderstand"), "false")
        _add(header, "w", "OperationTimeout", f"PT{opts.operation_timeout}S")
        _must_understand(_add(header, "w", "ResourceURI", self.options.shell_uri))
        _must_understand(_add(header, "a", "Action", ACTION_RECEIVE))
        selector_set = _add(header, "w", "SelectorSet")
        _add(selector_set, "w", "Selector", self.shell_id, Name="ShellId")

    def _build_body(self, body: ET.Element) -> None:
        receive = _add(body, "rsp", "Receive")
        _add(
            receive,
            "rsp",
            "DesiredStream",
            " ".join(self.options.out_streams),
            CommandId=self.command_id,
        )
