"""Tests for protocol interfaces.

Verifies that concrete implementations satisfy protocol contracts.
"""

from typing import Protocol

import httpx

from winrm_output.models import ConnectionOptions
from winrm_output.protocols import OutputMessage, ResponseDocument, StreamDecoder, Transport
from winrm_output.services import CommandOutputDecoder, CommandOutputMessage, HttpTransport
from winrm_output.services import ResponseDocument as XmlResponseDocument


def test_http_transport_implements_protocol() -> None:
    """HttpTransport satisfies Transport."""
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    assert isinstance(HttpTransport("http://winhost:5985/wsman", client=client), Transport)


def test_decoder_implements_protocol() -> None:
    """CommandOutputDecoder satisfies StreamDecoder."""
    assert isinstance(CommandOutputDecoder(), StreamDecoder)


def test_message_implements_protocol() -> None:
    """CommandOutputMessage satisfies OutputMessage."""
    options = ConnectionOptions(endpoint="http://winhost:5985/wsman")

    assert isinstance(CommandOutputMessage(options, "SHELL-1", "CMD-1"), OutputMessage)


def test_document_implements_protocol(receive_response) -> None:
    """The XML document view satisfies ResponseDocument."""
    document = receive_response()

    assert isinstance(document, XmlResponseDocument)
    assert isinstance(document, ResponseDocument)


def test_protocols_are_protocols() -> None:
    """All collaborator interfaces are typing.Protocol subclasses."""
    for protocol in (OutputMessage, ResponseDocument, StreamDecoder, Transport):
        assert issubclass(protocol, Protocol)


def test_protocol_allows_fakes() -> None:
    """Plain classes with the right methods satisfy the protocols."""

    class FakeDecoder:
        def decode(self, raw_output: str) -> str | None:
            return raw_output.upper() or None

    class FakeTransport:
        def send_request(self, message: str):
            return None

    assert isinstance(FakeDecoder(), StreamDecoder)
    assert isinstance(FakeTransport(), Transport)
    assert not isinstance(FakeDecoder(), Transport)


def test_output_message_requires_command_id() -> None:
    """A message must expose the command it polls for."""

    class AnonymousMessage:
        def build(self) -> str:
            return "<Receive/>"

    class CommandMessage(AnonymousMessage):
        command_id = "CMD-1"

    assert not isinstance(AnonymousMessage(), OutputMessage)
    assert isinstance(CommandMessage(), OutputMessage)
