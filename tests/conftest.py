"""Shared fixtures: canned Receive responses and a scripted transport."""

from collections.abc import Callable
from typing import Any

import pytest

from winrm_output.constants import COMMAND_STATE_DONE
from winrm_output.models import ConnectionOptions
from winrm_output.services.document import ResponseDocument

COMMAND_STATE_RUNNING = (
    "http://schemas.microsoft.com/wbem/wsman/1/windows/shell/CommandState/Running"
)

RECEIVE_RESPONSE = """<s:Envelope xmlns:s="http://www.w3.org/2003/05/soap-envelope"
    xmlns:a="http://schemas.xmlsoap.org/ws/2004/08/addressing"
    xmlns:rsp="http://schemas.microsoft.com/wbem/wsman/1/windows/shell">
  <s:Header>
    <a:Action>http://schemas.microsoft.com/wbem/wsman/1/windows/shell/ReceiveResponse</a:Action>
  </s:Header>
  <s:Body>
    <rsp:ReceiveResponse>
{streams}
      <rsp:CommandState CommandId="{command_id}" State="{state}">{exit_code}</rsp:CommandState>
    </rsp:ReceiveResponse>
  </s:Body>
</s:Envelope>"""


def build_receive_response(
    streams: list[tuple[str, str]] | None = None,
    exit_code: str | None = None,
    done: bool = False,
    command_id: str = "CMD-1",
) -> str:
    """Render a ReceiveResponse envelope."""
    stream_xml = "\n".join(
        f'      <rsp:Stream Name="{name}" CommandId="{command_id}">{text}</rsp:Stream>'
        for name, text in streams or []
    )
    return RECEIVE_RESPONSE.format(
        streams=stream_xml,
        command_id=command_id,
        state=COMMAND_STATE_DONE if done else COMMAND_STATE_RUNNING,
        exit_code="" if exit_code is None else f"<rsp:ExitCode>{exit_code}</rsp:ExitCode>",
    )


class ScriptedTransport:
    """Transport returning (or raising) scripted results in order."""

    def __init__(self, results: list[Any]):
        self.results = list(results)
        self.sent: list[str] = []

    def send_request(self, message: str) -> ResponseDocument:
        self.sent.append(message)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class StaticMessage:
    """Message whose build() output is counted and distinguishable per call."""

    def __init__(self, command_id: str = "CMD-1"):
        self.command_id = command_id
        self.builds = 0

    def build(self) -> str:
        self.builds += 1
        return f"<Receive n='{self.builds}'/>"


@pytest.fixture
def receive_response() -> Callable[..., ResponseDocument]:
    """Factory for parsed ReceiveResponse documents."""

    def factory(**kwargs: Any) -> ResponseDocument:
        return ResponseDocument.from_string(build_receive_response(**kwargs))

    return factory


@pytest.fixture
def scripted_transport() -> Callable[[list[Any]], ScriptedTransport]:
    """Factory for a transport replaying the given responses/faults."""
    return ScriptedTransport


@pytest.fixture
def static_message() -> StaticMessage:
    """A Receive message stand-in."""
    return StaticMessage()


@pytest.fixture
def connection_options() -> ConnectionOptions:
    """Connection options for a test endpoint."""
    return ConnectionOptions(endpoint="http://winhost:5985/wsman", operation_timeout=60)


@pytest.fixture
def receive_response_xml() -> Callable[..., str]:
    """Factory for raw ReceiveResponse envelope text."""
    return build_receive_response
