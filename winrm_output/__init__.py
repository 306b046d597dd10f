"""Retrieval of WinRM remote command output."""

from winrm_output.dependencies import Dependencies
from winrm_output.errors import ReceiveTimeoutError, WinRMError, WinRMHTTPTransportError, WSManFault
from winrm_output.models import ConnectionOptions, Output, OutputChunk, OutputOptions, StreamType
from winrm_output.services import (
    CommandOutputDecoder,
    CommandOutputMessage,
    CommandOutputProcessor,
    HttpTransport,
    ResponseDocument,
    receive_message_factory,
)

__version__ = "0.1.0"

__all__ = [
    "CommandOutputDecoder",
    "CommandOutputMessage",
    "CommandOutputProcessor",
    "ConnectionOptions",
    "Dependencies",
    "HttpTransport",
    "Output",
    "OutputChunk",
    "OutputOptions",
    "ReceiveTimeoutError",
    "ResponseDocument",
    "StreamType",
    "WSManFault",
    "WinRMError",
    "WinRMHTTPTransportError",
    "receive_message_factory",
]
