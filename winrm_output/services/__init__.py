"""Collaborators and the output retrieval processor."""

from winrm_output.services.decoder import CommandOutputDecoder
from winrm_output.services.document import ResponseDocument
from winrm_output.services.messages import CommandOutputMessage
from winrm_output.services.processor import CommandOutputProcessor, receive_message_factory
from winrm_output.services.transport import HttpTransport

__all__ = [
    "CommandOutputDecoder",
    "CommandOutputMessage",
    "CommandOutputProcessor",
    "HttpTransport",
    "ResponseDocument",
    "receive_message_factory",
]
