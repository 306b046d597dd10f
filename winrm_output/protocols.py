"""Protocol interfaces for the output retrieval collaborators.

The processor depends on these abstractions only, so each collaborator
can be swapped for a fake in tests or a different wire implementation.

Usage Example:

    from winrm_output.protocols import Transport

    class RecordingTransport:
        def __init__(self, responses):
            self.sent = []
            self._responses = iter(responses)

        def send_request(self, message: str):
            self.sent.append(message)
            return next(self._responses)

    assert isinstance(RecordingTransport([]), Transport)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResponseDocument(Protocol):
    """Parsed response to a single Receive request."""

    def streams(self) -> list[tuple[str, str | None]]:
        """Return every rsp:Stream element as ``(name, text)``.

        Text is None for elements without content.
        """
        ...

    def exit_code(self) -> str | None:
        """Return the rsp:ExitCode text, or None if absent."""
        ...

    def has_state(self, state_uri: str) -> bool:
        """Check whether any element carries ``State=state_uri``."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Performs one request/response exchange with the WinRM endpoint."""

    def send_request(self, message: str) -> ResponseDocument:
        """Send a built message.

        Args:
            message: Serialized SOAP envelope

        Returns:
            Parsed response document

        Raises:
            WSManFault: If the host answers with a WS-Man fault
        """
        ...


@runtime_checkable
class StreamDecoder(Protocol):
    """Decodes the text of one rsp:Stream element."""

    def decode(self, raw_output: str) -> str | None:
        """Return decoded text, or None when the chunk carries no data."""
        ...


@runtime_checkable
class OutputMessage(Protocol):
    """A not-yet-built Receive request for one command."""

    command_id: str

    def build(self) -> str:
        """Serialize the message. Each call stamps a fresh MessageID."""
        ...


__all__ = [
    "OutputMessage",
    "ResponseDocument",
    "StreamDecoder",
    "Transport",
]
