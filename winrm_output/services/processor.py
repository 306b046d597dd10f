"""Retrieval of remote command output over repeated Receive requests."""

import logging
import time
from collections.abc import Callable, Iterator

from winrm_output.constants import COMMAND_STATE_DONE, RECEIVE_TIMEOUT_FAULT_CODE
from winrm_output.errors import ReceiveTimeoutError, WSManFault
from winrm_output.models import ConnectionOptions, Output, OutputChunk, OutputOptions, StreamType
from winrm_output.protocols import OutputMessage, ResponseDocument, StreamDecoder, Transport
from winrm_output.services.decoder import CommandOutputDecoder
from winrm_output.services.messages import CommandOutputMessage

logger = logging.getLogger(__name__)

MessageFactory = Callable[[str, str], OutputMessage]
OutputCallback = Callable[[str | None, str | None], None]
StreamCallback = Callable[[OutputChunk, ResponseDocument], None]


def receive_message_factory(
    connection_options: ConnectionOptions,
    out_options: OutputOptions | None = None,
) -> MessageFactory:
    """Build a factory producing Receive messages for a shell/command pair."""

    def factory(shell_id: str, command_id: str) -> OutputMessage:
        return CommandOutputMessage(connection_options, shell_id, command_id, out_options)

    return factory


class CommandOutputProcessor:
    """Gets all the output of a command until it completes.

    Each poll sends one Receive request, decodes every non-empty stream of
    the response and folds it into an ``Output``. The WS-Man receive timeout
    fault (2150858793) means "nothing yet" and is retried transparently.

    Example:
        >>> processor = CommandOutputProcessor(transport, receive_message_factory(opts))
        >>> result = processor.command_output(shell_id, command_id, print)
        >>> result.exitcode
        0
    """

    def __init__(
        self,
        transport: Transport,
        message_factory: MessageFactory,
        decoder: StreamDecoder | None = None,
        receive_deadline: float | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            transport: Sends built messages and returns parsed responses
            message_factory: Creates the Receive message for a shell/command
            decoder: Stream text decoder, base64 by default
            receive_deadline: Seconds to keep retrying timeout faults for one
                request before raising ReceiveTimeoutError. None retries forever.
        """
        if receive_deadline is not None and receive_deadline <= 0:
            raise ValueError("receive_deadline must be > 0 or None")
        self.transport = transport
        self.message_factory = message_factory
        self.decoder = decoder or CommandOutputDecoder()
        self.receive_deadline = receive_deadline

    def command_output(
        self,
        shell_id: str,
        command_id: str,
        callback: OutputCallback | None = None,
    ) -> Output:
        """Get the command output from the remote shell.

        Args:
            shell_id: The remote shell id running the command
            command_id: The command id to get output for
            callback: Called with ``(stdout, stderr)`` for every decoded chunk;
                the stream that did not produce the chunk is None

        Returns:
            Accumulated output, exitcode defaulting to 0

        Raises:
            ValueError: If shell_id or command_id is empty
            WSManFault: On any fault other than the receive timeout
        """
        if not shell_id:
            raise ValueError("shell_id is required")
        if not command_id:
            raise ValueError("command_id is required")

        output = Output()
        logger.debug("Retrieving output for command id: %s", command_id)
        message = self.message_factory(shell_id, command_id)
        for chunk, document in self.iter_message_output(message):
            handled = self._handle_stream(chunk, output, document)
            if handled and callback:
                callback(*handled)

        if output.exitcode is None:
            output.exitcode = 0
        return output

    def message_output(
        self,
        message: OutputMessage,
        wait_for_done_state: bool = False,
        callback: StreamCallback | None = None,
    ) -> None:
        """Poll with ``message`` until the command is considered done.

        Without ``wait_for_done_state`` exactly one exchange is made. With it,
        requests repeat until a response reports CommandState/Done.
        """
        for chunk, document in self.iter_message_output(message, wait_for_done_state):
            if callback:
                callback(chunk, document)

    def iter_message_output(
        self,
        message: OutputMessage,
        wait_for_done_state: bool = False,
    ) -> Iterator[tuple[OutputChunk, ResponseDocument]]:
        """Yield ``(chunk, document)`` for every stream of every response."""
        document: ResponseDocument | None = None
        while not self._command_done(document, wait_for_done_state):
            logger.debug("Waiting for output...")
            document = self._send_get_output_message(message.build(), message)
            logger.debug("Processing output")
            for chunk in self._read_streams(document):
                yield chunk, document

    def _handle_stream(
        self,
        chunk: OutputChunk,
        output: Output,
        document: ResponseDocument,
    ) -> tuple[str | None, str | None] | None:
        decoded_text = self.decoder.decode(chunk.text)
        if not decoded_text:
            return None

        output.append(chunk.stream, decoded_text)
        if output.exitcode is None:
            output.exitcode = self._exit_code(document)
        if chunk.stream is StreamType.STDOUT:
            return decoded_text, None
        return None, decoded_text

    def _send_get_output_message(self, built_message: str, message: OutputMessage) -> ResponseDocument:
        started = time.monotonic()
        while True:
            try:
                return self.transport.send_request(built_message)
            except WSManFault as e:
                # If no output is available before wsman:OperationTimeout
                # expires the server returns this fault and the client
                # should issue another Receive request.
                if e.fault_code != RECEIVE_TIMEOUT_FAULT_CODE:
                    raise
                if self.receive_deadline is not None and time.monotonic() - started >= self.receive_deadline:
                    raise ReceiveTimeoutError(message.command_id, self.receive_deadline) from e
                logger.debug("Retrying receive request after timeout (fault %s)", e.fault_code)

    def _exit_code(self, document: ResponseDocument) -> int | None:
        text = document.exit_code()
        if text is None:
            return None
        try:
            return int(text.strip())
        except ValueError:
            logger.debug("Ignoring malformed exit code: %r", text)
            return None

    def _command_done(self, document: ResponseDocument | None, wait_for_done_state: bool) -> bool:
        if document is None:
            return False
        if not wait_for_done_state:
            return True
        return document.has_state(COMMAND_STATE_DONE)

    def _read_streams(self, document: ResponseDocument) -> Iterator[OutputChunk]:
        for name, text in document.streams():
            if not text:
                continue
            try:
                stream = StreamType(name)
            except ValueError:
                logger.warning("Skipping unknown output stream: %s", name)
                continue
            yield OutputChunk(stream, text)
