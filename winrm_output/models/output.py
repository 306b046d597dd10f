"""Command output data models."""

from dataclasses import dataclass, field
from enum import Enum


class StreamType(str, Enum):
    """Named output stream of a remote command."""

    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(frozen=True)
class OutputChunk:
    """One non-empty rsp:Stream element read from a Receive response."""

    stream: StreamType
    text: str


@dataclass
class Output:
    """Accumulated output of a remote command.

    ``data`` holds single-key records in the order chunks arrived,
    e.g. ``[{StreamType.STDOUT: "a"}, {StreamType.STDERR: "b"}]``.

    Only the processor appends, and only while ``command_output`` runs.
    Each call builds a fresh instance and keeps no reference to it after
    returning, so later polls never touch a result already handed out.
    """

    exitcode: int | None = None
    data: list[dict[StreamType, str]] = field(default_factory=list)

    def append(self, stream: StreamType, text: str) -> dict[StreamType, str]:
        """Append a decoded chunk and return the stored record."""
        record = {stream: text}
        self.data.append(record)
        return record

    def _join(self, *streams: StreamType) -> str:
        return "".join(
            text for record in self.data for kind, text in record.items() if kind in streams
        )

    @property
    def stdout(self) -> str:
        """All stdout text."""
        return self._join(StreamType.STDOUT)

    @property
    def stderr(self) -> str:
        """All stderr text."""
        return self._join(StreamType.STDERR)

    @property
    def output(self) -> str:
        """Stdout and stderr interleaved in arrival order."""
        return self._join(StreamType.STDOUT, StreamType.STDERR)
