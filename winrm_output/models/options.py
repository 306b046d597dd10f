"""Request option models."""

from dataclasses import dataclass

from winrm_output.constants import DEFAULT_OUT_STREAMS, RESOURCE_URI_CMD


@dataclass(frozen=True)
class ConnectionOptions:
    """Endpoint-wide values stamped into every WS-Man header."""

    endpoint: str
    operation_timeout: int = 20
    max_envelope_size: int = 153600
    locale: str = "en-US"

    def __post_init__(self) -> None:
        if self.operation_timeout <= 0:
            raise ValueError("operation_timeout must be > 0")
        if self.max_envelope_size <= 0:
            raise ValueError("max_envelope_size must be > 0")


@dataclass(frozen=True)
class OutputOptions:
    """Options for the Receive (get output) request.

    Attributes:
        out_streams: Streams to request, subset of stdout/stderr
        shell_uri: Resource URI of the shell the command runs in
    """

    out_streams: tuple[str, ...] = DEFAULT_OUT_STREAMS
    shell_uri: str = RESOURCE_URI_CMD

    def __post_init__(self) -> None:
        if not self.out_streams:
            raise ValueError("out_streams must name at least one stream")
        unknown = set(self.out_streams) - set(DEFAULT_OUT_STREAMS)
        if unknown:
            raise ValueError(f"Unknown output streams: {', '.join(sorted(unknown))}")
