"""Data models for winrm_output."""

from winrm_output.models.options import ConnectionOptions, OutputOptions
from winrm_output.models.output import Output, OutputChunk, StreamType

__all__ = [
    "ConnectionOptions",
    "Output",
    "OutputChunk",
    "OutputOptions",
    "StreamType",
]
