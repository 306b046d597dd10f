"""Utilities for winrm_output."""

from winrm_output.utils.console import ColorfulFormatter, configure_logging

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
]
