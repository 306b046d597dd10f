"""Tests for console logging helpers."""

import logging
from collections.abc import Generator

import pytest

from winrm_output.config import Settings
from winrm_output.utils.console import ColorfulFormatter, configure_logging


def make_record(name: str = "winrm_output.services.processor", msg: str = "Processing output") -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, msg, None, None)


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Package logger with handlers restored after the test."""
    logger = logging.getLogger("winrm_output")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    logger.handlers = []
    yield logger
    logger.handlers, logger.level, logger.propagate = saved[0], saved[1], saved[2]


def test_plain_format_contains_parts() -> None:
    """Without colors the line has level, short component and message."""
    line = ColorfulFormatter(use_colors=False).format(make_record())

    parts = [part.strip() for part in line.split("|")]
    assert parts[1] == "INFO"
    assert parts[2] == "services.processor"
    assert parts[3] == "Processing output"
    assert "\033[" not in line


def test_colors_highlight_fault_codes_and_uris() -> None:
    """Fault codes and endpoints are colored."""
    record = make_record(msg="Retrying receive request after timeout (fault 2150858793) on http://winhost:5985/wsman")

    line = ColorfulFormatter(use_colors=True).format(record)

    assert "\033[91mfault 2150858793\033[0m" in line
    assert "\033[94mhttp://winhost:5985/wsman\033[0m" in line


def test_configure_logging_installs_single_handler(package_logger: logging.Logger) -> None:
    """Repeated configuration does not stack handlers."""
    settings = Settings(log_level="DEBUG")

    configure_logging(settings)
    configure_logging(settings)

    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, ColorfulFormatter)
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_disables_colors_off_tty(package_logger: logging.Logger) -> None:
    """Colors are off when stderr is not a terminal."""
    configure_logging(Settings(log_colors=True))

    formatter = package_logger.handlers[0].formatter
    assert isinstance(formatter, ColorfulFormatter)
    assert formatter.use_colors is False
