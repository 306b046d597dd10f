"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from winrm_output.models import ConnectionOptions

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Endpoint
    endpoint: str = field(default="http://localhost:5985/wsman")
    locale: str = field(default="en-US")
    max_envelope_size: int = field(default=153_600)

    # Timeouts (seconds)
    operation_timeout: int = field(default=20)
    receive_timeout: float = field(default=30.0)
    receive_deadline: float | None = field(default=None)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    def __post_init__(self) -> None:
        """Keep the HTTP read timeout above the WS-Man OperationTimeout."""
        if self.receive_timeout <= self.operation_timeout:
            adjusted = float(self.operation_timeout + 10)
            logger.warning(
                "receive_timeout (%gs) must exceed operation_timeout (%ds), using %gs",
                self.receive_timeout,
                self.operation_timeout,
                adjusted,
            )
            self.receive_timeout = adjusted

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from WINRM_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            endpoint=os.getenv("WINRM_ENDPOINT", "http://localhost:5985/wsman"),
            locale=os.getenv("WINRM_LOCALE", "en-US"),
            max_envelope_size=cls._get_int("WINRM_MAX_ENVELOPE_SIZE", 153_600),
            operation_timeout=cls._get_int("WINRM_OPERATION_TIMEOUT", 20),
            receive_timeout=cls._get_float("WINRM_RECEIVE_TIMEOUT", 30.0),
            receive_deadline=cls._get_optional_float("WINRM_RECEIVE_DEADLINE"),
            log_level=os.getenv("WINRM_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("WINRM_LOG_COLORS", True),
        )

    def connection_options(self) -> ConnectionOptions:
        """Header values for messages sent to this endpoint."""
        return ConnectionOptions(
            endpoint=self.endpoint,
            operation_timeout=self.operation_timeout,
            max_envelope_size=self.max_envelope_size,
            locale=self.locale,
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get a positive integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default
        if parsed <= 0:
            logger.warning("%s must be > 0, got %d. Using default: %d", key, parsed, default)
            return default
        return parsed

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get a positive float from environment."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %g", key, value, default)
            return default
        if parsed <= 0:
            logger.warning("%s must be > 0, got %g. Using default: %g", key, parsed, default)
            return default
        return parsed

    @staticmethod
    def _get_optional_float(key: str) -> float | None:
        """Get a positive float, or None when unset, empty or invalid."""
        value = os.getenv(key, "").strip()
        if not value:
            return None

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, ignoring", key, value)
            return None
        if parsed <= 0:
            logger.warning("%s must be > 0, got %g, ignoring", key, parsed)
            return None
        return parsed

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
