"""Dependency injection container for winrm_output.

Wires settings, transport and processor explicitly instead of through
module-level singletons.
"""

from dataclasses import dataclass

import httpx

from winrm_output.config import Settings
from winrm_output.services import CommandOutputProcessor, HttpTransport, receive_message_factory


@dataclass
class Dependencies:
    """Container for winrm_output dependencies.

    Example:
        deps = Dependencies.create()
        try:
            result = deps.processor.command_output(shell_id, command_id)
        finally:
            deps.close()
    """

    settings: Settings
    transport: HttpTransport
    processor: CommandOutputProcessor

    @classmethod
    def create(cls, auth: httpx.Auth | None = None) -> "Dependencies":
        """Create dependencies from environment configuration.

        Returns:
            Initialized Dependencies instance
        """
        return cls.from_settings(Settings.from_env(), auth=auth)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        auth: httpx.Auth | None = None,
        client: httpx.Client | None = None,
    ) -> "Dependencies":
        """Create dependencies with custom settings.

        Args:
            settings: Settings instance
            auth: Optional httpx authentication flow
            client: Optional pre-built HTTP client

        Returns:
            Dependencies with transport and processor initialized from settings
        """
        transport = HttpTransport(
            settings.endpoint,
            timeout=settings.receive_timeout,
            auth=auth,
            client=client,
        )
        processor = CommandOutputProcessor(
            transport,
            receive_message_factory(settings.connection_options()),
            receive_deadline=settings.receive_deadline,
        )
        return cls(settings=settings, transport=transport, processor=processor)

    def close(self) -> None:
        """Release the HTTP client."""
        self.transport.close()
