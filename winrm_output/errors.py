"""Exceptions raised while talking to a WinRM endpoint."""


class WinRMError(Exception):
    """Base class for all winrm_output errors."""


class WSManFault(WinRMError):
    """A WS-Management fault returned by the remote host."""

    def __init__(self, fault_code: str, fault_description: str = ""):
        """Initialize WS-Man fault.

        Args:
            fault_code: Numeric WSManFault Code attribute, as text
            fault_description: Human readable fault message
        """
        self.fault_code = str(fault_code)
        self.fault_description = fault_description
        super().__init__(f"[WSMAN ERROR CODE: {self.fault_code}]: {fault_description}")


class WinRMHTTPTransportError(WinRMError):
    """HTTP exchange failed without a WS-Man fault.

    ``status_code`` is None when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None, response_body: str = ""):
        self.status_code = status_code
        self.response_body = response_body
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} (status {status_code})")


class ReceiveTimeoutError(WinRMError):
    """Receive deadline elapsed while the host kept reporting no output."""

    def __init__(self, command_id: str | None, deadline: float):
        self.command_id = command_id
        self.deadline = deadline
        super().__init__(
            f"No output for command {command_id or '<unknown>'} "
            f"within receive deadline of {deadline:g}s"
        )
