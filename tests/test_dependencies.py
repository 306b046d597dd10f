"""Tests for the dependency container."""

import httpx
import pytest

from winrm_output.config import Settings
from winrm_output.dependencies import Dependencies
from winrm_output.models import StreamType
from winrm_output.services import CommandOutputProcessor, HttpTransport


def test_from_settings_wires_components() -> None:
    """Transport and processor are built from settings."""
    settings = Settings(endpoint="http://winhost:5985/wsman", receive_deadline=120)

    deps = Dependencies.from_settings(settings)
    try:
        assert isinstance(deps.transport, HttpTransport)
        assert isinstance(deps.processor, CommandOutputProcessor)
        assert deps.transport.endpoint == "http://winhost:5985/wsman"
        assert deps.processor.transport is deps.transport
        assert deps.processor.receive_deadline == 120
    finally:
        deps.close()


def test_create_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """create() uses WINRM_* environment variables."""
    monkeypatch.setenv("WINRM_ENDPOINT", "https://envhost:5986/wsman")

    deps = Dependencies.create()
    try:
        assert deps.settings.endpoint == "https://envhost:5986/wsman"
        assert deps.transport.endpoint == "https://envhost:5986/wsman"
    finally:
        deps.close()


def test_end_to_end_over_mock_http(receive_response_xml) -> None:
    """Processor retrieves output through the real transport and message."""
    bodies: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content)
        return httpx.Response(
            200,
            text=receive_response_xml([("stdout", "SGVsbG8="), ("stderr", "")], exit_code="5", done=True),
        )

    client = httpx.Client(transport=httpx.MockTransport(handler))
    deps = Dependencies.from_settings(Settings(endpoint="http://winhost:5985/wsman"), client=client)
    try:
        output = deps.processor.command_output("SHELL-1", "CMD-1")
    finally:
        deps.close()

    assert output.data == [{StreamType.STDOUT: "Hello"}]
    assert output.exitcode == 5
    assert len(bodies) == 1
    assert b"SHELL-1" in bodies[0]
    assert b'CommandId="CMD-1"' in bodies[0]
