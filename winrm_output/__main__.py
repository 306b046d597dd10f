"""Entry point: stream the output of an already started remote command.

Usage:
    python -m winrm_output SHELL_ID COMMAND_ID
"""

import argparse
import logging
import sys

from winrm_output.config import Settings
from winrm_output.dependencies import Dependencies
from winrm_output.errors import WinRMError
from winrm_output.utils.console import configure_logging

logger = logging.getLogger(__name__)


def _write_chunk(stdout: str | None, stderr: str | None) -> None:
    if stdout:
        sys.stdout.write(stdout)
        sys.stdout.flush()
    if stderr:
        sys.stderr.write(stderr)
        sys.stderr.flush()


def main(argv: list[str] | None = None) -> int:
    """Poll until the command output round completes.

    Returns:
        Remote exit code, or 1 if retrieval failed or the code is outside 0..255
    """
    parser = argparse.ArgumentParser(prog="winrm_output", description=__doc__.splitlines()[0])
    parser.add_argument("shell_id")
    parser.add_argument("command_id")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(settings)
    logger.info("Receiving output from %s", settings.endpoint)

    deps = Dependencies.from_settings(settings)
    try:
        output = deps.processor.command_output(args.shell_id, args.command_id, _write_chunk)
    except WinRMError as e:
        logger.error("Output retrieval failed: %s", e)
        return 1
    finally:
        deps.close()

    logger.info("Command %s exited with %d", args.command_id, output.exitcode)
    # The OS keeps only the low 8 bits, so 256 would otherwise read as success
    if not 0 <= output.exitcode <= 255:
        logger.warning("Exit code %d does not fit a process status, exiting with 1", output.exitcode)
        return 1
    return output.exitcode


if __name__ == "__main__":
    sys.exit(main())
