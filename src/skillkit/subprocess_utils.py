"""Subprocess execution for git and gh CLI calls.

Every integration call goes through run_command so that command tracing
(enabled with SKILLKIT_DEBUG) and missing-binary handling live in one place.
"""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Result from running a subprocess command.

    Attributes:
        success: True if command exited with code 0, False otherwise
        stdout: Standard output from the command
        stderr: Standard error from the command
    """

    success: bool
    stdout: str
    stderr: str


def configure_debug_logging() -> None:
    """Enable DEBUG logging of executed commands if SKILLKIT_DEBUG is set."""
    if os.environ.get("SKILLKIT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def run_command(cmd: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
    """Run a command without raising on non-zero exit.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution

    Returns:
        CommandResult with success flag and captured output. A missing
        executable is reported as a failed result rather than an exception.
    """
    logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError:
        logger.debug("Command not found: %s", cmd[0])
        return CommandResult(success=False, stdout="", stderr=f"{cmd[0]}: command not found")

    logger.debug("Exit code %d for: %s", result.returncode, " ".join(cmd))
    return CommandResult(
        success=result.returncode == 0,
        stdout=result.stdout,
        stderr=result.stderr,
    )
