"""Run external commands and collect their output line by line."""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from pathdisplay.config import get_settings
from pathdisplay.core.text_utils import split_lines
from pathdisplay.log import notify

logger = logging.getLogger(__name__)


@dataclass
class CommandOutput:
    """Captured result of an OS command."""

    stdout: list[str] = field(default_factory=list)
    returncode: int = -1
    stderr: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _lines(output: str) -> list[str]:
    if not output:
        return []
    lines = split_lines(output)
    # Output normally ends with a newline
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def get_os_command_output(
    cmd: list[str], cwd: str | Path | None = None, timeout: int | None = None
) -> CommandOutput:
    """Run a command synchronously.

    Args:
        cmd: Executable followed by its arguments
        cwd: Working directory for the command
        timeout: Seconds before giving up, defaults to the configured timeout

    Returns:
        Output lines and return code; an empty output with return code -1
        if the command could not be run
    """
    if not isinstance(cmd, list) or not cmd or not all(isinstance(arg, str) for arg in cmd):
        notify("get_os_command_output", "cmd has to be a non-empty list of strings", level="ERROR")
        return CommandOutput()

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout if timeout is not None else get_settings().COMMAND_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning(f"Command failed: {e}")
        return CommandOutput()

    return CommandOutput(
        stdout=_lines(result.stdout),
        returncode=result.returncode,
        stderr=_lines(result.stderr),
    )


def git_command(
    args: list[str], gitdir: str | None = None, toplevel: str | None = None
) -> list[str]:
    """Build a git invocation, optionally pinned to a git dir and work tree."""
    command = ["git"]
    if gitdir:
        command.extend(["--git-dir", gitdir])
    if toplevel:
        command.extend(["--work-tree", toplevel])
    return [*command, *args]
