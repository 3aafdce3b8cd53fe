from __future__ import annotations

import logging
import subprocess

from simple_command.types import CommandResult

logger = logging.getLogger(__name__)


def split_command(command_line: str) -> list[str]:
    """Split on whitespace only; quotes and escapes are passed through as-is."""
    if not isinstance(command_line, str):
        raise TypeError(
            f"command_line must be str, not {type(command_line).__name__}"
        )
    return command_line.split()


def run_command(command_line: str) -> CommandResult:
    """
    Run `command_line` to completion and describe how it went.

    stdout and stderr share one pipe, so the captured output keeps the order the
    child wrote it in. Failures are reported through `CommandResult.status`, never
    raised.
    """
    words = split_command(command_line)
    if not words:
        return CommandResult(command=command_line, status="empty_command")

    logger.debug("Running: %s", words)
    try:
        proc = subprocess.run(
            words,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except (OSError, ValueError) as e:
        # ValueError: a token contains a NUL byte.
        logger.debug("Failed to start %s: %s", words[0], e)
        return CommandResult(
            command=command_line,
            status="spawn_failure",
            error=str(e),
        )

    output = proc.stdout or b""
    logger.debug(
        "Finished: %s (returncode=%d, %d bytes of output)",
        words[0],
        proc.returncode,
        len(output),
    )
    if proc.returncode == 0:
        return CommandResult(
            command=command_line, status="ok", returncode=0, output=output
        )
    if proc.returncode < 0:
        # POSIX: a negative return code means the child was killed by that signal.
        return CommandResult(
            command=command_line,
            status="abnormal_termination",
            signal=-proc.returncode,
            output=output,
        )
    return CommandResult(
        command=command_line,
        status="non_zero_exit",
        returncode=proc.returncode,
        output=output,
    )


def simple_command(command_line: str) -> None:
    """
    Run a command, staying silent on success and aborting the process otherwise.

    Meant for build scripts, where nothing is around to catch a recoverable error.
    The exit message carries the combined stdout/stderr of the failed command.
    """
    result = run_command(command_line)
    if not result.ok:
        raise SystemExit(result.describe())
