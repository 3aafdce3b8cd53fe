from __future__ import annotations

import signal as _signal
from dataclasses import dataclass
from typing import Literal

CommandStatus = Literal[
    "ok",
    "empty_command",
    "spawn_failure",
    "non_zero_exit",
    "abnormal_termination",
]


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of running one command line.

    Notes:
    - `returncode` is only set when the child exited on its own.
    - `signal` is only set for `abnormal_termination` (POSIX).
    - `output` holds stdout and stderr interleaved in a single stream.
    """

    command: str
    status: CommandStatus
    returncode: int | None = None
    signal: int | None = None
    output: bytes = b""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def text(self) -> str:
        return self.output.decode("utf-8", errors="replace")

    def describe(self) -> str:
        if self.status == "ok":
            return f'Command "{self.command}" succeeded'
        if self.status == "empty_command":
            return f"No command specified (got {self.command!r})"
        if self.status == "spawn_failure":
            return f'Command "{self.command}" could not be started: {self.error}'
        if self.status == "non_zero_exit":
            head = f'Command "{self.command}" failed with return value {self.returncode}'
        else:
            head = f'Command "{self.command}" failed with no return value'
            if self.signal is not None:
                head += f" (killed by signal {_signal_name(self.signal)})"
        return head + "\n" + self.text


def _signal_name(signum: int) -> str:
    try:
        return _signal.Signals(signum).name
    except ValueError:
        return str(signum)
