from simple_command.runner import run_command, simple_command, split_command
from simple_command.types import CommandResult, CommandStatus

__all__ = [
    "CommandResult",
    "CommandStatus",
    "run_command",
    "simple_command",
    "split_command",
]
