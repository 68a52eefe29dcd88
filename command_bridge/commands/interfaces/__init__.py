"""
Command pattern interfaces for the command bridge.
"""

from .command import Command
from .command_context import CommandContext
from .command_result import CommandResult, CommandStatus
from .errors import (
    CommandDispatchError,
    InvalidCommandArgumentsError,
    UnknownCommandError,
)

__all__ = [
    "Command",
    "CommandContext",
    "CommandResult",
    "CommandStatus",
    "CommandDispatchError",
    "InvalidCommandArgumentsError",
    "UnknownCommandError",
]
