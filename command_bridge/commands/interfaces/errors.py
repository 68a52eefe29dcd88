from typing import List


class CommandDispatchError(ValueError):
    """Base class for errors raised at the boundary before a handler runs"""


class UnknownCommandError(CommandDispatchError):
    """Raised when an invocation names a command that is not registered"""

    def __init__(self, command_name: str, available_commands: List[str]):
        self.command_name = command_name
        self.available_commands = available_commands
        super().__init__(
            f"Command '{command_name}' not found. "
            f"Available commands: {available_commands}"
        )


class InvalidCommandArgumentsError(CommandDispatchError):
    """Raised when invocation arguments do not match the command's parameters"""

    def __init__(self, command_name: str, reason: str):
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"Invalid arguments for command '{command_name}': {reason}")
