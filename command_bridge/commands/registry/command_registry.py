import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from command_bridge.commands.impl.greet_command import GreetCommand
from command_bridge.commands.impl.read_file_command import ReadFileCommand
from command_bridge.commands.impl.system_info_command import SystemInfoCommand
from command_bridge.commands.impl.write_file_command import WriteFileCommand
from command_bridge.commands.interfaces.command import Command
from command_bridge.commands.interfaces.errors import UnknownCommandError


logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Immutable table of the commands reachable from the boundary.

    The registry is built once from a fixed list of handlers and cannot be
    changed afterwards: there is no API to add or remove commands, and the
    underlying mapping is exposed read-only.

    Usage:
        registry = CommandRegistry()
        command = registry.get_command("greet")
    """

    def __init__(self, fs_root: Optional[str] = None):
        """
        Build the registry.

        Args:
            fs_root: Optional sandbox root handed to the file commands

        Raises:
            ValueError: If two handlers declare the same command name
        """
        logger.info("Initializing CommandRegistry")

        commands: Dict[str, Command] = {}
        for command in self._build_commands(fs_root):
            self._register_command(commands, command)

        self._commands: Mapping[str, Command] = MappingProxyType(commands)

        logger.info(
            f"Registered {len(self._commands)} commands: "
            f"{self.get_available_commands()}"
        )

    @staticmethod
    def _build_commands(fs_root: Optional[str]) -> List[Command]:
        return [
            GreetCommand(),
            SystemInfoCommand(),
            ReadFileCommand(root=fs_root),
            WriteFileCommand(root=fs_root),
        ]

    @staticmethod
    def _register_command(commands: Dict[str, Command], command: Command) -> None:
        command_name = command.get_command_name()

        if command_name in commands:
            raise ValueError(f"Command '{command_name}' already registered")

        commands[command_name] = command
        logger.debug(f"Registered command: {command_name}")

    @property
    def commands(self) -> Mapping[str, Command]:
        """Read-only view of the name to command table"""
        return self._commands

    def get_command(self, command_name: str) -> Command:
        """
        Look up the handler for a command name.

        Raises:
            UnknownCommandError: If command_name is not registered
        """
        command = self._commands.get(command_name)
        if command is None:
            raise UnknownCommandError(command_name, self.get_available_commands())
        return command

    def get_available_commands(self) -> List[str]:
        """Sorted list of registered command names"""
        return sorted(self._commands)

    def get_command_info(self, command_name: str) -> Dict[str, Any]:
        """
        Describe a registered command.

        Raises:
            UnknownCommandError: If command_name is not registered
        """
        command = self.get_command(command_name)
        return {
            "name": command_name,
            "class": command.__class__.__name__,
            "parameters": list(command.get_parameters()),
            "suspendable": command.is_suspendable(),
        }

    def __contains__(self, command_name: object) -> bool:
        return command_name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
