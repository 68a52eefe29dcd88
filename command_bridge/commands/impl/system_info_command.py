import platform
import time

import command_bridge
from command_bridge.commands.interfaces.command import Command
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.interfaces.command_result import CommandResult
from command_bridge.config.constants import UNKNOWN_IDENTIFIER
from command_bridge.models.system_info import SystemInfo


def get_system_info() -> SystemInfo:
    """
    Take a fresh snapshot of the host platform.

    ``platform.system()`` and ``platform.machine()`` may return an empty
    string when the value cannot be determined; those are reported as
    "unknown".
    """
    return SystemInfo(
        platform=platform.system().lower() or UNKNOWN_IDENTIFIER,
        architecture=platform.machine().lower() or UNKNOWN_IDENTIFIER,
        version=command_bridge.__version__,
    )


class SystemInfoCommand(Command):
    """Reports the operating system, CPU architecture and app version."""

    def get_command_name(self) -> str:
        return "get_system_info"

    def execute(self, context: CommandContext) -> CommandResult:
        start_time = time.time()
        info = get_system_info()

        return CommandResult.success(
            invocation_id=context.invocation_id,
            command_name=self.get_command_name(),
            data=info,
            execution_time_ms=(time.time() - start_time) * 1000,
        )
