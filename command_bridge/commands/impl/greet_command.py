import time
from typing import Dict

from command_bridge.commands.interfaces.command import Command
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.interfaces.command_result import CommandResult
from command_bridge.config.constants import GREETING_TEMPLATE


def greet(name: str) -> str:
    return GREETING_TEMPLATE.format(name=name)


class GreetCommand(Command):
    """Returns a greeting for the given name. Total, never fails."""

    def get_command_name(self) -> str:
        return "greet"

    def get_parameters(self) -> Dict[str, type]:
        return {"name": str}

    def execute(self, context: CommandContext) -> CommandResult:
        start_time = time.time()
        message = greet(context.arguments["name"])

        return CommandResult.success(
            invocation_id=context.invocation_id,
            command_name=self.get_command_name(),
            data=message,
            execution_time_ms=(time.time() - start_time) * 1000,
        )
