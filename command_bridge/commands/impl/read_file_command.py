import asyncio
import time
from pathlib import Path
from typing import Dict, Optional

from command_bridge.commands.interfaces.command import Command
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.interfaces.command_result import CommandResult
from command_bridge.config.constants import FILE_ENCODING
from command_bridge.util.path_guard import resolve_within


def _read_text(path: Path) -> str:
    # newline="" keeps line endings exactly as stored
    with open(path, "r", encoding=FILE_ENCODING, newline="") as f:
        return f.read()


class ReadFileCommand(Command):
    """
    Reads the full contents of a text file.

    The read runs in a worker thread so the event loop can keep serving
    other invocations. Missing files, permission problems, undecodable
    content and sandbox violations all come back as a failure result
    carrying the underlying error message.
    """

    def __init__(self, root: Optional[str] = None) -> None:
        super().__init__()
        self._root = root

    def get_command_name(self) -> str:
        return "read_file"

    def get_parameters(self) -> Dict[str, type]:
        return {"path": str}

    async def execute(self, context: CommandContext) -> CommandResult:
        start_time = time.time()
        path = context.arguments["path"]

        try:
            target = resolve_within(path, self._root)
            contents = await asyncio.to_thread(_read_text, target)
        except (OSError, ValueError) as e:
            execution_time = (time.time() - start_time) * 1000
            self.logger.warning(f"Failed to read file '{path}': {e}")

            return CommandResult.failure(
                invocation_id=context.invocation_id,
                command_name=self.get_command_name(),
                error_message=f"Failed to read file '{path}': {e}",
                error_details={"error_type": type(e).__name__, "path": path},
                execution_time_ms=execution_time,
            )

        execution_time = (time.time() - start_time) * 1000
        self.logger.debug(f"Read {len(contents)} characters from '{path}'")

        return CommandResult.success(
            invocation_id=context.invocation_id,
            command_name=self.get_command_name(),
            data=contents,
            execution_time_ms=execution_time,
        )
