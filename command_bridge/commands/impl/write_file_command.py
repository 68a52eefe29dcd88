import asyncio
import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import Dict, Optional

from command_bridge.commands.interfaces.command import Command
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.interfaces.command_result import CommandResult
from command_bridge.config.constants import FILE_ENCODING
from command_bridge.util.path_guard import resolve_within


def _write_text(path: Path, content: str) -> None:
    """
    Write content so a failed write never damages an existing file.

    The text is encoded before anything on disk is touched. An existing
    target is replaced atomically from a temporary file in the same
    directory, keeping its permission bits. Parent directories are not
    created; a missing directory is a failure.
    """
    data = content.encode(FILE_ENCODING)

    target = Path(os.path.realpath(path))
    if not target.exists():
        with open(target, "wb") as f:
            f.write(data)
        return

    fd, tmp_path = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except BaseException:
        os.unlink(tmp_path)
        raise


class WriteFileCommand(Command):
    """
    Creates or overwrites a text file with the given content.

    Shares the failure policy of ReadFileCommand: every I/O error is
    returned as a failure result, never raised.
    """

    def __init__(self, root: Optional[str] = None) -> None:
        super().__init__()
        self._root = root

    def get_command_name(self) -> str:
        return "write_file"

    def get_parameters(self) -> Dict[str, type]:
        return {"path": str, "content": str}

    async def execute(self, context: CommandContext) -> CommandResult:
        start_time = time.time()
        path = context.arguments["path"]
        content = context.arguments["content"]

        try:
            target = resolve_within(path, self._root)
            await asyncio.to_thread(_write_text, target, content)
        except (OSError, ValueError) as e:
            execution_time = (time.time() - start_time) * 1000
            self.logger.warning(f"Failed to write file '{path}': {e}")

            return CommandResult.failure(
                invocation_id=context.invocation_id,
                command_name=self.get_command_name(),
                error_message=f"Failed to write file '{path}': {e}",
                error_details={"error_type": type(e).__name__, "path": path},
                execution_time_ms=execution_time,
            )

        execution_time = (time.time() - start_time) * 1000
        self.logger.debug(f"Wrote {len(content)} characters to '{path}'")

        return CommandResult.success(
            invocation_id=context.invocation_id,
            command_name=self.get_command_name(),
            data=None,
            execution_time_ms=execution_time,
        )
