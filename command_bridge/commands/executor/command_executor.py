import inspect
import time
from typing import Any, Dict, Mapping, Optional, Sequence, Union
import logging
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.interfaces.command_result import CommandResult
from command_bridge.commands.interfaces.errors import CommandDispatchError
from command_bridge.commands.registry.command_registry import CommandRegistry


logger = logging.getLogger(__name__)

Arguments = Union[Mapping[str, Any], Sequence[Any], None]


class CommandExecutor:
    """
    Dispatches invocations from the boundary to registered commands.

    The executor is the single entry point the boundary layer uses. It
    resolves the command, binds the arguments, and runs the handler:
    plain handlers run inline, coroutine handlers are awaited so the
    event loop can interleave other invocations while they wait on I/O.

    Dispatch errors (unknown command, bad arguments) are raised as
    CommandDispatchError subclasses. Anything that goes wrong inside a
    handler comes back as a failure CommandResult. Nothing is retried and
    no timeout is applied.
    """

    def __init__(self, command_registry: CommandRegistry):
        """
        Initialize command executor.

        Args:
            command_registry: Registry to resolve command names against
        """
        logger.info("Initializing CommandExecutor")

        self._command_registry = command_registry

        # Track execution metrics
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._rejected_count = 0
        self._total_execution_time = 0.0

    @property
    def registry(self) -> CommandRegistry:
        return self._command_registry

    async def invoke(
        self,
        command_name: str,
        arguments: Arguments = None,
        invocation_id: Optional[str] = None,
    ) -> CommandResult:
        """
        Invoke a command by name.

        Args:
            command_name: Name of the command to run
            arguments: Named arguments (mapping), positional arguments
                (sequence), or None
            invocation_id: Caller-supplied id; generated when omitted

        Returns:
            CommandResult with the handler's outcome

        Raises:
            UnknownCommandError: When command_name is not registered
            InvalidCommandArgumentsError: When arguments do not bind
        """
        start_time = time.time()

        try:
            command = self._command_registry.get_command(command_name)
            bound_arguments = command.bind_arguments(arguments)
        except CommandDispatchError as e:
            self._rejected_count += 1
            logger.error(f"Rejected invocation of '{command_name}': {e}")
            raise

        extra: Dict[str, Any] = {"invocation_id": invocation_id} if invocation_id else {}
        context = CommandContext(
            command_name=command_name, arguments=bound_arguments, **extra
        )

        self._execution_count += 1
        logger.info(
            f"Starting execution of command '{command_name}' "
            f"for invocation {context.invocation_id}"
        )

        command.pre_execute_hook(context)

        try:
            outcome = command.execute(context)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            result = outcome
        except Exception as e:
            logger.error(
                f"Command '{command_name}' raised exception "
                f"for invocation {context.invocation_id}: {str(e)}",
                exc_info=True,
            )
            result = CommandResult.failure(
                invocation_id=context.invocation_id,
                command_name=command_name,
                error_message=str(e) or type(e).__name__,
                error_details={"exception_type": type(e).__name__},
            )

        execution_time = (time.time() - start_time) * 1000
        if result.execution_time_ms == 0:
            result.execution_time_ms = execution_time
        self._total_execution_time += execution_time

        command.post_execute_hook(context, result)

        if result.is_success():
            self._success_count += 1
            logger.info(
                f"Command '{command_name}' completed successfully "
                f"for invocation {context.invocation_id} in {execution_time:.2f}ms"
            )
        else:
            self._failure_count += 1
            logger.warning(
                f"Command '{command_name}' failed for invocation "
                f"{context.invocation_id} in {execution_time:.2f}ms: "
                f"{result.error_message}"
            )

        return result

    def get_execution_metrics(self) -> Dict[str, Any]:
        """
        Get execution metrics for monitoring and debugging.

        Returns:
            Dictionary containing execution statistics
        """
        avg_execution_time = (
            self._total_execution_time / self._execution_count
            if self._execution_count > 0
            else 0
        )

        return {
            "total_executions": self._execution_count,
            "successful_executions": self._success_count,
            "failed_executions": self._failure_count,
            "rejected_invocations": self._rejected_count,
            "average_execution_time_ms": round(avg_execution_time, 2),
            "total_execution_time_ms": round(self._total_execution_time, 2),
        }

    def reset_metrics(self) -> None:
        """Reset execution metrics (useful for testing)"""
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._rejected_count = 0
        self._total_execution_time = 0.0
        logger.info("Execution metrics reset")
