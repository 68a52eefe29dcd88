import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, Mapping, Sequence, Union

from .command_context import CommandContext
from .command_result import CommandResult
from .errors import InvalidCommandArgumentsError


class Command(ABC):
    """
    Base interface for all commands exposed across the boundary.

    Commands encapsulate one named operation each. The executor looks them
    up by name, binds the caller's arguments against the declared
    parameters and runs them.

    All commands must implement:
    - execute(): The handler itself, either a plain method or a coroutine
    - get_command_name(): Unique identifier for the command

    A command whose ``execute`` is a coroutine is suspendable: the executor
    awaits it, so other invocations keep being served while it waits on
    I/O. A plain ``execute`` runs to completion inline.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def execute(
        self, context: CommandContext
    ) -> Union[CommandResult, Awaitable[CommandResult]]:
        """
        Execute the command with the given context.

        Args:
            context: CommandContext holding the bound arguments

        Returns:
            CommandResult with the handler's outcome, or an awaitable of one
            for suspendable commands
        """
        pass

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return unique identifier for this command.

        This is the name the frontend invokes. Lowercase with underscores
        (e.g., 'read_file').
        """
        pass

    def get_parameters(self) -> Dict[str, type]:
        """
        Return the command's parameters in positional order.

        Every declared parameter is required. Override for commands that
        take arguments; the default declares none.
        """
        return {}

    def is_suspendable(self) -> bool:
        """Return whether execution may suspend the calling task"""
        return inspect.iscoroutinefunction(self.execute)

    def bind_arguments(
        self, arguments: Union[Mapping[str, Any], Sequence[Any], None]
    ) -> Dict[str, Any]:
        """
        Bind raw invocation arguments to the declared parameters.

        Named arguments are matched by key. Positional arguments are matched
        against the parameters in declaration order.

        Args:
            arguments: Mapping of named arguments, sequence of positional
                arguments, or None for no arguments

        Returns:
            Dictionary of parameter name to value

        Raises:
            InvalidCommandArgumentsError: If arguments are missing, unexpected,
                or of the wrong type
        """
        parameters = self.get_parameters()
        name = self.get_command_name()

        if arguments is None:
            bound: Dict[str, Any] = {}
        elif isinstance(arguments, Mapping):
            bound = dict(arguments)
        elif isinstance(arguments, Sequence) and not isinstance(arguments, (str, bytes)):
            if len(arguments) > len(parameters):
                raise InvalidCommandArgumentsError(
                    name,
                    f"expected at most {len(parameters)} positional arguments, "
                    f"got {len(arguments)}",
                )
            bound = dict(zip(parameters, arguments))
        else:
            raise InvalidCommandArgumentsError(
                name, f"arguments must be an object or an array, got {type(arguments).__name__}"
            )

        unexpected = [key for key in bound if key not in parameters]
        if unexpected:
            raise InvalidCommandArgumentsError(
                name, f"unexpected arguments: {sorted(unexpected)}"
            )

        missing = [key for key in parameters if key not in bound]
        if missing:
            raise InvalidCommandArgumentsError(
                name, f"missing required arguments: {missing}"
            )

        for key, expected_type in parameters.items():
            if not isinstance(bound[key], expected_type):
                raise InvalidCommandArgumentsError(
                    name,
                    f"argument '{key}' must be of type {expected_type.__name__}, "
                    f"got {type(bound[key]).__name__}",
                )

        return bound

    def pre_execute_hook(self, context: CommandContext) -> None:
        """Hook called before command execution"""
        self.logger.debug(
            f"Executing command '{self.get_command_name()}' "
            f"for invocation {context.invocation_id}"
        )

    def post_execute_hook(self, context: CommandContext, result: CommandResult) -> None:
        """Hook called after command execution"""
        status_msg = "successfully" if result.is_success() else "with errors"
        self.logger.debug(
            f"Command '{self.get_command_name()}' completed {status_msg} "
            f"for invocation {context.invocation_id} in {result.execution_time_ms:.2f}ms"
        )

    def __str__(self) -> str:
        """String representation of the command"""
        return f"{self.__class__.__name__}(name='{self.get_command_name()}')"

    def __repr__(self) -> str:
        """Detailed string representation of the command"""
        return (
            f"{self.__class__.__name__}("
            f"name='{self.get_command_name()}', "
            f"parameters={list(self.get_parameters())}, "
            f"suspendable={self.is_suspendable()}"
            f")"
        )
