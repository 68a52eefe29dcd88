from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class CommandStatus(str, Enum):
    """Outcome of a command invocation"""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class CommandResult:
    """
    Tagged result of a command invocation.

    A result is either SUCCESS carrying ``data`` or FAILURE carrying a
    human-readable ``error_message``. Failures returned here are handler
    failures; dispatch errors (unknown command, bad arguments) are raised
    as exceptions instead and never produce a CommandResult.
    """

    invocation_id: str
    command_name: str
    status: CommandStatus
    execution_time_ms: float = 0.0
    data: Any = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        invocation_id: str,
        command_name: str,
        data: Any = None,
        execution_time_ms: float = 0.0,
    ) -> "CommandResult":
        return cls(
            invocation_id=invocation_id,
            command_name=command_name,
            status=CommandStatus.SUCCESS,
            execution_time_ms=execution_time_ms,
            data=data,
        )

    @classmethod
    def failure(
        cls,
        invocation_id: str,
        command_name: str,
        error_message: str,
        error_details: Optional[Dict[str, Any]] = None,
        execution_time_ms: float = 0.0,
    ) -> "CommandResult":
        if not error_message:
            raise ValueError("error_message is required for a failure result")
        return cls(
            invocation_id=invocation_id,
            command_name=command_name,
            status=CommandStatus.FAILURE,
            execution_time_ms=execution_time_ms,
            error_message=error_message,
            error_details=error_details,
        )

    def is_success(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    def is_failure(self) -> bool:
        return self.status == CommandStatus.FAILURE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the result for the boundary"""
        return {
            "invocation_id": self.invocation_id,
            "command_name": self.command_name,
            "status": self.status.value,
            "data": self.data,
            "error": self.error_message,
            "execution_time_ms": self.execution_time_ms,
        }
