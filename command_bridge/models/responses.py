from typing import Any, List, Optional
from pydantic import BaseModel, Field

from command_bridge.commands.interfaces.command_result import CommandStatus


class CommandResponse(BaseModel):
    """Response model for a command invocation"""

    invocation_id: str
    command_name: str
    status: CommandStatus = Field(..., description="Outcome of the handler")
    data: Any = Field(default=None, description="Handler result on success")
    error: Optional[str] = Field(
        default=None, description="Diagnostic message on failure"
    )
    execution_time_ms: float


class CommandListResponse(BaseModel):
    commands: List[str] = Field(..., description="Registered command names")


class HealthCheckResponse(BaseModel):
    status: str
    version: str
    commands: int = Field(..., description="Number of registered commands")
