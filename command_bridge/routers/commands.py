import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.encoders import jsonable_encoder

from command_bridge.commands.executor.command_executor import CommandExecutor
from command_bridge.commands.interfaces.errors import (
    InvalidCommandArgumentsError,
    UnknownCommandError,
)
from command_bridge.models.requests import InvokeRequest
from command_bridge.models.responses import CommandListResponse, CommandResponse

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(
    prefix="/commands",
    tags=["Commands"],
    responses={404: {"description": "Unknown command"}},
)


# Dependency functions
def get_command_executor(request: Request) -> CommandExecutor:
    """Get the executor attached by the application lifespan"""
    executor = getattr(request.app.state, "executor", None)
    if executor is None:
        raise HTTPException(
            status_code=503, detail="Command bridge is not initialized"
        )
    return executor


@router.get("/", response_model=CommandListResponse)
async def list_commands(
    executor: CommandExecutor = Depends(get_command_executor),
) -> CommandListResponse:
    return CommandListResponse(commands=executor.registry.get_available_commands())


@router.post(
    "/{command_name}",
    response_model=CommandResponse,
    responses={400: {"description": "Invalid command arguments"}},
)
async def invoke_command(
    command_name: str,
    body: Optional[InvokeRequest] = None,
    executor: CommandExecutor = Depends(get_command_executor),
) -> CommandResponse:
    """
    Invoke a registered command.

    Handler failures are returned with status "failure" and an error
    message. Unknown commands and arguments that do not match the command's
    parameters are rejected with 404 and 400 respectively.
    """
    arguments = body.arguments if body else None
    invocation_id = body.invocation_id if body else None

    try:
        result = await executor.invoke(
            command_name, arguments, invocation_id=invocation_id
        )
    except UnknownCommandError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidCommandArgumentsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CommandResponse(
        invocation_id=result.invocation_id,
        command_name=result.command_name,
        status=result.status,
        data=jsonable_encoder(result.data),
        error=result.error_message,
        execution_time_ms=result.execution_time_ms,
    )
