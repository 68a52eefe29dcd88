from typing import Any, Optional
from pydantic import BaseModel, Field


class InvokeRequest(BaseModel):
    # Shape is checked when binding to the command's parameters
    arguments: Any = Field(
        default=None,
        description="Named arguments as an object, or positional arguments as an array",
    )
    invocation_id: Optional[str] = Field(
        default=None, description="Caller-supplied id echoed back in the response"
    )
