from pydantic import BaseModel, ConfigDict, Field


class SystemInfo(BaseModel):
    """Snapshot of the host platform, built fresh for every query"""

    model_config = ConfigDict(frozen=True)

    platform: str = Field(..., min_length=1, description="Operating system identifier")
    architecture: str = Field(..., min_length=1, description="CPU architecture identifier")
    version: str = Field(..., min_length=1, description="Application version")
