from enum import Enum

from pydantic import BaseModel, Field


class BackendType(str, Enum):
    """External answer sources a message can be routed to."""

    WEATHER = "weather"
    ENCYCLOPEDIA = "encyclopedia"
    GENERATIVE_CHAT = "generative_chat"


class BackendStatus(BaseModel):
    """Error bookkeeping for a single backend."""

    has_recent_error: bool = Field(default=False, description="Backend failed recently")
    last_error_time: float = Field(default=0.0, description="Clock reading of the last failure")
    error_count: int = Field(default=0, ge=0, description="Failures since the last reset")
