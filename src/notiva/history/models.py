from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single chat message, from the user or from the bot."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Message content")
    is_from_user: bool = Field(description="True for user input, False for bot replies")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
