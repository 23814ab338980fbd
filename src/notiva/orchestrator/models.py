from pydantic import BaseModel, ConfigDict, Field

from ..routing import QueryClassification


class BackendResponse(BaseModel):
    """Reply produced for one message."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="User-facing reply")
    succeeded: bool = Field(description="False when the reply is a fallback/apology")
    classification: QueryClassification | None = Field(
        default=None,
        description="Routing decision that produced this reply (set by answer())"
    )
