"""Request/response schemas for the intent detection endpoint."""

from pydantic import BaseModel, Field


class IntentRequest(BaseModel):
    """Free-form need to classify."""

    need: str = Field(default="", max_length=10000, description="Free-form description of the need")


class IntentResponse(BaseModel):
    """Detected intent tag and the keyword that selected it (empty for ``generic``)."""

    intent: str
    matched: str = ""
