"""Request/response schemas for the prompt generation endpoints."""

from pydantic import BaseModel, Field


class NeedGenerateRequest(BaseModel):
    """Request body for generating a prompt from a free-form need.

    Omitted selectors fall back to the configured defaults.  Any string is
    accepted and echoed into the prompt as-is.
    """

    need: str = Field(default="", max_length=10000, description="Free-form description of the need")
    tone: str | None = Field(default=None, description="e.g. professional, friendly, direct")
    length: str | None = Field(default=None, description="e.g. short, medium, detailed")
    format: str | None = Field(default=None, description="e.g. email, slack, doc")


class LibraryGenerateRequest(BaseModel):
    """Request body for retrieving the closest library prompt."""

    need: str = Field(default="", max_length=10000, description="Free-form description of the need")


class GenerateResponse(BaseModel):
    """Result of a generate action.

    * ``status="generated"`` -- *title* and *text* hold the prompt.
    * ``status="empty_need"`` / ``"no_match"`` -- *title* and *text* hold an
      informational message for the user.
    """

    status: str
    intent: str | None = None
    title: str
    text: str
