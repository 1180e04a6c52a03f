"""Request/response schemas for the library endpoints."""

from pydantic import BaseModel, Field


class LibraryInfoResponse(BaseModel):
    """Summary of the loaded library."""

    source: str
    total: int
    titles: list[str]


class LibrarySearchRequest(BaseModel):
    need: str = Field(default="", max_length=10000)
    limit: int | None = Field(default=None, ge=1, le=100, description="Maximum number of hits")


class LibraryHit(BaseModel):
    title: str
    score: int


class LibrarySearchResponse(BaseModel):
    hits: list[LibraryHit]
    total: int
