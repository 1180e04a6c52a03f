"""Library introspection and search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.v1.schemas.library import (
    LibraryHit,
    LibraryInfoResponse,
    LibrarySearchRequest,
    LibrarySearchResponse,
)
from src.config import settings
from src.core.library.matcher import rank
from src.core.models import PromptLibrary
from src.dependencies import get_library

router = APIRouter()


@router.get(
    "/library",
    response_model=LibraryInfoResponse,
    summary="Describe the loaded library",
)
async def library_info(
    library: PromptLibrary = Depends(get_library),
) -> LibraryInfoResponse:
    return LibraryInfoResponse(
        source=library.source,
        total=len(library),
        titles=[record.title for record in library],
    )


@router.post(
    "/library/search",
    response_model=LibrarySearchResponse,
    summary="Rank library prompts against a need",
    description="List records that share at least one token with the need, best first.",
)
async def search_library(
    request: LibrarySearchRequest,
    library: PromptLibrary = Depends(get_library),
) -> LibrarySearchResponse:
    limit = request.limit if request.limit is not None else settings.search_limit
    hits = [
        LibraryHit(title=item.record.title, score=item.score)
        for item in rank(request.need, library, limit=limit)
    ]
    return LibrarySearchResponse(hits=hits, total=len(hits))
