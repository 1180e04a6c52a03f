"""Prompt generation endpoints -- from a free-form need or from the library."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.v1.schemas.common import ErrorResponse
from src.api.v1.schemas.generate import (
    GenerateResponse,
    LibraryGenerateRequest,
    NeedGenerateRequest,
)
from src.config import settings
from src.core.generator import PromptGenerator
from src.core.models import GenerationOutcome, GenerationRequest
from src.dependencies import get_generator
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _to_response(outcome: GenerationOutcome) -> GenerateResponse:
    return GenerateResponse(
        status=outcome.status.value,
        intent=outcome.intent,
        title=outcome.prompt.title,
        text=outcome.prompt.text,
    )


@router.post(
    "/generate/need",
    response_model=GenerateResponse,
    responses={500: {"model": ErrorResponse, "description": "Template rendering failed"}},
    summary="Generate a prompt from a need",
    description=(
        "Detect the intent of the need and fill the matching template with "
        "the need and the tone/length/format selectors.  An empty need "
        "returns status 'empty_need' with a hint instead of a prompt."
    ),
)
async def generate_from_need(
    request: NeedGenerateRequest,
    generator: PromptGenerator = Depends(get_generator),
) -> GenerateResponse:
    generation = GenerationRequest(
        need=request.need,
        tone=request.tone if request.tone is not None else settings.default_tone,
        length=request.length if request.length is not None else settings.default_length,
        format=request.format if request.format is not None else settings.default_format,
    )
    outcome = generator.generate_from_need(generation)
    logger.info("prompt_generated", source="need", status=outcome.status.value)
    return _to_response(outcome)


@router.post(
    "/generate/library",
    response_model=GenerateResponse,
    summary="Generate a prompt from the library",
    description=(
        "Return the library prompt with the highest token overlap with the "
        "need.  When nothing overlaps the status is 'no_match'."
    ),
)
async def generate_from_library(
    request: LibraryGenerateRequest,
    generator: PromptGenerator = Depends(get_generator),
) -> GenerateResponse:
    outcome = generator.generate_from_library(request.need)
    logger.info("prompt_generated", source="library", status=outcome.status.value)
    return _to_response(outcome)
