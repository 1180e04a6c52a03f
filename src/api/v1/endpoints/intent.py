"""Intent detection endpoint -- reports which intent a need maps to."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.v1.schemas.intent import IntentRequest, IntentResponse
from src.core.intent.classifier import IntentClassifier
from src.dependencies import get_classifier

router = APIRouter()


@router.post(
    "/intent",
    response_model=IntentResponse,
    summary="Detect intent",
    description=(
        "Classify a free-form need into one of the supported intents.  Needs "
        "that match no keyword (including empty ones) resolve to 'generic'."
    ),
)
async def detect(
    request: IntentRequest,
    classifier: IntentClassifier = Depends(get_classifier),
) -> IntentResponse:
    match = classifier.explain(request.need)
    return IntentResponse(intent=match.tag, matched=match.matched)
