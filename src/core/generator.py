"""Prompt generator -- the two user-facing actions.

:class:`PromptGenerator` ties the pipelines together:

* ``generate_from_need`` -- classify the need and render its template.
* ``generate_from_library`` -- find the closest library record and format it.

Both always return a :class:`GenerationOutcome` with a displayable prompt;
an empty need or a missing library match is reported through the outcome
status, never raised.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.core.intent.classifier import IntentClassifier
from src.core.library.formatter import format_prompt
from src.core.library.matcher import best_match
from src.core.models import (
    GeneratedPrompt,
    GenerationOutcome,
    GenerationRequest,
    OutcomeStatus,
    PromptRecord,
)
from src.core.templates.prompts import (
    EMPTY_NEED_TEXT,
    EMPTY_NEED_TITLE,
    NO_MATCH_TEXT,
    NO_MATCH_TITLE,
)
from src.utils.logging import get_logger

logger = get_logger("generator")


class PromptGenerator:
    """Entry point for both generation actions.

    Parameters
    ----------
    library:
        The loaded library snapshot (any iterable of records).
    classifier:
        Optional classifier; the built-in intents are used when ``None``.
    """

    def __init__(
        self,
        library: Iterable[PromptRecord] = (),
        classifier: IntentClassifier | None = None,
    ):
        self.library = library
        self.classifier = classifier or IntentClassifier()

    def generate_from_need(self, request: GenerationRequest) -> GenerationOutcome:
        need = request.need.strip()
        if not need:
            return GenerationOutcome(
                status=OutcomeStatus.EMPTY_NEED,
                prompt=GeneratedPrompt(title=EMPTY_NEED_TITLE, text=EMPTY_NEED_TEXT),
            )

        match = self.classifier.explain(need)
        logger.info("intent_detected", intent=match.tag, matched=match.matched)

        prompt = self.classifier.render(
            match.intent, need, request.tone, request.length, request.format,
        )
        return GenerationOutcome(
            status=OutcomeStatus.GENERATED,
            intent=match.tag,
            prompt=prompt,
        )

    def generate_from_library(self, need: str) -> GenerationOutcome:
        record = best_match(need.strip(), self.library)
        if record is None:
            logger.info("library_match_missing")
            return GenerationOutcome(
                status=OutcomeStatus.NO_MATCH,
                prompt=GeneratedPrompt(title=NO_MATCH_TITLE, text=NO_MATCH_TEXT),
            )

        logger.info("library_match_selected", title=record.title)
        return GenerationOutcome(
            status=OutcomeStatus.GENERATED,
            prompt=format_prompt(record),
        )
