"""FastAPI dependency functions for injection into endpoint handlers.

The prompt library is loaded once during the app lifespan and stored on
``app.state``; everything else is cheap and built per call around that
read-only snapshot.
"""

from __future__ import annotations

from fastapi import Request

from src.core.generator import PromptGenerator
from src.core.intent.classifier import IntentClassifier
from src.core.models import PromptLibrary
from src.utils.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Prompt library (loaded during app lifespan)
# ---------------------------------------------------------------------------

def get_library(request: Request) -> PromptLibrary:
    """Return the library snapshot stored on ``app.state``.

    An app that never ran its lifespan gets an empty library, which makes
    every library lookup report "no match".
    """
    library = getattr(request.app.state, "library", None)
    if library is None:
        logger.warning("library_not_initialised")
        return PromptLibrary()
    return library


# ---------------------------------------------------------------------------
# Classifier and generator
# ---------------------------------------------------------------------------

_classifier = IntentClassifier()


def get_classifier() -> IntentClassifier:
    """Return the shared classifier with the built-in intents."""
    return _classifier


def get_generator(request: Request) -> PromptGenerator:
    """Construct a :class:`PromptGenerator` over the current library."""
    return PromptGenerator(library=get_library(request), classifier=get_classifier())
