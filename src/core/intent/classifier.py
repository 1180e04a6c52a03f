"""Intent classification module.

Maps a free-form need onto one of the intent tags in
:mod:`src.core.intent.registry` by whole-word keyword matching.  Pattern
sets are tried in registration order and the first one that matches
anywhere in the text wins; when none matches the need is ``generic``.
Classification never fails: empty, whitespace-only or nonsense input simply
resolves to ``generic``.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.intent.registry import (
    FALLBACK_BUILDER,
    INTENT_SPECS,
    IntentSpec,
    PromptBuilder,
)
from src.core.models import GeneratedPrompt, Intent
from src.utils.logging import get_logger
from src.utils.text_utils import normalize

logger = get_logger("intent.classifier")


@dataclass
class IntentMatch:
    """The outcome of classifying a need.

    Attributes:
        intent: The winning tag (an :class:`Intent` for built-in intents).
        matched: The keyword that decided the match, empty for ``generic``.
    """

    intent: Intent | str
    matched: str = ""

    @property
    def tag(self) -> str:
        return self.intent.value if isinstance(self.intent, Intent) else str(self.intent)


class IntentClassifier:
    """Ordered keyword classifier.

    Parameters
    ----------
    specs:
        Intent specs in priority order.  Defaults to the built-in registry.
    """

    def __init__(self, specs: tuple[IntentSpec, ...] | list[IntentSpec] | None = None):
        self._specs: list[IntentSpec] = list(INTENT_SPECS if specs is None else specs)

    @property
    def specs(self) -> tuple[IntentSpec, ...]:
        return tuple(self._specs)

    def register(
        self,
        intent: Intent | str,
        phrases: tuple[str, ...] | list[str],
        builder: PromptBuilder = FALLBACK_BUILDER,
    ) -> IntentSpec:
        """Append a new intent after the existing ones, ahead of ``generic``.

        Intents registered without a builder render with the generic
        template.
        """
        spec = IntentSpec(intent, tuple(phrases), builder)
        self._specs.append(spec)
        logger.debug("intent_registered", intent=spec.tag, phrases=len(spec.phrases))
        return spec

    def explain(self, need: str | None) -> IntentMatch:
        """Classify *need* and report which keyword decided it."""
        text = normalize(need)
        if not text:
            return IntentMatch(intent=Intent.GENERIC)

        for spec in self._specs:
            found = spec.pattern.search(text)
            if found is not None:
                return IntentMatch(intent=spec.intent, matched=found.group(0))

        return IntentMatch(intent=Intent.GENERIC)

    def classify(self, need: str | None) -> Intent | str:
        """Return the intent tag for *need*."""
        return self.explain(need).intent

    def render(
        self,
        intent: Intent | str,
        need: str,
        tone: str,
        length: str,
        format: str,
    ) -> GeneratedPrompt:
        """Render *intent* with the builder registered alongside its patterns."""
        tag = intent.value if isinstance(intent, Intent) else str(intent)
        for spec in self._specs:
            if spec.tag == tag:
                return spec.builder(need, tone, length, format)
        return FALLBACK_BUILDER(need, tone, length, format)


_default_classifier = IntentClassifier()


def detect_intent(need: str | None) -> Intent | str:
    """Classify *need* with the built-in intents."""
    return _default_classifier.classify(need)
