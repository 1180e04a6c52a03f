"""Intent registry: keyword patterns and render functions, side by side.

Each :class:`IntentSpec` ties an intent tag to the phrases that select it
and to the builder that renders its prompt.  The classifier walks
``INTENT_SPECS`` in order (first match wins) and the dispatcher below looks
builders up by tag, so adding an intent means adding one entry here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from src.core.models import GeneratedPrompt, Intent
from src.core.templates.engine import (
    build_generic_prompt,
    build_ooo_prompt,
    build_prd_prompt,
    build_product_req_prompt,
    build_status_update_prompt,
)

PromptBuilder = Callable[[str, str, str, str], GeneratedPrompt]


def compile_patterns(phrases: tuple[str, ...]) -> re.Pattern[str]:
    """Compile *phrases* into one whole-word alternation.

    Phrases are escaped, so they are matched literally.  Word boundaries are
    ASCII-only, so an accented letter next to a keyword does not block it.
    An empty tuple yields a pattern that never matches.
    """
    if not phrases:
        return re.compile(r"(?!)")
    alternation = "|".join(re.escape(p) for p in phrases)
    return re.compile(rf"\b(?:{alternation})\b", re.ASCII)


@dataclass(frozen=True)
class IntentSpec:
    """An intent tag, the phrases that select it, and its prompt builder."""

    intent: Intent | str
    phrases: tuple[str, ...]
    builder: PromptBuilder
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", compile_patterns(self.phrases))

    @property
    def tag(self) -> str:
        return self.intent.value if isinstance(self.intent, Intent) else str(self.intent)


# Registration order is priority order.
INTENT_SPECS: tuple[IntentSpec, ...] = (
    IntentSpec(
        Intent.OOO,
        ("ooo", "out of office", "out-of-office", "vacation", "leave", "out of the office"),
        build_ooo_prompt,
    ),
    IntentSpec(
        Intent.STATUS_UPDATE,
        ("stakeholder", "update", "status", "weekly update", "progress report"),
        build_status_update_prompt,
    ),
    IntentSpec(
        Intent.PRODUCT_REQ,
        ("user story", "acceptance criteria", "ac", "feature request"),
        build_product_req_prompt,
    ),
    IntentSpec(
        Intent.PRD,
        ("prd", "requirements doc", "product requirements"),
        build_prd_prompt,
    ),
)

FALLBACK_BUILDER: PromptBuilder = build_generic_prompt

_BUILDERS: dict[str, PromptBuilder] = {spec.tag: spec.builder for spec in INTENT_SPECS}
_BUILDERS[Intent.GENERIC.value] = FALLBACK_BUILDER


def builder_for(intent: Intent | str) -> PromptBuilder:
    """Return the builder registered for *intent*, or the generic one."""
    tag = intent.value if isinstance(intent, Intent) else str(intent)
    return _BUILDERS.get(tag, FALLBACK_BUILDER)


def render_prompt(
    intent: Intent | str,
    need: str,
    tone: str,
    length: str,
    format: str,
) -> GeneratedPrompt:
    """Render the prompt for *intent*; unknown tags use the generic template."""
    return builder_for(intent)(need, tone, length, format)
