"""Prompt template engine.

One builder per intent turns ``(need, tone, length, format)`` into a
:class:`GeneratedPrompt`.  Builders are pure: the same inputs always give
byte-identical output, and every value is substituted verbatim.
"""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from src.core.models import GeneratedPrompt, PromptRecord
from src.core.templates.prompts import (
    GENERIC_TEMPLATE,
    GENERIC_TITLE,
    LIBRARY_TEMPLATE,
    OOO_TEMPLATE,
    OOO_TITLE,
    PRD_TEMPLATE,
    PRD_TITLE,
    PRODUCT_REQ_TEMPLATE,
    PRODUCT_REQ_TITLE,
    STATUS_UPDATE_TEMPLATE,
    STATUS_UPDATE_TITLE,
)
from src.utils.exceptions import TemplateRenderError

# Prompts are plain text, so autoescaping stays off; user input must come
# through exactly as typed.
_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)

_TEMPLATES: dict[str, Template] = {
    "ooo": _env.from_string(OOO_TEMPLATE),
    "status_update": _env.from_string(STATUS_UPDATE_TEMPLATE),
    "product_req": _env.from_string(PRODUCT_REQ_TEMPLATE),
    "prd": _env.from_string(PRD_TEMPLATE),
    "generic": _env.from_string(GENERIC_TEMPLATE),
    "library": _env.from_string(LIBRARY_TEMPLATE),
}


def _render(name: str, **context) -> str:
    try:
        return _TEMPLATES[name].render(**context)
    except TemplateError as exc:
        raise TemplateRenderError(name, str(exc)) from exc


def _fill(name: str, need: str, tone: str, length: str, format: str) -> str:
    return _render(name, need=need, tone=tone, length=length, format=format)


def build_ooo_prompt(need: str, tone: str, length: str, format: str) -> GeneratedPrompt:
    """Prompt for an out-of-office message (dates, urgent contact, return plan)."""
    return GeneratedPrompt(
        title=OOO_TITLE,
        text=_fill("ooo", need, tone, length, format),
    )


def build_status_update_prompt(
    need: str, tone: str, length: str, format: str,
) -> GeneratedPrompt:
    """Prompt for a stakeholder status update (progress, blockers, risks)."""
    return GeneratedPrompt(
        title=STATUS_UPDATE_TITLE,
        text=_fill("status_update", need, tone, length, format),
    )


def build_product_req_prompt(
    need: str, tone: str, length: str, format: str,
) -> GeneratedPrompt:
    """Prompt for a user story with acceptance criteria."""
    return GeneratedPrompt(
        title=PRODUCT_REQ_TITLE,
        text=_fill("product_req", need, tone, length, format),
    )


def build_prd_prompt(need: str, tone: str, length: str, format: str) -> GeneratedPrompt:
    """Prompt for a Product Requirements Document outline."""
    return GeneratedPrompt(
        title=PRD_TITLE,
        text=_fill("prd", need, tone, length, format),
    )


def build_generic_prompt(
    need: str, tone: str, length: str, format: str,
) -> GeneratedPrompt:
    """Catch-all prompt: clarify only when required, otherwise state assumptions."""
    return GeneratedPrompt(
        title=GENERIC_TITLE,
        text=_fill("generic", need, tone, length, format),
    )


def render_library_record(record: PromptRecord) -> str:
    """Render *record* into the fixed five-section library layout."""
    return _render("library", record=record)
