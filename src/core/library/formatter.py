"""Render a library record for display."""

from __future__ import annotations

from src.core.models import GeneratedPrompt, PromptRecord
from src.core.templates.engine import render_library_record
from src.core.templates.prompts import LIBRARY_TITLE_FALLBACK


def format_match(record: PromptRecord) -> str:
    """Render *record* as Instruction / Inputs / Output / Success criteria /
    Follow-up sections.  Empty fields leave their section body empty."""
    return render_library_record(record)


def format_prompt(record: PromptRecord) -> GeneratedPrompt:
    return GeneratedPrompt(
        title=record.title or LIBRARY_TITLE_FALLBACK,
        text=format_match(record),
    )
