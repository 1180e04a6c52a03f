"""Data models shared by the intent, template and library pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Intent(str, Enum):
    OOO = "ooo"
    STATUS_UPDATE = "status_update"
    PRODUCT_REQ = "product_req"
    PRD = "prd"
    GENERIC = "generic"


class GenerationRequest(BaseModel):
    """One user action: the need plus the style selectors.

    Tone, length and format are opaque strings; they are echoed into the
    prompt verbatim and never checked against a list of options.
    """

    need: str
    tone: str = "professional"
    length: str = "medium"
    format: str = "email"


class GeneratedPrompt(BaseModel):
    title: str
    text: str


class PromptRecord(BaseModel):
    """A pre-written prompt from the library.

    Every field is optional.  ``null`` and missing values become an empty
    string and unknown keys are ignored, so any JSON object is accepted.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = ""
    instruction: str = ""
    inputs: str = ""
    output: str = ""
    success_criteria: str = ""
    follow_up: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)


@dataclass(frozen=True)
class PromptLibrary:
    """Read-only snapshot of the library, in source order."""

    records: tuple[PromptRecord, ...] = ()
    source: str = ""

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)


class OutcomeStatus(str, Enum):
    GENERATED = "generated"
    EMPTY_NEED = "empty_need"
    NO_MATCH = "no_match"


class GenerationOutcome(BaseModel):
    """What the caller displays after a generate action.

    ``prompt`` is always populated: for ``empty_need`` and ``no_match`` it
    carries the informational message instead of a generated prompt.
    """

    status: OutcomeStatus
    prompt: GeneratedPrompt
    intent: str | None = None
