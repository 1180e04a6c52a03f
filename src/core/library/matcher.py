"""Lexical retrieval over the prompt library.

A record's score is the number of query tokens found as substrings of its
haystack (title, instruction and output, normalized).  Tokens are counted
from the raw list, so a word repeated in the query counts once per
repetition.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from src.core.models import PromptRecord
from src.utils.logging import get_logger
from src.utils.text_utils import normalize, tokenize

logger = get_logger("library.matcher")


class ScoredRecord(BaseModel):
    """A library record with its overlap score for one query."""

    record: PromptRecord
    score: int


def haystack(record: PromptRecord) -> str:
    return normalize(f"{record.title} {record.instruction} {record.output}")


def score_record(tokens: Sequence[str], record: PromptRecord) -> int:
    """Count the tokens that occur anywhere in *record*'s haystack."""
    hay = haystack(record)
    return sum(1 for tok in tokens if tok in hay)


def best_match(need: str | None, library: Iterable[PromptRecord]) -> PromptRecord | None:
    """Return the highest-scoring record for *need*, or ``None``.

    ``None`` is returned for an empty need, an empty library, or when no
    token matches any record.  On equal scores the earliest record wins.
    """
    tokens = tokenize(need)
    if not tokens:
        return None

    best: PromptRecord | None = None
    best_score = 0
    for record in library:
        score = score_record(tokens, record)
        if score > best_score:
            best_score = score
            best = record

    if best is None:
        logger.debug("library_no_match", token_count=len(tokens))
        return None

    logger.debug("library_match_found", title=best.title, score=best_score)
    return best


def rank(
    need: str | None,
    library: Iterable[PromptRecord],
    limit: int | None = None,
) -> list[ScoredRecord]:
    """Return records with a non-zero score, best first.

    The sort is stable, so records with equal scores keep library order and
    ``rank(...)[0]`` agrees with :func:`best_match`.
    """
    tokens = tokenize(need)
    if not tokens:
        return []

    scored: list[ScoredRecord] = []
    for record in library:
        score = score_record(tokens, record)
        if score > 0:
            scored.append(ScoredRecord(record=record, score=score))

    scored.sort(key=lambda item: item.score, reverse=True)
    if limit is not None:
        scored = scored[:max(limit, 0)]
    return scored
