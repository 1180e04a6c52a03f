"""Prompt library -- loading, lexical matching and formatting of pre-written prompts."""

from src.core.library.formatter import format_match, format_prompt
from src.core.library.loader import load_library, parse_library
from src.core.library.matcher import ScoredRecord, best_match, rank, score_record

__all__ = [
    "ScoredRecord",
    "best_match",
    "format_match",
    "format_prompt",
    "load_library",
    "parse_library",
    "rank",
    "score_record",
]
