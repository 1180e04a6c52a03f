"""Prompt library loader.

The library is a JSON array of prompt records read once at startup, either
from a local file or from an ``http(s)://`` URL.  Loading never raises: an
unreachable source, invalid JSON or an unexpected document shape all yield
an empty :class:`PromptLibrary`, and library lookups then report "no match".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import aiofiles  # type: ignore[import-untyped]
import httpx
from pydantic import ValidationError

from src.core.models import PromptLibrary, PromptRecord
from src.utils.exceptions import LibraryLoadError
from src.utils.logging import get_logger

logger = get_logger("library.loader")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _read_url(source: str, client: httpx.AsyncClient | None) -> str:
    try:
        if client is not None:
            response = await client.get(source)
        else:
            async with httpx.AsyncClient() as owned:
                response = await owned.get(source)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise LibraryLoadError(source, str(exc)) from exc
    return response.text


async def _read_file(source: str) -> str:
    path = Path(source)
    try:
        async with aiofiles.open(path, mode="r", encoding="utf-8") as fh:
            return await fh.read()
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise LibraryLoadError(source, str(exc)) from exc


def parse_library(raw: str, source: str = "") -> PromptLibrary:
    """Parse a JSON document into a :class:`PromptLibrary`.

    Raises
    ------
    LibraryLoadError
        When *raw* is not JSON or its top level is not an array.
    """
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise LibraryLoadError(source, f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise LibraryLoadError(source, f"expected a JSON array, got {type(data).__name__}")

    records: list[PromptRecord] = []
    skipped = 0
    for entry in data:
        if not isinstance(entry, dict):
            skipped += 1
            continue
        try:
            records.append(PromptRecord.model_validate(entry))
        except ValidationError:
            skipped += 1

    if skipped:
        logger.warning("library_entries_skipped", source=source, skipped=skipped)

    return PromptLibrary(records=tuple(records), source=source)


async def load_library(
    source: str,
    client: httpx.AsyncClient | None = None,
) -> PromptLibrary:
    """Load the prompt library from *source* (file path or URL).

    Parameters
    ----------
    source:
        Local path or ``http(s)://`` URL of a JSON array of records.
    client:
        Optional shared HTTP client used for URL sources.

    Returns
    -------
    PromptLibrary
        The loaded snapshot, or an empty one if anything went wrong.
    """
    try:
        if _is_url(source):
            raw = await _read_url(source, client)
        else:
            raw = await _read_file(source)
        library = parse_library(raw, source)
    except LibraryLoadError as exc:
        logger.warning("library_load_failed", source=source, error=str(exc))
        return PromptLibrary(source=source)

    logger.info("library_loaded", source=source, record_count=len(library))
    return library
