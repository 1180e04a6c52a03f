"""Tests for loading the prompt library from files and URLs."""
import json

import httpx
import pytest

from src.core.models import PromptLibrary


class TestParseLibrary:
    def test_parse_records(self, library_json):
        from src.core.library.loader import parse_library
        library = parse_library(library_json, "inline")
        assert len(library) == 3
        assert library.source == "inline"
        assert [r.title for r in library] == [
            "Sprint planning", "Release notes", "Retro facilitation",
        ]

    def test_missing_and_null_fields_become_empty(self):
        from src.core.library.loader import parse_library
        library = parse_library('[{"title": "T", "output": null, "extra": 1}]')
        record = library.records[0]
        assert record.title == "T"
        assert record.output == ""
        assert record.follow_up == ""

    def test_non_string_values_are_stringified(self):
        from src.core.library.loader import parse_library
        record = parse_library('[{"title": 42}]').records[0]
        assert record.title == "42"

    def test_non_object_entries_are_skipped(self):
        from src.core.library.loader import parse_library
        library = parse_library('[{"title": "keep"}, "nope", 3, null]')
        assert [r.title for r in library] == ["keep"]

    def test_duplicate_titles_are_kept(self):
        from src.core.library.loader import parse_library
        library = parse_library('[{"title": "Same"}, {"title": "Same"}]')
        assert len(library) == 2

    @pytest.mark.parametrize("raw", ["not json", '{"title": "x"}', '"text"', ""])
    def test_invalid_documents_raise(self, raw):
        from src.core.library.loader import parse_library
        from src.utils.exceptions import LibraryLoadError
        with pytest.raises(LibraryLoadError):
            parse_library(raw, "bad")


class TestLoadLibrary:
    @pytest.mark.asyncio
    async def test_load_from_file(self, library_file):
        from src.core.library.loader import load_library
        library = await load_library(library_file)
        assert isinstance(library, PromptLibrary)
        assert len(library) == 3
        assert library.source == library_file

    @pytest.mark.asyncio
    async def test_missing_file_gives_empty_library(self, tmp_path):
        from src.core.library.loader import load_library
        library = await load_library(str(tmp_path / "missing.json"))
        assert len(library) == 0
        assert not library

    @pytest.mark.asyncio
    async def test_malformed_file_gives_empty_library(self, tmp_path):
        from src.core.library.loader import load_library
        path = tmp_path / "prompts.json"
        path.write_text("{ not json", encoding="utf-8")
        library = await load_library(str(path))
        assert len(library) == 0

    @pytest.mark.asyncio
    async def test_load_from_url(self, library_json):
        from src.core.library.loader import load_library

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/prompts.json"
            return httpx.Response(200, text=library_json)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            library = await load_library("https://example.test/prompts.json", client=client)
        assert len(library) == 3

    @pytest.mark.asyncio
    async def test_http_error_gives_empty_library(self):
        from src.core.library.loader import load_library

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="not found")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            library = await load_library("https://example.test/prompts.json", client=client)
        assert len(library) == 0
        assert library.source == "https://example.test/prompts.json"

    @pytest.mark.asyncio
    async def test_unreachable_url_gives_empty_library(self):
        from src.core.library.loader import load_library

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            library = await load_library("http://example.test/prompts.json", client=client)
        assert len(library) == 0

    @pytest.mark.asyncio
    async def test_url_returning_object_gives_empty_library(self):
        from src.core.library.loader import load_library

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=json.dumps({"prompts": []}))

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            library = await load_library("https://example.test/prompts.json", client=client)
        assert len(library) == 0

    @pytest.mark.asyncio
    async def test_bundled_library_loads(self):
        from pathlib import Path

        from src.core.library.loader import load_library
        source = Path(__file__).resolve().parents[2] / "prompts.json"
        library = await load_library(str(source))
        assert len(library) > 0
        assert all(record.title for record in library)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source", [
        "prompts\x00.json",
        "http://exa mple.com:notaport/prompts.json",
    ])
    async def test_unusable_source_gives_empty_library(self, source):
        from src.core.library.loader import load_library
        library = await load_library(source)
        assert len(library) == 0
        assert library.source == source

    @pytest.mark.asyncio
    async def test_deeply_nested_json_gives_empty_library(self, tmp_path):
        from src.core.library.loader import load_library
        path = tmp_path / "prompts.json"
        path.write_text("[" * 100000, encoding="utf-8")
        library = await load_library(str(path))
        assert len(library) == 0

    def test_deeply_nested_json_raises_load_error(self):
        from src.core.library.loader import parse_library
        from src.utils.exceptions import LibraryLoadError
        with pytest.raises(LibraryLoadError):
            parse_library("[" * 100000, "nested")
