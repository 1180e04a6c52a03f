import json

import pytest

from src.core.models import PromptLibrary, PromptRecord


@pytest.fixture
def sample_records():
    return [
        PromptRecord(
            title="Sprint planning",
            instruction="plan a sprint",
            inputs="Team capacity, candidate backlog items",
            output="backlog",
            success_criteria="Sprint goal agreed",
            follow_up="Schedule the review",
        ),
        PromptRecord(
            title="Release notes",
            instruction="Summarise the changes shipped in this release",
            inputs="Merged pull requests",
            output="Customer-facing release notes",
        ),
        PromptRecord(
            title="Retro facilitation",
            instruction="Run a sprint retrospective",
            output="Action items",
        ),
    ]


@pytest.fixture
def sample_library(sample_records):
    return PromptLibrary(records=tuple(sample_records), source="memory")


@pytest.fixture
def library_json(sample_records):
    return json.dumps([r.model_dump() for r in sample_records])


@pytest.fixture
def library_file(tmp_path, library_json):
    path = tmp_path / "prompts.json"
    path.write_text(library_json, encoding="utf-8")
    return str(path)
