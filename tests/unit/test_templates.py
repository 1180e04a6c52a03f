"""Tests for the prompt template builders and the intent dispatch."""
import pytest

from src.core.models import Intent
from src.core.templates import (
    build_generic_prompt,
    build_ooo_prompt,
    build_prd_prompt,
    build_product_req_prompt,
    build_status_update_prompt,
)

ALL_BUILDERS = [
    build_ooo_prompt,
    build_status_update_prompt,
    build_product_req_prompt,
    build_prd_prompt,
    build_generic_prompt,
]


class TestBuilders:
    def test_ooo_prompt(self):
        need = "I'll be OOO next week"
        prompt = build_ooo_prompt(need, "friendly", "short", "slack")
        assert prompt.title == "Generated: Out-of-office message"
        assert prompt.text.startswith("You are an expert communications assistant.")
        assert f'"{need}"' in prompt.text
        assert "- Tone: friendly" in prompt.text
        assert "- Length: short" in prompt.text
        assert "- Channel/format: slack" in prompt.text
        assert "who to contact for urgent issues" in prompt.text

    def test_status_update_prompt(self):
        prompt = build_status_update_prompt("weekly update", "direct", "medium", "email")
        assert prompt.title == "Generated: Stakeholder status update"
        assert "Summarise progress, blockers, and next steps clearly." in prompt.text

    def test_product_req_prompt(self):
        prompt = build_product_req_prompt("user story for export", "direct", "short", "doc")
        assert prompt.title == "Generated: User story / requirement"
        assert "As a [persona], I want [need] so that [reason]" in prompt.text
        assert "2) Acceptance criteria (bulleted)" in prompt.text

    def test_prd_prompt(self):
        prompt = build_prd_prompt("PRD for SSO", "professional", "detailed", "doc")
        assert prompt.title == "Generated: Product Requirements Document (PRD)"
        assert (
            "Problem statement, Goals, Scope (in/out), User stories, Success metrics, Risks"
            in prompt.text
        )

    def test_generic_prompt(self):
        prompt = build_generic_prompt("plan a launch party", "friendly", "short", "slack")
        assert prompt.title == "Generated: Structured prompt from your need"
        assert "Ask up to 3 clarifying questions ONLY if absolutely required." in prompt.text
        assert "- Keep the tone friendly." in prompt.text
        assert "- Keep the length short." in prompt.text
        assert "- Output in slack format." in prompt.text

    @pytest.mark.parametrize("builder", ALL_BUILDERS)
    def test_section_order(self, builder):
        text = builder("need", "tone", "length", "format").text
        if builder is build_generic_prompt:
            headers = ["Goal:\n", "Instructions:\n", "Output structure:\n"]
        else:
            headers = ["Task:\n", "User input:\n", "Requirements:\n", "Output:\n"]
        positions = [text.index(h) for h in headers]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("builder", ALL_BUILDERS)
    def test_idempotent(self, builder):
        args = ("Need with {{ braces }} & <tags>", "friendly", "short", "slack")
        assert builder(*args) == builder(*args)

    @pytest.mark.parametrize("builder", ALL_BUILDERS)
    def test_values_are_verbatim(self, builder):
        need = 'Say "hi" to <team> & {{ everyone }} {% raw %}'
        text = builder(need, "<b>bold</b>", "", "a & b").text
        assert need in text
        assert "<b>bold</b>" in text
        assert "a & b" in text

    @pytest.mark.parametrize("builder", ALL_BUILDERS)
    def test_no_trailing_newline(self, builder):
        assert not builder("x", "y", "z", "w").text.endswith("\n")


class TestRenderPrompt:
    @pytest.mark.parametrize("intent,builder", [
        (Intent.OOO, build_ooo_prompt),
        (Intent.STATUS_UPDATE, build_status_update_prompt),
        (Intent.PRODUCT_REQ, build_product_req_prompt),
        (Intent.PRD, build_prd_prompt),
        (Intent.GENERIC, build_generic_prompt),
        ("prd", build_prd_prompt),
    ])
    def test_dispatch(self, intent, builder):
        from src.core.intent.registry import render_prompt
        args = ("need", "tone", "length", "format")
        assert render_prompt(intent, *args) == builder(*args)

    def test_unknown_intent_falls_back_to_generic(self):
        from src.core.intent.registry import render_prompt
        prompt = render_prompt("meeting_notes", "need", "tone", "length", "format")
        assert prompt == build_generic_prompt("need", "tone", "length", "format")

    def test_every_intent_has_a_builder(self):
        from src.core.intent.registry import builder_for
        for intent in Intent:
            assert builder_for(intent) is not None


class TestTemplateWording:
    @pytest.mark.parametrize("builder", [
        build_ooo_prompt,
        build_status_update_prompt,
        build_product_req_prompt,
        build_prd_prompt,
    ])
    def test_typographic_apostrophe(self, builder):
        assert "the user’s input." in builder("x", "y", "z", "w").text

    def test_user_story_template_quotes(self):
        text = build_product_req_prompt("x", "y", "z", "w").text
        assert "“As a [persona], I want [need] so that [reason]”." in text

    def test_messages(self):
        from src.core.templates.prompts import EMPTY_NEED_TEXT, NO_MATCH_TEXT
        assert "“Generate an OOO message for next week...”" in EMPTY_NEED_TEXT
        assert NO_MATCH_TEXT == (
            "I couldn’t find a close match in the current prompt library. "
            "Use “Generate from my need” instead."
        )
