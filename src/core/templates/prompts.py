"""Prompt templates rendered by :mod:`src.core.templates.engine`.

Each template is a Jinja2 string with four slots: ``need``, ``tone``,
``length`` and ``format``.  Section headers are literal and their order is
fixed; callers and tests rely on both.
"""

OOO_TITLE: str = "Generated: Out-of-office message"

OOO_TEMPLATE: str = """\
You are an expert communications assistant.

Task:
Create an out-of-office (OOO) message based on the user’s input.

User input:
"{{ need }}"

Requirements:
- Tone: {{ tone }}
- Length: {{ length }}
- Channel/format: {{ format }}
- Include: dates (if mentioned), who to contact for urgent issues, and what the sender will do when back.
- If dates are missing, ask 2 quick questions at the end OR provide 2 variants (with placeholders).

Output:
1) Final OOO message (ready to copy/paste)
2) Optional: 1 shorter variant"""

STATUS_UPDATE_TITLE: str = "Generated: Stakeholder status update"

STATUS_UPDATE_TEMPLATE: str = """\
You are an executive communications assistant.

Task:
Craft a status update based on the user’s input.

User input:
"{{ need }}"

Requirements:
- Tone: {{ tone }}
- Length: {{ length }}
- Channel/format: {{ format }}
- Summarise progress, blockers, and next steps clearly.
- Highlight any risks or escalations.

Output:
1) Status update message (ready to send)
2) Optional: bullet points summarising key takeaways"""

PRODUCT_REQ_TITLE: str = "Generated: User story / requirement"

PRODUCT_REQ_TEMPLATE: str = """\
You are a product discovery assistant.

Task:
Create a user story or requirement based on the user’s input.

User input:
"{{ need }}"

Requirements:
- Tone: {{ tone }}
- Length: {{ length }}
- Channel/format: {{ format }}
- Use the template: “As a [persona], I want [need] so that [reason]”.
- Define acceptance criteria clearly.

Output:
1) User story statement
2) Acceptance criteria (bulleted)"""

PRD_TITLE: str = "Generated: Product Requirements Document (PRD)"

PRD_TEMPLATE: str = """\
You are a product strategy assistant.

Task:
Draft a Product Requirements Document (PRD) based on the user’s input.

User input:
"{{ need }}"

Requirements:
- Tone: {{ tone }}
- Length: {{ length }}
- Channel/format: {{ format }}
- Include sections: Problem statement, Goals, Scope (in/out), User stories, Success metrics, Risks.
- Summarise stakeholders and timeline if applicable.

Output:
1) PRD outline
2) Checklist of next steps"""

GENERIC_TITLE: str = "Generated: Structured prompt from your need"

GENERIC_TEMPLATE: str = """\
You are a senior Product + Delivery assistant.

Goal:
Help me with this request:
"{{ need }}"

Instructions:
- Ask up to 3 clarifying questions ONLY if absolutely required. Otherwise proceed with reasonable assumptions (and list them).
- Keep the tone {{ tone }}.
- Keep the length {{ length }}.
- Output in {{ format }} format.

Output structure:
1) Assumptions (if any)
2) The main deliverable (fully written)
3) Next steps / checklist"""

# Library records are rendered through a fixed five-section layout.
LIBRARY_TITLE_FALLBACK: str = "Library Prompt"

LIBRARY_TEMPLATE: str = """\
Instruction:
{{ record.instruction }}

Inputs:
{{ record.inputs }}

Output:
{{ record.output }}

Success criteria:
{{ record.success_criteria }}

Follow-up:
{{ record.follow_up }}"""

# Messages shown instead of a prompt when nothing can be generated.
EMPTY_NEED_TITLE: str = "Tell me what you need"
EMPTY_NEED_TEXT: str = (
    'Type a short description above (e.g., “Generate an OOO message for next week...” ).'
)

NO_MATCH_TITLE: str = "No library match found"
NO_MATCH_TEXT: str = (
    "I couldn’t find a close match in the current prompt library. "
    "Use “Generate from my need” instead."
)
