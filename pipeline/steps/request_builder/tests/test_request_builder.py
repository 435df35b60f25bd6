"""
Test suite for the Request Builder

Checks the composition order of the generation request and the optional
leave, attachment and footer blocks.

Run with:
    pytest pipeline/steps/request_builder/tests/test_request_builder.py -v
"""

import pytest
from uuid import uuid4

from pipeline.models.core import GenerationData
from pipeline.models.fields import EmailFields, Honorific
from pipeline.steps.request_builder.main import RequestBuilderStep
from pipeline.steps.request_builder.prompts import (
    ATTACHMENT_INSTRUCTION,
    HEADER_LINE,
    OUTPUT_CONTRACT,
    create_generation_prompt,
)


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def leave_request_fields():
    """Leave request with no attachment and no footer"""
    return EmailFields.model_validate({
        "intent": {"reason": "Leave Request", "tone": "Formal"},
        "recipient": {"label": "Manager"},
        "leave": {"start_date": "2024-05-01", "end_date": "2024-05-03", "reason": "Vacation"},
    })


@pytest.fixture
def project_update_fields():
    return EmailFields.model_validate({
        "sender": {"name": "Alex"},
        "intent": {"reason": "Project Update", "tone": "Friendly"},
        "recipient": {"label": "Jordan", "honorific": "Name", "relationship": "Peer"},
        "freeform": {"other_preferences": "Mention the demo"},
    })


# ===================================================================
# TESTS - Header and contract
# ===================================================================

def test_header_lists_every_field(project_update_fields):
    prompt = create_generation_prompt(project_update_fields)
    lines = prompt.split("\n")

    assert lines[:8] == [
        HEADER_LINE,
        "From: Alex",
        "Reason: Project Update",
        "Tone: Friendly",
        "Recipient: Jordan",
        "Recipient Gender/Title: Name",
        "Recipient Details: Peer",
        "Other Preferences: Mention the demo",
    ]


def test_empty_fields_build_without_error():
    """Every field is optional; absent values become empty strings."""
    prompt = create_generation_prompt(EmailFields())

    assert "From: \n" in prompt
    assert "Tone: \n" in prompt
    assert "Recipient Gender/Title: \n" in prompt
    assert prompt.endswith(OUTPUT_CONTRACT)


def test_output_contract_is_last(project_update_fields):
    prompt = create_generation_prompt(project_update_fields)

    assert prompt.endswith("\n\n" + OUTPUT_CONTRACT)
    assert "Subject: [Generated Subject]" in OUTPUT_CONTRACT
    assert "[Project Name]" in OUTPUT_CONTRACT
    assert "**" in OUTPUT_CONTRACT


def test_other_honorific_is_substituted():
    fields = EmailFields.model_validate({
        "recipient": {"honorific": "Other", "honorific_other": "Professor"},
    })

    prompt = create_generation_prompt(fields)

    assert "Recipient Gender/Title: Professor" in prompt
    assert "Recipient Gender/Title: Other" not in prompt


def test_dotted_honorific_value():
    fields = EmailFields(recipient={"honorific": Honorific.DR})

    assert "Recipient Gender/Title: Dr." in create_generation_prompt(fields)


@pytest.mark.parametrize(
    "honorific, expected",
    [("Mr.", "Mr."), ("Mr", "Mr."), ("Ms", "Ms."), ("Dr", "Dr.")],
)
def test_undotted_honorific_spellings(honorific, expected):
    fields = EmailFields.model_validate({
        "recipient": {"label": "Manager", "honorific": honorific},
    })

    assert fields.recipient.honorific.value == expected
    assert f"Recipient Gender/Title: {expected}\n" in create_generation_prompt(fields)


def test_blank_enum_fields_are_accepted():
    """Form selects post "" when nothing is chosen."""
    fields = EmailFields.model_validate({
        "intent": {"tone": ""},
        "recipient": {"honorific": "", "relationship": ""},
    })

    assert fields.intent.tone is None
    assert fields.recipient.honorific is None
    assert "Tone: \n" in create_generation_prompt(fields)


# ===================================================================
# TESTS - Optional blocks
# ===================================================================

def test_leave_request_scenario(leave_request_fields):
    """
    Leave request end to end.

    Expected behavior:
    - Header block, then leave block, in that order
    - No attachment or footer instruction
    """
    prompt = create_generation_prompt(leave_request_fields)

    header_at = prompt.index(HEADER_LINE)
    leave_at = prompt.index("Leave Start Date: 2024-05-01")
    assert header_at < leave_at < prompt.index(OUTPUT_CONTRACT)
    assert "Leave End Date: 2024-05-03" in prompt
    assert "Reason for Leave: Vacation" in prompt
    assert "Tone: Formal" in prompt
    assert "Recipient: Manager" in prompt

    assert ATTACHMENT_INSTRUCTION not in prompt
    assert "footer" not in prompt.lower()


def test_leave_block_only_for_leave_requests(project_update_fields):
    prompt = create_generation_prompt(project_update_fields)

    assert "Leave Start Date" not in prompt


def test_leave_request_without_dates_degrades():
    fields = EmailFields.model_validate({"intent": {"reason": "Leave Request"}})

    prompt = create_generation_prompt(fields)

    assert "Leave Start Date: \n" in prompt
    assert "Leave End Date: \n" in prompt


def test_other_leave_reason_is_substituted():
    fields = EmailFields.model_validate({
        "intent": {"reason": "Leave Request"},
        "leave": {"reason": "Other", "reason_other": "Moving house"},
    })

    assert "Reason for Leave: Moving house" in create_generation_prompt(fields)


def test_attachment_instruction(project_update_fields):
    fields = project_update_fields.model_copy(
        update={"modifiers": project_update_fields.modifiers.model_copy(update={"has_attachment": True})}
    )

    prompt = create_generation_prompt(fields)

    assert ATTACHMENT_INSTRUCTION in prompt
    assert prompt.index(ATTACHMENT_INSTRUCTION) < prompt.index(OUTPUT_CONTRACT)


def test_footer_text_is_used_verbatim():
    fields = EmailFields.model_validate({
        "modifiers": {"footer": {"enabled": True, "text": "Alex | Acme Corp"}},
    })

    prompt = create_generation_prompt(fields)

    assert '"Alex | Acme Corp"' in prompt
    assert "exactly as written" in prompt


def test_empty_footer_is_synthesized():
    fields = EmailFields.model_validate({
        "sender": {"name": "Alex"},
        "intent": {"tone": "Official"},
        "modifiers": {"footer": {"enabled": True, "text": ""}},
    })

    prompt = create_generation_prompt(fields)

    assert 'sender name "Alex"' in prompt
    assert 'tone "Official"' in prompt


def test_whitespace_footer_is_used_verbatim():
    fields = EmailFields.model_validate({
        "modifiers": {"footer": {"enabled": True, "text": "  "}},
    })

    prompt = create_generation_prompt(fields)

    assert 'exactly as written: "  "' in prompt
    assert "compose yourself" not in prompt


def test_disabled_footer_ignores_text():
    fields = EmailFields.model_validate({
        "modifiers": {"footer": {"enabled": False, "text": "Alex | Acme Corp"}},
    })

    assert "Acme Corp" not in create_generation_prompt(fields)


def test_builder_is_deterministic(leave_request_fields):
    assert create_generation_prompt(leave_request_fields) == create_generation_prompt(leave_request_fields)


# ===================================================================
# TESTS - Step
# ===================================================================

@pytest.mark.asyncio
async def test_step_sets_prompt(leave_request_fields):
    data = GenerationData(task_id=str(uuid4()), fields=leave_request_fields)

    result = await RequestBuilderStep().execute(data)

    assert result.success is True
    assert result.step_name == "request_builder"
    assert data.prompt == create_generation_prompt(leave_request_fields)
    assert "duration" in result.metadata
    assert "request_builder" in data.step_timings
