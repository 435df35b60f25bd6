"""
Request Builder Prompts

Composes the generation request from the Field Model. The trailing
OUTPUT_CONTRACT is what the response splitter relies on: subject line,
one blank line, then the body.
"""

from typing import List

from pipeline.models.fields import EmailFields


SYSTEM_PROMPT = (
    "You are an email writing assistant. Write complete, natural emails from the "
    "details you are given and follow the formatting instructions exactly."
)

HEADER_LINE = "Write an email with the following details:"

ATTACHMENT_INSTRUCTION = (
    "Please include a mention of an attachment in the email body, such as "
    "\"Please find the attached document\" or \"I have attached the required "
    "files for your reference.\""
)

OUTPUT_CONTRACT = """Please use the appropriate salutation (Dear Sir/Madam/Mr./Ms./Name) based on the recipient's gender/title provided.
Use square brackets [] to denote any placeholders or parts that might need editing, such as [Project Name] or [Specific Date].
Do not use any symbols like ** in the email.

Generate both a subject line and the main email body. Format the response as follows:
Subject: [Generated Subject]

[Generated Email Body]"""


def _header_lines(fields: EmailFields) -> List[str]:
    return [
        HEADER_LINE,
        f"From: {fields.sender.name}",
        f"Reason: {fields.intent.reason}",
        f"Tone: {fields.intent.tone_value}",
        f"Recipient: {fields.recipient.label}",
        f"Recipient Gender/Title: {fields.recipient.resolved_honorific}",
        f"Recipient Details: {fields.recipient.relationship_value}",
        f"Other Preferences: {fields.freeform.other_preferences}",
    ]


def _leave_lines(fields: EmailFields) -> List[str]:
    return [
        f"Leave Start Date: {fields.leave.start_date}",
        f"Leave End Date: {fields.leave.end_date}",
        f"Reason for Leave: {fields.leave.resolved_reason}",
    ]


def _footer_instruction(fields: EmailFields) -> str:
    footer_text = fields.modifiers.footer.text
    if footer_text:
        return (
            "Please include the following footer at the end of the email, "
            f"exactly as written: \"{footer_text}\""
        )
    return (
        "Please end the email with a footer you compose yourself, using the "
        f"sender name \"{fields.sender.name}\" and the tone \"{fields.intent.tone_value}\"."
    )


def create_generation_prompt(fields: EmailFields) -> str:
    """
    Build the generation request for one cycle.

    Total and side-effect free: absent values are interpolated as empty
    strings and the leave, attachment and footer blocks are only added when
    their switches are on.

    Args:
        fields: Structured intent from the form

    Returns:
        Request string for the generation service
    """
    lines = _header_lines(fields)

    if fields.intent.is_leave_request:
        lines.extend(_leave_lines(fields))

    if fields.modifiers.has_attachment:
        lines.append(ATTACHMENT_INSTRUCTION)

    if fields.modifiers.footer.enabled:
        lines.append(_footer_instruction(fields))

    # Contract always comes last, after one blank line
    lines.append("")
    lines.append(OUTPUT_CONTRACT)

    return "\n".join(lines)
