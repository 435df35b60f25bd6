"""
Response Splitter Utilities

Splits the raw completion into subject and body.
"""

from typing import Tuple

SECTION_SEPARATOR = "\n\n"
SUBJECT_PREFIX = "Subject: "


def split_response(raw: str) -> Tuple[str, str]:
    """
    Split a completion into (subject, body).

    The text before the first blank line is the subject, with a leading
    "Subject: " stripped when present. Everything after it is the body,
    including any further blank lines. Without a blank line the whole text
    is the body and the subject is empty.

    Example:
        >>> split_response("Subject: Meeting\\n\\nHi team,\\n\\nThanks")
        ('Meeting', 'Hi team,\\n\\nThanks')
    """
    subject, separator, body = raw.partition(SECTION_SEPARATOR)
    if not separator:
        return "", raw

    if subject.startswith(SUBJECT_PREFIX):
        subject = subject[len(SUBJECT_PREFIX):]

    return subject, body
