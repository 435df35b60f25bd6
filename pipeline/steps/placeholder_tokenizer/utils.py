"""
Placeholder Tokenizer Utilities

Breaks a document into literal text and [bracketed] placeholders.
"""

import re
from typing import List

from pipeline.models.segments import Literal, Placeholder, Segment

# "[" to the next "]" with no other bracket in between and at least one character
PLACEHOLDER_PATTERN = re.compile(r"\[([^\[\]]+)\]")

SENDER_NAME_PLACEHOLDER = "your name"


def is_sender_name_placeholder(name: str) -> bool:
    return name.lower() == SENDER_NAME_PLACEHOLDER


def _append_text(segments: List[Segment], text: str) -> None:
    """Append literal text, merging with a trailing Literal so literals stay maximal."""
    if not text:
        return
    if segments and isinstance(segments[-1], Literal):
        segments[-1] = Literal(segments[-1].text + text)
    else:
        segments.append(Literal(text))


def tokenize(document: str, sender_name: str = "") -> List[Segment]:
    """
    Tokenize a document into Literal and Placeholder segments.

    Placeholders never nest: the first "]" after a "[" closes it, and a "["
    seen before that "]" restarts the match. Unterminated or empty brackets
    stay literal text. "[Your Name]" (any case) is replaced by the sender's
    name as literal text.

    Args:
        document: Subject or body text
        sender_name: Value substituted for "[your name]"

    Returns:
        Ordered segments; joining their canonical forms gives the document
        back, apart from the sender-name substitution.

    Example:
        >>> tokenize("Dear [Sir/Madam], re: [Project Name]")
        [Literal(text='Dear '), Placeholder(name='Sir/Madam'), Literal(text=', re: '), Placeholder(name='Project Name')]
    """
    segments: List[Segment] = []
    position = 0

    for match in PLACEHOLDER_PATTERN.finditer(document):
        _append_text(segments, document[position:match.start()])

        name = match.group(1)
        if is_sender_name_placeholder(name):
            _append_text(segments, sender_name)
        else:
            segments.append(Placeholder(name))

        position = match.end()

    _append_text(segments, document[position:])
    return segments


def extract_placeholders(document: str) -> List[str]:
    """
    Unique placeholder names in order of first appearance.

    Example:
        >>> extract_placeholders("On [Date] at [Time], see you [Date]")
        ['Date', 'Time']
    """
    seen = set()
    names = []
    for segment in tokenize(document):
        if isinstance(segment, Placeholder) and segment.name not in seen:
            seen.add(segment.name)
            names.append(segment.name)
    return names
