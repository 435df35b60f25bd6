"""
Segments: the units a tokenized document is made of.

A document is an ordered sequence of ``Literal`` and ``Placeholder``
segments. Joining the canonical form of every segment gives the document
text back.
"""

from dataclasses import dataclass
from typing import Iterable, Union

PLACEHOLDER_OPEN = "["
PLACEHOLDER_CLOSE = "]"


@dataclass(frozen=True)
class Literal:
    """Finalized text, rendered as-is."""

    text: str

    kind = "literal"

    @property
    def canonical(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholder:
    """A bracketed span left for the user to fill in, e.g. ``[Project Name]``."""

    name: str

    kind = "placeholder"

    @property
    def canonical(self) -> str:
        return f"{PLACEHOLDER_OPEN}{self.name}{PLACEHOLDER_CLOSE}"


Segment = Union[Literal, Placeholder]


def join_segments(segments: Iterable[Segment]) -> str:
    """Concatenate the canonical form of each segment."""
    return "".join(segment.canonical for segment in segments)
