"""
Response Splitter Step

Splits the generation service's completion into subject and body.
"""

from .main import ResponseSplitterStep
from .utils import split_response

__all__ = ["ResponseSplitterStep", "split_response"]
