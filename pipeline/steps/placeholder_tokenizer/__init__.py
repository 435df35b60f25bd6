"""
Placeholder Tokenizer Step

Splits generated text into literal and [placeholder] segments.
"""

from .main import PlaceholderTokenizerStep
from .utils import tokenize, extract_placeholders

__all__ = ["PlaceholderTokenizerStep", "tokenize", "extract_placeholders"]
