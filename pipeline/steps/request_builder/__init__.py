"""
Request Builder Step

Composes the generation request from the structured email fields.
"""

from .main import RequestBuilderStep
from .prompts import create_generation_prompt

__all__ = ["RequestBuilderStep", "create_generation_prompt"]
