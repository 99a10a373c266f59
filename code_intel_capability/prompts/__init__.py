"""
Code Intelligence Prompts.

Prompt templates for the code intelligence capability.
"""

from .semantics import (
    semantic_extraction_prompt,
    truncate_content,
    build_semantic_extraction_prompt,
)

__all__ = [
    "semantic_extraction_prompt",
    "truncate_content",
    "build_semantic_extraction_prompt",
]
