"""
Semantic Extraction.

LLM-backed extraction of structured semantics for a code unit.
"""

from .semantics import (
    compute_prompt_digest,
    extract_json_object,
    parse_semantics_response,
    extract_semantics,
    SemanticExtractor,
)

__all__ = [
    "compute_prompt_digest",
    "extract_json_object",
    "parse_semantics_response",
    "extract_semantics",
    "SemanticExtractor",
]
