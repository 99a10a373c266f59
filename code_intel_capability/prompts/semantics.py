"""
Semantic extraction prompt.

One prompt per code unit, asking the model for a single JSON document with
five required sections and an optional wisdom section.

IMPORTANT: Prompts use {placeholder} syntax for context injection.
build_semantic_extraction_prompt provides the values via str.format().
"""

from code_intel_capability.models.semantics import CodeUnit


TRUNCATION_MARKER = "\n... [content truncated]"
NO_SIGNATURE = "(signature not available)"
NO_CONTENT = "(source not available: reason from the name and file path alone)"


def semantic_extraction_prompt() -> str:
    """Semantic extraction prompt.

    Expected placeholders:
        - name: Code unit name
        - file_path: Workspace-relative file path
        - signature: Signature text or NO_SIGNATURE
        - content: Source text (possibly truncated) or NO_CONTENT
    """
    return """You are analyzing a unit of source code to capture its semantics for other engineers and coding agents.

**Name:** {name}
**File:** {file_path}
**Signature:** {signature}

**Source:**
```
{content}
```

Describe WHAT this code is for and HOW it works. Ground every statement in the code shown.
If the source is not available, infer cautiously from the name and path and say so in the explanations.

Respond with ONE JSON object and nothing else. Required sections:
- purpose: {{"summary": one sentence, "explanation": short paragraph, "problemSolved": string, "valueProp": string}}
- domain: {{"concepts": [string], "boundedContext": string, "businessRules": [string]}}
- intent: {{"primaryUseCase": string, "secondaryUseCases": [string], "antiUseCases": [string]}}
- mechanism: {{"explanation": string, "algorithm": string, "approach": string, "patterns": [string]}}
- complexity: {{"time": big-O or description, "space": big-O or description, "cognitive": "trivial" | "simple" | "moderate" | "complex"}}

Optional section (omit it if you have nothing useful to add):
- wisdom: {{"gotchas": [string], "tips": [string], "tribal": [string], "learningPath": [{{"order": integer, "description": string}}]}}

JSON response:"""


def truncate_content(content: str, max_chars: int) -> str:
    """Cut content to max_chars, marking the cut."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars] + TRUNCATION_MARKER


def build_semantic_extraction_prompt(unit: CodeUnit, max_content_chars: int) -> str:
    """Render the extraction prompt for a code unit.

    Args:
        unit: Code unit to describe; signature and content are optional
        max_content_chars: Content length limit before truncation

    Returns:
        The exact prompt text sent to the model
    """
    content = truncate_content(unit.content, max_content_chars) if unit.content else NO_CONTENT
    return semantic_extraction_prompt().format(
        name=unit.name,
        file_path=unit.file_path,
        signature=unit.signature or NO_SIGNATURE,
        content=content,
    )


__all__ = [
    "TRUNCATION_MARKER",
    "NO_SIGNATURE",
    "NO_CONTENT",
    "semantic_extraction_prompt",
    "truncate_content",
    "build_semantic_extraction_prompt",
]
