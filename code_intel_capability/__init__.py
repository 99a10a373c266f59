"""
Code Intelligence Capability.

Strict tool contracts between coding agents and the code-intelligence
backend, and an LLM-backed semantic extraction pipeline.

Usage:
    from code_intel_capability import validate_tool_input, extract_semantics

    result = validate_tool_input("query", {"intent": "where is auth handled"})
"""

from code_intel_capability.contracts import (
    ToolName,
    ConstructionResultEnvelope,
    ToolCallGate,
    ValidationIssue,
    ValidationResult,
    build_construction_result_envelope,
    get_output_schema_hint,
    list_tool_schemas,
    parse_tool_input,
    register_schemas,
    validate_tool_input,
    validate_tool_output,
)
from code_intel_capability.config.identity import PRODUCT_VERSION
from code_intel_capability.errors import (
    CodeIntelError,
    ExtractionParseError,
    ToolInputValidationError,
    UnknownToolError,
)
from code_intel_capability.extraction import SemanticExtractor, extract_semantics
from code_intel_capability.models import (
    CodeUnit,
    SemanticExtractionOptions,
    SemanticExtractionResult,
    SemanticsRecord,
)

__version__ = PRODUCT_VERSION

__all__ = [
    "ToolName",
    "ConstructionResultEnvelope",
    "ToolCallGate",
    "ValidationIssue",
    "ValidationResult",
    "build_construction_result_envelope",
    "get_output_schema_hint",
    "list_tool_schemas",
    "parse_tool_input",
    "register_schemas",
    "validate_tool_input",
    "validate_tool_output",
    "CodeIntelError",
    "ExtractionParseError",
    "ToolInputValidationError",
    "UnknownToolError",
    "SemanticExtractor",
    "extract_semantics",
    "CodeUnit",
    "SemanticExtractionOptions",
    "SemanticExtractionResult",
    "SemanticsRecord",
]
