"""
Code Intelligence Tool Contracts.

Single source of truth for the agent-facing tool contract: strict input
models, structured output models and hints, the tool registry, validation,
the construction result envelope and the confidence-tier policy.

Design Principles:
- Contract-first: define the model, then validate every call against it
- Strict: undeclared fields are rejected, values are never coerced
- Failures are values: validation reports every violation in one result

Usage:
    from code_intel_capability.contracts import (
        validate_tool_input,
        validate_tool_output,
        list_tool_schemas,
    )

    result = validate_tool_input("submit_feedback", {"feedbackToken": "tok-1", "outcome": "success"})
    if not result.valid:
        logger.warning("tool_input_validation_failed", errors=result.errors)
"""

from .confidence import (
    CONFIDENCE_BEHAVIOR_CONTRACT,
    ConfidenceTier,
    ConfidenceAction,
    ESCALATION_TIERS,
    tier_for_confidence,
    required_action,
    can_escalate,
)

from .schemas import (
    ContractModel,
    ToolInput,
    QueryToolInput,
    SubmitFeedbackToolInput,
    RequestHumanReviewToolInput,
)

from .outputs import (
    ToolOutput,
    SelectTechniqueCompositionsOutputSchema,
    CompileTechniqueCompositionOutputSchema,
    CompileIntentBundlesOutputSchema,
    SemanticsRecordOutputSchema,
    ToolOutputSchemaHint,
    DEFAULT_TOOL_OUTPUT_SCHEMA_HINT,
)

from .registry import (
    ToolName,
    ToolSchema,
    OutputSchema,
    register_schemas,
    get_tool_schema,
    list_tool_schemas,
    list_output_schemas,
    get_expected_output_schema_name,
    get_output_schema,
    get_output_schema_hint,
    get_tool_json_schema,
)

from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_tool_input,
    validate_tool_output,
    parse_tool_input,
)

from .envelope import (
    EnvelopeMeta,
    ConstructionResultEnvelope,
    build_construction_result_envelope,
    estimate_tokens,
    is_trivial_result,
    validate_construction_result,
)

from .gate import ToolCallGate

__all__ = [
    # Confidence
    "CONFIDENCE_BEHAVIOR_CONTRACT",
    "ConfidenceTier",
    "ConfidenceAction",
    "ESCALATION_TIERS",
    "tier_for_confidence",
    "required_action",
    "can_escalate",
    # Input models
    "ContractModel",
    "ToolInput",
    "QueryToolInput",
    "SubmitFeedbackToolInput",
    "RequestHumanReviewToolInput",
    # Output models
    "ToolOutput",
    "SelectTechniqueCompositionsOutputSchema",
    "CompileTechniqueCompositionOutputSchema",
    "CompileIntentBundlesOutputSchema",
    "SemanticsRecordOutputSchema",
    "ToolOutputSchemaHint",
    "DEFAULT_TOOL_OUTPUT_SCHEMA_HINT",
    # Registry
    "ToolName",
    "ToolSchema",
    "OutputSchema",
    "register_schemas",
    "get_tool_schema",
    "list_tool_schemas",
    "list_output_schemas",
    "get_expected_output_schema_name",
    "get_output_schema",
    "get_output_schema_hint",
    "get_tool_json_schema",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "validate_tool_input",
    "validate_tool_output",
    "parse_tool_input",
    # Envelope
    "EnvelopeMeta",
    "ConstructionResultEnvelope",
    "build_construction_result_envelope",
    "estimate_tokens",
    "is_trivial_result",
    "validate_construction_result",
    # Gate
    "ToolCallGate",
]
