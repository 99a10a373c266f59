"""
Construction Result Envelope.

Every tool invocation returns its output wrapped in a uniform envelope that
carries provenance, evidence and accounting. An envelope is well-formed only
when `schema` names the tool's registered output schema (when it has one)
and `output` validates against that schema.
"""

import json
import math
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, StrictBool, StrictStr

from code_intel_capability.adapters import get_logger
from code_intel_capability.agents.protocols import LoggerProtocol
from code_intel_capability.contracts.registry import get_expected_output_schema_name, tool_key
from code_intel_capability.contracts.schemas import ContractModel, NonNegativeInt, Omittable
from code_intel_capability.contracts.validation import (
    ROOT_PATH,
    ValidationIssue,
    ValidationResult,
    format_issues,
    validate_tool_output,
)


class EnvelopeMeta(ContractModel):
    """Identifies the construction that produced an envelope."""
    model_config = ConfigDict(populate_by_name=True)

    construction_id: StrictStr
    schema_name: StrictStr
    workspace: Omittable[StrictStr] = None
    intent: Omittable[StrictStr] = None
    composition_id: Omittable[StrictStr] = None


class ConstructionResultEnvelope(ContractModel):
    """Uniform wrapper returned by every tool invocation.

    `trivial_result` marks outputs that needed no substantive computation
    (an empty or single-item result); consumers may skip confidence
    heuristics when it is set.
    """
    model_config = ConfigDict(populate_by_name=True)

    success: StrictBool
    output: Any
    output_schema: StrictStr = Field(alias="schema")
    evidence: List[StrictStr] = Field(default_factory=list)
    run_id: StrictStr
    tokens_used: NonNegativeInt
    duration_ms: NonNegativeInt
    trivial_result: StrictBool = False
    meta: EnvelopeMeta

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def estimate_tokens(output: Any) -> int:
    """Rough token count: compact JSON length / 4, rounded half up."""
    serialized = json.dumps(output, separators=(",", ":"), ensure_ascii=False, default=str)
    return int(math.floor(len(serialized) / 4 + 0.5))


def build_construction_result_envelope(
    output: Any,
    schema_name: str,
    run_id: str,
    duration_ms: int,
    construction_id: str,
    workspace: Optional[str] = None,
    intent: Optional[str] = None,
    composition_id: Optional[str] = None,
    evidence: Optional[List[str]] = None,
    trivial_result: bool = False,
) -> ConstructionResultEnvelope:
    """Wrap a successful tool output.

    Args:
        output: Validated tool output
        schema_name: Registered output schema name (or tool name when the
            tool declares no output schema)
        run_id: Run identifier for correlation
        duration_ms: Wall-clock duration of the tool call
        construction_id: Tool or construction that produced the output
        workspace: Workspace the call ran against
        intent: Intent text, for intent-driven tools
        composition_id: Technique composition id, for compilation tools
        evidence: Ordered evidence identifiers or descriptions
        trivial_result: Output needed no substantive computation

    Returns:
        ConstructionResultEnvelope with tokens_used estimated from output
    """
    meta: Dict[str, Any] = {"construction_id": construction_id, "schema_name": schema_name}
    for key, value in (("workspace", workspace), ("intent", intent), ("composition_id", composition_id)):
        if value is not None:
            meta[key] = value

    return ConstructionResultEnvelope(
        success=True,
        output=output,
        output_schema=schema_name,
        evidence=list(evidence or []),
        run_id=run_id,
        tokens_used=estimate_tokens(output),
        duration_ms=max(0, int(duration_ms)),
        trivial_result=trivial_result,
        meta=EnvelopeMeta(**meta),
    )


def is_trivial_result(schema_name: str, output: Dict[str, Any]) -> bool:
    """Default triviality rule for the structured technique outputs.

    Selections and bundles are trivial with at most one entry. A compiled
    composition is trivial with at most one included primitive, or, when
    primitives were not included, when no primitive is missing.
    """
    if schema_name == "SelectTechniqueCompositionsOutputSchema":
        return len(output.get("compositions", [])) <= 1
    if schema_name == "CompileIntentBundlesOutputSchema":
        return len(output.get("bundles", [])) <= 1
    if schema_name == "CompileTechniqueCompositionOutputSchema":
        if "primitives" in output:
            return len(output["primitives"]) <= 1
        return len(output.get("missingPrimitiveIds", [])) == 0
    return False


def schema_failure_message(construction_id: str, issues: List[ValidationIssue]) -> str:
    return f"schema_validation_failed({construction_id}): {format_issues(issues)}"


def _output_path(path: str) -> str:
    return "output" if path in (ROOT_PATH, "") else f"output.{path}"


def validate_construction_result(
    tool_name: str,
    envelope: ConstructionResultEnvelope,
    logger: Optional[LoggerProtocol] = None,
) -> ValidationResult:
    """Check that an envelope is well-formed for a tool or construction.

    Args:
        tool_name: Tool or registered construction that produced the envelope
        envelope: Envelope to check
        logger: Optional logger for failure events

    Returns:
        ValidationResult whose data is the envelope dict with validated
        output; `schema_mismatch` when `schema` is not the tool's output
        schema
    """
    logger = logger or get_logger()
    name = tool_key(tool_name)
    expected = get_expected_output_schema_name(name)

    if expected is not None and envelope.output_schema != expected:
        logger.warning(
            "construction_schema_mismatch",
            tool=name,
            expected=expected,
            actual=envelope.output_schema,
        )
        return ValidationResult.fail([
            ValidationIssue(
                path="schema",
                message=f"Expected schema {expected}, got {envelope.output_schema}",
                code="schema_mismatch",
            )
        ])

    result = validate_tool_output(expected or name, envelope.output, logger=logger)
    if not result.valid:
        logger.error(
            "construction_output_validation_failed",
            construction_id=envelope.meta.construction_id,
            schema=envelope.output_schema,
            error=schema_failure_message(envelope.meta.construction_id, result.errors),
        )
        return ValidationResult.fail([
            ValidationIssue(path=_output_path(issue.path), message=issue.message, code=issue.code)
            for issue in result.errors
        ])

    data = envelope.to_dict()
    data["output"] = result.data
    return ValidationResult.ok(data)


__all__ = [
    "EnvelopeMeta",
    "ConstructionResultEnvelope",
    "estimate_tokens",
    "build_construction_result_envelope",
    "is_trivial_result",
    "schema_failure_message",
    "validate_construction_result",
]
