"""
Tool Contract Validation.

Validation failures are values, not exceptions: validate_tool_input and
validate_tool_output always return a ValidationResult, and every violated
field is reported in one pass. parse_tool_input is the raising variant for
callers that want the typed model.

Usage:
    result = validate_tool_input("query", {"intent": "how does auth work"})
    if not result.valid:
        return {"success": False, "errors": [e.model_dump() for e in result.errors]}
    result.data["pageSize"]  # 20
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from code_intel_capability.adapters import get_logger
from code_intel_capability.agents.protocols import LoggerProtocol
from code_intel_capability.contracts.registry import (
    get_output_schema,
    get_tool_schema,
    register_schemas,
    tool_key,
)
from code_intel_capability.contracts.schemas import ToolInput
from code_intel_capability.errors import ToolInputValidationError, UnknownToolError


ROOT_PATH = "/"
NULL_CODE = "invalid_type"


class ValidationIssue(BaseModel):
    """One field-level contract violation."""
    path: str
    message: str
    code: str


class ValidationResult(BaseModel):
    """All-or-nothing outcome of validating a payload against a schema."""
    valid: bool
    data: Optional[Any] = None
    errors: List[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def ok(cls, data: Any) -> "ValidationResult":
        return cls(valid=True, data=data)

    @classmethod
    def fail(cls, errors: List[ValidationIssue]) -> "ValidationResult":
        return cls(valid=False, errors=errors)


def issues_from_error(exc: ValidationError) -> List[ValidationIssue]:
    """Flatten a pydantic ValidationError into wire-named issues.

    A type error on an explicit null is reported as `invalid_type`, the same
    code omittable fields raise for null.
    """
    issues = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or ROOT_PATH
        code = error["type"]
        if code.endswith("_type") and error.get("input", ...) is None:
            code = NULL_CODE
        issues.append(ValidationIssue(path=path, message=error["msg"], code=code))
    return issues


def _unknown(code: str, name: str) -> ValidationResult:
    label = "tool" if code == "unknown_tool" else "schema"
    return ValidationResult.fail(
        [ValidationIssue(path="", message=f"Unknown {label}: {name}", code=code)]
    )


# ═══════════════════════════════════════════════════════════════════
# INPUT VALIDATION
# ═══════════════════════════════════════════════════════════════════

def _model_for_input(tool_name: str, payload: Any):
    tool_schema = get_tool_schema(tool_name)
    if tool_schema is None:
        return None, payload
    if payload is None and tool_schema.allows_empty_input:
        payload = {}
    return tool_schema.input_model, payload


def validate_tool_input(
    tool_name: str,
    payload: Any,
    logger: Optional[LoggerProtocol] = None,
) -> ValidationResult:
    """Validate raw agent input for a tool.

    Args:
        tool_name: Registered tool name (str or ToolName)
        payload: Untyped input, usually a decoded JSON object
        logger: Optional logger for failure events

    Returns:
        ValidationResult with camelCase `data` on success, every violation
        in `errors` otherwise
    """
    name = tool_key(tool_name)
    model, payload = _model_for_input(name, payload)
    if model is None:
        (logger or get_logger()).warning("tool_input_unknown_tool", tool=name)
        return _unknown("unknown_tool", name)

    try:
        validated = model.model_validate(payload)
    except ValidationError as exc:
        issues = issues_from_error(exc)
        (logger or get_logger()).warning(
            "tool_input_validation_failed",
            tool=name,
            issue_count=len(issues),
            paths=[issue.path for issue in issues],
        )
        return ValidationResult.fail(issues)

    return ValidationResult.ok(validated.model_dump(by_alias=True))


def parse_tool_input(tool_name: str, payload: Any) -> ToolInput:
    """Validate input and return the typed model.

    Raises:
        UnknownToolError: If tool_name is not registered
        ToolInputValidationError: If payload violates the tool schema
    """
    name = tool_key(tool_name)
    model, payload = _model_for_input(name, payload)
    if model is None:
        raise UnknownToolError(name)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ToolInputValidationError(name, issues_from_error(exc)) from exc


# ═══════════════════════════════════════════════════════════════════
# OUTPUT VALIDATION
# ═══════════════════════════════════════════════════════════════════

def _is_registered_name(name: str) -> bool:
    if name in register_schemas():
        return True
    return get_output_schema(name) is not None


def validate_tool_output(
    schema_or_tool_name: str,
    output: Any,
    logger: Optional[LoggerProtocol] = None,
) -> ValidationResult:
    """Validate a tool's output against its registered output schema.

    Tools that declare no output schema accept any output unchanged.
    Validating already-valid data again yields identical data.

    Args:
        schema_or_tool_name: Output schema name or tool name
        output: Tool output payload
        logger: Optional logger for failure events

    Returns:
        ValidationResult; `unknown_schema` when the name is not registered
    """
    name = tool_key(schema_or_tool_name)
    if not _is_registered_name(name):
        return _unknown("unknown_schema", name)

    model = get_output_schema(name)
    if model is None:
        return ValidationResult.ok(output)

    try:
        validated = model.model_validate(output)
    except ValidationError as exc:
        issues = issues_from_error(exc)
        (logger or get_logger()).warning(
            "tool_output_validation_failed",
            schema=model.__name__,
            issue_count=len(issues),
        )
        return ValidationResult.fail(issues)

    return ValidationResult.ok(validated.model_dump(by_alias=True))


def format_issues(issues: List[ValidationIssue]) -> str:
    """Render issues as `path: message` pairs, for single-line error strings."""
    return "; ".join(f"{issue.path}: {issue.message}" for issue in issues)


__all__ = [
    "ROOT_PATH",
    "NULL_CODE",
    "ValidationIssue",
    "ValidationResult",
    "issues_from_error",
    "validate_tool_input",
    "validate_tool_output",
    "parse_tool_input",
    "format_issues",
]
