"""Exception hierarchy for the code intelligence capability.

Validation problems at the tool boundary are reported as ValidationResult
values, never raised. The exceptions here cover the raising variants
(parse_tool_input) and the semantic extraction pipeline, where a failure
must reach the caller instead of a partially populated record.
"""

from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from code_intel_capability.contracts.validation import ValidationIssue
    from code_intel_capability.models.semantics import EvidenceRecord


class CodeIntelError(Exception):
    """Base class for all capability errors."""


# ─── Contract errors ───

class ContractError(CodeIntelError):
    """Base class for tool contract violations raised by parse helpers."""


class UnknownToolError(ContractError):
    """Raised when a tool name is not present in the schema registry."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolInputValidationError(ContractError):
    """Raised by parse_tool_input when input violates the tool schema."""

    def __init__(self, tool_name: str, issues: List["ValidationIssue"]):
        summary = "; ".join(f"{issue.path}: {issue.message}" for issue in issues)
        super().__init__(f"Invalid input for {tool_name}: {summary}")
        self.tool_name = tool_name
        self.issues = issues


# ─── Extraction errors ───

class ExtractionError(CodeIntelError):
    """Base class for semantic extraction failures."""


class ExtractionParseError(ExtractionError):
    """Model output could not be parsed into the semantics document.

    Carries the raw model text and the evidence record of the call so the
    failed attempt can still be audited.
    """

    def __init__(
        self,
        message: str,
        raw_text: str,
        evidence: Optional["EvidenceRecord"] = None,
        issues: Optional[List[Any]] = None,
    ):
        super().__init__(message)
        self.raw_text = raw_text
        self.evidence = evidence
        self.issues = issues or []


class AdapterFailure(CodeIntelError):
    """Opaque failure raised by an external chat or model-resolution adapter.

    The pipeline never interprets this error; it propagates to the caller
    unchanged.
    """

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


__all__ = [
    "CodeIntelError",
    "ContractError",
    "UnknownToolError",
    "ToolInputValidationError",
    "ExtractionError",
    "ExtractionParseError",
    "AdapterFailure",
]
