"""
Semantic extraction types.

Data shapes for the semantic extraction pipeline: the code unit being
described, extraction options, the parsed semantics record and the
provenance attached to every LLM call.

Design Principles:
- Required sections are parsed strictly; a model reply that omits one is
  an error, never a partially filled record
- The wisdom section is always present on a record, with empty lists when
  the model supplied nothing
- Wire names are camelCase; Python attributes are snake_case
"""

from typing import TYPE_CHECKING, Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    computed_field,
    model_validator,
)
from pydantic.alias_generators import to_camel

from code_intel_capability.config.llm_config import get_default_provider, get_provider_config

if TYPE_CHECKING:
    from code_intel_capability.contracts.envelope import ConstructionResultEnvelope


# Registered construction that produces SemanticsRecord envelopes.
EXTRACT_SEMANTICS_CONSTRUCTION_ID = "extract_semantics"
SEMANTICS_SCHEMA_NAME = "SemanticsRecord"


class SemanticModel(BaseModel):
    """Base for semantic extraction shapes.

    Unknown keys in a model reply are ignored; declared keys are strictly
    typed.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ═══════════════════════════════════════════════════════════════════
# REQUEST
# ═══════════════════════════════════════════════════════════════════

class CodeUnit(SemanticModel):
    """A function or module to describe. Identity is (name, file_path)."""
    name: StrictStr
    file_path: StrictStr
    signature: Optional[StrictStr] = None
    content: Optional[StrictStr] = None

    @property
    def key(self) -> str:
        return f"{self.file_path}::{self.name}"


class SemanticExtractionOptions(SemanticModel):
    """Per-call extraction settings.

    Unset fields come from configuration: the provider from
    CODE_INTEL_LLM_PROVIDER, max_tokens and temperature from that
    provider's ProviderLLMConfig.
    """
    llm_provider: Literal["claude", "codex"] = Field(default_factory=get_default_provider)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_content_chars: int = Field(
        default=8000,
        gt=0,
        description="Code content beyond this many characters is truncated in the prompt",
    )

    @model_validator(mode="after")
    def apply_provider_defaults(self):
        config = get_provider_config(self.llm_provider)
        if self.max_tokens is None:
            self.max_tokens = config.max_tokens
        if self.temperature is None:
            self.temperature = config.temperature
        return self


# ═══════════════════════════════════════════════════════════════════
# SEMANTICS RECORD
# ═══════════════════════════════════════════════════════════════════

class PurposeSection(SemanticModel):
    summary: StrictStr
    explanation: StrictStr
    problem_solved: StrictStr
    value_prop: StrictStr


class DomainSection(SemanticModel):
    concepts: List[StrictStr]
    bounded_context: StrictStr
    business_rules: List[StrictStr]


class IntentSection(SemanticModel):
    primary_use_case: StrictStr
    secondary_use_cases: List[StrictStr]
    anti_use_cases: List[StrictStr]


class MechanismSection(SemanticModel):
    explanation: StrictStr
    algorithm: StrictStr
    approach: StrictStr
    patterns: List[StrictStr]


class ComplexitySection(SemanticModel):
    time: StrictStr
    space: StrictStr
    cognitive: StrictStr


def _whole_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Model replies sometimes render integers as 1.0
WholeNumber = Annotated[StrictInt, BeforeValidator(_whole_number)]


class LearningPathStep(SemanticModel):
    order: WholeNumber
    description: StrictStr


class WisdomSection(SemanticModel):
    """Tacit knowledge about a code unit. Every list defaults to empty."""
    gotchas: List[StrictStr] = Field(default_factory=list)
    tips: List[StrictStr] = Field(default_factory=list)
    tribal: List[StrictStr] = Field(default_factory=list)
    learning_path: List[LearningPathStep] = Field(default_factory=list)


class RequiredSemantics(SemanticModel):
    """The five sections a model reply must contain."""
    purpose: PurposeSection
    domain: DomainSection
    intent: IntentSection
    mechanism: MechanismSection
    complexity: ComplexitySection


class SemanticsRecord(RequiredSemantics):
    """Parsed semantics for a code unit, wisdom always populated."""
    wisdom: WisdomSection = Field(default_factory=WisdomSection)


# ═══════════════════════════════════════════════════════════════════
# PROVENANCE & RESULT
# ═══════════════════════════════════════════════════════════════════

class EvidenceRecord(SemanticModel):
    """Provenance of a single LLM call.

    prompt_digest is the SHA-256 hex digest of the exact prompt sent, so the
    call can be correlated later without storing the prompt.
    """
    provider: StrictStr
    model_id: StrictStr
    prompt_digest: StrictStr
    timestamp: StrictStr

    def describe(self) -> str:
        return f"llm:{self.provider}/{self.model_id} prompt:{self.prompt_digest} at {self.timestamp}"


class TokenUsage(SemanticModel):
    input: int = 0
    output: int = 0


class SemanticExtractionResult(SemanticModel):
    """Outcome of one successful extraction."""
    semantics: SemanticsRecord
    evidence: EvidenceRecord
    raw_response: str
    tokens_used: TokenUsage = Field(default_factory=TokenUsage)
    latency_ms: int = 0

    @computed_field
    @property
    def wisdom(self) -> WisdomSection:
        return self.semantics.wisdom

    def to_envelope(
        self,
        run_id: str,
        duration_ms: Optional[int] = None,
        workspace: Optional[str] = None,
    ) -> "ConstructionResultEnvelope":
        """Wrap the semantics record in a construction result envelope.

        The envelope validates with validate_construction_result under the
        extract_semantics construction id.
        """
        from code_intel_capability.contracts.envelope import build_construction_result_envelope

        return build_construction_result_envelope(
            output=self.semantics.to_dict(),
            schema_name=SEMANTICS_SCHEMA_NAME,
            run_id=run_id,
            duration_ms=self.latency_ms if duration_ms is None else duration_ms,
            construction_id=EXTRACT_SEMANTICS_CONSTRUCTION_ID,
            workspace=workspace,
            evidence=[self.evidence.describe()],
        )


__all__ = [
    "EXTRACT_SEMANTICS_CONSTRUCTION_ID",
    "SEMANTICS_SCHEMA_NAME",
    "SemanticModel",
    "CodeUnit",
    "SemanticExtractionOptions",
    "PurposeSection",
    "DomainSection",
    "IntentSection",
    "MechanismSection",
    "ComplexitySection",
    "WholeNumber",
    "LearningPathStep",
    "WisdomSection",
    "RequiredSemantics",
    "SemanticsRecord",
    "EvidenceRecord",
    "TokenUsage",
    "SemanticExtractionResult",
]
