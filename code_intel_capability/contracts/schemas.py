"""
Tool Input Schemas for the Code Intelligence Capability.

One strict pydantic model per tool. These are the ONLY input shapes the
backend accepts from an agent.

Contract Rules (enforced by the models):
1. Strict: any undeclared field is rejected (`extra="forbid"`)
2. No coercion: "5" is not a number and 1 is not a boolean
3. Numeric bounds are inclusive on both ends
4. Defaults apply only when a field is absent; explicit null is a type
   violation unless the field is declared nullable
5. Absent optional fields without a declared default stay absent in the
   validated payload
6. Wire names are camelCase (alias_generator), except the handful of
   snake_case fields and aliases the agent protocol already uses
"""

from typing import Annotated, Any, List, Literal, Optional, TypeVar

from annotated_types import Ge, Gt, Le, MaxLen, MinLen
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    Strict,
    StrictBool,
    StrictStr,
    StringConstraints,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from code_intel_capability.contracts.confidence import CONFIDENCE_BEHAVIOR_CONTRACT


# ═══════════════════════════════════════════════════════════════════════════════
# FIELD TYPES
# ═══════════════════════════════════════════════════════════════════════════════

T = TypeVar("T")


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("invalid_type", "Expected a value, received null")
    return value


# Optional on the wire (may be omitted) but never null.
Omittable = Annotated[Optional[T], AfterValidator(_reject_null)]

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
Text500 = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=500)]
Text2000 = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=2000)]
Text4000 = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=4000)]

PositiveInt = Annotated[int, Strict(), Gt(0)]
NonNegativeInt = Annotated[int, Strict(), Ge(0)]
PageSize = Annotated[int, Strict(), Ge(1), Le(200)]
PageIdx = Annotated[int, Strict(), Ge(0)]
UnitInterval = Annotated[float, Strict(), Ge(0), Le(1)]

StrList = List[StrictStr]
NonEmptyStrList = List[NonEmptyStr]

LLMProvider = Literal["claude", "codex"]
Depth = Literal["L0", "L1", "L2", "L3"]
QueryIntent = Literal[
    "understand", "debug", "refactor", "impact", "security",
    "test", "document", "navigate", "general",
]
ExportFormat = Literal["json", "sqlite", "scip", "lsif"]
AuditType = Literal["full", "claims", "coverage", "security", "freshness"]
BundleType = Literal["minimal", "standard", "comprehensive"]
RepoMapStyle = Literal["compact", "detailed", "json"]
FindSymbolKind = Literal["function", "module", "context_pack", "claim", "composition", "run"]
TraceImportsDirection = Literal["imports", "importedBy", "both"]
ChangeType = Literal["modify", "delete", "rename", "move"]
ConstructionOperator = Literal[
    "seq", "fanout", "fallback", "fix", "select", "atom", "dimap", "map", "contramap",
]

WORKSPACE_DESCRIPTION = "Workspace path (optional, uses first available if not specified)"
MIN_CONFIDENCE_DESCRIPTION = f"Minimum confidence threshold (0-1). {CONFIDENCE_BEHAVIOR_CONTRACT}"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE MODEL
# ═══════════════════════════════════════════════════════════════════════════════

class ContractModel(BaseModel):
    """Strict camelCase model shared by tool inputs and tool outputs.

    Serialization drops optional fields that were absent from the input and
    have no declared default, so validated payloads never grow keys the
    agent did not send.
    """
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel)

    @model_serializer(mode="wrap")
    def omit_absent_fields(self, handler, info: SerializationInfo):
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set or field.default is not None:
                continue
            key = field.alias if (info.by_alias and field.alias) else name
            data.pop(key, None)
        return data


class ToolInput(ContractModel):
    """Base for every tool input and nested input object."""


# ═══════════════════════════════════════════════════════════════════════════════
# SHARED NESTED OBJECTS
# ═══════════════════════════════════════════════════════════════════════════════

class SearchFilter(ToolInput):
    """Structured retrieval filter for path/language/export/test constraints."""
    path_prefix: Omittable[NonEmptyStr] = Field(None, description="Workspace-relative path prefix for scoped retrieval")
    language: Omittable[NonEmptyStr] = Field(None, description="Language filter (example: typescript, python, rust)")
    is_exported: Omittable[StrictBool] = None
    is_pure: Omittable[StrictBool] = None
    exclude_tests: Omittable[StrictBool] = None
    max_file_size_bytes: Omittable[PositiveInt] = None


class ContextHints(ToolInput):
    """Agent-state hints that bias retrieval toward the active session topology.

    Keys are snake_case on the wire.
    """
    model_config = ConfigDict(extra="forbid", alias_generator=None)

    active_file: Omittable[NonEmptyStr] = None
    active_symbol: Omittable[NonEmptyStr] = None
    recently_edited_files: Omittable[NonEmptyStrList] = None
    recent_tool_calls: Omittable[NonEmptyStrList] = None
    conversation_context: Omittable[Text2000] = None


class CustomRating(ToolInput):
    """Per-pack relevance rating attached to feedback."""
    pack_id: NonEmptyStr
    relevant: StrictBool
    usefulness: Omittable[UnitInterval] = None
    reason: Omittable[StrictStr] = None


class Counterevidence(ToolInput):
    """Intentional-exception entry for completeness checks."""
    artifact: NonEmptyStr
    pattern: Omittable[NonEmptyStr] = None
    file_pattern: Omittable[NonEmptyStr] = None
    reason: NonEmptyStr
    weight: Omittable[UnitInterval] = None


class PagedListInput(ToolInput):
    """Shared pagination controls for list tools."""
    workspace: Omittable[StrictStr] = Field(None, description=WORKSPACE_DESCRIPTION)
    limit: Omittable[PositiveInt] = None
    page_size: PageSize = Field(20, description="Items per page (default: 20, max: 200)")
    page_idx: PageIdx = Field(0, description="Zero-based page index (default: 0)")
    output_file: Omittable[NonEmptyStr] = Field(
        None, description="Write paged response payload to file and return a file reference"
    )


class WorkspaceOnlyInput(ToolInput):
    workspace: Omittable[StrictStr] = Field(None, description=WORKSPACE_DESCRIPTION)


# ═══════════════════════════════════════════════════════════════════════════════
# BOOTSTRAP & STATUS
# ═══════════════════════════════════════════════════════════════════════════════

class BootstrapToolInput(ToolInput):
    """Input for bootstrap - index a workspace."""
    workspace: NonEmptyStr = Field(description="Absolute path to the workspace to bootstrap")
    force: StrictBool = Field(False, description="Force re-index even if cached data exists")
    include: Omittable[StrList] = Field(None, description="Glob patterns for files to include")
    exclude: Omittable[StrList] = Field(None, description="Glob patterns for files to exclude")
    llm_provider: Omittable[LLMProvider] = Field(None, description="Preferred LLM provider for semantic analysis")
    max_files: Omittable[PositiveInt] = Field(None, description="Maximum files to index (for testing)")
    file_timeout_ms: Omittable[NonNegativeInt] = Field(None, description="Per-file timeout in ms (0 disables)")
    file_timeout_retries: Omittable[NonNegativeInt] = None
    file_timeout_policy: Omittable[Literal["skip", "retry", "fail"]] = None


class StatusToolInput(WorkspaceOnlyInput):
    """Input for status - index and session health."""
    session_id: Omittable[NonEmptyStr] = None
    plan_id: Omittable[NonEmptyStr] = None
    cost_budget_usd: Omittable[Annotated[float, Strict(), Ge(0)]] = None


class SystemContractToolInput(WorkspaceOnlyInput):
    """Input for system_contract - describe the backend contract."""


class DiagnoseSelfToolInput(WorkspaceOnlyInput):
    """Input for diagnose_self - self-diagnostic probe."""


class GetSessionBriefingToolInput(WorkspaceOnlyInput):
    """Input for get_session_briefing."""
    session_id: Omittable[NonEmptyStr] = None
    include_constructions: StrictBool = True


class ListStrategicContractsToolInput(PagedListInput):
    """Input for list_strategic_contracts."""
    contract_type: Omittable[Literal["api", "event", "schema"]] = None
    breaking_only: StrictBool = False


class GetStrategicContractToolInput(WorkspaceOnlyInput):
    """Input for get_strategic_contract."""
    contract_id: NonEmptyStr


# ═══════════════════════════════════════════════════════════════════════════════
# RETRIEVAL
# ═══════════════════════════════════════════════════════════════════════════════

class QueryToolInput(ToolInput):
    """Input for query - intent-driven context retrieval.

    Three fields also accept a snake_case alias (context_hints,
    recency_weight, explain_misses). When both spellings are supplied the
    canonical camelCase value wins; the alias only fills an absent
    canonical field.
    """
    intent: Text2000 = Field(description="The query intent or question")
    workspace: Omittable[StrictStr] = Field(None, description=WORKSPACE_DESCRIPTION)
    session_id: Omittable[NonEmptyStr] = None
    intent_type: Omittable[QueryIntent] = Field(None, description="Typed query intent for routing optimization")
    affected_files: Omittable[StrList] = None
    context_hints: Omittable[ContextHints] = None
    context_hints_alias: Omittable[ContextHints] = Field(None, alias="context_hints", exclude=True)
    filter: Omittable[SearchFilter] = None
    working_file: Omittable[NonEmptyStr] = None
    alpha: Omittable[Annotated[float, Strict(), Ge(0.01), Le(0.5)]] = Field(
        None, description="Conformal error-rate target alpha in [0.01, 0.5]"
    )
    recency_weight: Omittable[UnitInterval] = None
    recency_weight_alias: Omittable[UnitInterval] = Field(None, alias="recency_weight", exclude=True)
    min_confidence: UnitInterval = Field(0.5, description=MIN_CONFIDENCE_DESCRIPTION)
    depth: Depth = Field("L1", description="Depth of context to retrieve")
    include_engines: StrictBool = False
    include_evidence: StrictBool = False
    page_size: PageSize = Field(20, description="Items per page (default: 20, max: 200)")
    page_idx: PageIdx = Field(0, description="Zero-based page index (default: 0)")
    output_file: Omittable[NonEmptyStr] = None
    explain_misses: StrictBool = Field(False, description="Include near-miss retrieval diagnostics")
    explain_misses_alias: Omittable[StrictBool] = Field(
        None, alias="explain_misses", exclude=True, description="Alias for explainMisses"
    )
    stream: StrictBool = False
    stream_chunk_size: PageSize = 5

    @model_validator(mode="after")
    def reconcile_aliases(self):
        for canonical, alias in (
            ("context_hints", "context_hints_alias"),
            ("recency_weight", "recency_weight_alias"),
            ("explain_misses", "explain_misses_alias"),
        ):
            if canonical not in self.model_fields_set and alias in self.model_fields_set:
                setattr(self, canonical, getattr(self, alias))
        return self


class LibrainianGetUncertaintyToolInput(ToolInput):
    """Input for librainian_get_uncertainty - retrieval uncertainty probe."""
    query: Text2000
    workspace: Omittable[StrictStr] = None
    depth: Depth = "L1"
    min_confidence: UnitInterval = Field(0.0, description="Minimum confidence threshold (0-1)")
    top_k: Annotated[int, Strict(), Ge(1), Le(50)] = 10


class SemanticSearchToolInput(ToolInput):
    """Input for semantic_search - localization search over indexed code."""
    query: Text2000
    workspace: Omittable[StrictStr] = None
    session_id: Omittable[NonEmptyStr] = None
    filter: Omittable[SearchFilter] = None
    working_file: Omittable[NonEmptyStr] = None
    min_confidence: UnitInterval = Field(0.4, description=MIN_CONFIDENCE_DESCRIPTION)
    depth: Depth = "L1"
    limit: PageSize = 20
    include_engines: StrictBool = False
    include_evidence: StrictBool = False


class ValidateImportToolInput(ToolInput):
    """Input for validate_import - check that an import really exists."""
    package: NonEmptyStr
    import_name: NonEmptyStr
    member_name: Omittable[NonEmptyStr] = None
    workspace: Omittable[StrictStr] = None
    context: Omittable[Text2000] = None


class GetContextPackToolInput(ToolInput):
    """Input for get_context_pack - token-budgeted context pack assembly."""
    intent: Text2000
    relevant_files: Omittable[NonEmptyStrList] = None
    token_budget: Annotated[int, Strict(), Ge(100), Le(50000)] = 4000
    workdir: Omittable[StrictStr] = None
    workspace: Omittable[StrictStr] = None


class GetContextPackBundleToolInput(ToolInput):
    """Input for get_context_pack_bundle - bundle context packs for entities."""
    entity_ids: Annotated[StrList, MinLen(1)] = Field(description="Entity IDs to bundle context for")
    bundle_type: BundleType = "standard"
    max_tokens: Omittable[Annotated[int, Strict(), Ge(100), Le(100000)]] = None
    page_size: PageSize = 20
    page_idx: PageIdx = 0
    output_file: Omittable[NonEmptyStr] = None


class GetRepoMapToolInput(ToolInput):
    """Input for get_repo_map - ranked repository map for fast orientation."""
    workspace: Omittable[StrictStr] = None
    max_tokens: Annotated[int, Strict(), Ge(128), Le(50000)] = 4096
    focus: Omittable[Annotated[NonEmptyStrList, MaxLen(64)]] = None
    style: RepoMapStyle = "compact"


class FindSymbolToolInput(ToolInput):
    """Input for find_symbol - symbol discovery."""
    query: Text500
    kind: Omittable[FindSymbolKind] = None
    workspace: Omittable[StrictStr] = None
    limit: PageSize = 20


class ExplainFunctionToolInput(ToolInput):
    """Input for explain_function."""
    name: Text500
    file_path: Omittable[StrictStr] = None
    workspace: Omittable[StrictStr] = None


class FindCallersToolInput(ToolInput):
    function_id: Text500
    workspace: Omittable[StrictStr] = None
    transitive: StrictBool = False
    max_depth: Annotated[int, Strict(), Ge(1), Le(8)] = 3
    limit: Annotated[int, Strict(), Ge(1), Le(500)] = 100


class FindCalleesToolInput(ToolInput):
    function_id: Text500
    workspace: Omittable[StrictStr] = None
    limit: Annotated[int, Strict(), Ge(1), Le(500)] = 100


class FindUsagesToolInput(ToolInput):
    symbol: Text500
    workspace: Omittable[StrictStr] = None
    limit: Annotated[int, Strict(), Ge(1), Le(500)] = 100


class TraceImportsToolInput(ToolInput):
    file_path: NonEmptyStr
    direction: TraceImportsDirection = "both"
    depth: Annotated[int, Strict(), Ge(1), Le(6)] = 2
    workspace: Omittable[StrictStr] = None


class TraceControlFlowToolInput(ToolInput):
    function_id: Text500
    workspace: Omittable[StrictStr] = None
    max_blocks: Annotated[int, Strict(), Ge(1), Le(1000)] = 200


class TraceDataFlowToolInput(ToolInput):
    source: Text500
    sink: Text500
    function_id: Omittable[Text500] = None
    workspace: Omittable[StrictStr] = None


# ═══════════════════════════════════════════════════════════════════════════════
# CHANGE IMPACT
# ═══════════════════════════════════════════════════════════════════════════════

class GetChangeImpactToolInput(ToolInput):
    """Input for get_change_impact - ranked blast radius for a change."""
    target: NonEmptyStr = Field(description="Changed file/module/function identifier to analyze")
    workspace: Omittable[StrictStr] = None
    depth: Annotated[int, Strict(), Ge(1), Le(8)] = Field(3, description="Maximum transitive depth")
    max_results: Annotated[int, Strict(), Ge(1), Le(1000)] = 200
    change_type: Omittable[ChangeType] = None


class BlastRadiusToolInput(GetChangeImpactToolInput):
    """Input for blast_radius - alias for get_change_impact."""


class PreCommitCheckToolInput(ToolInput):
    changed_files: Annotated[NonEmptyStrList, MinLen(1), MaxLen(200)]
    workspace: Omittable[StrictStr] = None
    strict: StrictBool = False
    max_risk_level: Literal["low", "medium", "high", "critical"] = "high"


class LibrarianCompletenessCheckToolInput(ToolInput):
    workspace: Omittable[StrictStr] = None
    changed_files: Omittable[Annotated[NonEmptyStrList, MaxLen(500)]] = None
    mode: Literal["auto", "changed", "full"] = "auto"
    support_threshold: Annotated[int, Strict(), Ge(1), Le(500)] = 5
    counterevidence: Omittable[List[Counterevidence]] = None


# ═══════════════════════════════════════════════════════════════════════════════
# PLANNING & BUDGET
# ═══════════════════════════════════════════════════════════════════════════════

class EstimateBudgetToolInput(ToolInput):
    task_description: Text4000
    available_tokens: Annotated[int, Strict(), Ge(1), Le(1_000_000)]
    workdir: Omittable[StrictStr] = None
    pipeline: Omittable[NonEmptyStrList] = None
    workspace: Omittable[StrictStr] = None


class EstimateTaskComplexityToolInput(ToolInput):
    task: Text4000
    workdir: Omittable[StrictStr] = None
    workspace: Omittable[StrictStr] = None
    recent_files: Omittable[NonEmptyStrList] = None
    function_id: Omittable[NonEmptyStr] = None


class SynthesizePlanToolInput(ToolInput):
    task: Text2000
    context_pack_ids: Annotated[NonEmptyStrList, MinLen(1), MaxLen(100)] = Field(alias="context_pack_ids")
    workspace: Omittable[StrictStr] = None
    session_id: Omittable[NonEmptyStr] = None


# ═══════════════════════════════════════════════════════════════════════════════
# FEEDBACK & SESSION
# ═══════════════════════════════════════════════════════════════════════════════

class SubmitFeedbackToolInput(ToolInput):
    """Input for submit_feedback - records agent feedback for a query."""
    feedback_token: NonEmptyStr = Field(description="Feedback token from query response")
    outcome: Literal["success", "failure", "partial"] = Field(description="Task outcome")
    workspace: Omittable[StrictStr] = None
    agent_id: Omittable[StrictStr] = None
    prediction_id: Omittable[StrictStr] = None
    missing_context: Omittable[StrictStr] = None
    custom_ratings: Omittable[List[CustomRating]] = None


class FeedbackRetrievalResultToolInput(ToolInput):
    feedback_token: NonEmptyStr
    was_helpful: StrictBool
    workspace: Omittable[StrictStr] = None
    agent_id: Omittable[StrictStr] = None
    missing_context: Omittable[StrictStr] = None


class ResetSessionStateToolInput(ToolInput):
    """Input for reset_session_state."""
    session_id: Omittable[NonEmptyStr] = None
    workspace: Omittable[StrictStr] = None


class GetRetrievalStatsToolInput(ToolInput):
    workspace: Omittable[StrictStr] = None
    intent_type: Omittable[NonEmptyStr] = None
    limit: Annotated[int, Strict(), Ge(1), Le(1000)] = 200


class GetExplorationSuggestionsToolInput(ToolInput):
    workspace: Omittable[StrictStr] = None
    entity_type: Literal["function", "module"] = "module"
    limit: PageSize = 5


# ═══════════════════════════════════════════════════════════════════════════════
# ESCALATION & CLAIMS
# ═══════════════════════════════════════════════════════════════════════════════

class RequestHumanReviewToolInput(ToolInput):
    """Input for request_human_review.

    Escalation is only valid for the two tiers that require manual
    involvement, so confidence_tier accepts exactly low/uncertain.
    """
    model_config = ConfigDict(extra="forbid", alias_generator=None)

    reason: NonEmptyStr = Field(description="Why human review is needed")
    context_summary: NonEmptyStr = Field(description="Summary of uncertain or conflicting context")
    proposed_action: NonEmptyStr = Field(description="Action the agent was about to take")
    confidence_tier: Literal["low", "uncertain"] = Field(description="Confidence tier requiring escalation")
    risk_level: Literal["low", "medium", "high"] = Field(description="Risk if the proposed action is wrong")
    blocking: StrictBool = Field(description="Whether the agent should pause for human response")


class VerifyClaimToolInput(ToolInput):
    claim_id: NonEmptyStr
    force: StrictBool = False


class ClaimWorkScopeToolInput(ToolInput):
    scope_id: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    session_id: Omittable[NonEmptyStr] = None
    owner: Omittable[NonEmptyStr] = None
    mode: Literal["claim", "release", "check"] = "claim"
    ttl_seconds: Annotated[int, Strict(), Ge(1), Le(86400)] = 1800


class AppendClaimToolInput(ToolInput):
    claim: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    session_id: Omittable[NonEmptyStr] = None
    tags: Omittable[NonEmptyStrList] = None
    evidence: Omittable[NonEmptyStrList] = None
    confidence: UnitInterval = 0.6
    source_tool: Omittable[NonEmptyStr] = None


class QueryClaimsToolInput(ToolInput):
    query: Omittable[Text2000] = None
    workspace: Omittable[StrictStr] = None
    session_id: Omittable[NonEmptyStr] = None
    tags: Omittable[NonEmptyStrList] = None
    since: Omittable[NonEmptyStr] = Field(None, description="ISO timestamp lower bound for createdAt")
    limit: PageSize = 20


class HarvestSessionKnowledgeToolInput(ToolInput):
    session_id: Omittable[NonEmptyStr] = None
    workspace: Omittable[StrictStr] = None
    max_items: PageSize = 20
    min_confidence: UnitInterval = 0.0
    include_recommendations: StrictBool = True
    memory_file_path: Omittable[NonEmptyStr] = None
    openclaw_root: Omittable[NonEmptyStr] = None
    persist_to_memory: StrictBool = True
    source: Literal["openclaw-session", "manual", "harvest"] = "harvest"


# ═══════════════════════════════════════════════════════════════════════════════
# MEMORY
# ═══════════════════════════════════════════════════════════════════════════════

class MemoryAddToolInput(ToolInput):
    content: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    scope: Literal["codebase", "module", "function"] = "codebase"
    scope_key: Omittable[NonEmptyStr] = None
    source: Literal["agent", "analysis", "user"] = "agent"
    confidence: UnitInterval = 0.7
    evergreen: StrictBool = False


class MemorySearchToolInput(ToolInput):
    query: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    scope_key: Omittable[NonEmptyStr] = None
    limit: PageSize = 10
    min_score: UnitInterval = 0.1


class MemoryUpdateToolInput(ToolInput):
    id: NonEmptyStr
    content: NonEmptyStr
    workspace: Omittable[StrictStr] = None


class MemoryDeleteToolInput(ToolInput):
    id: NonEmptyStr
    workspace: Omittable[StrictStr] = None


# ═══════════════════════════════════════════════════════════════════════════════
# AUDIT, RUNS & EXPORT
# ═══════════════════════════════════════════════════════════════════════════════

class RunAuditToolInput(ToolInput):
    type: AuditType = Field(description="Type of audit to perform")
    scope: Omittable[StrList] = None
    generate_report: StrictBool = True


class ListRunsToolInput(ToolInput):
    workspace: Omittable[StrictStr] = None
    limit: Omittable[Annotated[int, Strict(), Gt(0), Le(100)]] = Field(
        None, description="Maximum number of runs to return (default: 10, max: 100)"
    )


class DiffRunsToolInput(ToolInput):
    workspace: Omittable[StrictStr] = None
    run_id_a: NonEmptyStr = Field(alias="runIdA")
    run_id_b: NonEmptyStr = Field(alias="runIdB")
    detailed: StrictBool = False


class ExportIndexToolInput(ToolInput):
    format: ExportFormat
    output_path: NonEmptyStr
    include_embeddings: StrictBool = False
    scope: Omittable[StrList] = None


# ═══════════════════════════════════════════════════════════════════════════════
# VERIFICATION PLANS, EPISODES & TECHNIQUES
# ═══════════════════════════════════════════════════════════════════════════════

class ListVerificationPlansToolInput(PagedListInput):
    """Input for list_verification_plans."""


class ListEpisodesToolInput(PagedListInput):
    """Input for list_episodes."""


class ListTechniquePrimitivesToolInput(PagedListInput):
    """Input for list_technique_primitives."""


class ListTechniqueCompositionsToolInput(PagedListInput):
    """Input for list_technique_compositions."""


class SelectTechniqueCompositionsToolInput(ToolInput):
    intent: NonEmptyStr = Field(description="Intent or goal to select compositions for")
    workspace: Omittable[StrictStr] = None
    limit: Omittable[PositiveInt] = None


class CompileTechniqueCompositionToolInput(ToolInput):
    composition_id: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    include_primitives: Omittable[StrictBool] = None


class CompileIntentBundlesToolInput(ToolInput):
    intent: NonEmptyStr
    workspace: Omittable[StrictStr] = None
    limit: Omittable[PositiveInt] = None
    include_primitives: Omittable[StrictBool] = None


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTRUCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class ListConstructionsToolInput(ToolInput):
    tags: Omittable[StrList] = None
    capabilities: Omittable[StrList] = None
    requires: Omittable[StrList] = Field(None, description="Alias for capabilities filter")
    language: Omittable[StrictStr] = None
    trust_tier: Omittable[Literal["official", "partner", "community"]] = None
    available_only: StrictBool = False


class ListCapabilitiesToolInput(WorkspaceOnlyInput):
    """Input for list_capabilities."""


class InvokeConstructionToolInput(ToolInput):
    construction_id: NonEmptyStr
    # Opaque payload handed to the construction; null is a legal payload.
    input: Any = None
    workspace: Omittable[StrictStr] = None


class DescribeConstructionToolInput(ToolInput):
    id: NonEmptyStr
    include_example: StrictBool = True
    include_composition_hints: StrictBool = True


class ExplainOperatorToolInput(ToolInput):
    operator: Omittable[ConstructionOperator] = None
    situation: Omittable[NonEmptyStr] = None

    @model_validator(mode="after")
    def require_operator_or_situation(self):
        if self.operator is None and self.situation is None:
            raise PydanticCustomError("custom", "Either operator or situation is required")
        return self


class CheckConstructionTypesToolInput(ToolInput):
    first: NonEmptyStr
    second: NonEmptyStr
    operator: Literal["seq", "fanout", "fallback"]


__all__ = [
    "ContractModel",
    "ToolInput",
    "Omittable",
    "SearchFilter",
    "ContextHints",
    "CustomRating",
    "Counterevidence",
    "BootstrapToolInput",
    "StatusToolInput",
    "SystemContractToolInput",
    "DiagnoseSelfToolInput",
    "GetSessionBriefingToolInput",
    "ListStrategicContractsToolInput",
    "GetStrategicContractToolInput",
    "QueryToolInput",
    "LibrainianGetUncertaintyToolInput",
    "SemanticSearchToolInput",
    "ValidateImportToolInput",
    "GetContextPackToolInput",
    "GetContextPackBundleToolInput",
    "GetRepoMapToolInput",
    "FindSymbolToolInput",
    "ExplainFunctionToolInput",
    "FindCallersToolInput",
    "FindCalleesToolInput",
    "FindUsagesToolInput",
    "TraceImportsToolInput",
    "TraceControlFlowToolInput",
    "TraceDataFlowToolInput",
    "GetChangeImpactToolInput",
    "BlastRadiusToolInput",
    "PreCommitCheckToolInput",
    "LibrarianCompletenessCheckToolInput",
    "EstimateBudgetToolInput",
    "EstimateTaskComplexityToolInput",
    "SynthesizePlanToolInput",
    "SubmitFeedbackToolInput",
    "FeedbackRetrievalResultToolInput",
    "ResetSessionStateToolInput",
    "GetRetrievalStatsToolInput",
    "GetExplorationSuggestionsToolInput",
    "RequestHumanReviewToolInput",
    "VerifyClaimToolInput",
    "ClaimWorkScopeToolInput",
    "AppendClaimToolInput",
    "QueryClaimsToolInput",
    "HarvestSessionKnowledgeToolInput",
    "MemoryAddToolInput",
    "MemorySearchToolInput",
    "MemoryUpdateToolInput",
    "MemoryDeleteToolInput",
    "RunAuditToolInput",
    "ListRunsToolInput",
    "DiffRunsToolInput",
    "ExportIndexToolInput",
    "ListVerificationPlansToolInput",
    "ListEpisodesToolInput",
    "ListTechniquePrimitivesToolInput",
    "ListTechniqueCompositionsToolInput",
    "SelectTechniqueCompositionsToolInput",
    "CompileTechniqueCompositionToolInput",
    "CompileIntentBundlesToolInput",
    "ListConstructionsToolInput",
    "ListCapabilitiesToolInput",
    "InvokeConstructionToolInput",
    "DescribeConstructionToolInput",
    "ExplainOperatorToolInput",
    "CheckConstructionTypesToolInput",
]
