"""
Tool Schema Registry.

Closed enumeration of every tool the backend exposes, mapped to its strict
input model and, for the technique tools, its structured output model and
output hint. The three are registered together: a tool cannot be named
anywhere in the capability without being present here.

Structured outputs are also registered by schema name, together with the
constructions the capability runs itself (extract_semantics). Both tables
are built once, at import.

Usage:
    from code_intel_capability.contracts.registry import register_schemas, ToolName

    schemas = register_schemas()
    schemas[ToolName.QUERY.value].input_model
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from code_intel_capability.contracts import schemas as s
from code_intel_capability.contracts.outputs import (
    DEFAULT_TOOL_OUTPUT_SCHEMA_HINT,
    CompileIntentBundlesOutputSchema,
    CompileTechniqueCompositionOutputSchema,
    SelectTechniqueCompositionsOutputSchema,
    SemanticsRecordOutputSchema,
    ToolOutput,
    ToolOutputSchemaHint,
    build_output_schema_hint,
)
from code_intel_capability.config.identity import SCHEMA_ID_PREFIX
from code_intel_capability.models.semantics import (
    EXTRACT_SEMANTICS_CONSTRUCTION_ID,
    SEMANTICS_SCHEMA_NAME,
)


class ToolName(str, Enum):
    """Every tool exposed to agents."""
    # ─── Bootstrap & status ───
    BOOTSTRAP = "bootstrap"
    STATUS = "status"
    SYSTEM_CONTRACT = "system_contract"
    DIAGNOSE_SELF = "diagnose_self"
    GET_SESSION_BRIEFING = "get_session_briefing"
    LIST_STRATEGIC_CONTRACTS = "list_strategic_contracts"
    GET_STRATEGIC_CONTRACT = "get_strategic_contract"
    # ─── Retrieval ───
    QUERY = "query"
    SEMANTIC_SEARCH = "semantic_search"
    LIBRAINIAN_GET_UNCERTAINTY = "librainian_get_uncertainty"
    GET_CONTEXT_PACK = "get_context_pack"
    GET_CONTEXT_PACK_BUNDLE = "get_context_pack_bundle"
    GET_REPO_MAP = "get_repo_map"
    FIND_SYMBOL = "find_symbol"
    EXPLAIN_FUNCTION = "explain_function"
    FIND_CALLERS = "find_callers"
    FIND_CALLEES = "find_callees"
    FIND_USAGES = "find_usages"
    TRACE_IMPORTS = "trace_imports"
    TRACE_CONTROL_FLOW = "trace_control_flow"
    TRACE_DATA_FLOW = "trace_data_flow"
    VALIDATE_IMPORT = "validate_import"
    # ─── Change impact ───
    GET_CHANGE_IMPACT = "get_change_impact"
    BLAST_RADIUS = "blast_radius"
    PRE_COMMIT_CHECK = "pre_commit_check"
    LIBRARIAN_COMPLETENESS_CHECK = "librarian_completeness_check"
    # ─── Planning & budget ───
    ESTIMATE_BUDGET = "estimate_budget"
    ESTIMATE_TASK_COMPLEXITY = "estimate_task_complexity"
    SYNTHESIZE_PLAN = "synthesize_plan"
    # ─── Feedback & session ───
    SUBMIT_FEEDBACK = "submit_feedback"
    FEEDBACK_RETRIEVAL_RESULT = "feedback_retrieval_result"
    RESET_SESSION_STATE = "reset_session_state"
    GET_RETRIEVAL_STATS = "get_retrieval_stats"
    GET_EXPLORATION_SUGGESTIONS = "get_exploration_suggestions"
    # ─── Escalation & claims ───
    REQUEST_HUMAN_REVIEW = "request_human_review"
    VERIFY_CLAIM = "verify_claim"
    CLAIM_WORK_SCOPE = "claim_work_scope"
    APPEND_CLAIM = "append_claim"
    QUERY_CLAIMS = "query_claims"
    HARVEST_SESSION_KNOWLEDGE = "harvest_session_knowledge"
    # ─── Memory ───
    MEMORY_ADD = "memory_add"
    MEMORY_SEARCH = "memory_search"
    MEMORY_UPDATE = "memory_update"
    MEMORY_DELETE = "memory_delete"
    # ─── Audit, runs & export ───
    RUN_AUDIT = "run_audit"
    LIST_RUNS = "list_runs"
    DIFF_RUNS = "diff_runs"
    EXPORT_INDEX = "export_index"
    # ─── Verification & techniques ───
    LIST_VERIFICATION_PLANS = "list_verification_plans"
    LIST_EPISODES = "list_episodes"
    LIST_TECHNIQUE_PRIMITIVES = "list_technique_primitives"
    LIST_TECHNIQUE_COMPOSITIONS = "list_technique_compositions"
    SELECT_TECHNIQUE_COMPOSITIONS = "select_technique_compositions"
    COMPILE_TECHNIQUE_COMPOSITION = "compile_technique_composition"
    COMPILE_INTENT_BUNDLES = "compile_intent_bundles"
    # ─── Constructions ───
    LIST_CONSTRUCTIONS = "list_constructions"
    LIST_CAPABILITIES = "list_capabilities"
    INVOKE_CONSTRUCTION = "invoke_construction"
    DESCRIBE_CONSTRUCTION = "describe_construction"
    EXPLAIN_OPERATOR = "explain_operator"
    CHECK_CONSTRUCTION_TYPES = "check_construction_types"


@dataclass(frozen=True)
class ToolSchema:
    """Registered contract for a single tool."""
    name: str
    input_model: Type[s.ToolInput]
    description: str
    output_model: Optional[Type[ToolOutput]] = None
    output_hint: Optional[ToolOutputSchemaHint] = None
    allows_empty_input: bool = False

    @property
    def output_schema_name(self) -> Optional[str]:
        return self.output_model.__name__ if self.output_model else None


# ═══════════════════════════════════════════════════════════════════
# SOURCE LIST: (tool, input model, description, allows empty input)
# ═══════════════════════════════════════════════════════════════════

_TOOL_SOURCES: List[Tuple[ToolName, Type[s.ToolInput], str, bool]] = [
    (ToolName.BOOTSTRAP, s.BootstrapToolInput, "Index a workspace for code intelligence", False),
    (ToolName.STATUS, s.StatusToolInput, "Report index and session health", False),
    (ToolName.SYSTEM_CONTRACT, s.SystemContractToolInput, "Describe the backend contract and versions", False),
    (ToolName.DIAGNOSE_SELF, s.DiagnoseSelfToolInput, "Run a self-diagnostic probe", False),
    (ToolName.GET_SESSION_BRIEFING, s.GetSessionBriefingToolInput, "Summarize session state and next steps", False),
    (ToolName.LIST_STRATEGIC_CONTRACTS, s.ListStrategicContractsToolInput, "List API/event/schema contracts", True),
    (ToolName.GET_STRATEGIC_CONTRACT, s.GetStrategicContractToolInput, "Get a single strategic contract", False),
    (ToolName.QUERY, s.QueryToolInput, "Intent-driven context retrieval", False),
    (ToolName.SEMANTIC_SEARCH, s.SemanticSearchToolInput, "Semantic localization search", False),
    (ToolName.LIBRAINIAN_GET_UNCERTAINTY, s.LibrainianGetUncertaintyToolInput, "Probe retrieval uncertainty for a query", False),
    (ToolName.GET_CONTEXT_PACK, s.GetContextPackToolInput, "Assemble a token-budgeted context pack", False),
    (ToolName.GET_CONTEXT_PACK_BUNDLE, s.GetContextPackBundleToolInput, "Bundle context packs for entities", False),
    (ToolName.GET_REPO_MAP, s.GetRepoMapToolInput, "Ranked repository map", True),
    (ToolName.FIND_SYMBOL, s.FindSymbolToolInput, "Discover symbols by name", False),
    (ToolName.EXPLAIN_FUNCTION, s.ExplainFunctionToolInput, "Explain a function", False),
    (ToolName.FIND_CALLERS, s.FindCallersToolInput, "Find callers of a function", False),
    (ToolName.FIND_CALLEES, s.FindCalleesToolInput, "Find callees of a function", False),
    (ToolName.FIND_USAGES, s.FindUsagesToolInput, "Find usages of a symbol", False),
    (ToolName.TRACE_IMPORTS, s.TraceImportsToolInput, "Trace the import graph of a file", False),
    (ToolName.TRACE_CONTROL_FLOW, s.TraceControlFlowToolInput, "Trace control flow of a function", False),
    (ToolName.TRACE_DATA_FLOW, s.TraceDataFlowToolInput, "Trace data flow between a source and sink", False),
    (ToolName.VALIDATE_IMPORT, s.ValidateImportToolInput, "Check that an import really exists", False),
    (ToolName.GET_CHANGE_IMPACT, s.GetChangeImpactToolInput, "Ranked blast radius for a change", False),
    (ToolName.BLAST_RADIUS, s.BlastRadiusToolInput, "Alias for get_change_impact", False),
    (ToolName.PRE_COMMIT_CHECK, s.PreCommitCheckToolInput, "Risk check for changed files", False),
    (ToolName.LIBRARIAN_COMPLETENESS_CHECK, s.LibrarianCompletenessCheckToolInput, "Check change completeness", True),
    (ToolName.ESTIMATE_BUDGET, s.EstimateBudgetToolInput, "Estimate token budget for a task", False),
    (ToolName.ESTIMATE_TASK_COMPLEXITY, s.EstimateTaskComplexityToolInput, "Estimate task complexity", False),
    (ToolName.SYNTHESIZE_PLAN, s.SynthesizePlanToolInput, "Synthesize a plan from context packs", False),
    (ToolName.SUBMIT_FEEDBACK, s.SubmitFeedbackToolInput, "Record task outcome feedback", False),
    (ToolName.FEEDBACK_RETRIEVAL_RESULT, s.FeedbackRetrievalResultToolInput, "Record retrieval helpfulness", False),
    (ToolName.RESET_SESSION_STATE, s.ResetSessionStateToolInput, "Reset session state", True),
    (ToolName.GET_RETRIEVAL_STATS, s.GetRetrievalStatsToolInput, "Retrieval statistics", True),
    (ToolName.GET_EXPLORATION_SUGGESTIONS, s.GetExplorationSuggestionsToolInput, "Suggest unexplored areas", True),
    (ToolName.REQUEST_HUMAN_REVIEW, s.RequestHumanReviewToolInput, "Escalate a low-confidence action", False),
    (ToolName.VERIFY_CLAIM, s.VerifyClaimToolInput, "Verify a recorded claim", False),
    (ToolName.CLAIM_WORK_SCOPE, s.ClaimWorkScopeToolInput, "Claim or release a work scope", False),
    (ToolName.APPEND_CLAIM, s.AppendClaimToolInput, "Append a session claim", False),
    (ToolName.QUERY_CLAIMS, s.QueryClaimsToolInput, "Query session claims", True),
    (ToolName.HARVEST_SESSION_KNOWLEDGE, s.HarvestSessionKnowledgeToolInput, "Harvest session knowledge", True),
    (ToolName.MEMORY_ADD, s.MemoryAddToolInput, "Add a memory fact", False),
    (ToolName.MEMORY_SEARCH, s.MemorySearchToolInput, "Search memory facts", False),
    (ToolName.MEMORY_UPDATE, s.MemoryUpdateToolInput, "Update a memory fact", False),
    (ToolName.MEMORY_DELETE, s.MemoryDeleteToolInput, "Delete a memory fact", False),
    (ToolName.RUN_AUDIT, s.RunAuditToolInput, "Run an index audit", False),
    (ToolName.LIST_RUNS, s.ListRunsToolInput, "List indexing runs", True),
    (ToolName.DIFF_RUNS, s.DiffRunsToolInput, "Diff two indexing runs", False),
    (ToolName.EXPORT_INDEX, s.ExportIndexToolInput, "Export the index", False),
    (ToolName.LIST_VERIFICATION_PLANS, s.ListVerificationPlansToolInput, "List verification plans", True),
    (ToolName.LIST_EPISODES, s.ListEpisodesToolInput, "List recorded episodes", True),
    (ToolName.LIST_TECHNIQUE_PRIMITIVES, s.ListTechniquePrimitivesToolInput, "List technique primitives", True),
    (ToolName.LIST_TECHNIQUE_COMPOSITIONS, s.ListTechniqueCompositionsToolInput, "List technique compositions", True),
    (ToolName.SELECT_TECHNIQUE_COMPOSITIONS, s.SelectTechniqueCompositionsToolInput, "Select compositions for an intent", False),
    (ToolName.COMPILE_TECHNIQUE_COMPOSITION, s.CompileTechniqueCompositionToolInput, "Compile a technique composition", False),
    (ToolName.COMPILE_INTENT_BUNDLES, s.CompileIntentBundlesToolInput, "Compile work bundles for an intent", False),
    (ToolName.LIST_CONSTRUCTIONS, s.ListConstructionsToolInput, "List available constructions", True),
    (ToolName.LIST_CAPABILITIES, s.ListCapabilitiesToolInput, "List backend capabilities", True),
    (ToolName.INVOKE_CONSTRUCTION, s.InvokeConstructionToolInput, "Invoke a construction", False),
    (ToolName.DESCRIBE_CONSTRUCTION, s.DescribeConstructionToolInput, "Describe a construction", False),
    (ToolName.EXPLAIN_OPERATOR, s.ExplainOperatorToolInput, "Explain a composition operator", False),
    (ToolName.CHECK_CONSTRUCTION_TYPES, s.CheckConstructionTypesToolInput, "Type-check two composed constructions", False),
]

# Tools that promise a structured output, with the hint description.
_OUTPUT_SOURCES: Dict[ToolName, Tuple[Type[ToolOutput], str]] = {
    ToolName.SELECT_TECHNIQUE_COMPOSITIONS: (
        SelectTechniqueCompositionsOutputSchema,
        "Technique compositions selected for an intent",
    ),
    ToolName.COMPILE_TECHNIQUE_COMPOSITION: (
        CompileTechniqueCompositionOutputSchema,
        "Compiled work template for a technique composition",
    ),
    ToolName.COMPILE_INTENT_BUNDLES: (
        CompileIntentBundlesOutputSchema,
        "Compiled work bundles for an intent",
    ),
}

# Constructions the capability runs itself: (construction id, schema name,
# output model, hint description).
_CONSTRUCTION_SOURCES: List[Tuple[str, str, Type[ToolOutput], str]] = [
    (
        EXTRACT_SEMANTICS_CONSTRUCTION_ID,
        SEMANTICS_SCHEMA_NAME,
        SemanticsRecordOutputSchema,
        "Semantics extracted for a code unit",
    ),
]


@dataclass(frozen=True)
class OutputSchema:
    """Registered structured output, keyed by schema name."""
    name: str
    model: Type[ToolOutput]
    hint: ToolOutputSchemaHint


def _build_registry() -> Mapping[str, ToolSchema]:
    registry: Dict[str, ToolSchema] = {}
    for tool, input_model, description, allows_empty in _TOOL_SOURCES:
        output_model, output_hint = None, None
        if tool in _OUTPUT_SOURCES:
            output_model, output_description = _OUTPUT_SOURCES[tool]
            output_hint = build_output_schema_hint(output_model, output_description)
        registry[tool.value] = ToolSchema(
            name=tool.value,
            input_model=input_model,
            description=description,
            output_model=output_model,
            output_hint=output_hint,
            allows_empty_input=allows_empty,
        )
    return MappingProxyType(registry)


def _build_output_registry(
    registry: Mapping[str, ToolSchema],
) -> Tuple[Mapping[str, OutputSchema], Mapping[str, str]]:
    outputs: Dict[str, OutputSchema] = {}
    for tool_schema in registry.values():
        if tool_schema.output_model is not None:
            outputs[tool_schema.output_schema_name] = OutputSchema(
                name=tool_schema.output_schema_name,
                model=tool_schema.output_model,
                hint=tool_schema.output_hint,
            )

    constructions: Dict[str, str] = {}
    for construction_id, schema_name, model, description in _CONSTRUCTION_SOURCES:
        outputs[schema_name] = OutputSchema(
            name=schema_name,
            model=model,
            hint=build_output_schema_hint(model, description),
        )
        constructions[construction_id] = schema_name
    return MappingProxyType(outputs), MappingProxyType(constructions)


_REGISTRY: Mapping[str, ToolSchema] = _build_registry()
_OUTPUT_REGISTRY, _CONSTRUCTION_OUTPUTS = _build_output_registry(_REGISTRY)


def register_schemas() -> Mapping[str, ToolSchema]:
    """Return the tool registry.

    The registry is built once at import; every call returns the same
    read-only mapping.

    Returns:
        Read-only mapping of tool name to ToolSchema, in declaration order
    """
    return _REGISTRY


def tool_key(tool_name: Any) -> str:
    """Normalize a ToolName member or plain string to the registry key."""
    return tool_name.value if isinstance(tool_name, ToolName) else str(tool_name)


def get_tool_schema(tool_name: str) -> Optional[ToolSchema]:
    """Look up a tool's registered schema, or None when unknown."""
    return _REGISTRY.get(tool_key(tool_name))


def list_tool_schemas() -> List[str]:
    """Registered tool names, in declaration order."""
    return list(_REGISTRY.keys())


def list_output_schemas() -> List[str]:
    """Registered structured output schema names."""
    return list(_OUTPUT_REGISTRY.keys())


def get_expected_output_schema_name(tool_or_construction_id: str) -> Optional[str]:
    """Output schema an envelope from this tool or construction must name.

    Returns None for tools without a structured output and for unknown ids.
    """
    name = tool_key(tool_or_construction_id)
    if name in _REGISTRY:
        return _REGISTRY[name].output_schema_name
    return _CONSTRUCTION_OUTPUTS.get(name)


def _resolve_output(name: str) -> Optional[OutputSchema]:
    schema_name = get_expected_output_schema_name(name) or name
    return _OUTPUT_REGISTRY.get(schema_name)


def get_output_schema(schema_or_tool_name: str) -> Optional[Type[ToolOutput]]:
    """Resolve an output model by schema name, tool name or construction id."""
    output = _resolve_output(tool_key(schema_or_tool_name))
    return output.model if output else None


def get_output_schema_hint(tool_name: str) -> ToolOutputSchemaHint:
    """Output hint for a tool, construction or schema name.

    Falls back to the default open-object hint.
    """
    output = _resolve_output(tool_key(tool_name))
    return output.hint if output else DEFAULT_TOOL_OUTPUT_SCHEMA_HINT


def _kebab(tool_name: str) -> str:
    return re.sub(r"_+", "-", tool_name).lower()


def get_tool_json_schema(tool_name: str) -> Optional[Dict[str, Any]]:
    """Draft-07 JSON schema for a tool's input, or None when unknown."""
    tool_schema = get_tool_schema(tool_name)
    if tool_schema is None:
        return None
    body = tool_schema.input_model.model_json_schema(by_alias=True, mode="validation")
    body.pop("title", None)
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "$id": f"{SCHEMA_ID_PREFIX}{_kebab(tool_schema.name)}-tool-input",
        "title": tool_schema.input_model.__name__,
        "description": tool_schema.description,
        **body,
        "additionalProperties": False,
    }


__all__ = [
    "ToolName",
    "ToolSchema",
    "OutputSchema",
    "register_schemas",
    "tool_key",
    "get_tool_schema",
    "list_tool_schemas",
    "list_output_schemas",
    "get_expected_output_schema_name",
    "get_output_schema",
    "get_output_schema_hint",
    "get_tool_json_schema",
]
