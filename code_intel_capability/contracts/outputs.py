"""
Output Schemas for structured-output tools.

The technique tools and the extract_semantics construction promise a
structured output. Every other tool's output is forward-compatible and
advertised with DEFAULT_TOOL_OUTPUT_SCHEMA_HINT.

Hints are derived from the models' JSON schema so the advertised `required`
list can never drift from what validate_tool_output enforces.
"""

from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from code_intel_capability.contracts.schemas import ContractModel, NonNegativeInt, Omittable
from code_intel_capability.models.semantics import (
    ComplexitySection,
    DomainSection,
    IntentSection,
    MechanismSection,
    PurposeSection,
    WisdomSection,
)


class ToolOutput(ContractModel):
    """Base for structured tool outputs. Top-level fields are closed."""


class CompiledTemplate(ToolOutput):
    """Compiled work template for a technique composition.

    Nested content is produced by the technique compiler and is left open.
    """
    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: Optional[StrictStr] = None


class SelectTechniqueCompositionsOutputSchema(ToolOutput):
    """Output of select_technique_compositions."""
    intent: StrictStr
    compositions: List[Dict[str, Any]]
    total: NonNegativeInt
    limited: Omittable[NonNegativeInt] = None


class CompileTechniqueCompositionOutputSchema(ToolOutput):
    """Output of compile_technique_composition."""
    composition_id: StrictStr
    template: CompiledTemplate
    primitives: Omittable[List[Dict[str, Any]]] = None
    missing_primitive_ids: List[StrictStr]


class IntentBundle(ToolOutput):
    template: CompiledTemplate
    primitives: Omittable[List[Dict[str, Any]]] = None
    missing_primitive_ids: List[StrictStr]


class CompileIntentBundlesOutputSchema(ToolOutput):
    """Output of compile_intent_bundles."""
    intent: StrictStr
    bundles: List[IntentBundle]
    total: NonNegativeInt
    limited: Omittable[NonNegativeInt] = None


class SemanticsRecordOutputSchema(ToolOutput):
    """Output of the extract_semantics construction.

    Sections keep their own typing; wisdom is always present.
    """
    purpose: PurposeSection
    domain: DomainSection
    intent: IntentSection
    mechanism: MechanismSection
    complexity: ComplexitySection
    wisdom: WisdomSection


# ═══════════════════════════════════════════════════════════════════════════════
# OUTPUT SCHEMA HINTS
# ═══════════════════════════════════════════════════════════════════════════════

class ToolOutputSchemaHint(BaseModel):
    """JSON-schema-style record advertising a tool's output contract."""
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["object"] = "object"
    description: str
    additional_properties: Optional[bool] = Field(None, alias="additionalProperties")
    required: Optional[List[str]] = None
    properties: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


DEFAULT_TOOL_OUTPUT_SCHEMA_HINT = ToolOutputSchemaHint(
    description=(
        "Tool-specific JSON payload. Structured outputs are declared for the "
        "technique selection and compilation tools; all other tools return an "
        "open object."
    ),
    additional_properties=True,
)


def build_output_schema_hint(model: Type[ToolOutput], description: str) -> ToolOutputSchemaHint:
    """Derive a hint from an output model's JSON schema.

    Args:
        model: Output model class
        description: Human-readable description of the output

    Returns:
        Hint whose `required` list matches the model's required fields
    """
    schema = model.model_json_schema(by_alias=True, mode="validation")
    properties = {
        name: {key: value for key, value in prop.items() if key != "title"}
        for name, prop in schema.get("properties", {}).items()
    }
    return ToolOutputSchemaHint(
        description=description,
        additional_properties=False,
        required=list(schema.get("required", [])),
        properties=properties,
    )


__all__ = [
    "ToolOutput",
    "CompiledTemplate",
    "IntentBundle",
    "SelectTechniqueCompositionsOutputSchema",
    "CompileTechniqueCompositionOutputSchema",
    "CompileIntentBundlesOutputSchema",
    "SemanticsRecordOutputSchema",
    "ToolOutputSchemaHint",
    "DEFAULT_TOOL_OUTPUT_SCHEMA_HINT",
    "build_output_schema_hint",
]
