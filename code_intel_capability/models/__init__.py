"""Capability data models."""

from .semantics import (
    CodeUnit,
    SemanticExtractionOptions,
    WisdomSection,
    LearningPathStep,
    SemanticsRecord,
    EvidenceRecord,
    TokenUsage,
    SemanticExtractionResult,
)

__all__ = [
    "CodeUnit",
    "SemanticExtractionOptions",
    "WisdomSection",
    "LearningPathStep",
    "SemanticsRecord",
    "EvidenceRecord",
    "TokenUsage",
    "SemanticExtractionResult",
]
