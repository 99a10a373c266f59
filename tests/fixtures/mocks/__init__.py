"""Mock implementations of the capability's external collaborators."""

from .llm import MockChatCapability, StaticModelIdResolver, semantics_document

__all__ = [
    "MockChatCapability",
    "StaticModelIdResolver",
    "semantics_document",
]
