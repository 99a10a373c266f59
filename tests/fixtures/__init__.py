"""Test fixtures for code_intel_capability.

Fixture Categories:
- mocks/: Deterministic stand-ins for the chat capability and model-id resolver
- conftest.py: pytest fixtures wiring the mocks and a capturing logger
"""

from .mocks import (
    MockChatCapability,
    StaticModelIdResolver,
    semantics_document,
)

__all__ = [
    "MockChatCapability",
    "StaticModelIdResolver",
    "semantics_document",
]
