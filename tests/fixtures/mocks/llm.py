"""Mock chat capability for testing.

Provides canned responses for the semantic extraction pipeline without
requiring a real LLM provider.
"""

from typing import Any, Dict, List, Optional
import json


def semantics_document(include_wisdom: bool = True) -> Dict[str, Any]:
    """A well-formed semantics reply body."""
    document: Dict[str, Any] = {
        "purpose": {
            "summary": "Parses a function signature string into a structured form.",
            "explanation": "Tokenizes the signature and builds a parameter list.",
            "problemSolved": "Callers need typed access to parameters.",
            "valueProp": "Single place to interpret signature syntax.",
        },
        "domain": {
            "concepts": ["signature", "parameter", "type annotation"],
            "boundedContext": "parser",
            "businessRules": ["Optional parameters follow required ones"],
        },
        "intent": {
            "primaryUseCase": "Index function signatures",
            "secondaryUseCases": ["Render hover documentation"],
            "antiUseCases": ["Executing code"],
        },
        "mechanism": {
            "explanation": "Single pass over tokens with a small state machine.",
            "algorithm": "Linear scan",
            "approach": "Recursive descent on bracket depth",
            "patterns": ["state machine"],
        },
        "complexity": {
            "time": "O(n)",
            "space": "O(n)",
            "cognitive": "moderate",
        },
    }
    if include_wisdom:
        document["wisdom"] = {
            "gotchas": ["Default values may contain commas", "Generics nest brackets"],
            "tips": ["Normalize whitespace first"],
            "tribal": ["Originally written for TypeScript only"],
            "learningPath": [
                {"order": 1, "description": "Read the tokenizer"},
                {"order": 2, "description": "Read the parameter builder"},
            ],
        }
    return document


class MockChatCapability:
    """Mock chat capability for testing the extraction pipeline.

    Supports configurable responses based on prompt content.
    Tracks all requests for assertion in tests.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, str]] = None,
        default_response: Optional[str] = None,
        error: Optional[BaseException] = None,
    ):
        """Initialize mock capability.

        Args:
            responses: Dict mapping prompt substrings to responses.
                       If a prompt contains the key, return the value.
            default_response: Reply when no key matches (a full
                              semantics document by default)
            error: Raised from chat() instead of replying, when set
        """
        self.responses = responses or {}
        self.default_response = (
            default_response if default_response is not None else json.dumps(semantics_document())
        )
        self.error = error
        self.call_count = 0
        self.calls: List[Dict[str, Any]] = []

    async def chat(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Return the configured response for the request's prompt."""
        self.call_count += 1
        self.calls.append(request)

        if self.error is not None:
            raise self.error

        prompt = request["messages"][0]["content"]
        for key, response in self.responses.items():
            if key.lower() in prompt.lower():
                return {"provider": request["provider"], "content": response}

        return {"provider": request["provider"], "content": self.default_response}

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["messages"][0]["content"]

    def reset(self):
        """Reset call tracking."""
        self.call_count = 0
        self.calls = []

    def set_response(self, key: str, response: str):
        """Set a custom response for prompts containing key."""
        self.responses[key] = response


class StaticModelIdResolver:
    """Deterministic provider to model-id lookup that records calls."""

    def __init__(self, model_ids: Optional[Dict[str, str]] = None):
        self.model_ids = model_ids or {"claude": "claude-test-model", "codex": "codex-test-model"}
        self.calls: List[str] = []

    def __call__(self, provider: str) -> str:
        self.calls.append(provider)
        return self.model_ids[provider]
