"""Collaborator Protocols for the Code Intelligence Capability.

The capability never talks to an LLM, a model registry or a logging backend
directly. It depends only on the narrow protocols below; implementations
live with the host and are injected at call time.
"""

from typing import Any, List, Literal, Protocol, TypedDict, runtime_checkable


# =============================================================================
# CHAT CAPABILITY
# =============================================================================

class ChatMessage(TypedDict):
    """A single chat message."""
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(TypedDict):
    """Request handed to the chat capability.

    One user message carrying the full prompt; the capability owns transport,
    retries, concurrency limits and timeouts.
    """
    provider: str
    model_id: str
    messages: List[ChatMessage]
    max_tokens: int
    temperature: float


class ChatResponse(TypedDict):
    """Raw model response. `content` is opaque text."""
    provider: str
    content: str


@runtime_checkable
class ChatCapabilityProtocol(Protocol):
    """Protocol for the external LLM transport adapter.

    Failure is signalled by raising, never by a sentinel response.
    """

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Send a chat request and return the raw response.

        Args:
            request: Provider, model id, messages and sampling settings

        Returns:
            ChatResponse with the provider that answered and its raw text
        """
        ...


# =============================================================================
# MODEL-ID RESOLUTION
# =============================================================================

@runtime_checkable
class ModelIdResolverProtocol(Protocol):
    """Maps a provider selector to a model id. Pure lookup, always resolvable.

    Implementations: config.llm_config.resolve_model_id
    """

    def __call__(self, provider: str) -> str:
        ...


# =============================================================================
# LOGGING
# =============================================================================

@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured logger: snake_case event name plus keyword context."""

    def debug(self, event: str, **kwargs: Any) -> Any:
        ...

    def info(self, event: str, **kwargs: Any) -> Any:
        ...

    def warning(self, event: str, **kwargs: Any) -> Any:
        ...

    def error(self, event: str, **kwargs: Any) -> Any:
        ...

    def bind(self, **kwargs: Any) -> "LoggerProtocol":
        ...


__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatCapabilityProtocol",
    "ModelIdResolverProtocol",
    "LoggerProtocol",
]
