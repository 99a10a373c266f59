"""Code Intelligence Capability - LLM Configuration.

Per-provider defaults for the semantic extraction pipeline. Model ids can be
overridden from the environment:

    CODE_INTEL_CLAUDE_MODEL   model id used for the claude provider
    CODE_INTEL_CODEX_MODEL    model id used for the codex provider
    CODE_INTEL_LLM_PROVIDER   provider used when the caller does not choose one

Usage:
    from code_intel_capability.config.llm_config import resolve_model_id

    model_id = resolve_model_id("codex")
"""

import os
from dataclasses import dataclass
from typing import Dict, List


# =============================================================================
# CAPABILITY ID
# =============================================================================

CAPABILITY_ID = "code_intel"


# =============================================================================
# PROVIDER CONFIGURATIONS
# =============================================================================

@dataclass(frozen=True)
class ProviderLLMConfig:
    """LLM defaults for one provider."""
    provider: str
    model_id: str
    max_tokens: int = 1200
    temperature: float = 0.0


SUPPORTED_PROVIDERS: List[str] = ["claude", "codex"]

DEFAULT_CLAUDE_MODEL = "claude-haiku-4-5-20241022"
DEFAULT_CODEX_MODEL = "gpt-5.1-codex-mini"


def get_provider_configs() -> Dict[str, ProviderLLMConfig]:
    """Provider configurations, read from the environment at call time."""
    return {
        # ─── Claude ───
        "claude": ProviderLLMConfig(
            provider="claude",
            model_id=os.getenv("CODE_INTEL_CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
        ),
        # ─── Codex ───
        "codex": ProviderLLMConfig(
            provider="codex",
            model_id=os.getenv("CODE_INTEL_CODEX_MODEL", DEFAULT_CODEX_MODEL),
        ),
    }


def get_default_provider() -> str:
    """Provider used when the caller does not pick one.

    Raises:
        ValueError: If CODE_INTEL_LLM_PROVIDER names an unsupported provider
    """
    provider = os.getenv("CODE_INTEL_LLM_PROVIDER", "claude")
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Unsupported LLM provider: {provider}")
    return provider


def get_provider_config(provider: str) -> ProviderLLMConfig:
    """Get LLM config for a provider.

    Args:
        provider: Provider name ("claude" or "codex")

    Returns:
        ProviderLLMConfig

    Raises:
        KeyError: If provider is not supported
    """
    configs = get_provider_configs()
    if provider not in configs:
        raise KeyError(f"Unknown LLM provider: {provider}")
    return configs[provider]


def resolve_model_id(provider: str) -> str:
    """Default model-id resolver: a pure lookup, no network effect."""
    return get_provider_config(provider).model_id


__all__ = [
    "CAPABILITY_ID",
    "ProviderLLMConfig",
    "SUPPORTED_PROVIDERS",
    "DEFAULT_CLAUDE_MODEL",
    "DEFAULT_CODEX_MODEL",
    "get_provider_configs",
    "get_default_provider",
    "get_provider_config",
    "resolve_model_id",
]
