"""Code Intelligence Capability Configuration.

Exports:
- Product identity (PRODUCT_VERSION, service name, schema id prefix)
- Provider LLM configuration and the default model-id resolver
"""

from code_intel_capability.config.identity import (
    PRODUCT_VERSION,
    PRODUCT_SERVICE_NAME,
    SCHEMA_ID_PREFIX,
)

from code_intel_capability.config.llm_config import (
    CAPABILITY_ID,
    ProviderLLMConfig,
    SUPPORTED_PROVIDERS,
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_CODEX_MODEL,
    get_provider_configs,
    get_default_provider,
    get_provider_config,
    resolve_model_id,
)

__all__ = [
    # Identity
    "PRODUCT_VERSION",
    "PRODUCT_SERVICE_NAME",
    "SCHEMA_ID_PREFIX",
    # LLM Configuration
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
