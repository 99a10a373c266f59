"""Product identity constants for the Code Intelligence Capability.

Centralizes product identity for the agent-facing contract.
"""

PRODUCT_VERSION = "1.0.0"

# Bound to every log event and used in JSON schema $id values
PRODUCT_SERVICE_NAME = "code-intel"
SCHEMA_ID_PREFIX = "code-intel://schemas/"
