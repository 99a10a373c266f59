"""Infrastructure adapters for the code intelligence capability.

Only logging lives here. Components take an optional logger and fall back
to get_logger(), so tests and hosts can inject their own.
"""

from typing import Any, Optional

import structlog

from code_intel_capability.config.identity import PRODUCT_SERVICE_NAME
from code_intel_capability.config.llm_config import CAPABILITY_ID


def get_logger(name: Optional[str] = None, **initial_context: Any):
    """Return a structlog logger bound to the capability and service.

    Args:
        name: Optional logger name (usually the module's __name__)
        **initial_context: Key/value pairs bound to every event

    Returns:
        A structlog BoundLogger-compatible logger
    """
    logger = structlog.get_logger(name) if name else structlog.get_logger()
    return logger.bind(component=CAPABILITY_ID, service=PRODUCT_SERVICE_NAME, **initial_context)


__all__ = ["get_logger"]
