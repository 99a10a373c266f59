"""Validate-then-execute gate for agent tool calls.

Input is validated before the tool handler runs, so no side effect ever
happens on the invalid branch. Envelopes returned by handlers of tools with
a structured output are checked before they leave the gate.
"""

import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from code_intel_capability.adapters import get_logger
from code_intel_capability.agents.protocols import LoggerProtocol
from code_intel_capability.contracts.envelope import (
    ConstructionResultEnvelope,
    schema_failure_message,
    validate_construction_result,
)
from code_intel_capability.contracts.registry import tool_key
from code_intel_capability.contracts.validation import (
    ValidationIssue,
    validate_tool_input,
    validate_tool_output,
)


ToolHandler = Callable[[Dict[str, Any]], Awaitable[Union[ConstructionResultEnvelope, Any]]]


def _failure(tool: str, errors: List[ValidationIssue], error: Optional[str] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {
        "success": False,
        "tool": tool,
        "errors": [issue.model_dump() for issue in errors],
    }
    if error:
        response["error"] = error
    return response


class ToolCallGate:
    """Runs tool handlers only on validated input.

    Usage:
        gate = ToolCallGate()
        response = await gate.call("query", raw_args, handle_query)
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or get_logger()

    async def call(self, tool_name: str, raw_input: Any, handler: ToolHandler) -> Any:
        """Validate input, run the handler, validate its output.

        Args:
            tool_name: Registered tool name
            raw_input: Untyped agent input
            handler: Async callable receiving the validated, defaulted input

        Returns:
            The validated envelope dict or output payload on success;
            `{success: False, tool, errors}` on any contract violation.
            Handler exceptions propagate.
        """
        name = tool_key(tool_name)
        validation = validate_tool_input(name, raw_input, logger=self._logger)
        if not validation.valid:
            return _failure(name, validation.errors)

        started = time.monotonic()
        output = await handler(validation.data)
        duration_ms = int((time.monotonic() - started) * 1000)

        if isinstance(output, ConstructionResultEnvelope):
            checked = validate_construction_result(name, output, logger=self._logger)
            if not checked.valid:
                return _failure(
                    name,
                    checked.errors,
                    error=schema_failure_message(output.meta.construction_id, checked.errors),
                )
            self._logger.debug("tool_call_completed", tool=name, duration_ms=duration_ms)
            return checked.data

        checked = validate_tool_output(name, output, logger=self._logger)
        if not checked.valid:
            return _failure(name, checked.errors, error=schema_failure_message(name, checked.errors))
        self._logger.debug("tool_call_completed", tool=name, duration_ms=duration_ms)
        return checked.data


__all__ = ["ToolHandler", "ToolCallGate"]
