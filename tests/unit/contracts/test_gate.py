"""Unit tests for the validate-then-execute tool call gate."""

import pytest

from code_intel_capability.contracts.envelope import build_construction_result_envelope
from code_intel_capability.contracts.gate import ToolCallGate


class RecordingHandler:
    """Async tool handler that records the input it received."""

    def __init__(self, output=None, error=None):
        self.output = output if output is not None else {"packs": []}
        self.error = error
        self.calls = []

    async def __call__(self, validated_input):
        self.calls.append(validated_input)
        if self.error is not None:
            raise self.error
        return self.output


class TestToolCallGateInput:
    """Tests for the input side of the gate."""

    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_handler(self, recording_logger):
        """Test handlers do not run on invalid input."""
        handler = RecordingHandler()
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call("query", {"intent": "", "bogus": 1}, handler)

        assert handler.calls == []
        assert response["success"] is False
        assert response["tool"] == "query"
        assert {e["path"] for e in response["errors"]} == {"intent", "bogus"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, recording_logger):
        """Test unknown tools fail without running the handler."""
        handler = RecordingHandler()
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call("not_a_real_tool", {}, handler)

        assert handler.calls == []
        assert response["errors"][0]["code"] == "unknown_tool"

    @pytest.mark.asyncio
    async def test_handler_receives_defaulted_input(self, recording_logger):
        """Test the handler sees validated input with defaults applied."""
        handler = RecordingHandler()
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call("query", {"intent": "how does auth work"}, handler)

        assert response == {"packs": []}
        assert handler.calls[0]["pageSize"] == 20
        assert handler.calls[0]["depth"] == "L1"
        assert "tool_call_completed" in recording_logger.names("debug")

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self, recording_logger):
        """Test handler exceptions are not swallowed."""
        gate = ToolCallGate(logger=recording_logger)

        with pytest.raises(RuntimeError, match="index offline"):
            await gate.call("status", {}, RecordingHandler(error=RuntimeError("index offline")))


class TestToolCallGateOutput:
    """Tests for the output side of the gate."""

    @pytest.mark.asyncio
    async def test_valid_envelope_returned_as_dict(self, recording_logger):
        """Test well-formed envelopes pass through in wire form."""
        envelope = build_construction_result_envelope(
            output={"intent": "harden auth", "compositions": [], "total": 0},
            schema_name="SelectTechniqueCompositionsOutputSchema",
            run_id="run-1",
            duration_ms=4,
            construction_id="select_technique_compositions",
            intent="harden auth",
            trivial_result=True,
        )
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call(
            "select_technique_compositions", {"intent": "harden auth"}, RecordingHandler(output=envelope)
        )

        assert response["success"] is True
        assert response["trivialResult"] is True
        assert response["output"]["total"] == 0

    @pytest.mark.asyncio
    async def test_malformed_envelope_output(self, recording_logger):
        """Test an envelope with invalid output becomes a failure."""
        envelope = build_construction_result_envelope(
            output={"intent": "harden auth", "compositions": []},
            schema_name="SelectTechniqueCompositionsOutputSchema",
            run_id="run-1",
            duration_ms=4,
            construction_id="select_technique_compositions",
        )
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call(
            "select_technique_compositions", {"intent": "harden auth"}, RecordingHandler(output=envelope)
        )

        assert response["success"] is False
        assert response["errors"][0]["path"] == "output.total"
        assert response["error"].startswith("schema_validation_failed(select_technique_compositions)")

    @pytest.mark.asyncio
    async def test_bare_structured_output_validated(self, recording_logger):
        """Test bare outputs of structured tools are validated too."""
        gate = ToolCallGate(logger=recording_logger)

        response = await gate.call(
            "compile_technique_composition",
            {"compositionId": "tc-1"},
            RecordingHandler(output={"compositionId": "tc-1", "template": {"id": "wt-1"}}),
        )

        assert response["success"] is False
        assert response["errors"][0]["path"] == "missingPrimitiveIds"
