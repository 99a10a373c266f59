"""Unit tests for the semantic extraction pipeline.

Covers:
- Prompt construction and evidence
- Strict parsing of required sections
- Wisdom defaults
- Error propagation from the chat capability
"""

import json

import pytest

from code_intel_capability.contracts.envelope import validate_construction_result, validate_tool_output
from code_intel_capability.errors import AdapterFailure, ExtractionParseError
from code_intel_capability.extraction.semantics import (
    SemanticExtractor,
    compute_prompt_digest,
    extract_json_object,
    extract_semantics,
    parse_semantics_response,
    parse_wisdom,
)
from code_intel_capability.models.semantics import (
    CodeUnit,
    SemanticExtractionOptions,
    SemanticsRecord,
)
from code_intel_capability.prompts.semantics import TRUNCATION_MARKER
from fixtures.mocks import MockChatCapability, semantics_document


UNIT = {
    "name": "parseSignature",
    "filePath": "src/parser/signature.ts",
    "signature": "parseSignature(text: string): Signature",
    "content": "export function parseSignature(text) { return tokenize(text); }",
}


class TestExtractSemantics:
    """Tests for extract_semantics."""

    @pytest.mark.asyncio
    async def test_full_reply(self, mock_chat, model_resolver, recording_logger):
        """Test a complete reply populates every section and the wisdom."""
        result = await extract_semantics(
            UNIT,
            {"llmProvider": "claude"},
            chat=mock_chat,
            resolve_model_id=model_resolver,
            logger=recording_logger,
        )

        semantics = result.semantics
        assert semantics.purpose.summary == "Parses a function signature string into a structured form."
        assert semantics.complexity.time == "O(n)"
        assert result.wisdom.gotchas == ["Default values may contain commas", "Generics nest brackets"]
        assert [step.order for step in result.wisdom.learning_path] == [1, 2]
        assert result.evidence.provider == "claude"
        assert result.evidence.model_id == "claude-test-model"
        assert recording_logger.names("info") == ["semantic_extraction_completed"]

    @pytest.mark.asyncio
    async def test_request_shape(self, mock_chat, model_resolver):
        """Test the chat request carries one user message and the options."""
        options = SemanticExtractionOptions(llm_provider="codex", max_tokens=800, temperature=0.2)

        await extract_semantics(UNIT, options, chat=mock_chat, resolve_model_id=model_resolver)

        assert mock_chat.call_count == 1
        request = mock_chat.calls[0]
        assert request["provider"] == "codex"
        assert request["model_id"] == "codex-test-model"
        assert request["max_tokens"] == 800
        assert request["temperature"] == 0.2
        assert len(request["messages"]) == 1
        assert request["messages"][0]["role"] == "user"
        assert model_resolver.calls == ["codex"]

    @pytest.mark.asyncio
    async def test_prompt_digest_matches_prompt(self, mock_chat, model_resolver):
        """Test evidence fingerprints the exact prompt sent."""
        result = await extract_semantics(
            UNIT, {"llmProvider": "claude"}, chat=mock_chat, resolve_model_id=model_resolver
        )

        assert result.evidence.prompt_digest == compute_prompt_digest(mock_chat.last_prompt)
        assert len(result.evidence.prompt_digest) == 64
        assert result.evidence.timestamp.endswith("Z")

    @pytest.mark.asyncio
    async def test_prompt_includes_unit(self, mock_chat, model_resolver):
        """Test name, path, signature and content reach the prompt."""
        await extract_semantics(UNIT, {"llmProvider": "claude"}, chat=mock_chat, resolve_model_id=model_resolver)

        prompt = mock_chat.last_prompt
        assert "parseSignature" in prompt
        assert "src/parser/signature.ts" in prompt
        assert UNIT["signature"] in prompt
        assert UNIT["content"] in prompt

    @pytest.mark.asyncio
    async def test_long_content_truncated(self, mock_chat, model_resolver):
        """Test content over the limit is cut and marked."""
        unit = dict(UNIT, content="x" * 50)

        await extract_semantics(
            unit,
            {"llmProvider": "claude", "maxContentChars": 10},
            chat=mock_chat,
            resolve_model_id=model_resolver,
        )

        assert "x" * 10 + TRUNCATION_MARKER in mock_chat.last_prompt
        assert "x" * 11 not in mock_chat.last_prompt

    @pytest.mark.asyncio
    async def test_reply_without_wisdom(self, model_resolver):
        """Test absent wisdom becomes four empty lists."""
        chat = MockChatCapability(default_response=json.dumps(semantics_document(include_wisdom=False)))

        result = await extract_semantics(UNIT, {"llmProvider": "claude"}, chat=chat, resolve_model_id=model_resolver)

        wisdom = result.semantics.wisdom
        assert (wisdom.gotchas, wisdom.tips, wisdom.tribal, wisdom.learning_path) == ([], [], [], [])

    @pytest.mark.asyncio
    async def test_bare_unit_with_codex(self, model_resolver):
        """Test a unit without signature or content, answered without wisdom."""
        document = semantics_document(include_wisdom=False)
        chat = MockChatCapability(default_response=json.dumps(document))

        result = await extract_semantics(
            {"name": "parseSignature", "filePath": "src/parser/signature.ts"},
            {"llmProvider": "codex"},
            chat=chat,
            resolve_model_id=model_resolver,
        )

        semantics = result.semantics.to_dict()
        for section in ("purpose", "domain", "intent", "mechanism", "complexity"):
            assert semantics[section] == document[section]
        assert semantics["wisdom"] == {"gotchas": [], "tips": [], "tribal": [], "learningPath": []}
        assert result.evidence.provider == "codex"
        assert result.evidence.model_id == "codex-test-model"
        assert chat.calls[0]["provider"] == "codex"

    @pytest.mark.asyncio
    async def test_options_default_from_environment(self, mock_chat, model_resolver, monkeypatch):
        """Test an empty options object takes provider and sampling from config."""
        monkeypatch.setenv("CODE_INTEL_LLM_PROVIDER", "codex")

        result = await extract_semantics(UNIT, {}, chat=mock_chat, resolve_model_id=model_resolver)

        request = mock_chat.calls[0]
        assert result.evidence.provider == "codex"
        assert request["max_tokens"] == 1200
        assert request["temperature"] == 0.0

    @pytest.mark.asyncio
    async def test_missing_required_section(self, model_resolver, recording_logger):
        """Test a reply without mechanism fails with the raw text attached."""
        document = semantics_document()
        del document["mechanism"]
        raw = json.dumps(document)
        chat = MockChatCapability(default_response=raw)

        with pytest.raises(ExtractionParseError) as exc_info:
            await extract_semantics(
                UNIT,
                {"llmProvider": "claude"},
                chat=chat,
                resolve_model_id=model_resolver,
                logger=recording_logger,
            )

        assert exc_info.value.raw_text == raw
        assert exc_info.value.evidence.provider == "claude"
        assert [issue.path for issue in exc_info.value.issues] == ["mechanism"]
        assert recording_logger.names("warning") == ["semantic_extraction_parse_failed"]

    @pytest.mark.asyncio
    async def test_chat_failure_propagates(self, model_resolver, recording_logger):
        """Test adapter errors reach the caller unchanged."""
        failure = AdapterFailure("rate limited", provider="claude")
        chat = MockChatCapability(error=failure)

        with pytest.raises(AdapterFailure) as exc_info:
            await extract_semantics(
                UNIT,
                {"llmProvider": "claude"},
                chat=chat,
                resolve_model_id=model_resolver,
                logger=recording_logger,
            )

        assert exc_info.value is failure
        assert recording_logger.names("error") == ["semantic_extraction_chat_failed"]

    @pytest.mark.asyncio
    async def test_non_text_reply(self, model_resolver):
        """Test a reply without text content is a parse error."""

        class EmptyChat:
            async def chat(self, request):
                return {"provider": request["provider"], "content": None}

        with pytest.raises(ExtractionParseError):
            await extract_semantics(UNIT, {"llmProvider": "claude"}, chat=EmptyChat(), resolve_model_id=model_resolver)

    @pytest.mark.asyncio
    async def test_invalid_provider_rejected_before_chat(self, mock_chat, model_resolver):
        """Test options are validated before any call is made."""
        with pytest.raises(ValueError):
            await extract_semantics(UNIT, {"llmProvider": "gemini"}, chat=mock_chat, resolve_model_id=model_resolver)

        assert mock_chat.call_count == 0


class TestSemanticExtractor:
    """Tests for the SemanticExtractor wrapper."""

    @pytest.mark.asyncio
    async def test_extract_and_envelope(self, mock_chat, model_resolver, recording_logger):
        """Test results wrap into a SemanticsRecord envelope."""
        extractor = SemanticExtractor(chat=mock_chat, resolve_model_id=model_resolver, logger=recording_logger)

        result = await extractor.extract(CodeUnit(name="parseSignature", file_path="src/parser/signature.ts"), {"llmProvider": "claude"})
        envelope = result.to_envelope(run_id="run-7", duration_ms=30)

        assert envelope.output_schema == "SemanticsRecord"
        assert envelope.meta.construction_id == "extract_semantics"
        assert envelope.duration_ms == 30
        assert envelope.evidence == [result.evidence.describe()]
        assert envelope.output["purpose"]["problemSolved"] == "Callers need typed access to parameters."
        assert result.tokens_used.input > 0

    @pytest.mark.asyncio
    async def test_envelope_validates_as_construction_result(self, mock_chat, model_resolver, recording_logger):
        """Test the envelope passes construction result validation."""
        extractor = SemanticExtractor(chat=mock_chat, resolve_model_id=model_resolver, logger=recording_logger)

        result = await extractor.extract(UNIT, {"llmProvider": "claude"})
        envelope = result.to_envelope(run_id="run-8", workspace="/repo")

        checked = validate_construction_result(envelope.meta.construction_id, envelope, logger=recording_logger)

        assert checked.valid, checked.errors
        assert checked.data["output"]["wisdom"]["gotchas"] == result.wisdom.gotchas
        assert validate_tool_output("SemanticsRecord", envelope.output).valid
        assert recording_logger.names("error") == []

    @pytest.mark.asyncio
    async def test_result_dict_carries_wisdom(self, mock_chat, model_resolver):
        """Test wisdom appears at the top level of the serialized result."""
        extractor = SemanticExtractor(chat=mock_chat, resolve_model_id=model_resolver)

        result = await extractor.extract(UNIT, {"llmProvider": "claude"})
        data = result.to_dict()

        assert data["wisdom"] == data["semantics"]["wisdom"]
        assert data["wisdom"]["learningPath"][0] == {"order": 1, "description": "Read the tokenizer"}


class TestSemanticExtractionOptions:
    """Tests for option defaults."""

    def test_defaults_follow_provider_config(self, monkeypatch):
        monkeypatch.delenv("CODE_INTEL_LLM_PROVIDER", raising=False)

        options = SemanticExtractionOptions()

        assert options.llm_provider == "claude"
        assert options.max_tokens == 1200
        assert options.temperature == 0.0
        assert options.max_content_chars == 8000

    def test_provider_from_environment(self, monkeypatch):
        monkeypatch.setenv("CODE_INTEL_LLM_PROVIDER", "codex")

        assert SemanticExtractionOptions().llm_provider == "codex"
        assert SemanticExtractionOptions(llm_provider="claude").llm_provider == "claude"

    def test_explicit_values_win(self):
        """Test caller-supplied sampling settings are kept."""
        options = SemanticExtractionOptions.model_validate({"llmProvider": "codex", "maxTokens": 300, "temperature": 0.7})

        assert (options.max_tokens, options.temperature) == (300, 0.7)

    def test_non_positive_max_tokens_rejected(self):
        with pytest.raises(ValueError):
            SemanticExtractionOptions(llm_provider="claude", max_tokens=0)


class TestParseSemanticsResponse:
    """Tests for reply parsing on its own."""

    def test_json_inside_code_fence(self):
        """Test prose and fences around the object are tolerated."""
        raw = "Here you go:\n```json\n" + json.dumps(semantics_document()) + "\n```"

        record = parse_semantics_response(raw)

        assert isinstance(record, SemanticsRecord)
        assert record.intent.primary_use_case == "Index function signatures"

    def test_not_json(self):
        """Test a reply without an object fails."""
        with pytest.raises(ExtractionParseError) as exc_info:
            parse_semantics_response("I cannot help with that.")

        assert exc_info.value.raw_text == "I cannot help with that."

    def test_broken_json(self):
        with pytest.raises(ExtractionParseError):
            parse_semantics_response('{"purpose": {')

    def test_mistyped_required_field(self):
        """Test a list where a string is required fails."""
        document = semantics_document()
        document["complexity"]["time"] = ["O(n)"]

        with pytest.raises(ExtractionParseError) as exc_info:
            parse_semantics_response(json.dumps(document))

        assert exc_info.value.issues[0].path == "complexity.time"

    def test_unknown_keys_ignored(self):
        """Test extra keys in the reply do not fail parsing."""
        document = semantics_document()
        document["confidence"] = 0.9

        assert parse_semantics_response(json.dumps(document)).purpose.value_prop

    def test_partial_wisdom_defaults(self):
        """Test missing wisdom sub-fields default to empty lists."""
        document = semantics_document()
        document["wisdom"] = {"tips": ["Read the tests"]}

        wisdom = parse_semantics_response(json.dumps(document)).wisdom

        assert wisdom.tips == ["Read the tests"]
        assert wisdom.gotchas == []
        assert wisdom.learning_path == []

    def test_malformed_wisdom(self):
        """Test a mistyped wisdom section is an error with prefixed paths."""
        with pytest.raises(ExtractionParseError) as exc_info:
            parse_wisdom({"gotchas": "not a list"}, raw_text="raw")

        assert exc_info.value.issues[0].path == "wisdom.gotchas"

    def test_whole_number_order_accepted(self):
        """Test a learning path order rendered as 1.0 is read as 1."""
        document = semantics_document()
        document["wisdom"]["learningPath"][0]["order"] = 1.0

        step = parse_semantics_response(json.dumps(document)).wisdom.learning_path[0]

        assert step.order == 1
        assert isinstance(step.order, int)

    def test_fractional_order_rejected(self):
        document = semantics_document()
        document["wisdom"]["learningPath"][0]["order"] = 1.5

        with pytest.raises(ExtractionParseError) as exc_info:
            parse_semantics_response(json.dumps(document))

        assert exc_info.value.issues[0].path == "wisdom.learningPath.0.order"

    def test_null_wisdom(self):
        assert parse_wisdom(None, raw_text="raw").tribal == []

    def test_extract_json_object_rejects_missing_object(self):
        with pytest.raises(ValueError):
            extract_json_object("no braces here")
