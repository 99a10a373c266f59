"""Semantic Extraction - LLM-backed semantics for a code unit.

Pipeline:
1. Resolve the model id for the requested provider
2. Build one prompt for the unit and fingerprint it (evidence)
3. Send it to the chat capability; the reply is opaque text
4. Parse the five required sections strictly
5. Parse the optional wisdom section with empty-list defaults

The single await point is the chat call. Adapter errors and cancellation
propagate unchanged; there are no retries here.
"""

import hashlib
import json
import math
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from code_intel_capability.adapters import get_logger
from code_intel_capability.agents.protocols import (
    ChatCapabilityProtocol,
    ChatRequest,
    LoggerProtocol,
    ModelIdResolverProtocol,
)
from code_intel_capability.config.llm_config import resolve_model_id as default_model_id_resolver
from code_intel_capability.contracts.validation import issues_from_error
from code_intel_capability.errors import ExtractionParseError
from code_intel_capability.models.semantics import (
    CodeUnit,
    EvidenceRecord,
    RequiredSemantics,
    SemanticExtractionOptions,
    SemanticExtractionResult,
    SemanticsRecord,
    TokenUsage,
    WisdomSection,
)
from code_intel_capability.prompts.semantics import build_semantic_extraction_prompt


# Outermost braces; tolerates code fences and prose around the object.
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def compute_prompt_digest(prompt: str) -> str:
    """SHA-256 hex digest of the exact prompt text."""
    return hashlib.sha256(prompt.encode("utf-8")).hexdigest()


def estimate_token_count(text: str) -> int:
    return math.ceil(len(text) / 4)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, `Z` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ═══════════════════════════════════════════════════════════════════
# RESPONSE PARSING
# ═══════════════════════════════════════════════════════════════════

def extract_json_object(text: str) -> Dict[str, Any]:
    """Locate and decode the JSON object in a model reply.

    Raises:
        ValueError: If no object is found or it does not decode to a dict
    """
    match = JSON_OBJECT_PATTERN.search(text)
    if not match:
        raise ValueError("No JSON object found in model response")
    document = json.loads(match.group(0))
    if not isinstance(document, dict):
        raise ValueError("Model response JSON is not an object")
    return document


def parse_wisdom(
    value: Any,
    raw_text: str,
    evidence: Optional[EvidenceRecord] = None,
) -> WisdomSection:
    """Second-stage parse of the optional wisdom section.

    Absent (or null) wisdom yields four empty lists; absent sub-fields
    default to empty lists. A present but mistyped section is an error.
    """
    if value is None:
        return WisdomSection()
    try:
        return WisdomSection.model_validate(value)
    except ValidationError as exc:
        issues = issues_from_error(exc)
        raise ExtractionParseError(
            "Model response has a malformed wisdom section",
            raw_text=raw_text,
            evidence=evidence,
            issues=[issue.model_copy(update={"path": f"wisdom.{issue.path}"}) for issue in issues],
        ) from exc


def parse_semantics_response(
    raw_text: str,
    evidence: Optional[EvidenceRecord] = None,
) -> SemanticsRecord:
    """Parse a model reply into a fully populated SemanticsRecord.

    Args:
        raw_text: Raw model reply
        evidence: Evidence of the call, attached to any parse error

    Returns:
        SemanticsRecord with wisdom always present

    Raises:
        ExtractionParseError: Malformed JSON, a missing required section or
            a wrongly typed field
    """
    try:
        document = extract_json_object(raw_text)
    except ValueError as exc:
        raise ExtractionParseError(
            f"Model response is not valid JSON: {exc}",
            raw_text=raw_text,
            evidence=evidence,
            issues=[str(exc)],
        ) from exc

    try:
        required = RequiredSemantics.model_validate(document)
    except ValidationError as exc:
        raise ExtractionParseError(
            "Model response is missing or mistypes a required section",
            raw_text=raw_text,
            evidence=evidence,
            issues=issues_from_error(exc),
        ) from exc

    wisdom = parse_wisdom(document.get("wisdom"), raw_text, evidence)
    return SemanticsRecord(
        purpose=required.purpose,
        domain=required.domain,
        intent=required.intent,
        mechanism=required.mechanism,
        complexity=required.complexity,
        wisdom=wisdom,
    )


# ═══════════════════════════════════════════════════════════════════
# PIPELINE
# ═══════════════════════════════════════════════════════════════════

async def extract_semantics(
    unit: Union[CodeUnit, Dict[str, Any]],
    options: Union[SemanticExtractionOptions, Dict[str, Any]],
    *,
    chat: ChatCapabilityProtocol,
    resolve_model_id: ModelIdResolverProtocol,
    logger: Optional[LoggerProtocol] = None,
) -> SemanticExtractionResult:
    """Extract semantics for one code unit.

    Args:
        unit: Code unit (name, file path, optional signature and content)
        options: Provider and sampling settings
        chat: Chat capability that sends the prompt
        resolve_model_id: Provider to model-id lookup
        logger: Optional logger

    Returns:
        SemanticExtractionResult with semantics, evidence and accounting

    Raises:
        ExtractionParseError: The reply could not be parsed
        Exception: Any error raised by the chat capability, unchanged
    """
    logger = logger or get_logger()
    unit = unit if isinstance(unit, CodeUnit) else CodeUnit.model_validate(unit)
    if not isinstance(options, SemanticExtractionOptions):
        options = SemanticExtractionOptions.model_validate(options)

    provider = options.llm_provider
    model_id = resolve_model_id(provider)
    prompt = build_semantic_extraction_prompt(unit, options.max_content_chars)
    evidence = EvidenceRecord(
        provider=provider,
        model_id=model_id,
        prompt_digest=compute_prompt_digest(prompt),
        timestamp=utc_timestamp(),
    )

    request: ChatRequest = {
        "provider": provider,
        "model_id": model_id,
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": options.max_tokens,
        "temperature": options.temperature,
    }

    started = time.monotonic()
    try:
        response = await chat.chat(request)
    except Exception as e:
        logger.error(
            "semantic_extraction_chat_failed",
            unit=unit.key,
            provider=provider,
            model_id=model_id,
            error=str(e),
        )
        raise
    latency_ms = int((time.monotonic() - started) * 1000)

    raw_text = response.get("content") if isinstance(response, dict) else None
    if not isinstance(raw_text, str):
        raise ExtractionParseError(
            "Chat capability returned no text content",
            raw_text=str(raw_text),
            evidence=evidence,
        )

    try:
        semantics = parse_semantics_response(raw_text, evidence)
    except ExtractionParseError as e:
        logger.warning(
            "semantic_extraction_parse_failed",
            unit=unit.key,
            provider=provider,
            prompt_digest=evidence.prompt_digest,
            issue_count=len(e.issues),
        )
        raise

    logger.info(
        "semantic_extraction_completed",
        unit=unit.key,
        provider=provider,
        model_id=model_id,
        latency_ms=latency_ms,
        wisdom_items=len(semantics.wisdom.gotchas) + len(semantics.wisdom.tips) + len(semantics.wisdom.tribal),
    )

    return SemanticExtractionResult(
        semantics=semantics,
        evidence=evidence,
        raw_response=raw_text,
        tokens_used=TokenUsage(
            input=estimate_token_count(prompt),
            output=estimate_token_count(raw_text),
        ),
        latency_ms=latency_ms,
    )


class SemanticExtractor:
    """Holds the collaborators for repeated extractions.

    Usage:
        extractor = SemanticExtractor(chat=llm_adapter)
        result = await extractor.extract(
            {"name": "parseSignature", "filePath": "src/parser/signature.ts"},
            {"llmProvider": "codex"},
        )
    """

    def __init__(
        self,
        chat: ChatCapabilityProtocol,
        resolve_model_id: ModelIdResolverProtocol = default_model_id_resolver,
        logger: Optional[LoggerProtocol] = None,
    ):
        self._chat = chat
        self._resolve_model_id = resolve_model_id
        self._logger = logger or get_logger()

    async def extract(
        self,
        unit: Union[CodeUnit, Dict[str, Any]],
        options: Union[SemanticExtractionOptions, Dict[str, Any]],
    ) -> SemanticExtractionResult:
        return await extract_semantics(
            unit,
            options,
            chat=self._chat,
            resolve_model_id=self._resolve_model_id,
            logger=self._logger,
        )


__all__ = [
    "JSON_OBJECT_PATTERN",
    "compute_prompt_digest",
    "estimate_token_count",
    "utc_timestamp",
    "extract_json_object",
    "parse_wisdom",
    "parse_semantics_response",
    "extract_semantics",
    "SemanticExtractor",
]
