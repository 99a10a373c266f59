"""Unit tests for the confidence-tier contract."""

import pytest

from code_intel_capability.contracts.confidence import (
    CONFIDENCE_BEHAVIOR_CONTRACT,
    ConfidenceAction,
    ConfidenceTier,
    can_escalate,
    required_action,
    tier_for_confidence,
)
from code_intel_capability.contracts.registry import get_tool_json_schema


class TestTierForConfidence:
    """Tests for score to tier mapping."""

    @pytest.mark.parametrize("score,tier", [
        (1.0, ConfidenceTier.DEFINITIVE),
        (0.9, ConfidenceTier.DEFINITIVE),
        (0.89, ConfidenceTier.HIGH),
        (0.75, ConfidenceTier.HIGH),
        (0.5, ConfidenceTier.MEDIUM),
        (0.3, ConfidenceTier.LOW),
        (0.29, ConfidenceTier.UNCERTAIN),
        (0.0, ConfidenceTier.UNCERTAIN),
    ])
    def test_thresholds(self, score, tier):
        assert tier_for_confidence(score) is tier

    @pytest.mark.parametrize("score", [-0.01, 1.01])
    def test_out_of_range(self, score):
        with pytest.raises(ValueError):
            tier_for_confidence(score)


class TestRequiredAction:
    """Tests for the tier policy."""

    @pytest.mark.parametrize("tier", ["definitive", "high"])
    def test_trusted_tiers_proceed(self, tier):
        assert required_action(tier, write=True) is ConfidenceAction.PROCEED

    def test_medium_reviews_before_write(self):
        """Test medium needs review only for write-class actions."""
        assert required_action(ConfidenceTier.MEDIUM) is ConfidenceAction.PROCEED
        assert required_action(ConfidenceTier.MEDIUM, write=True) is ConfidenceAction.REVIEW_BEFORE_WRITE

    @pytest.mark.parametrize("tier", ["low", "uncertain"])
    def test_untrusted_tiers_need_verification(self, tier):
        assert required_action(tier) is ConfidenceAction.MANUAL_VERIFICATION


class TestEscalation:
    """Tests for request_human_review eligibility."""

    @pytest.mark.parametrize("tier,expected", [
        ("definitive", False),
        ("high", False),
        ("medium", False),
        ("low", True),
        ("uncertain", True),
    ])
    def test_can_escalate(self, tier, expected):
        assert can_escalate(tier) is expected

    def test_contract_text_in_min_confidence_description(self):
        """Test the behavior contract is advertised on minConfidence."""
        schema = get_tool_json_schema("query")

        assert CONFIDENCE_BEHAVIOR_CONTRACT in schema["properties"]["minConfidence"]["description"]
