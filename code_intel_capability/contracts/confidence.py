"""
Confidence-tier contract.

The tier policy is a contract between the backend and agent-side tool
implementations, not a runtime check inside the validator. The validator
only guarantees that tier values and minConfidence thresholds are well
typed; tools consult the tier and honour the required action:

    definitive / high  -> proceed without additional confirmation
    medium             -> review before any write-class operation
    low / uncertain    -> manual verification or request_human_review
"""

from enum import Enum
from typing import Dict, FrozenSet


CONFIDENCE_BEHAVIOR_CONTRACT = (
    "Confidence contract: when confidence_tier is definitive/high, proceed with "
    "reasonable trust; medium requires review before write operations; "
    "low/uncertain requires manual verification or request_human_review."
)


class ConfidenceTier(str, Enum):
    """Retrieval confidence tiers, most to least trusted."""
    DEFINITIVE = "definitive"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNCERTAIN = "uncertain"


class ConfidenceAction(str, Enum):
    """What an agent must do before acting on a result of a given tier."""
    PROCEED = "proceed"
    REVIEW_BEFORE_WRITE = "review_before_write"
    MANUAL_VERIFICATION = "manual_verification"


# Tiers for which request_human_review is a valid action.
ESCALATION_TIERS: FrozenSet[ConfidenceTier] = frozenset({
    ConfidenceTier.LOW,
    ConfidenceTier.UNCERTAIN,
})

TIER_POLICY: Dict[ConfidenceTier, ConfidenceAction] = {
    ConfidenceTier.DEFINITIVE: ConfidenceAction.PROCEED,
    ConfidenceTier.HIGH: ConfidenceAction.PROCEED,
    ConfidenceTier.MEDIUM: ConfidenceAction.REVIEW_BEFORE_WRITE,
    ConfidenceTier.LOW: ConfidenceAction.MANUAL_VERIFICATION,
    ConfidenceTier.UNCERTAIN: ConfidenceAction.MANUAL_VERIFICATION,
}

# Lower bounds (inclusive), checked in order.
TIER_THRESHOLDS = (
    (0.9, ConfidenceTier.DEFINITIVE),
    (0.75, ConfidenceTier.HIGH),
    (0.5, ConfidenceTier.MEDIUM),
    (0.3, ConfidenceTier.LOW),
)


def tier_for_confidence(score: float) -> ConfidenceTier:
    """Map a confidence score in [0, 1] to its tier.

    Raises:
        ValueError: If score is outside [0, 1]
    """
    if not 0.0 <= score <= 1.0:
        raise ValueError(f"Confidence score out of range: {score}")
    for lower_bound, tier in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return ConfidenceTier.UNCERTAIN


def required_action(tier: ConfidenceTier, write: bool = False) -> ConfidenceAction:
    """Action an agent must take before using a result of this tier.

    Medium-tier results only need review when the agent is about to perform
    a write-class operation; read-only use may proceed.
    """
    tier = ConfidenceTier(tier)
    action = TIER_POLICY[tier]
    if action is ConfidenceAction.REVIEW_BEFORE_WRITE and not write:
        return ConfidenceAction.PROCEED
    return action


def can_escalate(tier: ConfidenceTier) -> bool:
    """Whether request_human_review is a valid action for the tier."""
    return ConfidenceTier(tier) in ESCALATION_TIERS


__all__ = [
    "CONFIDENCE_BEHAVIOR_CONTRACT",
    "ConfidenceTier",
    "ConfidenceAction",
    "ESCALATION_TIERS",
    "TIER_POLICY",
    "TIER_THRESHOLDS",
    "tier_for_confidence",
    "required_action",
    "can_escalate",
]
