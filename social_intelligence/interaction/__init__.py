"""Interaction scoring module for per-guest sociability profiles."""

from .scorer import (
    RiskKind,
    RiskFactor,
    GroupSizeRange,
    InteractionStyle,
    SocialPreferences,
    InteractionProfile,
    InteractionConfig,
    INTERACTION_STYLES,
    calculate_interaction_score,
    score_interaction,
    score_interactions,
)

__all__ = [
    "RiskKind",
    "RiskFactor",
    "GroupSizeRange",
    "InteractionStyle",
    "SocialPreferences",
    "InteractionProfile",
    "InteractionConfig",
    "INTERACTION_STYLES",
    "calculate_interaction_score",
    "score_interaction",
    "score_interactions",
]
