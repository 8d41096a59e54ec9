"""Emotion module for emotional-state prediction and wellness actions."""

from .estimator import (
    EmotionalState,
    WellnessKind,
    ActivityBundle,
    ACTIVITY_BY_STATE,
    WellnessRecommendation,
    EmotionalProfile,
    EmotionConfig,
    determine_state,
    generate_wellness_recommendations,
    predict_emotional_state,
    predict_emotional_states,
)

__all__ = [
    "EmotionalState",
    "WellnessKind",
    "ActivityBundle",
    "ACTIVITY_BY_STATE",
    "WellnessRecommendation",
    "EmotionalProfile",
    "EmotionConfig",
    "determine_state",
    "generate_wellness_recommendations",
    "predict_emotional_state",
    "predict_emotional_states",
]
