"""Engagement module for live event telemetry analysis."""

from .analyzer import (
    Momentum,
    AdjustmentKind,
    EngagementConfig,
    EngagementRecommendation,
    ScheduleAdjustment,
    EngagementAnalysis,
    calculate_engagement_level,
    calculate_participation_rate,
    classify_momentum,
    analyze_engagement,
    suggest_schedule_adjustments,
)

__all__ = [
    "Momentum",
    "AdjustmentKind",
    "EngagementConfig",
    "EngagementRecommendation",
    "ScheduleAdjustment",
    "EngagementAnalysis",
    "calculate_engagement_level",
    "calculate_participation_rate",
    "classify_momentum",
    "analyze_engagement",
    "suggest_schedule_adjustments",
]
