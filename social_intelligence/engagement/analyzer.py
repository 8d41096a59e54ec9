"""
Live event engagement analysis.

Derives an engagement level, participation rate and momentum from an
event telemetry snapshot, plus threshold-triggered recommendations.

Engagement Level:
    base  = active / total * 100   when both counts are known and total > 0
          = default_level (50)     otherwise
    level = (base + feedback_score) / 2   when a feedback score is present
          = base                          otherwise

Participation Rate:
    round(active / total * 100), or 0 when total is zero or unknown

Momentum (from the snapshot's engagement score):
    > 70 -> Increasing, < 40 -> Decreasing, otherwise Stable
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from ..profiles import Priority

logger = logging.getLogger(__name__)


class Momentum(Enum):
    """Direction of engagement."""
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"


class AdjustmentKind(Enum):
    """Kinds of schedule adjustment."""
    ACTIVITY_SWAP = "ACTIVITY_SWAP"
    BREAK_INSERTION = "BREAK_INSERTION"


@dataclass
class EngagementConfig:
    """
    Configuration for engagement analysis.

    Attributes:
        default_level: Base level when participation counts are unavailable
        low_engagement_threshold: Level below which a boost is recommended
        low_participation_threshold: Rate below which more participation is recommended
        increasing_momentum_threshold: Engagement score above which momentum is increasing
        decreasing_momentum_threshold: Engagement score below which momentum is decreasing
        default_peak_activity_time: Used when the snapshot names no peak
        default_low_activity_periods: Used when the snapshot names no low periods
    """
    default_level: float = 50
    low_engagement_threshold: float = 40
    low_participation_threshold: float = 60
    increasing_momentum_threshold: float = 70
    decreasing_momentum_threshold: float = 40
    default_peak_activity_time: str = "2-4 PM"
    default_low_activity_periods: Tuple[str, ...] = ("After lunch (1-2 PM)",)

    def validate(self) -> None:
        """Validate configuration values."""
        if self.decreasing_momentum_threshold > self.increasing_momentum_threshold:
            raise ValueError(
                f"decreasing_momentum_threshold ({self.decreasing_momentum_threshold}) must not "
                f"exceed increasing_momentum_threshold ({self.increasing_momentum_threshold})"
            )
        if not 0 <= self.default_level <= 100:
            raise ValueError(f"default_level must be in [0, 100], got {self.default_level}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_level": self.default_level,
            "low_engagement_threshold": self.low_engagement_threshold,
            "low_participation_threshold": self.low_participation_threshold,
            "increasing_momentum_threshold": self.increasing_momentum_threshold,
            "decreasing_momentum_threshold": self.decreasing_momentum_threshold,
            "default_peak_activity_time": self.default_peak_activity_time,
            "default_low_activity_periods": list(self.default_low_activity_periods),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngagementConfig":
        return cls.from_config({"engagement": d})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngagementConfig":
        """Create from main config dictionary."""
        section = config.get("engagement", {})
        defaults = cls()
        return cls(
            default_level=section.get("default_level", defaults.default_level),
            low_engagement_threshold=section.get(
                "low_engagement_threshold", defaults.low_engagement_threshold),
            low_participation_threshold=section.get(
                "low_participation_threshold", defaults.low_participation_threshold),
            increasing_momentum_threshold=section.get(
                "increasing_momentum_threshold", defaults.increasing_momentum_threshold),
            decreasing_momentum_threshold=section.get(
                "decreasing_momentum_threshold", defaults.decreasing_momentum_threshold),
            default_peak_activity_time=section.get(
                "default_peak_activity_time", defaults.default_peak_activity_time),
            default_low_activity_periods=tuple(section.get(
                "default_low_activity_periods", defaults.default_low_activity_periods)),
        )


@dataclass
class EngagementRecommendation:
    """Threshold-triggered recommendation."""
    priority: Priority
    action: str
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "priority": self.priority.value,
            "action": self.action,
            "suggestion": self.suggestion,
        }


@dataclass
class ScheduleAdjustment:
    """Suggested change to the running schedule."""
    kind: AdjustmentKind
    reason: str
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.kind.value,
            "reason": self.reason,
            "suggestion": self.suggestion,
        }


@dataclass
class EngagementAnalysis:
    """
    Engagement analysis for one event snapshot.

    Attributes:
        current_engagement_level: Level in [0, 100] (rounded)
        participation_rate: Rate in [0, 100] (rounded)
        momentum: Engagement direction
        peak_activity_time: Peak activity window
        low_activity_periods: Low activity windows
        recommendations: Threshold-triggered recommendations
    """
    current_engagement_level: int
    participation_rate: int
    momentum: Momentum
    peak_activity_time: str
    low_activity_periods: List[str]
    recommendations: List[EngagementRecommendation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_engagement_level": self.current_engagement_level,
            "participation_rate": self.participation_rate,
            "engagement_trends": {
                "momentum": self.momentum.value,
                "peak_activity_time": self.peak_activity_time,
                "low_activity_periods": list(self.low_activity_periods),
            },
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def _number(snapshot: Mapping[str, Any], *keys: str) -> Optional[float]:
    """First finite numeric value among keys; None when absent or malformed."""
    for key in keys:
        value = snapshot.get(key)
        if value is None or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric {key}: {value!r}")
            continue
        if not (math.isnan(number) or math.isinf(number)):
            return number
    return None


def _counts(snapshot: Mapping[str, Any]) -> Tuple[Optional[float], Optional[float]]:
    active = _number(snapshot, "active_participants", "activeParticipants")
    total = _number(snapshot, "total_guests", "totalGuests")
    return active, total


def calculate_engagement_level(
    snapshot: Mapping[str, Any],
    config: Optional[EngagementConfig] = None
) -> int:
    config = config or EngagementConfig()
    active, total = _counts(snapshot)

    level = config.default_level
    if active is not None and total is not None and total > 0:
        level = active / total * 100

    feedback = _number(snapshot, "feedback_score", "feedbackScore")
    if feedback is not None:
        level = (level + feedback) / 2

    return _round_half_up(level)


def calculate_participation_rate(snapshot: Mapping[str, Any]) -> int:
    """Participation percentage; never divides by zero."""
    active, total = _counts(snapshot)
    if not total:
        return 0
    return _round_half_up((active or 0.0) / total * 100)


def classify_momentum(
    snapshot: Mapping[str, Any],
    config: Optional[EngagementConfig] = None
) -> Momentum:
    config = config or EngagementConfig()
    score = _number(snapshot, "engagement_score", "engagementScore")
    if score is None:
        return Momentum.STABLE
    if score > config.increasing_momentum_threshold:
        return Momentum.INCREASING
    if score < config.decreasing_momentum_threshold:
        return Momentum.DECREASING
    return Momentum.STABLE


def analyze_engagement(
    snapshot: Mapping[str, Any],
    config: Optional[EngagementConfig] = None
) -> EngagementAnalysis:
    """
    Analyze one event telemetry snapshot.

    Args:
        snapshot: Mapping with any of active_participants, total_guests,
            feedback_score, engagement_score, peak_activity_time and
            low_activity_periods (camelCase keys are accepted too)
        config: Engagement configuration (defaults if omitted)

    Returns:
        EngagementAnalysis for the snapshot
    """
    config = config or EngagementConfig()

    peak = snapshot.get("peak_activity_time", snapshot.get("peakActivityTime"))
    low_periods = snapshot.get("low_activity_periods", snapshot.get("lowActivityPeriods"))

    analysis = EngagementAnalysis(
        current_engagement_level=calculate_engagement_level(snapshot, config),
        participation_rate=calculate_participation_rate(snapshot),
        momentum=classify_momentum(snapshot, config),
        peak_activity_time=peak or config.default_peak_activity_time,
        low_activity_periods=list(low_periods or config.default_low_activity_periods),
    )

    if analysis.current_engagement_level < config.low_engagement_threshold:
        analysis.recommendations.append(EngagementRecommendation(
            priority=Priority.HIGH,
            action="Boost engagement with high-energy activity",
            suggestion="Switch to team games, icebreakers, or impromptu networking",
        ))

    if analysis.participation_rate < config.low_participation_threshold:
        analysis.recommendations.append(EngagementRecommendation(
            priority=Priority.MEDIUM,
            action="Increase participation",
            suggestion="Make current activity more inclusive or switch to optional interest groups",
        ))

    logger.info(f"Engagement level {analysis.current_engagement_level}, "
                f"participation {analysis.participation_rate}%, "
                f"momentum {analysis.momentum.value}, "
                f"{len(analysis.recommendations)} recommendations")
    return analysis


def suggest_schedule_adjustments(
    analysis: EngagementAnalysis,
    config: Optional[EngagementConfig] = None
) -> List[ScheduleAdjustment]:
    """Schedule changes for low engagement and low participation; both may apply."""
    config = config or EngagementConfig()
    adjustments = []

    if analysis.current_engagement_level < config.low_engagement_threshold:
        adjustments.append(ScheduleAdjustment(
            kind=AdjustmentKind.ACTIVITY_SWAP,
            reason="Low engagement with current activity",
            suggestion="Replace current activity with high-energy team game",
        ))

    if analysis.participation_rate < config.low_participation_threshold:
        adjustments.append(ScheduleAdjustment(
            kind=AdjustmentKind.BREAK_INSERTION,
            reason="Guest fatigue detected",
            suggestion="Insert 15-minute wellness break with refreshments",
        ))

    return adjustments
