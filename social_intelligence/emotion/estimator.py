"""
Guest emotional-state estimation.

Predicts each guest's dominant emotional state and maps it to a
recommended activity bundle and wellness actions.

Dominant State (first rule that applies):
    energy level "low"             -> tired
    engagement score > 80          -> excited
    engagement score < 30          -> disengaged
    otherwise (or score unknown)   -> neutral

Confidence:
    min(0.5 + 0.1 * len(feedback_history), 1.0)

Wellness recommendations are independent triggers; any combination may
fire. Indicators (social-media sentiment, latest app feedback) explain
the prediction but never change the state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Iterable, List, Optional, Tuple

from ..profiles import (
    GuestProfile,
    EnergyLevel,
    StressLevel,
    Priority,
    normalize,
    normalize_guests,
    require_exhaustive,
)
from ..profiles.normalizer import GuestInput
from ..sentiment import classify_text

logger = logging.getLogger(__name__)

DEFAULT_SOCIAL_POSITIVE: Tuple[str, ...] = (
    "exciting", "amazing", "love", "great", "wonderful", "fantastic",
)
DEFAULT_SOCIAL_NEGATIVE: Tuple[str, ...] = (
    "boring", "tired", "stressed", "disappointed", "frustrated",
)


class EmotionalState(Enum):
    """Predicted dominant emotional state."""
    EXCITED = "excited"
    NEUTRAL = "neutral"
    TIRED = "tired"
    DISENGAGED = "disengaged"


class WellnessKind(Enum):
    """Kinds of wellness recommendation."""
    STRESS_MANAGEMENT = "STRESS_MANAGEMENT"
    ENERGY_BOOST = "ENERGY_BOOST"
    SOCIAL_RECOVERY = "SOCIAL_RECOVERY"


@dataclass(frozen=True)
class ActivityBundle:
    """Activity recommendation for an emotional state."""
    type: str
    suggestions: Tuple[str, ...]
    duration: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "suggestions": list(self.suggestions),
            "duration": self.duration,
        }


ACTIVITY_BY_STATE: Dict[EmotionalState, ActivityBundle] = {
    EmotionalState.EXCITED: ActivityBundle(
        type="High-Energy Activities",
        suggestions=("Team sports", "Group games", "Dance or music events", "Adventure activities"),
        duration="60+ minutes",
    ),
    EmotionalState.NEUTRAL: ActivityBundle(
        type="Balanced Activities",
        suggestions=("Networking sessions", "Skill-building workshops", "Cultural events",
                     "Casual networking"),
        duration="45-60 minutes",
    ),
    EmotionalState.TIRED: ActivityBundle(
        type="Relaxing Activities",
        suggestions=("Spa/wellness session", "Meditation break", "Scenic walk",
                     "Casual conversation"),
        duration="30-45 minutes",
    ),
    EmotionalState.DISENGAGED: ActivityBundle(
        type="Re-engagement Activities",
        suggestions=("Interest-based small group", "One-on-one mentoring",
                     "Personalized consulting", "VIP experience"),
        duration="30-45 minutes",
    ),
}

require_exhaustive(ACTIVITY_BY_STATE, EmotionalState, "ACTIVITY_BY_STATE")


@dataclass(frozen=True)
class WellnessRecommendation:
    """A single wellness action."""
    kind: WellnessKind
    suggestion: str
    duration_minutes: int
    priority: Priority

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "suggestion": self.suggestion,
            "duration": f"{self.duration_minutes} minutes",
            "duration_minutes": self.duration_minutes,
            "priority": self.priority.value,
        }


@dataclass
class EmotionalProfile:
    """
    Predicted emotional profile for one guest.

    Attributes:
        guest_id: Guest identifier
        guest_name: Guest display name
        state: Dominant emotional state
        confidence: Confidence in [0, 1]
        energy_level: Normalized energy level
        stress_level: Normalized stress level
        indicators: Explanatory signals behind the prediction
        recommended_activity: Activity bundle for the state
        wellness_recommendations: Triggered wellness actions
    """
    guest_id: str
    guest_name: str
    state: EmotionalState
    confidence: float
    energy_level: EnergyLevel
    stress_level: StressLevel
    indicators: Dict[str, str] = field(default_factory=dict)
    recommended_activity: ActivityBundle = ACTIVITY_BY_STATE[EmotionalState.NEUTRAL]
    wellness_recommendations: List[WellnessRecommendation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guest_id": self.guest_id,
            "guest_name": self.guest_name,
            "predicted_emotional_state": {
                "state": self.state.value,
                "confidence": self.confidence,
                "indicators": dict(self.indicators),
                "energy_level": self.energy_level.value,
                "stress_level": self.stress_level.value,
            },
            "recommended_activity": self.recommended_activity.to_dict(),
            "wellness_recommendations": [r.to_dict() for r in self.wellness_recommendations],
        }


@dataclass
class EmotionConfig:
    """
    Configuration for emotional-state estimation.

    Attributes:
        excited_threshold: Engagement score above which a guest is excited
        disengaged_threshold: Engagement score below which a guest is disengaged
        base_confidence: Confidence with no feedback history
        confidence_step: Confidence added per feedback history entry
        social_positive_keywords: Positive social-media keywords
        social_negative_keywords: Negative social-media keywords
    """
    excited_threshold: float = 80
    disengaged_threshold: float = 30
    base_confidence: float = 0.5
    confidence_step: float = 0.1
    social_positive_keywords: Tuple[str, ...] = DEFAULT_SOCIAL_POSITIVE
    social_negative_keywords: Tuple[str, ...] = DEFAULT_SOCIAL_NEGATIVE

    def validate(self) -> None:
        """Validate configuration values."""
        if self.disengaged_threshold > self.excited_threshold:
            raise ValueError(
                f"disengaged_threshold ({self.disengaged_threshold}) must not exceed "
                f"excited_threshold ({self.excited_threshold})"
            )
        if not 0 <= self.base_confidence <= 1:
            raise ValueError(f"base_confidence must be in [0, 1], got {self.base_confidence}")
        if self.confidence_step < 0:
            raise ValueError(f"confidence_step must not be negative, got {self.confidence_step}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "excited_threshold": self.excited_threshold,
            "disengaged_threshold": self.disengaged_threshold,
            "base_confidence": self.base_confidence,
            "confidence_step": self.confidence_step,
            "social_positive_keywords": list(self.social_positive_keywords),
            "social_negative_keywords": list(self.social_negative_keywords),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EmotionConfig":
        d = dict(d)
        d["social_positive_keywords"] = tuple(d.get("social_positive_keywords", DEFAULT_SOCIAL_POSITIVE))
        d["social_negative_keywords"] = tuple(d.get("social_negative_keywords", DEFAULT_SOCIAL_NEGATIVE))
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EmotionConfig":
        """Create from main config dictionary."""
        section = config.get("emotion", {})
        keywords = section.get("social_media_keywords", {})
        return cls(
            excited_threshold=section.get("excited_threshold", 80),
            disengaged_threshold=section.get("disengaged_threshold", 30),
            base_confidence=section.get("base_confidence", 0.5),
            confidence_step=section.get("confidence_step", 0.1),
            social_positive_keywords=tuple(keywords.get("positive", DEFAULT_SOCIAL_POSITIVE)),
            social_negative_keywords=tuple(keywords.get("negative", DEFAULT_SOCIAL_NEGATIVE)),
        )


def determine_state(guest: GuestProfile, config: EmotionConfig) -> EmotionalState:
    if guest.energy_level is EnergyLevel.LOW:
        return EmotionalState.TIRED
    if guest.engagement_score is not None:
        if guest.engagement_score > config.excited_threshold:
            return EmotionalState.EXCITED
        if guest.engagement_score < config.disengaged_threshold:
            return EmotionalState.DISENGAGED
    return EmotionalState.NEUTRAL


def calculate_confidence(guest: GuestProfile, config: EmotionConfig) -> float:
    return min(config.base_confidence + config.confidence_step * len(guest.feedback_history), 1.0)


def collect_indicators(guest: GuestProfile, config: EmotionConfig) -> Dict[str, str]:
    """Explanatory signals, each present only when its source field is."""
    indicators = {}
    if guest.recent_social_activity:
        indicators["social_engagement"] = classify_text(
            guest.recent_social_activity,
            config.social_positive_keywords,
            config.social_negative_keywords,
        ).value
    if guest.feedback_history:
        indicators["app_feedback"] = guest.feedback_history[-1]
    return indicators


def generate_wellness_recommendations(guest: GuestProfile) -> List[WellnessRecommendation]:
    recommendations = []

    if guest.stress_level is StressLevel.HIGH:
        recommendations.append(WellnessRecommendation(
            kind=WellnessKind.STRESS_MANAGEMENT,
            suggestion="Mindfulness session or quiet break",
            duration_minutes=15,
            priority=Priority.HIGH,
        ))

    if guest.energy_level is EnergyLevel.LOW:
        recommendations.append(WellnessRecommendation(
            kind=WellnessKind.ENERGY_BOOST,
            suggestion="Light snack and refreshment break",
            duration_minutes=10,
            priority=Priority.HIGH,
        ))

    if guest.social_exhaustion:
        recommendations.append(WellnessRecommendation(
            kind=WellnessKind.SOCIAL_RECOVERY,
            suggestion="Quiet time or one-on-one conversation",
            duration_minutes=20,
            priority=Priority.MEDIUM,
        ))

    return recommendations


def predict_emotional_state(
    guest: GuestInput,
    config: Optional[EmotionConfig] = None
) -> EmotionalProfile:
    """
    Predict the emotional profile of one guest.

    Args:
        guest: Raw guest mapping or normalized GuestProfile
        config: Emotion configuration (defaults if omitted)

    Returns:
        EmotionalProfile for the guest
    """
    config = config or EmotionConfig()
    profile = normalize(guest)
    state = determine_state(profile, config)

    logger.debug(f"Predicted state for {profile.guest_id}: {state.value}")

    return EmotionalProfile(
        guest_id=profile.guest_id,
        guest_name=profile.name,
        state=state,
        confidence=calculate_confidence(profile, config),
        energy_level=profile.energy_level,
        stress_level=profile.stress_level,
        indicators=collect_indicators(profile, config),
        recommended_activity=ACTIVITY_BY_STATE[state],
        wellness_recommendations=generate_wellness_recommendations(profile),
    )


def predict_emotional_states(
    guests: Iterable[GuestInput],
    config: Optional[EmotionConfig] = None
) -> List[EmotionalProfile]:
    """
    Predict emotional profiles for every guest, in input order.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        config: Emotion configuration (defaults if omitted)

    Returns:
        List of EmotionalProfile, one per guest
    """
    config = config or EmotionConfig()
    profiles = [predict_emotional_state(guest, config) for guest in normalize_guests(guests)]

    counts: Dict[str, int] = {}
    for profile in profiles:
        counts[profile.state.value] = counts.get(profile.state.value, 0) + 1
    logger.info(f"Predicted emotional states for {len(profiles)} guests: {counts}")

    return profiles
