"""
Guest interaction scoring.

Computes a bounded 0-100 social-interaction score per guest, a social
style classification, social preferences, and engagement risk factors.

Score Formula:
    score = baseline
          + min(social_media_activity / divisor, social_media_cap)
          + min(event_attendance_count * attendance_weight, attendance_cap)
          + min(len(interests) * interest_weight, interest_cap)
    score = clip(score, 0, max_score)

With the default configuration a guest with no optional attributes
scores exactly 50. Risk factors are reported alongside the score and
never change it.
"""

import logging
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Dict, Any, List, Iterable, Optional

from ..profiles import (
    GuestProfile,
    PersonalityType,
    Severity,
    normalize,
    normalize_guests,
    require_exhaustive,
)
from ..profiles.normalizer import GuestInput

logger = logging.getLogger(__name__)


class RiskKind(Enum):
    """Kinds of engagement risk."""
    FIRST_TIME = "FIRST_TIME"
    SOCIAL_ANXIETY = "SOCIAL_ANXIETY"
    LANGUAGE_BARRIER = "LANGUAGE_BARRIER"


@dataclass(frozen=True)
class GroupSizeRange:
    """Inclusive range of group sizes a guest is comfortable in."""
    min: int
    max: int

    def to_dict(self) -> Dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class InteractionStyle:
    """Interaction style classification for a personality type."""
    label: str
    preference: str
    optimal_group_size: GroupSizeRange
    energy_drain: str
    suggestion: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "preference": self.preference,
            "optimal_group_size": self.optimal_group_size.to_dict(),
            "energy_drain": self.energy_drain,
            "suggestion": self.suggestion,
        }


INTERACTION_STYLES: Dict[PersonalityType, InteractionStyle] = {
    PersonalityType.INTROVERT: InteractionStyle(
        label="Introvert",
        preference="Small group conversations",
        optimal_group_size=GroupSizeRange(2, 4),
        energy_drain="Large events",
        suggestion="One-on-one networking sessions",
    ),
    PersonalityType.EXTRAVERT: InteractionStyle(
        label="Extravert",
        preference="Large group activities",
        optimal_group_size=GroupSizeRange(8, 15),
        energy_drain="Quiet individual activities",
        suggestion="Group games and networking events",
    ),
    PersonalityType.AMBIVERT: InteractionStyle(
        label="Ambivert",
        preference="Flexible social engagement",
        optimal_group_size=GroupSizeRange(4, 8),
        energy_drain="Extreme social or solitary situations",
        suggestion="Balanced mix of group and small activities",
    ),
}

PERSONALITY_TRAITS: Dict[PersonalityType, str] = {
    PersonalityType.INTROVERT: "Reserved, prefers small groups",
    PersonalityType.EXTRAVERT: "Outgoing, enjoys large groups",
    PersonalityType.AMBIVERT: "Balanced, flexible social style",
}

require_exhaustive(INTERACTION_STYLES, PersonalityType, "INTERACTION_STYLES")
require_exhaustive(PERSONALITY_TRAITS, PersonalityType, "PERSONALITY_TRAITS")


@dataclass(frozen=True)
class RiskFactor:
    """A single engagement risk with its suggested mitigation."""
    kind: RiskKind
    severity: Severity
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class SocialPreferences:
    """Social preferences derived from a guest profile."""
    networking_friendly: bool
    group_activity_preference: str
    personality_trait: str
    communication_style: str
    interest_areas: List[str]
    professional_focus: List[str]
    hobby_interests: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class InteractionProfile:
    """
    Derived interaction record for one guest.

    Attributes:
        guest_id: Guest identifier
        guest_name: Guest display name
        interaction_score: Score in [0, 100]
        social_preferences: Derived social preferences
        interaction_style: Style classification for the personality type
        risk_factors: Engagement risks with mitigations
    """
    guest_id: str
    guest_name: str
    interaction_score: float
    social_preferences: SocialPreferences
    interaction_style: InteractionStyle
    risk_factors: List[RiskFactor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "guest_id": self.guest_id,
            "guest_name": self.guest_name,
            "interaction_score": self.interaction_score,
            "social_preferences": self.social_preferences.to_dict(),
            "interaction_style": self.interaction_style.to_dict(),
            "risk_factors": [risk.to_dict() for risk in self.risk_factors],
        }


@dataclass
class InteractionConfig:
    """
    Configuration for interaction scoring.

    Attributes:
        baseline: Starting score for every guest
        max_score: Upper clamp for the final score
        social_media_divisor: Social-media activity is divided by this
        social_media_cap: Maximum social-media contribution
        attendance_weight: Points per past event attended
        attendance_cap: Maximum attendance contribution
        interest_weight: Points per declared interest
        interest_cap: Maximum interest contribution
    """
    baseline: float = 50.0
    max_score: float = 100.0
    social_media_divisor: float = 5.0
    social_media_cap: float = 20.0
    attendance_weight: float = 1.5
    attendance_cap: float = 15.0
    interest_weight: float = 3.0
    interest_cap: float = 15.0

    def validate(self) -> None:
        """Validate configuration values."""
        if self.social_media_divisor <= 0:
            raise ValueError(f"social_media_divisor must be positive, got {self.social_media_divisor}")
        for name in ["social_media_cap", "attendance_cap", "interest_cap"]:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if not 0 <= self.baseline <= self.max_score:
            raise ValueError(f"baseline must be in [0, {self.max_score}], got {self.baseline}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "InteractionConfig":
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "InteractionConfig":
        """Create from main config dictionary."""
        section = config.get("interaction", {})
        defaults = cls()
        return cls(**{
            key: float(section.get(key, value))
            for key, value in asdict(defaults).items()
        })


def calculate_interaction_score(guest: GuestProfile, config: InteractionConfig) -> float:
    """
    Calculate the bounded interaction score for a normalized guest.

    Args:
        guest: Normalized guest profile
        config: Interaction scoring configuration

    Returns:
        Score in [0, max_score]
    """
    score = config.baseline
    score += max(0.0, min(guest.social_media_activity / config.social_media_divisor,
                          config.social_media_cap))
    score += max(0.0, min(guest.event_attendance_count * config.attendance_weight,
                          config.attendance_cap))
    score += min(len(guest.interests) * config.interest_weight, config.interest_cap)
    return min(max(score, 0.0), config.max_score)


def determine_social_preferences(guest: GuestProfile) -> SocialPreferences:
    return SocialPreferences(
        networking_friendly=guest.open_to_networking,
        group_activity_preference=guest.group_activity_preference.value,
        personality_trait=PERSONALITY_TRAITS[guest.personality_type],
        communication_style=guest.communication_style.value,
        interest_areas=list(guest.interests),
        professional_focus=list(guest.professional_interests),
        hobby_interests=list(guest.hobby_interests),
    )


def identify_risk_factors(guest: GuestProfile) -> List[RiskFactor]:
    """Risk triggers are independent; any combination may fire."""
    risks = []

    if guest.first_time_attendee:
        risks.append(RiskFactor(
            kind=RiskKind.FIRST_TIME,
            severity=Severity.MEDIUM,
            suggestion="Assign buddy or welcome session",
        ))

    if guest.introverted and guest.likes_mixing_with_strangers is False:
        risks.append(RiskFactor(
            kind=RiskKind.SOCIAL_ANXIETY,
            severity=Severity.MEDIUM,
            suggestion="Provide structured small group activities",
        ))

    if guest.language_barrier:
        risks.append(RiskFactor(
            kind=RiskKind.LANGUAGE_BARRIER,
            severity=Severity.HIGH,
            suggestion="Provide translator or language-matched groups",
        ))

    return risks


def score_interaction(guest: GuestInput, config: Optional[InteractionConfig] = None) -> InteractionProfile:
    """
    Build the interaction profile for one guest.

    Args:
        guest: Raw guest mapping or normalized GuestProfile
        config: Interaction scoring configuration (defaults if omitted)

    Returns:
        InteractionProfile for the guest
    """
    config = config or InteractionConfig()
    profile = normalize(guest)

    score = calculate_interaction_score(profile, config)
    logger.debug(f"Interaction score for {profile.guest_id}: {score:.1f}")

    return InteractionProfile(
        guest_id=profile.guest_id,
        guest_name=profile.name,
        interaction_score=score,
        social_preferences=determine_social_preferences(profile),
        interaction_style=INTERACTION_STYLES[profile.personality_type],
        risk_factors=identify_risk_factors(profile),
    )


def score_interactions(
    guests: Iterable[GuestInput],
    config: Optional[InteractionConfig] = None
) -> List[InteractionProfile]:
    """
    Build interaction profiles for every guest, in input order.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        config: Interaction scoring configuration (defaults if omitted)

    Returns:
        List of InteractionProfile, one per guest
    """
    config = config or InteractionConfig()
    profiles = [score_interaction(guest, config) for guest in normalize_guests(guests)]
    logger.info(f"Scored interactions for {len(profiles)} guests")
    return profiles
