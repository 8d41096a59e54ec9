"""
Guest profile schema.

Defines the closed variants used across the engine and the normalized
GuestProfile record that every scorer consumes. Raw guest records are
loosely typed mappings; GuestProfile is the fully populated form produced
once by the normalizer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, Tuple, Type, Mapping


class PersonalityType(Enum):
    """Social personality type."""
    INTROVERT = "introvert"
    EXTRAVERT = "extravert"
    AMBIVERT = "ambivert"

    @classmethod
    def parse(cls, value: Any) -> "PersonalityType":
        """Parse a raw value; unknown or missing types are ambivert."""
        return _parse_enum(cls, value, cls.AMBIVERT)


class ActivityPreference(Enum):
    """Preference for group activities."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> "ActivityPreference":
        return _parse_enum(cls, value, cls.MODERATE)


class CommunicationStyle(Enum):
    """Preferred communication register."""
    FORMAL = "formal"
    CASUAL = "casual"
    BALANCED = "balanced"

    @classmethod
    def parse(cls, value: Any) -> "CommunicationStyle":
        return _parse_enum(cls, value, cls.BALANCED)


class EnergyLevel(Enum):
    """Self-reported or observed energy level."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> "EnergyLevel":
        return _parse_enum(cls, value, cls.MODERATE)


class StressLevel(Enum):
    """Self-reported or observed stress level."""
    NORMAL = "normal"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> "StressLevel":
        return _parse_enum(cls, value, cls.NORMAL)


class Severity(Enum):
    """Severity of an engagement risk."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Priority(Enum):
    """Priority attached to a recommendation."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


def _parse_enum(enum_cls: Type[Enum], value: Any, default: Enum) -> Enum:
    """Map a raw value onto an enum member, falling back to the named default."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    return default


def require_exhaustive(table: Mapping[Enum, Any], enum_cls: Type[Enum], name: str) -> None:
    """
    Check that a lookup table has an entry for every enum member.

    Called at module import so an incomplete table fails on load
    rather than at lookup time.

    Raises:
        ValueError: If any member is missing from the table
    """
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise ValueError(f"Lookup table '{name}' has no entry for {enum_cls.__name__}: {missing}")


@dataclass(frozen=True)
class GuestProfile:
    """
    Normalized guest record.

    Every attribute a downstream scorer reads is populated, either from the
    raw record or from a documented default. Tag collections are tuples in
    declaration order with duplicates removed, so "first shared interest"
    is deterministic.

    Attributes:
        guest_id: Guest identifier
        name: Display name (defaults to the identifier)
        social_media_activity: Activity level, never negative (default 0)
        event_attendance_count: Past events attended, never negative (default 0)
        interests: Declared interest tags
        hobby_interests: Declared hobby tags
        professional_interests: Declared professional focus areas
        professional_industry: Industry, None when undeclared
        personality_type: Defaults to ambivert
        group_activity_preference: Defaults to moderate
        communication_style: Defaults to balanced
        language: Spoken language (default "English")
        energy_level: Defaults to moderate
        stress_level: Defaults to normal
        open_to_networking: True unless explicitly false
        first_time_attendee: First event for this guest
        introverted: Explicit flag or introvert personality type
        likes_mixing_with_strangers: None when undeclared
        language_barrier: Declared language barrier
        social_exhaustion: Declared social exhaustion
        engagement_score: Observed engagement (0-100), None when unknown
        feedback_history: Prior app feedback, oldest first
        recent_social_activity: Recent social-media text, None when unknown
        preferred_time_slots: Preferred session day-parts
    """
    guest_id: str
    name: str
    social_media_activity: float = 0.0
    event_attendance_count: float = 0.0
    interests: Tuple[str, ...] = ()
    hobby_interests: Tuple[str, ...] = ()
    professional_interests: Tuple[str, ...] = ()
    professional_industry: Optional[str] = None
    personality_type: PersonalityType = PersonalityType.AMBIVERT
    group_activity_preference: ActivityPreference = ActivityPreference.MODERATE
    communication_style: CommunicationStyle = CommunicationStyle.BALANCED
    language: str = "English"
    energy_level: EnergyLevel = EnergyLevel.MODERATE
    stress_level: StressLevel = StressLevel.NORMAL
    open_to_networking: bool = True
    first_time_attendee: bool = False
    introverted: bool = False
    likes_mixing_with_strangers: Optional[bool] = None
    language_barrier: bool = False
    social_exhaustion: bool = False
    engagement_score: Optional[float] = None
    feedback_history: Tuple[str, ...] = ()
    recent_social_activity: Optional[str] = None
    preferred_time_slots: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with string enum values."""
        return {
            "guest_id": self.guest_id,
            "name": self.name,
            "social_media_activity": self.social_media_activity,
            "event_attendance_count": self.event_attendance_count,
            "interests": list(self.interests),
            "hobby_interests": list(self.hobby_interests),
            "professional_interests": list(self.professional_interests),
            "professional_industry": self.professional_industry,
            "personality_type": self.personality_type.value,
            "group_activity_preference": self.group_activity_preference.value,
            "communication_style": self.communication_style.value,
            "language": self.language,
            "energy_level": self.energy_level.value,
            "stress_level": self.stress_level.value,
            "open_to_networking": self.open_to_networking,
            "first_time_attendee": self.first_time_attendee,
            "introverted": self.introverted,
            "likes_mixing_with_strangers": self.likes_mixing_with_strangers,
            "language_barrier": self.language_barrier,
            "social_exhaustion": self.social_exhaustion,
            "engagement_score": self.engagement_score,
            "feedback_history": list(self.feedback_history),
            "recent_social_activity": self.recent_social_activity,
            "preferred_time_slots": list(self.preferred_time_slots),
        }

    def summary(self) -> Dict[str, str]:
        """Identity fields used when a guest is referenced from another record."""
        return {"id": self.guest_id, "name": self.name}
