"""
Guest profile normalization.

Turns a possibly sparse, loosely typed guest record into a GuestProfile
with every attribute populated. Missing or malformed optional fields never
raise; they resolve to the documented defaults:

    personality type         -> ambivert
    group activity preference -> moderate
    communication style      -> balanced
    interests / hobbies      -> empty
    energy level             -> moderate
    stress level             -> normal
    open to networking       -> true unless explicitly false
    language                 -> "English"

Records may use snake_case keys or the camelCase keys of the upstream
records provider.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .schema import (
    GuestProfile,
    PersonalityType,
    ActivityPreference,
    CommunicationStyle,
    EnergyLevel,
    StressLevel,
)

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "English"

# Canonical field -> accepted raw keys, first match wins
_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "guest_id": ("guest_id", "id", "guestId"),
    "name": ("name", "guest_name", "guestName"),
    "social_media_activity": ("social_media_activity", "socialMediaActivity"),
    "event_attendance_count": ("event_attendance_count", "eventAttendanceCount"),
    "interests": ("interests",),
    "hobby_interests": ("hobby_interests", "hobbyInterests"),
    "professional_interests": ("professional_interests", "professionalInterests"),
    "professional_industry": ("professional_industry", "professionalIndustry"),
    "personality_type": ("personality_type", "personalityType"),
    "group_activity_preference": ("group_activity_preference", "groupActivityPreference"),
    "communication_style": ("communication_style", "communicationStyle"),
    "language": ("language", "spoken_language", "spokenLanguage"),
    "energy_level": ("energy_level", "energyLevel"),
    "stress_level": ("stress_level", "stressLevel"),
    "open_to_networking": ("open_to_networking", "openToNetworking"),
    "first_time_attendee": ("first_time_attendee", "first_time_event", "firstTimeEvent", "firstTimeAttendee"),
    "introverted": ("introverted",),
    "likes_mixing_with_strangers": ("likes_mixing_with_strangers", "likesMixingWithStrangers"),
    "language_barrier": ("language_barrier", "languageBarrier"),
    "social_exhaustion": ("social_exhaustion", "socialExhaustion"),
    "engagement_score": ("engagement_score", "engagementScore"),
    "feedback_history": ("feedback_history", "app_feedback_history", "appFeedbackHistory"),
    "recent_social_activity": ("recent_social_activity", "recentSocialActivity"),
    "preferred_time_slots": ("preferred_time_slots", "preferredTimeSlots"),
}

_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0", ""}

GuestInput = Union[GuestProfile, Mapping[str, Any]]


def normalize(guest: GuestInput, position: Optional[int] = None) -> GuestProfile:
    """
    Normalize one guest record.

    Args:
        guest: Raw guest mapping, or an already normalized GuestProfile
        position: Index of the guest in its collection, used to name
            guests that carry no identifier

    Returns:
        GuestProfile with every attribute populated
    """
    if isinstance(guest, GuestProfile):
        return guest
    fallback_id = f"guest_{position}" if position is not None else "unknown"
    return _build_profile(_canonical_fields(guest), fallback_id)


def _build_profile(raw: Mapping[str, Any], fallback_id: str) -> GuestProfile:
    guest_id = _text(raw.get("guest_id"))
    if guest_id is None:
        guest_id = fallback_id
        logger.debug(f"Guest record without id, using '{guest_id}'")

    personality = PersonalityType.parse(raw.get("personality_type"))
    open_flag = _optional_flag(raw.get("open_to_networking"))

    return GuestProfile(
        guest_id=guest_id,
        name=_text(raw.get("name")) or guest_id,
        social_media_activity=_count(raw.get("social_media_activity"), "social_media_activity"),
        event_attendance_count=_count(raw.get("event_attendance_count"), "event_attendance_count"),
        interests=_tags(raw.get("interests")),
        hobby_interests=_tags(raw.get("hobby_interests")),
        professional_interests=_tags(raw.get("professional_interests")),
        professional_industry=_text(raw.get("professional_industry")),
        personality_type=personality,
        group_activity_preference=ActivityPreference.parse(raw.get("group_activity_preference")),
        communication_style=CommunicationStyle.parse(raw.get("communication_style")),
        language=_text(raw.get("language")) or DEFAULT_LANGUAGE,
        energy_level=EnergyLevel.parse(raw.get("energy_level")),
        stress_level=StressLevel.parse(raw.get("stress_level")),
        open_to_networking=open_flag is not False,
        first_time_attendee=_flag(raw.get("first_time_attendee")),
        introverted=_flag(raw.get("introverted")) or personality is PersonalityType.INTROVERT,
        likes_mixing_with_strangers=_optional_flag(raw.get("likes_mixing_with_strangers")),
        language_barrier=_flag(raw.get("language_barrier")),
        social_exhaustion=_flag(raw.get("social_exhaustion")),
        engagement_score=_optional_number(raw.get("engagement_score"), "engagement_score"),
        feedback_history=_tags(raw.get("feedback_history"), dedupe=False),
        recent_social_activity=_text(raw.get("recent_social_activity")),
        preferred_time_slots=_tags(raw.get("preferred_time_slots")),
    )


def normalize_guests(guests: Iterable[GuestInput]) -> List[GuestProfile]:
    """
    Normalize a collection of guest records, preserving order.

    Guests without an id are named guest_<position>; a numeric suffix is
    appended when that name is already declared by another guest.

    Args:
        guests: Iterable of raw guest mappings or GuestProfiles

    Returns:
        List of GuestProfile instances
    """
    records = [g if isinstance(g, GuestProfile) else _canonical_fields(g) for g in guests]
    taken = {
        r.guest_id if isinstance(r, GuestProfile) else _text(r.get("guest_id"))
        for r in records
    }

    profiles = []
    for i, record in enumerate(records):
        if isinstance(record, GuestProfile):
            profiles.append(record)
            continue
        fallback_id = f"guest_{i}"
        if _text(record.get("guest_id")) is None:
            suffix = 1
            while fallback_id in taken:
                fallback_id = f"guest_{i}_{suffix}"
                suffix += 1
            taken.add(fallback_id)
        profiles.append(_build_profile(record, fallback_id))
    return profiles


def _canonical_fields(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Resolve aliased keys onto canonical field names."""
    fields = {}
    for canonical, aliases in _FIELD_ALIASES.items():
        for key in aliases:
            if key in record and not _is_missing(record[key]):
                fields[canonical] = record[key]
                break
    return fields


def _is_missing(value: Any) -> bool:
    """None and NaN (as produced by tabular sources) count as missing."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def _text(value: Any) -> Optional[str]:
    if _is_missing(value):
        return None
    text = str(value).strip()
    return text or None


def _count(value: Any, field_name: str) -> float:
    """Coerce an activity count; malformed or negative values become 0."""
    number = _optional_number(value, field_name)
    if number is None or number < 0:
        return 0.0
    return number


def _optional_number(value: Any, field_name: str) -> Optional[float]:
    if _is_missing(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric {field_name}: {value!r}")
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _flag(value: Any) -> bool:
    return _optional_flag(value) is True


def _optional_flag(value: Any) -> Optional[bool]:
    """Three-valued flag: True, False, or None when undeclared."""
    if _is_missing(value):
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return None
    return bool(value)


def _tags(value: Any, dedupe: bool = True) -> Tuple[str, ...]:
    """
    Coerce a tag collection into a tuple of non-empty strings.

    Sequences keep declaration order. Sets have none, so their items are
    sorted to keep the result independent of hash seeding.
    """
    if _is_missing(value):
        return ()
    if isinstance(value, str):
        items: Iterable[Any] = [value]
    elif isinstance(value, (set, frozenset)):
        items = sorted(value, key=str)
    else:
        try:
            items = list(value)
        except TypeError:
            items = [value]

    tags = []
    for item in items:
        text = _text(item)
        if text is None:
            continue
        if dedupe and text in tags:
            continue
        tags.append(text)
    return tuple(tags)
