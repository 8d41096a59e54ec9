"""
Interest-based networking sessions.

Groups guests by declared interest and proposes one networking session
per interest held by at least two guests. A guest with k interests
appears in k groups. Grouping uses shared tags only; compatibility plays
no part.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Iterable, List, Optional, Sequence, Tuple

from ..profiles import GuestProfile, normalize_guests
from ..profiles.normalizer import GuestInput

logger = logging.getLogger(__name__)

DEFAULT_TIME_SLOTS: Tuple[str, ...] = (
    "Morning (9-11 AM)",
    "Late Morning (11-1 PM)",
    "Afternoon (2-4 PM)",
    "Early Evening (5-7 PM)",
)


@dataclass
class NetworkingConfig:
    """
    Configuration for networking grouping.

    Attributes:
        min_group_size: Minimum members for an interest to get a session
        time_slots: Day-parts in priority order (ties resolve to the first)
        default_time_slot: Slot used when no member states a preference
        duration: Session duration shown to guests
        format: Session format shown to guests
    """
    min_group_size: int = 2
    time_slots: Tuple[str, ...] = DEFAULT_TIME_SLOTS
    default_time_slot: str = "Afternoon (2-4 PM)"
    duration: str = "45 minutes"
    format: str = "Structured networking with icebreaker activities"

    def validate(self) -> None:
        """Validate configuration values."""
        if self.min_group_size < 2:
            raise ValueError(f"min_group_size must be at least 2, got {self.min_group_size}")
        if not self.time_slots:
            raise ValueError("time_slots must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_group_size": self.min_group_size,
            "time_slots": list(self.time_slots),
            "default_time_slot": self.default_time_slot,
            "duration": self.duration,
            "format": self.format,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "NetworkingConfig":
        return cls.from_config({"networking": d})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "NetworkingConfig":
        """Create from main config dictionary."""
        section = config.get("networking", {})
        defaults = cls()
        return cls(
            min_group_size=int(section.get("min_group_size", defaults.min_group_size)),
            time_slots=tuple(section.get("time_slots", defaults.time_slots)),
            default_time_slot=section.get("default_time_slot", defaults.default_time_slot),
            duration=section.get("duration", defaults.duration),
            format=section.get("format", defaults.format),
        )


@dataclass
class NetworkingOpportunity:
    """
    A proposed networking session for guests sharing an interest.

    Attributes:
        opportunity_id: Stable id, "network_<interest>"
        interest: Shared interest tag
        participants: Identity of each member, in input order
        duration: Recommended duration
        format: Recommended session format
        best_time: Recommended time slot
    """
    opportunity_id: str
    interest: str
    participants: List[Dict[str, str]] = field(default_factory=list)
    duration: str = "45 minutes"
    format: str = ""
    best_time: str = ""
    type: str = "INTEREST_BASED_NETWORKING"

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    @property
    def title(self) -> str:
        return f"{self.interest} Networking Session"

    @property
    def description(self) -> str:
        return f"Connect with fellow enthusiasts interested in {self.interest}"

    @property
    def expected_outcome(self) -> str:
        return f"Build professional connections in {self.interest}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.opportunity_id,
            "type": self.type,
            "interest": self.interest,
            "title": self.title,
            "description": self.description,
            "participants": [dict(p) for p in self.participants],
            "participant_count": self.participant_count,
            "duration": self.duration,
            "format": self.format,
            "best_time": self.best_time,
            "expected_outcome": self.expected_outcome,
        }


def group_guests_by_interest(profiles: Sequence[GuestProfile]) -> Dict[str, List[GuestProfile]]:
    """
    Map each interest tag to the guests declaring it.

    Tags appear in first-seen order; members keep input order.
    """
    groups: Dict[str, List[GuestProfile]] = {}
    for profile in profiles:
        for interest in profile.interests:
            groups.setdefault(interest, []).append(profile)
    return groups


def find_optimal_session_time(
    members: Sequence[GuestProfile],
    config: Optional[NetworkingConfig] = None
) -> str:
    """
    Pick the time slot preferred by the most members.

    Ties resolve to the earliest slot in the configured list. When no
    member prefers any configured slot the default slot is returned.
    """
    config = config or NetworkingConfig()

    best_slot = None
    best_count = 0
    for slot in config.time_slots:
        count = sum(1 for member in members if slot in member.preferred_time_slots)
        if count > best_count:
            best_slot, best_count = slot, count

    return best_slot if best_slot is not None else config.default_time_slot


def group_by_interest(
    guests: Iterable[GuestInput],
    config: Optional[NetworkingConfig] = None
) -> List[NetworkingOpportunity]:
    """
    Propose networking sessions for interests shared by enough guests.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        config: Networking configuration (defaults if omitted)

    Returns:
        List of NetworkingOpportunity in first-seen interest order
    """
    config = config or NetworkingConfig()
    profiles = normalize_guests(guests)
    groups = group_guests_by_interest(profiles)

    opportunities = []
    for interest, members in groups.items():
        if len(members) < config.min_group_size:
            continue
        opportunities.append(NetworkingOpportunity(
            opportunity_id=f"network_{interest}",
            interest=interest,
            participants=[member.summary() for member in members],
            duration=config.duration,
            format=config.format,
            best_time=find_optimal_session_time(members, config),
        ))

    logger.info(f"Found {len(opportunities)} networking opportunities "
                f"across {len(groups)} interests")
    return opportunities
