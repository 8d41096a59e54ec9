"""
Guest pairing recommendations.

Selects the top floor(n/2) guest pairs by compatibility and attaches an
activity suggestion and an interaction prediction to each.

Selection uses a stable descending sort of the pairwise scores, so pairs
with equal scores keep their natural iteration order (i < j over the
input list). A guest may appear in more than one selected pair.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Iterable, List, Optional, Tuple

import numpy as np

from ..profiles import GuestProfile, DEFAULT_LANGUAGE, normalize_guests
from ..profiles.normalizer import GuestInput
from .engine import CompatibilityConfig, compute_pair_scores, shared_tags

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITIES: Tuple[Tuple[str, str], ...] = (
    ("sports", "Team sports or golf activity"),
    ("travel", "Travel story sharing session"),
    ("technology", "Tech talk or innovation workshop"),
    ("food", "Culinary experience or food tasting"),
    ("arts", "Art gallery tour or creative workshop"),
)


@dataclass
class PairingConfig:
    """
    Configuration for pairing recommendations.

    Attributes:
        default_language: Language assumed for guests who declare none
        fallback_activity: Activity when no prioritized interest is shared
        activities: (interest, activity) in priority order, first match wins
    """
    default_language: str = DEFAULT_LANGUAGE
    fallback_activity: str = "General networking or dinner conversation"
    activities: Tuple[Tuple[str, str], ...] = DEFAULT_ACTIVITIES

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.fallback_activity:
            raise ValueError("fallback_activity must not be empty")
        interests = [interest for interest, _ in self.activities]
        if len(interests) != len(set(interests)):
            raise ValueError(f"Duplicate interests in activity priority list: {interests}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_language": self.default_language,
            "fallback_activity": self.fallback_activity,
            "activities": [
                {"interest": interest, "activity": activity}
                for interest, activity in self.activities
            ],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PairingConfig":
        return cls.from_config({"pairing": d})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "PairingConfig":
        """Create from main config dictionary."""
        section = config.get("pairing", {})
        activities = section.get("activities")
        if activities is None:
            parsed = DEFAULT_ACTIVITIES
        else:
            parsed = tuple((entry["interest"], entry["activity"]) for entry in activities)

        return cls(
            default_language=section.get("default_language", DEFAULT_LANGUAGE),
            fallback_activity=section.get("fallback_activity",
                                          "General networking or dinner conversation"),
            activities=parsed,
        )


@dataclass
class InteractionPrediction:
    """Predicted interaction quality for a guest pair."""
    engagement_potential: str
    conversation_starters: List[str]
    potential_challenges: List[str] = field(default_factory=list)
    icebreaker: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "engagement_potential": self.engagement_potential,
            "conversation_starters": list(self.conversation_starters),
            "potential_challenges": list(self.potential_challenges),
            "icebreaker": self.icebreaker,
        }


@dataclass
class GuestPairing:
    """
    A recommended guest pair.

    Attributes:
        pair_id: "<guest1_id>_<guest2_id>" in input order
        guest1: Identity of the earlier guest in the input list
        guest2: Identity of the later guest in the input list
        compatibility_score: Score in [0, 1]
        shared_interests: Interests declared by both guests
        suggested_activity: Activity chosen from the interest priority list
        activity_hint: Activity type requested by the caller
        interaction_prediction: Challenges and icebreaker for the pair
    """
    pair_id: str
    guest1: Dict[str, str]
    guest2: Dict[str, str]
    compatibility_score: float
    shared_interests: List[str]
    suggested_activity: str
    activity_hint: str
    interaction_prediction: InteractionPrediction

    @property
    def compatibility_percent(self) -> int:
        """Compatibility as a rounded percentage."""
        return int(np.floor(self.compatibility_score * 100 + 0.5))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pair_id": self.pair_id,
            "guest1": dict(self.guest1),
            "guest2": dict(self.guest2),
            "compatibility_score": self.compatibility_score,
            "compatibility_percent": self.compatibility_percent,
            "shared_interests": list(self.shared_interests),
            "suggested_activity": self.suggested_activity,
            "activity_hint": self.activity_hint,
            "interaction_prediction": self.interaction_prediction.to_dict(),
        }


def suggest_activity(shared_interests: List[str], config: PairingConfig) -> str:
    """Pick the activity for the highest-priority shared interest."""
    for interest, activity in config.activities:
        if interest in shared_interests:
            return activity
    return config.fallback_activity


def predict_pair_interaction(
    guest1: GuestProfile,
    guest2: GuestProfile,
    config: PairingConfig
) -> InteractionPrediction:
    """
    Predict how a pair is likely to interact.

    A language challenge is flagged only when both guests speak a
    non-default language and the two languages differ.
    """
    shared = shared_tags(guest1.interests, guest2.interests)
    prediction = InteractionPrediction(
        engagement_potential="High",
        conversation_starters=shared,
    )

    if (guest1.language != guest2.language
            and guest1.language != config.default_language
            and guest2.language != config.default_language):
        prediction.potential_challenges.append("Language barrier")

    if shared:
        prediction.icebreaker = f'"I noticed we both enjoy {shared[0]}! Have you tried...?"'
    else:
        topic = guest1.interests[0] if guest1.interests else "the destination"
        prediction.icebreaker = (
            '"What brings you to this event? Are you looking to meet new people '
            f'or learn about {topic}?"'
        )

    return prediction


def suggest_pairings(
    guests: Iterable[GuestInput],
    activity_hint: str = "general",
    compatibility_config: Optional[CompatibilityConfig] = None,
    config: Optional[PairingConfig] = None
) -> List[GuestPairing]:
    """
    Recommend the most compatible guest pairs.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        activity_hint: Activity type requested by the caller; carried on
            each pairing, selection does not depend on it
        compatibility_config: Compatibility configuration (defaults if omitted)
        config: Pairing configuration (defaults if omitted)

    Returns:
        Up to floor(n/2) GuestPairing, sorted by descending compatibility
    """
    config = config or PairingConfig()
    profiles = normalize_guests(guests)

    indices_a, indices_b, scores = compute_pair_scores(profiles, compatibility_config)
    n_selected = min(len(profiles) // 2, len(scores))

    # Stable sort keeps natural pair order among equal scores
    order = np.argsort(-scores, kind="stable")[:n_selected]

    pairings = []
    for k in order:
        guest1 = profiles[indices_a[k]]
        guest2 = profiles[indices_b[k]]
        shared = shared_tags(guest1.interests, guest2.interests)

        pairings.append(GuestPairing(
            pair_id=f"{guest1.guest_id}_{guest2.guest_id}",
            guest1=guest1.summary(),
            guest2=guest2.summary(),
            compatibility_score=float(scores[k]),
            shared_interests=shared,
            suggested_activity=suggest_activity(shared, config),
            activity_hint=activity_hint,
            interaction_prediction=predict_pair_interaction(guest1, guest2, config),
        ))

    logger.info(f"Selected {len(pairings)} pairings from {len(scores)} candidate pairs")
    return pairings
