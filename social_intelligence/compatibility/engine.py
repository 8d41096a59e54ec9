"""
Pairwise guest compatibility.

This module computes a symmetric compatibility score for every unordered
pair of guests. Pairs are enumerated in natural order (i < j over the
input list) and each pair key is an unordered frozenset of guest ids, so
score(a, b) == score(b, a) by construction.

Compatibility Formula:
    score = baseline
          + shared_interest_weight * |interests_A & interests_B|
          + same_personality_bonus            (identical personality types)
          + complementary_personality_bonus   ({introvert, extravert} pair)
          + industry_match_bonus              (same declared industry)
          + shared_hobby_weight * |hobbies_A & hobbies_B|
    score = clip(score, 0, 1)

The two personality bonuses are structurally exclusive: a pair cannot be
both identical and complementary.

Complexity:
    Shared-tag counts come from one-hot tag matrices (M @ M.T), so time and
    memory are quadratic in the number of guests. For very large guest
    lists this is the dominant cost of the engine; no pruning is applied.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, FrozenSet, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..profiles import GuestProfile, PersonalityType, normalize_guests
from ..profiles.normalizer import GuestInput

logger = logging.getLogger(__name__)

PairKey = FrozenSet[str]

_PERSONALITY_CODES = {member: code for code, member in enumerate(PersonalityType)}
_COMPLEMENTARY = {
    _PERSONALITY_CODES[PersonalityType.INTROVERT],
    _PERSONALITY_CODES[PersonalityType.EXTRAVERT],
}


@dataclass
class CompatibilityConfig:
    """
    Configuration for compatibility scoring.

    Attributes:
        baseline: Starting score for every pair
        shared_interest_weight: Added per shared interest
        same_personality_bonus: Added when personality types are identical
        complementary_personality_bonus: Added for an introvert/extravert pair
        industry_match_bonus: Added when declared industries match exactly
        shared_hobby_weight: Added per shared hobby
    """
    baseline: float = 0.5
    shared_interest_weight: float = 0.15
    same_personality_bonus: float = 0.20
    complementary_personality_bonus: float = 0.15
    industry_match_bonus: float = 0.10
    shared_hobby_weight: float = 0.10

    def validate(self) -> None:
        """Validate configuration values."""
        for name, value in asdict(self).items():
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CompatibilityConfig":
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CompatibilityConfig":
        """Create from main config dictionary."""
        section = config.get("compatibility", {})
        defaults = cls()
        return cls(**{
            key: float(section.get(key, value))
            for key, value in asdict(defaults).items()
        })


def pair_key(guest_id_a: str, guest_id_b: str) -> PairKey:
    """Unordered key for a pair of guest ids."""
    return frozenset((guest_id_a, guest_id_b))


def shared_tags(tags_a: Sequence[str], tags_b: Sequence[str]) -> List[str]:
    """Tags declared by both guests, in the first guest's declaration order."""
    other = set(tags_b)
    return [tag for tag in tags_a if tag in other]


def _tag_matrix(tag_lists: Sequence[Sequence[str]]) -> np.ndarray:
    """
    One-hot encode tag collections.

    Args:
        tag_lists: One tag sequence per guest

    Returns:
        Binary matrix (n_guests x vocabulary size)
    """
    vocabulary: Dict[str, int] = {}
    for tags in tag_lists:
        for tag in tags:
            vocabulary.setdefault(tag, len(vocabulary))

    matrix = np.zeros((len(tag_lists), len(vocabulary)), dtype=np.int64)
    for row, tags in enumerate(tag_lists):
        for tag in tags:
            matrix[row, vocabulary[tag]] = 1
    return matrix


def _shared_counts(tag_lists: Sequence[Sequence[str]]) -> np.ndarray:
    """Pairwise shared-tag counts (n x n); the product of one-hot rows marks exact matches."""
    matrix = _tag_matrix(tag_lists)
    return matrix @ matrix.T


def compute_pair_scores(
    profiles: Sequence[GuestProfile],
    config: Optional[CompatibilityConfig] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute compatibility scores for every unordered pair.

    Args:
        profiles: Normalized guest profiles
        config: Compatibility configuration (defaults if omitted)

    Returns:
        Tuple of (indices_a, indices_b, scores) arrays. Indices satisfy
        indices_a[k] < indices_b[k] and are in natural iteration order
        (row-major over the upper triangle).
    """
    config = config or CompatibilityConfig()
    n_guests = len(profiles)

    indices_a, indices_b = np.triu_indices(n_guests, k=1)
    if len(indices_a) == 0:
        return indices_a, indices_b, np.zeros(0, dtype=float)

    shared_interests = _shared_counts([p.interests for p in profiles])[indices_a, indices_b]
    shared_hobbies = _shared_counts([p.hobby_interests for p in profiles])[indices_a, indices_b]

    codes = np.array([_PERSONALITY_CODES[p.personality_type] for p in profiles])
    codes_a = codes[indices_a]
    codes_b = codes[indices_b]
    same_personality = codes_a == codes_b
    complementary = (
        ~same_personality
        & np.isin(codes_a, list(_COMPLEMENTARY))
        & np.isin(codes_b, list(_COMPLEMENTARY))
    )

    # Undeclared industries never match
    industries = np.array([p.professional_industry for p in profiles], dtype=object)
    industries_a = industries[indices_a]
    industries_b = industries[indices_b]
    declared = np.array([value is not None for value in industries_a]) & \
        np.array([value is not None for value in industries_b])
    industry_match = declared & (industries_a == industries_b)

    scores = (
        config.baseline
        + config.shared_interest_weight * shared_interests
        + config.same_personality_bonus * same_personality
        + config.complementary_personality_bonus * complementary
        + config.industry_match_bonus * industry_match
        + config.shared_hobby_weight * shared_hobbies
    )
    scores = np.clip(scores.astype(float), 0, 1)

    return indices_a, indices_b, scores


def compute_compatibility(
    guests: Iterable[GuestInput],
    config: Optional[CompatibilityConfig] = None
) -> Dict[PairKey, float]:
    """
    Compute the compatibility score for every unordered guest pair.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        config: Compatibility configuration (defaults if omitted)

    Returns:
        Mapping from unordered pair key to score in [0, 1], in natural
        pair iteration order
    """
    profiles = normalize_guests(guests)
    _warn_duplicate_ids(profiles)

    indices_a, indices_b, scores = compute_pair_scores(profiles, config)

    compatibility = {
        pair_key(profiles[a].guest_id, profiles[b].guest_id): float(score)
        for a, b, score in zip(indices_a, indices_b, scores)
    }

    logger.info(f"Computed compatibility for {len(scores)} pairs from {len(profiles)} guests")
    return compatibility


def compatibility_between(
    compatibility: Dict[PairKey, float],
    guest_id_a: str,
    guest_id_b: str
) -> Optional[float]:
    """Look up the score for a pair in either order, None if absent."""
    return compatibility.get(pair_key(guest_id_a, guest_id_b))


def _warn_duplicate_ids(profiles: Sequence[GuestProfile]) -> None:
    seen = set()
    for profile in profiles:
        if profile.guest_id in seen:
            logger.warning(f"Duplicate guest id '{profile.guest_id}'; pair keys will collide")
        seen.add(profile.guest_id)
