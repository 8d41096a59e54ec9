"""Compatibility module for pairwise scoring and guest pairing."""

from .engine import (
    PairKey,
    CompatibilityConfig,
    pair_key,
    shared_tags,
    compute_pair_scores,
    compute_compatibility,
    compatibility_between,
)
from .pairing import (
    PairingConfig,
    InteractionPrediction,
    GuestPairing,
    suggest_activity,
    predict_pair_interaction,
    suggest_pairings,
)

__all__ = [
    "PairKey",
    "CompatibilityConfig",
    "pair_key",
    "shared_tags",
    "compute_pair_scores",
    "compute_compatibility",
    "compatibility_between",
    "PairingConfig",
    "InteractionPrediction",
    "GuestPairing",
    "suggest_activity",
    "predict_pair_interaction",
    "suggest_pairings",
]
