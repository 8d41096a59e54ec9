"""
Guest Social Intelligence Engine

This package turns attendee records and live event telemetry into
explainable numeric scores and recommendations for event planners:
interaction scores, pairwise compatibility, networking sessions,
emotional-state predictions, sentiment trends and engagement analysis.

Key Design Decisions:
- Every scorer is a pure function of its inputs (no hidden state)
- Guest records are normalized once into a fully populated GuestProfile
- Only the SentimentTracker holds mutable state (an append-only log)
- All weights, caps and thresholds are configurable through YAML
"""

from .engine import EngineConfig, SocialIntelligenceEngine

__version__ = "1.0.0"

__all__ = ["EngineConfig", "SocialIntelligenceEngine"]
