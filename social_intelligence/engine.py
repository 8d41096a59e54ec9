"""
Engine facade for guest social intelligence.

This module ties the component scorers together behind one object that a
calling surface constructs and owns:
1. EngineConfig collects the typed configuration of every component
2. SocialIntelligenceEngine exposes every analysis as a method and owns
   the only mutable state, the sentiment log

Every method except track() is a pure function of its arguments and the
configuration.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Iterable, List, Mapping, Optional

import pandas as pd

from .configs import load_default_config
from .profiles import GuestProfile, normalize as normalize_guest, normalize_guests
from .profiles.normalizer import GuestInput
from .interaction import InteractionConfig, InteractionProfile, score_interaction, score_interactions
from .compatibility import (
    CompatibilityConfig,
    PairKey,
    PairingConfig,
    GuestPairing,
    compute_compatibility,
    suggest_pairings,
)
from .networking import NetworkingConfig, NetworkingOpportunity, group_by_interest
from .emotion import EmotionConfig, EmotionalProfile, predict_emotional_states
from .sentiment import (
    Clock,
    SentimentConfig,
    SentimentEntry,
    SentimentLog,
    SentimentSummary,
    SentimentAdjustment,
    SentimentTracker,
    suggest_sentiment_adjustments,
)
from .engagement import (
    EngagementConfig,
    EngagementAnalysis,
    ScheduleAdjustment,
    analyze_engagement,
    suggest_schedule_adjustments,
)
from .evaluation import (
    ScoreReport,
    compatibility_frame,
    create_compatibility_report,
    summarize_interaction_scores,
)

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """
    Configuration for every engine component.

    Attributes:
        interaction: Interaction scoring weights and caps
        compatibility: Pairwise compatibility weights
        pairing: Pairing activities and language defaults
        networking: Session grouping and time slots
        emotion: Emotional-state thresholds and keywords
        sentiment: Sentiment keywords, window and trend ratios
        engagement: Engagement thresholds and default labels
        log_level: Logging level used by the CLI
    """
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    compatibility: CompatibilityConfig = field(default_factory=CompatibilityConfig)
    pairing: PairingConfig = field(default_factory=PairingConfig)
    networking: NetworkingConfig = field(default_factory=NetworkingConfig)
    emotion: EmotionConfig = field(default_factory=EmotionConfig)
    sentiment: SentimentConfig = field(default_factory=SentimentConfig)
    engagement: EngagementConfig = field(default_factory=EngagementConfig)
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate every component configuration."""
        self.interaction.validate()
        self.compatibility.validate()
        self.pairing.validate()
        self.networking.validate()
        self.emotion.validate()
        self.sentiment.validate()
        self.engagement.validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "global": {"log_level": self.log_level},
            "interaction": self.interaction.to_dict(),
            "compatibility": self.compatibility.to_dict(),
            "pairing": self.pairing.to_dict(),
            "networking": self.networking.to_dict(),
            "emotion": self.emotion.to_dict(),
            "sentiment": self.sentiment.to_dict(),
            "engagement": self.engagement.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngineConfig":
        """Inverse of to_dict."""
        return cls(
            interaction=InteractionConfig.from_dict(d.get("interaction", {})),
            compatibility=CompatibilityConfig.from_dict(d.get("compatibility", {})),
            pairing=PairingConfig.from_dict(d.get("pairing", {})),
            networking=NetworkingConfig.from_dict(d.get("networking", {})),
            emotion=EmotionConfig.from_dict(d.get("emotion", {})),
            sentiment=SentimentConfig.from_dict(d.get("sentiment", {})),
            engagement=EngagementConfig.from_dict(d.get("engagement", {})),
            log_level=d.get("global", {}).get("log_level", "INFO"),
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineConfig":
        """Create from main config dictionary; missing sections use defaults."""
        return cls(
            interaction=InteractionConfig.from_config(config),
            compatibility=CompatibilityConfig.from_config(config),
            pairing=PairingConfig.from_config(config),
            networking=NetworkingConfig.from_config(config),
            emotion=EmotionConfig.from_config(config),
            sentiment=SentimentConfig.from_config(config),
            engagement=EngagementConfig.from_config(config),
            log_level=config.get("global", {}).get("log_level", "INFO"),
        )

    @classmethod
    def default(cls) -> "EngineConfig":
        """Configuration from the packaged defaults.yaml."""
        return cls.from_config(load_default_config())


class SocialIntelligenceEngine:
    """
    Guest analytics engine.

    Callers construct and own an instance; there is no shared global
    engine. Two engines never share sentiment history unless they are
    given the same SentimentLog.

    Attributes:
        config: Engine configuration
        tracker: Sentiment tracker owning the feedback log
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        sentiment_log: Optional[SentimentLog] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (packaged defaults if omitted)
            sentiment_log: Feedback log to append to (a new empty log if omitted)
            clock: Returns the current time as an aware datetime (UTC now if omitted)
        """
        self.config = config or EngineConfig.default()
        self.config.validate()
        self.tracker = SentimentTracker(self.config.sentiment, log=sentiment_log, clock=clock)
        logger.info("Initialized SocialIntelligenceEngine")

    @property
    def sentiment_log(self) -> SentimentLog:
        return self.tracker.log

    # Guest analytics

    def normalize(self, guest: GuestInput) -> GuestProfile:
        return normalize_guest(guest)

    def score_interaction(self, guest: GuestInput) -> InteractionProfile:
        return score_interaction(guest, self.config.interaction)

    def score_interactions(self, guests: Iterable[GuestInput]) -> List[InteractionProfile]:
        return score_interactions(guests, self.config.interaction)

    def compute_compatibility(self, guests: Iterable[GuestInput]) -> Dict[PairKey, float]:
        return compute_compatibility(guests, self.config.compatibility)

    def group_by_interest(self, guests: Iterable[GuestInput]) -> List[NetworkingOpportunity]:
        return group_by_interest(guests, self.config.networking)

    def suggest_pairings(
        self,
        guests: Iterable[GuestInput],
        activity_hint: str = "general"
    ) -> List[GuestPairing]:
        return suggest_pairings(
            guests,
            activity_hint=activity_hint,
            compatibility_config=self.config.compatibility,
            config=self.config.pairing,
        )

    def predict_emotional_states(self, guests: Iterable[GuestInput]) -> List[EmotionalProfile]:
        return predict_emotional_states(guests, self.config.emotion)

    # Feedback sentiment

    def track(self, feedback: Mapping[str, Any]) -> SentimentEntry:
        """Classify and record one piece of feedback. The only mutating operation."""
        return self.tracker.track(feedback)

    def trends(self, window_minutes: Optional[float] = None) -> SentimentSummary:
        return self.tracker.trends(window_minutes)

    def suggest_sentiment_adjustments(
        self,
        window_minutes: Optional[float] = None
    ) -> List[SentimentAdjustment]:
        return suggest_sentiment_adjustments(self.trends(window_minutes))

    # Live event telemetry

    def analyze_engagement(self, snapshot: Mapping[str, Any]) -> EngagementAnalysis:
        return analyze_engagement(snapshot, self.config.engagement)

    def suggest_schedule_adjustments(self, snapshot: Mapping[str, Any]) -> List[ScheduleAdjustment]:
        analysis = self.analyze_engagement(snapshot)
        return suggest_schedule_adjustments(analysis, self.config.engagement)

    # Reports

    def compatibility_frame(self, guests: Iterable[GuestInput]) -> pd.DataFrame:
        return compatibility_frame(guests, self.config.compatibility)

    def compatibility_report(self, guests: Iterable[GuestInput], top_k: int = 5) -> ScoreReport:
        return create_compatibility_report(guests, self.config.compatibility, top_k=top_k)

    def interaction_report(self, guests: Iterable[GuestInput]) -> ScoreReport:
        profiles = self.score_interactions(guests)
        return summarize_interaction_scores([p.interaction_score for p in profiles])

    def analyze(
        self,
        guests: Iterable[GuestInput],
        snapshot: Optional[Mapping[str, Any]] = None,
        activity_hint: str = "general",
        top_k: int = 5
    ) -> Dict[str, Any]:
        """
        Run every guest analysis and return a JSON-ready report.

        Guests are normalized once up front and the profiles are shared by
        all analyses.

        Args:
            guests: Raw guest mappings or normalized GuestProfiles
            snapshot: Optional event telemetry snapshot
            activity_hint: Activity type carried on each pairing
            top_k: Number of top pairs listed in the compatibility report

        Returns:
            Dictionary with one entry per analysis
        """
        profiles = normalize_guests(guests)
        logger.info(f"Analyzing {len(profiles)} guests")

        interactions = self.score_interactions(profiles)
        report = {
            "guest_count": len(profiles),
            "interaction_profiles": [p.to_dict() for p in interactions],
            "networking_opportunities": [o.to_dict() for o in self.group_by_interest(profiles)],
            "pairings": [p.to_dict() for p in self.suggest_pairings(profiles, activity_hint)],
            "emotional_profiles": [e.to_dict() for e in self.predict_emotional_states(profiles)],
            "compatibility_report": self.compatibility_report(profiles, top_k=top_k).to_dict(),
            "interaction_report": summarize_interaction_scores(
                [p.interaction_score for p in interactions]
            ).to_dict(),
            "sentiment": self.trends().to_dict(),
        }

        if snapshot is not None:
            analysis = self.analyze_engagement(snapshot)
            report["engagement"] = analysis.to_dict()
            report["schedule_adjustments"] = [
                a.to_dict() for a in suggest_schedule_adjustments(analysis, self.config.engagement)
            ]

        return report
