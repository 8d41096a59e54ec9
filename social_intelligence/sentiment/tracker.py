"""
Time-windowed sentiment tracking.

The SentimentTracker keeps an append-only log of classified feedback and
aggregates it over a trailing time window.

Trend Classification (positive ratio over the window):
    total == 0   -> insufficient_data
    ratio > 0.6  -> very_positive
    ratio > 0.4  -> positive
    ratio < 0.2  -> negative
    otherwise    -> neutral

Action is required when negative feedback outnumbers positive feedback
inside the window.

Concurrency:
    SentimentLog guards append and snapshot with a single lock. Entries are
    frozen, so a reader sees a complete entry or none at all. Aggregation
    runs on a snapshot copy outside the lock.
"""

import logging
import threading
from dataclasses import dataclass, asdict, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..profiles import Priority
from .classifier import Sentiment, classify_text

logger = logging.getLogger(__name__)

DEFAULT_POSITIVE_KEYWORDS: Tuple[str, ...] = (
    "great", "wonderful", "amazing", "loved", "excellent", "fantastic", "awesome",
)
DEFAULT_NEGATIVE_KEYWORDS: Tuple[str, ...] = (
    "terrible", "bad", "poor", "disappointing", "awful", "hate", "boring",
)

Clock = Callable[[], datetime]


class SentimentTrend(Enum):
    """Overall sentiment trend over a window."""
    VERY_POSITIVE = "very_positive"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    INSUFFICIENT_DATA = "insufficient_data"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SentimentConfig:
    """
    Configuration for sentiment tracking.

    Attributes:
        window_minutes: Default trailing window for trends
        very_positive_ratio: Positive ratio above which the trend is very positive
        positive_ratio: Positive ratio above which the trend is positive
        negative_ratio: Positive ratio below which the trend is negative
        positive_keywords: Keywords signalling positive feedback
        negative_keywords: Keywords signalling negative feedback
    """
    window_minutes: float = 60
    very_positive_ratio: float = 0.6
    positive_ratio: float = 0.4
    negative_ratio: float = 0.2
    positive_keywords: Tuple[str, ...] = DEFAULT_POSITIVE_KEYWORDS
    negative_keywords: Tuple[str, ...] = DEFAULT_NEGATIVE_KEYWORDS

    def validate(self) -> None:
        """Validate configuration values."""
        if self.window_minutes <= 0:
            raise ValueError(f"window_minutes must be positive, got {self.window_minutes}")
        if not 0 <= self.negative_ratio <= self.positive_ratio <= self.very_positive_ratio <= 1:
            raise ValueError(
                f"Ratios must satisfy 0 <= negative <= positive <= very_positive <= 1, got "
                f"{self.negative_ratio}, {self.positive_ratio}, {self.very_positive_ratio}"
            )
        if not self.positive_keywords or not self.negative_keywords:
            raise ValueError("Keyword lists must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["positive_keywords"] = list(self.positive_keywords)
        d["negative_keywords"] = list(self.negative_keywords)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SentimentConfig":
        d = dict(d)
        d["positive_keywords"] = tuple(d.get("positive_keywords", DEFAULT_POSITIVE_KEYWORDS))
        d["negative_keywords"] = tuple(d.get("negative_keywords", DEFAULT_NEGATIVE_KEYWORDS))
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SentimentConfig":
        """Create from main config dictionary."""
        section = config.get("sentiment", {})
        keywords = section.get("keywords", {})
        return cls(
            window_minutes=section.get("window_minutes", 60),
            very_positive_ratio=section.get("very_positive_ratio", 0.6),
            positive_ratio=section.get("positive_ratio", 0.4),
            negative_ratio=section.get("negative_ratio", 0.2),
            positive_keywords=tuple(keywords.get("positive", DEFAULT_POSITIVE_KEYWORDS)),
            negative_keywords=tuple(keywords.get("negative", DEFAULT_NEGATIVE_KEYWORDS)),
        )


@dataclass(frozen=True)
class SentimentEntry:
    """Immutable, timestamped record of one piece of classified feedback."""
    timestamp: datetime
    guest_id: Optional[str]
    sentiment: Sentiment
    rating: float
    topic: str
    raw_text: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "guest_id": self.guest_id,
            "sentiment": self.sentiment.value,
            "rating": self.rating,
            "topic": self.topic,
            "raw_text": self.raw_text,
        }


class SentimentLog:
    """
    Append-only, thread-safe log of sentiment entries.

    Owned by exactly one tracker; entries live for the lifetime of the
    log and are never removed.
    """

    def __init__(self, entries: Sequence[SentimentEntry] = ()):
        self._entries: List[SentimentEntry] = list(entries)
        self._lock = threading.Lock()

    def append(self, entry: SentimentEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def snapshot(self) -> Tuple[SentimentEntry, ...]:
        """Consistent copy of all entries, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@dataclass
class SentimentSummary:
    """Aggregated sentiment over a trailing window."""
    window_minutes: float
    total_feedback: int
    sentiments: Dict[str, int]
    trend: SentimentTrend
    action_required: bool

    @property
    def time_window(self) -> str:
        return f"Last {self.window_minutes:g} minutes"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time_window": self.time_window,
            "window_minutes": self.window_minutes,
            "total_feedback": self.total_feedback,
            "sentiments": dict(self.sentiments),
            "trend": self.trend.value,
            "action_required": self.action_required,
        }


@dataclass
class SentimentAdjustment:
    """Suggested response to a sentiment trend."""
    priority: Priority
    action: str
    options: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority.value,
            "action": self.action,
            "options": list(self.options),
        }


def classify_trend(counts: Mapping[str, int], config: Optional[SentimentConfig] = None) -> SentimentTrend:
    """
    Classify the trend from sentiment counts.

    Args:
        counts: Mapping with "positive", "neutral" and "negative" counts
        config: Sentiment configuration (defaults if omitted)

    Returns:
        SentimentTrend for the counts
    """
    config = config or SentimentConfig()
    total = sum(counts.get(s.value, 0) for s in Sentiment)
    if total == 0:
        return SentimentTrend.INSUFFICIENT_DATA

    positive_ratio = counts.get(Sentiment.POSITIVE.value, 0) / total
    if positive_ratio > config.very_positive_ratio:
        return SentimentTrend.VERY_POSITIVE
    if positive_ratio > config.positive_ratio:
        return SentimentTrend.POSITIVE
    if positive_ratio < config.negative_ratio:
        return SentimentTrend.NEGATIVE
    return SentimentTrend.NEUTRAL


def suggest_sentiment_adjustments(summary: SentimentSummary) -> List[SentimentAdjustment]:
    """Suggest responses for a negative or positive trend; other trends get none."""
    suggestions = []

    if summary.trend is SentimentTrend.NEGATIVE:
        suggestions.append(SentimentAdjustment(
            priority=Priority.CRITICAL,
            action="Address guest satisfaction immediately",
            options=[
                "Pause current activity and gather feedback",
                "Offer alternative preferred activities",
                "Provide personalized attention to unhappy guests",
            ],
        ))

    if summary.trend is SentimentTrend.POSITIVE:
        suggestions.append(SentimentAdjustment(
            priority=Priority.LOW,
            action="Maintain current experience",
            options=["Continue scheduled activities", "Reinforce what's working well"],
        ))

    return suggestions


class SentimentTracker:
    """
    Tracker for guest feedback sentiment.

    Classifies incoming feedback, appends it to an owned SentimentLog and
    aggregates the log over trailing windows. Tracking is the only
    mutating operation in the engine.

    Attributes:
        config: Sentiment configuration
        log: The append-only entry log
    """

    def __init__(
        self,
        config: Optional[SentimentConfig] = None,
        log: Optional[SentimentLog] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize the tracker.

        Args:
            config: Sentiment configuration (defaults if omitted)
            log: Log to append to (a new empty log if omitted)
            clock: Returns the current time as an aware datetime
        """
        self.config = config or SentimentConfig()
        self.config.validate()
        self.log = log if log is not None else SentimentLog()
        self._clock = clock or _utc_now

    def analyze_sentiment(self, text: Optional[str]) -> Sentiment:
        return classify_text(text, self.config.positive_keywords, self.config.negative_keywords)

    def track(self, feedback: Mapping[str, Any]) -> SentimentEntry:
        """
        Classify and record one piece of feedback.

        Args:
            feedback: Mapping with guest_id (or guestId), text, and optional
                rating and topic

        Returns:
            The recorded SentimentEntry
        """
        text = feedback.get("text")
        text = str(text) if text is not None else None

        guest_id = feedback.get("guest_id", feedback.get("guestId"))

        entry = SentimentEntry(
            timestamp=self._clock(),
            guest_id=str(guest_id) if guest_id is not None else None,
            sentiment=self.analyze_sentiment(text),
            rating=_rating(feedback.get("rating")),
            topic=feedback.get("topic") or "general",
            raw_text=text,
        )
        self.log.append(entry)

        logger.debug(f"Tracked {entry.sentiment.value} feedback from {entry.guest_id} on {entry.topic}")
        return entry

    def entries(self) -> Tuple[SentimentEntry, ...]:
        return self.log.snapshot()

    def trends(self, window_minutes: Optional[float] = None) -> SentimentSummary:
        """
        Aggregate feedback over a trailing window.

        Args:
            window_minutes: Window length (config default if omitted)

        Returns:
            SentimentSummary for entries newer than now - window
        """
        if window_minutes is None:
            window_minutes = self.config.window_minutes

        window_start = self._clock() - timedelta(minutes=window_minutes)
        recent = [entry for entry in self.log.snapshot() if entry.timestamp > window_start]

        counts = {s.value: 0 for s in Sentiment}
        for entry in recent:
            counts[entry.sentiment.value] += 1

        summary = SentimentSummary(
            window_minutes=window_minutes,
            total_feedback=len(recent),
            sentiments=counts,
            trend=classify_trend(counts, self.config),
            action_required=counts[Sentiment.NEGATIVE.value] > counts[Sentiment.POSITIVE.value],
        )

        logger.info(f"Sentiment over last {window_minutes:g} minutes: "
                    f"{summary.total_feedback} entries, trend={summary.trend.value}")
        return summary


def _rating(value: Any) -> float:
    """Numeric rating, 0 when absent or malformed."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric rating: {value!r}")
        return 0.0
