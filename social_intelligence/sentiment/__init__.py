"""Sentiment module for feedback classification and windowed trends."""

from .classifier import Sentiment, classify_text, count_keyword_matches
from .tracker import (
    Clock,
    SentimentTrend,
    SentimentConfig,
    SentimentEntry,
    SentimentLog,
    SentimentSummary,
    SentimentAdjustment,
    SentimentTracker,
    classify_trend,
    suggest_sentiment_adjustments,
)

__all__ = [
    "Clock",
    "Sentiment",
    "classify_text",
    "count_keyword_matches",
    "SentimentTrend",
    "SentimentConfig",
    "SentimentEntry",
    "SentimentLog",
    "SentimentSummary",
    "SentimentAdjustment",
    "SentimentTracker",
    "classify_trend",
    "suggest_sentiment_adjustments",
]
