"""
Tests for feedback sentiment tracking.

See social_intelligence/sentiment/tracker.py for implementation.
"""

import threading

import pytest

from social_intelligence.sentiment import (
    Sentiment,
    SentimentTrend,
    SentimentConfig,
    SentimentLog,
    SentimentSummary,
    SentimentTracker,
    classify_text,
    classify_trend,
    suggest_sentiment_adjustments,
)
from social_intelligence.profiles import Priority


POSITIVE = ["great", "amazing"]
NEGATIVE = ["bad", "boring"]


def test_majority_of_keyword_matches_wins():
    assert classify_text("Great and AMAZING", POSITIVE, NEGATIVE) is Sentiment.POSITIVE
    assert classify_text("bad and boring but great", POSITIVE, NEGATIVE) is Sentiment.NEGATIVE


def test_ties_and_no_matches_are_neutral():
    assert classify_text("great but boring", POSITIVE, NEGATIVE) is Sentiment.NEUTRAL
    assert classify_text("it was a day", POSITIVE, NEGATIVE) is Sentiment.NEUTRAL


def test_empty_text_is_neutral():
    assert classify_text("", POSITIVE, NEGATIVE) is Sentiment.NEUTRAL
    assert classify_text(None, POSITIVE, NEGATIVE) is Sentiment.NEUTRAL


def test_track_appends_and_returns_entry(clock):
    tracker = SentimentTracker(clock=clock)
    entry = tracker.track({"guestId": "g1", "text": "Excellent dinner", "rating": 5})

    assert entry.guest_id == "g1"
    assert entry.sentiment is Sentiment.POSITIVE
    assert entry.rating == 5.0
    assert entry.topic == "general"
    assert entry.timestamp == clock.now
    assert tracker.entries() == (entry,)


def test_track_tolerates_missing_fields(clock):
    tracker = SentimentTracker(clock=clock)
    entry = tracker.track({})

    assert entry.sentiment is Sentiment.NEUTRAL
    assert entry.rating == 0.0
    assert entry.guest_id is None


def test_entries_are_immutable(clock):
    entry = SentimentTracker(clock=clock).track({"guest_id": "g1", "text": "ok"})
    with pytest.raises(AttributeError):
        entry.topic = "changed"


def test_six_two_two_is_positive_without_action(clock):
    """A positive ratio of exactly 0.6 is not very positive."""
    tracker = SentimentTracker(clock=clock)
    for _ in range(6):
        tracker.track({"guestId": "g", "text": "great"})
    for _ in range(2):
        tracker.track({"guestId": "g", "text": "fine"})
    for _ in range(2):
        tracker.track({"guestId": "g", "text": "terrible"})

    summary = tracker.trends()

    assert summary.total_feedback == 10
    assert summary.sentiments == {"positive": 6, "neutral": 2, "negative": 2}
    assert summary.trend is SentimentTrend.POSITIVE
    assert summary.action_required is False


def test_empty_window_is_insufficient_data(clock):
    summary = SentimentTracker(clock=clock).trends()

    assert summary.total_feedback == 0
    assert summary.trend is SentimentTrend.INSUFFICIENT_DATA
    assert summary.action_required is False


def test_window_excludes_old_entries(clock):
    tracker = SentimentTracker(clock=clock)
    tracker.track({"text": "terrible"})
    clock.advance(90)
    tracker.track({"text": "great"})

    assert tracker.trends(60).total_feedback == 1
    assert tracker.trends(120).total_feedback == 2


def test_entry_exactly_at_window_start_is_excluded(clock):
    tracker = SentimentTracker(clock=clock)
    tracker.track({"text": "great"})
    clock.advance(60)

    assert tracker.trends(60).total_feedback == 0


def test_action_required_when_negative_outnumbers_positive(clock):
    tracker = SentimentTracker(clock=clock)
    tracker.track({"text": "bad"})
    tracker.track({"text": "awful"})
    tracker.track({"text": "great"})

    summary = tracker.trends()

    assert summary.action_required is True
    assert summary.trend is SentimentTrend.NEUTRAL  # 1/3 is between 0.2 and 0.4


@pytest.mark.parametrize("counts, expected", [
    ({"positive": 7, "neutral": 3, "negative": 0}, SentimentTrend.VERY_POSITIVE),
    ({"positive": 5, "neutral": 5, "negative": 0}, SentimentTrend.POSITIVE),
    ({"positive": 4, "neutral": 6, "negative": 0}, SentimentTrend.NEUTRAL),
    ({"positive": 2, "neutral": 8, "negative": 0}, SentimentTrend.NEUTRAL),
    ({"positive": 1, "neutral": 9, "negative": 0}, SentimentTrend.NEGATIVE),
    ({"positive": 0, "neutral": 0, "negative": 0}, SentimentTrend.INSUFFICIENT_DATA),
])
def test_trend_brackets(counts, expected):
    assert classify_trend(counts) is expected


def test_time_window_label():
    summary = SentimentSummary(60, 0, {}, SentimentTrend.INSUFFICIENT_DATA, False)
    assert summary.time_window == "Last 60 minutes"


def test_sentiment_adjustments():
    def adjustments(trend):
        return suggest_sentiment_adjustments(SentimentSummary(60, 1, {}, trend, False))

    negative = adjustments(SentimentTrend.NEGATIVE)
    positive = adjustments(SentimentTrend.POSITIVE)

    assert negative[0].priority is Priority.CRITICAL
    assert len(negative[0].options) == 3
    assert positive[0].priority is Priority.LOW
    assert adjustments(SentimentTrend.VERY_POSITIVE) == []
    assert adjustments(SentimentTrend.INSUFFICIENT_DATA) == []


def test_trackers_with_separate_logs_are_isolated(clock):
    first = SentimentTracker(clock=clock)
    second = SentimentTracker(clock=clock)
    first.track({"text": "great"})

    assert len(first.log) == 1
    assert len(second.log) == 0


def test_injected_log_is_shared(clock):
    log = SentimentLog()
    SentimentTracker(log=log, clock=clock).track({"text": "great"})

    assert SentimentTracker(log=log, clock=clock).trends().total_feedback == 1


def test_concurrent_tracking_loses_no_entries(clock):
    tracker = SentimentTracker(clock=clock)

    def submit():
        for _ in range(200):
            tracker.track({"text": "great"})
            tracker.trends()

    threads = [threading.Thread(target=submit) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(tracker.log) == 1600
    assert tracker.trends().sentiments["positive"] == 1600


def test_invalid_config_rejected():
    with pytest.raises(ValueError, match="window_minutes"):
        SentimentTracker(SentimentConfig(window_minutes=0))
