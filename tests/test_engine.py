"""
Tests for the engine facade.

See social_intelligence/engine.py for implementation.
"""

import json

import pytest

from social_intelligence import EngineConfig, SocialIntelligenceEngine
from social_intelligence.compatibility import CompatibilityConfig, pair_key
from social_intelligence.sentiment import SentimentLog, SentimentTrend


def test_engine_defaults_to_packaged_config():
    assert SocialIntelligenceEngine().config == EngineConfig.default()


def test_engine_rejects_invalid_config():
    config = EngineConfig(compatibility=CompatibilityConfig(baseline=2.0))
    with pytest.raises(ValueError):
        SocialIntelligenceEngine(config)


def test_engine_uses_its_config(clock):
    config = EngineConfig(compatibility=CompatibilityConfig(baseline=0.0, same_personality_bonus=0.0))
    engine = SocialIntelligenceEngine(config, clock=clock)

    scores = engine.compute_compatibility([{"id": "a"}, {"id": "b"}])
    assert scores[pair_key("a", "b")] == 0.0


def test_every_operation_runs(engine, sample_guests):
    assert engine.normalize(sample_guests[0]).guest_id == "ana"
    assert engine.score_interaction(sample_guests[0]).guest_id == "ana"
    assert len(engine.score_interactions(sample_guests)) == 4
    assert len(engine.compute_compatibility(sample_guests)) == 6
    assert len(engine.group_by_interest(sample_guests)) == 3
    assert len(engine.suggest_pairings(sample_guests)) == 2
    assert len(engine.predict_emotional_states(sample_guests)) == 4
    assert engine.analyze_engagement({"activeParticipants": 5, "totalGuests": 10}).participation_rate == 50


def test_track_is_the_only_mutation(engine, sample_guests):
    before = [dict(g) for g in sample_guests]
    engine.analyze(sample_guests)

    assert sample_guests == before
    assert len(engine.sentiment_log) == 0

    engine.track({"guestId": "ana", "text": "Amazing!"})
    assert len(engine.sentiment_log) == 1


def test_engines_do_not_share_sentiment(clock):
    first = SocialIntelligenceEngine(clock=clock)
    second = SocialIntelligenceEngine(clock=clock)
    first.track({"text": "terrible"})

    assert first.trends().total_feedback == 1
    assert second.trends().trend is SentimentTrend.INSUFFICIENT_DATA


def test_injected_sentiment_log(clock):
    log = SentimentLog()
    engine = SocialIntelligenceEngine(sentiment_log=log, clock=clock)
    engine.track({"text": "great"})

    assert engine.sentiment_log is log
    assert len(log) == 1


def test_sentiment_adjustments_follow_trend(engine):
    for text in ["terrible", "awful", "bad", "fine", "fine", "fine"]:
        engine.track({"text": text})

    adjustments = engine.suggest_sentiment_adjustments()

    assert engine.trends().trend is SentimentTrend.NEGATIVE
    assert adjustments[0].action == "Address guest satisfaction immediately"


def test_schedule_adjustments_from_snapshot(engine):
    adjustments = engine.suggest_schedule_adjustments({"activeParticipants": 1, "totalGuests": 10})
    assert [a.to_dict()["type"] for a in adjustments] == ["ACTIVITY_SWAP", "BREAK_INSERTION"]


def test_analyze_report_is_json_ready(engine, sample_guests):
    report = engine.analyze(sample_guests, snapshot={"activeParticipants": 40, "totalGuests": 50})

    assert report["guest_count"] == 4
    assert report["pairings"][0]["pair_id"] == "ana_dev"
    assert report["engagement"]["participation_rate"] == 80
    assert report["schedule_adjustments"] == []
    json.dumps(report)


def test_analyze_without_snapshot_skips_engagement(engine):
    report = engine.analyze([{"id": "a"}, {"name": "No Id"}])

    assert "engagement" not in report
    assert [p["guest_id"] for p in report["interaction_profiles"]] == ["a", "guest_1"]


def test_analyze_is_idempotent(engine, sample_guests):
    assert engine.analyze(sample_guests) == engine.analyze(sample_guests)


def test_interaction_report_summarizes_scores(engine, sample_guests):
    scores = [p.interaction_score for p in engine.score_interactions(sample_guests)]
    report = engine.interaction_report(sample_guests)

    assert report.score_name == "interaction"
    assert report.distribution_stats.count == 4
    assert report.distribution_stats.max == max(scores)

    analyzed = engine.analyze(sample_guests)["interaction_report"]
    assert analyzed == report.to_dict()
