"""
Tests for score distribution reports.

See social_intelligence/evaluation/metrics.py for implementation.
"""

import json

import pytest

from social_intelligence.compatibility import compute_compatibility, pair_key
from social_intelligence.evaluation import (
    compute_score_distribution_stats,
    compatibility_frame,
    create_compatibility_report,
    create_score_report,
    summarize_interaction_scores,
)


def test_distribution_stats():
    stats = compute_score_distribution_stats([0.0, 0.5, 1.0])

    assert stats.count == 3
    assert stats.mean == pytest.approx(0.5)
    assert stats.min == 0.0
    assert stats.max == 1.0
    assert stats.quantiles["p50"] == pytest.approx(0.5)
    assert set(stats.quantiles) == {"p10", "p25", "p50", "p75", "p90"}


def test_empty_scores_give_zeroed_stats():
    stats = compute_score_distribution_stats([])

    assert stats.count == 0
    assert stats.mean == 0.0
    assert stats.quantiles["p90"] == 0.0


def test_compatibility_frame_matches_mapping(sample_guests):
    frame = compatibility_frame(sample_guests)
    scores = compute_compatibility(sample_guests)

    assert len(frame) == len(scores)
    for row in frame.itertuples():
        assert row.score == pytest.approx(scores[pair_key(row.guest_a, row.guest_b)])


def test_compatibility_frame_sorted_with_stable_ties():
    frame = compatibility_frame([{"id": x} for x in "abcd"])

    assert list(frame["pair_id"]) == ["a_b", "a_c", "a_d", "b_c", "b_d", "c_d"]

    ranked = compatibility_frame([
        {"id": "a"},
        {"id": "b", "interests": ["food"]},
        {"id": "c", "interests": ["food"]},
    ])
    assert ranked["pair_id"].iloc[0] == "b_c"
    assert ranked["shared_interests"].iloc[0] == 1
    assert list(ranked["score"]) == sorted(ranked["score"], reverse=True)


def test_compatibility_frame_empty():
    frame = compatibility_frame([{"id": "solo"}])

    assert frame.empty
    assert list(frame.columns) == ["pair_id", "guest_a", "guest_b", "score", "shared_interests"]


def test_compatibility_report(sample_guests):
    report = create_compatibility_report(sample_guests, top_k=2)

    assert report.score_name == "compatibility"
    assert report.distribution_stats.count == 6
    assert report.additional_metrics["top_pairs"] == ["ana_dev", "chloe_dev"]
    assert "Score Report: compatibility" in report.summary()


def test_report_saves_json(tmp_path):
    report = create_score_report("interaction", [50, 75, 100])
    path = tmp_path / "report.json"
    report.save(str(path))

    saved = json.loads(path.read_text())
    assert saved["score_name"] == "interaction"
    assert saved["distribution_stats"]["max"] == 100.0


def test_interaction_score_summary():
    report = summarize_interaction_scores([50, 67, 100])

    assert report.score_name == "interaction"
    assert report.distribution_stats.min == 50.0
    assert report.distribution_stats.mean == pytest.approx(217 / 3)
    assert report.additional_metrics == {}
