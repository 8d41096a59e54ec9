"""
Tests for guest pairing recommendations.

See social_intelligence/compatibility/pairing.py for implementation.
"""

from social_intelligence.compatibility import (
    PairingConfig,
    suggest_activity,
    suggest_pairings,
)


def test_returns_floor_half_of_guest_count(sample_guests):
    assert len(suggest_pairings(sample_guests)) == 2
    assert len(suggest_pairings(sample_guests[:3])) == 1
    assert len(suggest_pairings(sample_guests[:1])) == 0
    assert suggest_pairings([]) == []


def test_pairs_sorted_by_descending_compatibility():
    guests = [{"id": f"g{i}", "interests": ["food"] * (i % 2) + ["arts"] * (i % 3 == 0)}
              for i in range(7)]
    scores = [p.compatibility_score for p in suggest_pairings(guests)]

    assert len(scores) == 3
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_natural_pair_order():
    """Identical guests all score the same, so the first pairs in i<j order win."""
    pairings = suggest_pairings([{"id": x} for x in "abcdef"])

    assert [p.pair_id for p in pairings] == ["a_b", "a_c", "a_d"]


def test_highest_scoring_pair_selected_first(sample_guests):
    top = suggest_pairings(sample_guests)[0]

    # ana and dev share travel and food plus the finance industry
    assert top.pair_id == "ana_dev"
    assert top.shared_interests == ["travel", "food"]
    assert top.guest1 == {"id": "ana", "name": "Ana"}


def test_activity_follows_interest_priority():
    config = PairingConfig()

    assert suggest_activity(["food", "sports"], config) == "Team sports or golf activity"
    assert suggest_activity(["arts", "travel"], config) == "Travel story sharing session"
    assert suggest_activity(["knitting"], config) == "General networking or dinner conversation"
    assert suggest_activity([], config) == "General networking or dinner conversation"


def test_icebreaker_references_first_shared_interest():
    pairing = suggest_pairings([
        {"id": "a", "interests": ["arts", "food"]},
        {"id": "b", "interests": ["food", "arts"]},
    ])[0]

    assert "arts" in pairing.interaction_prediction.icebreaker
    assert pairing.interaction_prediction.conversation_starters == ["arts", "food"]


def test_set_interests_give_stable_icebreaker():
    interests = {"wine", "golf", "opera", "chess", "jazz"}
    pairing = suggest_pairings([
        {"id": "a", "interests": interests},
        {"id": "b", "interests": set(interests)},
    ])[0]

    assert pairing.interaction_prediction.icebreaker.startswith('"I noticed we both enjoy chess!')
    assert pairing.shared_interests == ["chess", "golf", "jazz", "opera", "wine"]


def test_icebreaker_without_shared_interests():
    with_interest = suggest_pairings([
        {"id": "a", "interests": ["golf"]},
        {"id": "b", "interests": ["opera"]},
    ])[0]
    without_interest = suggest_pairings([{"id": "a"}, {"id": "b"}])[0]

    assert "golf" in with_interest.interaction_prediction.icebreaker
    assert "the destination" in without_interest.interaction_prediction.icebreaker


def test_language_challenge_requires_two_different_non_default_languages():
    def challenges(lang_a, lang_b):
        guests = [{"id": "a"}, {"id": "b"}]
        if lang_a:
            guests[0]["language"] = lang_a
        if lang_b:
            guests[1]["language"] = lang_b
        return suggest_pairings(guests)[0].interaction_prediction.potential_challenges

    assert challenges("French", "Spanish") == ["Language barrier"]
    assert challenges("French", "French") == []
    assert challenges("French", None) == []
    assert challenges("English", "Spanish") == []


def test_activity_hint_is_carried_not_used_for_selection(sample_guests):
    general = suggest_pairings(sample_guests)
    dining = suggest_pairings(sample_guests, activity_hint="dining")

    assert [p.pair_id for p in general] == [p.pair_id for p in dining]
    assert all(p.activity_hint == "dining" for p in dining)


def test_compatibility_percent_rounds():
    pairing = suggest_pairings([
        {"id": "a", "personalityType": "introvert"},
        {"id": "b", "personalityType": "extravert"},
    ])[0]

    assert pairing.compatibility_percent == 65
    assert pairing.to_dict()["compatibility_percent"] == 65


def test_pairing_config_from_config_reads_activity_list():
    config = PairingConfig.from_config({"pairing": {
        "activities": [{"interest": "wine", "activity": "Wine tasting"}],
    }})

    assert suggest_activity(["wine"], config) == "Wine tasting"
    assert suggest_activity(["sports"], config) == config.fallback_activity
