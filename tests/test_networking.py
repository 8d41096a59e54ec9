"""
Tests for interest-based networking sessions.

See social_intelligence/networking/grouper.py for implementation.
"""

from social_intelligence.networking import (
    NetworkingConfig,
    find_optimal_session_time,
    group_by_interest,
)
from social_intelligence.profiles import normalize_guests


def test_interest_held_by_one_guest_is_excluded():
    opportunities = group_by_interest([
        {"id": "a", "interests": ["sports"]},
        {"id": "b", "interests": ["sports", "food"]},
    ])

    assert len(opportunities) == 1
    assert opportunities[0].interest == "sports"
    assert opportunities[0].participant_count == 2
    assert [p["id"] for p in opportunities[0].participants] == ["a", "b"]


def test_guest_appears_in_every_matching_group(sample_guests):
    opportunities = {o.interest: o for o in group_by_interest(sample_guests)}

    assert set(opportunities) == {"sports", "travel", "food"}
    assert [p["id"] for p in opportunities["food"].participants] == ["ana", "chloe", "dev"]
    assert all(o.participant_count >= 2 for o in opportunities.values())


def test_opportunities_in_first_seen_interest_order(sample_guests):
    interests = [o.interest for o in group_by_interest(sample_guests)]
    assert interests == ["sports", "travel", "food"]


def test_set_interests_give_sorted_opportunities():
    interests = {"wine", "golf", "opera", "chess", "jazz"}
    opportunities = group_by_interest([
        {"id": "a", "interests": interests},
        {"id": "b", "interests": frozenset(interests)},
    ])

    assert [o.interest for o in opportunities] == ["chess", "golf", "jazz", "opera", "wine"]


def test_session_details():
    opportunity = group_by_interest([
        {"id": "a", "interests": ["arts"]},
        {"id": "b", "interests": ["arts"]},
    ])[0]

    assert opportunity.opportunity_id == "network_arts"
    assert opportunity.duration == "45 minutes"
    assert opportunity.format == "Structured networking with icebreaker activities"
    assert opportunity.to_dict()["type"] == "INTEREST_BASED_NETWORKING"
    assert opportunity.to_dict()["participant_count"] == 2


def test_no_preferences_default_to_afternoon():
    members = normalize_guests([{"id": "a"}, {"id": "b"}])
    assert find_optimal_session_time(members) == "Afternoon (2-4 PM)"


def test_most_preferred_slot_wins():
    members = normalize_guests([
        {"id": "a", "preferredTimeSlots": ["Early Evening (5-7 PM)"]},
        {"id": "b", "preferredTimeSlots": ["Early Evening (5-7 PM)", "Morning (9-11 AM)"]},
        {"id": "c", "preferredTimeSlots": ["Morning (9-11 AM)", "Late Morning (11-1 PM)"]},
        {"id": "d", "preferredTimeSlots": ["Early Evening (5-7 PM)"]},
    ])
    assert find_optimal_session_time(members) == "Early Evening (5-7 PM)"


def test_slot_ties_resolve_to_first_listed():
    members = normalize_guests([
        {"id": "a", "preferredTimeSlots": ["Early Evening (5-7 PM)"]},
        {"id": "b", "preferredTimeSlots": ["Late Morning (11-1 PM)"]},
    ])
    assert find_optimal_session_time(members) == "Late Morning (11-1 PM)"


def test_min_group_size_from_config():
    guests = [{"id": x, "interests": ["food"]} for x in "ab"]

    assert group_by_interest(guests, NetworkingConfig(min_group_size=3)) == []
    assert len(group_by_interest(guests + [{"id": "c", "interests": ["food"]}],
                                 NetworkingConfig(min_group_size=3))) == 1


def test_empty_guest_list():
    assert group_by_interest([]) == []
