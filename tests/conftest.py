"""
Pytest configuration for social intelligence engine tests.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# VALIDATION ON TEST RUN
# =============================================================================

def pytest_configure(config):
    """
    Validate the packaged defaults before running tests.

    A broken defaults.yaml surfaces as a collection failure rather than
    as scattered test failures.
    """
    from social_intelligence.configs import load_default_config, validate_config

    issues = validate_config(load_default_config())
    if issues:
        pytest.fail("Packaged defaults are invalid:\n" + "\n".join(issues), pytrace=False)


# =============================================================================
# FIXTURES
# =============================================================================

class FakeClock:
    """Manually advanced clock returning aware UTC datetimes."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, minutes):
        self.now = self.now + timedelta(minutes=minutes)


@pytest.fixture
def clock():
    """Fixed clock for sentiment window tests."""
    return FakeClock()


@pytest.fixture
def sample_guests():
    """Small guest list covering sparse and fully populated records."""
    return [
        {
            "id": "ana",
            "name": "Ana",
            "interests": ["sports", "travel", "food"],
            "personalityType": "extravert",
            "socialMediaActivity": 80,
            "eventAttendanceCount": 6,
            "professionalIndustry": "finance",
            "preferredTimeSlots": ["Morning (9-11 AM)"],
            "engagementScore": 85,
        },
        {
            "id": "ben",
            "name": "Ben",
            "interests": ["sports", "technology"],
            "personalityType": "introvert",
            "firstTimeEvent": True,
            "likesMixingWithStrangers": False,
            "energyLevel": "low",
            "stressLevel": "high",
        },
        {
            "id": "chloe",
            "name": "Chloe",
            "interests": ["food", "arts"],
            "language": "French",
            "languageBarrier": True,
            "appFeedbackHistory": ["Loved the dinner"],
            "engagementScore": 20,
        },
        {
            "id": "dev",
            "name": "Dev",
            "interests": ["travel", "food"],
            "professionalIndustry": "finance",
            "hobbyInterests": ["hiking"],
        },
    ]


@pytest.fixture
def engine(clock):
    """Engine on packaged defaults with a fixed clock."""
    from social_intelligence import SocialIntelligenceEngine
    return SocialIntelligenceEngine(clock=clock)
