"""Guest profile schema and normalization."""

from .schema import (
    GuestProfile,
    PersonalityType,
    ActivityPreference,
    CommunicationStyle,
    EnergyLevel,
    StressLevel,
    Severity,
    Priority,
    require_exhaustive,
)
from .normalizer import DEFAULT_LANGUAGE, normalize, normalize_guests

__all__ = [
    "GuestProfile",
    "PersonalityType",
    "ActivityPreference",
    "CommunicationStyle",
    "EnergyLevel",
    "StressLevel",
    "Severity",
    "Priority",
    "require_exhaustive",
    "DEFAULT_LANGUAGE",
    "normalize",
    "normalize_guests",
]
