"""Networking module for interest-based session grouping."""

from .grouper import (
    DEFAULT_TIME_SLOTS,
    NetworkingConfig,
    NetworkingOpportunity,
    group_guests_by_interest,
    find_optimal_session_time,
    group_by_interest,
)

__all__ = [
    "DEFAULT_TIME_SLOTS",
    "NetworkingConfig",
    "NetworkingOpportunity",
    "group_guests_by_interest",
    "find_optimal_session_time",
    "group_by_interest",
]
