"""Data loading module for guest records and event snapshots."""

from .loaders import (
    LIST_COLUMNS,
    load_guest_records,
    load_event_snapshot,
    split_list_cell,
)

__all__ = [
    "LIST_COLUMNS",
    "load_guest_records",
    "load_event_snapshot",
    "split_list_cell",
]
