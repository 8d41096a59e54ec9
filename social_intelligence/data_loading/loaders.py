"""
Data loading functions for guest records and event telemetry.

This module reads raw records from JSON or CSV files. No normalization is
done here; that's handled by the profiles module.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any

import pandas as pd

logger = logging.getLogger(__name__)

# Columns holding list values in tabular guest files, separated by LIST_SEPARATOR
LIST_COLUMNS = {
    "interests",
    "hobby_interests", "hobbyInterests",
    "professional_interests", "professionalInterests",
    "feedback_history", "app_feedback_history", "appFeedbackHistory",
    "preferred_time_slots", "preferredTimeSlots",
}

LIST_SEPARATOR = ";"


def load_guest_records(filepath: str) -> List[Dict[str, Any]]:
    """
    Load raw guest records from a JSON or CSV file.

    JSON files must hold a list of objects (or an object with a "guests"
    list). CSV files hold one guest per row; list-valued columns such as
    interests are separated by ";". Every CSV cell is read as text and
    empty cells are dropped, so the normalizer applies its defaults.

    Args:
        filepath: Path to the guest file (.json or .csv)

    Returns:
        List of raw guest mappings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or has an unsupported format
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Guest records file not found: {filepath}")

    logger.info(f"Loading guest records from {filepath}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        records = _load_json_records(path)
    elif suffix == ".csv":
        records = _load_csv_records(path)
    else:
        raise ValueError(f"Unsupported guest records format '{suffix}': {filepath}")

    if not records:
        raise ValueError(f"Guest records file is empty: {filepath}")

    logger.info(f"Loaded {len(records)} guest records")
    return records


def load_event_snapshot(filepath: str) -> Dict[str, Any]:
    """
    Load one event telemetry snapshot from a JSON object.

    Args:
        filepath: Path to the snapshot JSON file

    Returns:
        Snapshot mapping (activeParticipants, totalGuests, ...)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a JSON object
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Event snapshot file not found: {filepath}")

    logger.info(f"Loading event snapshot from {filepath}")
    snapshot = _read_json(path)

    if not isinstance(snapshot, dict):
        raise ValueError(f"Event snapshot must be a JSON object: {filepath}")
    if not snapshot:
        raise ValueError(f"Event snapshot file is empty: {filepath}")

    return snapshot


def _read_json(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ValueError(f"File is empty: {path}")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")


def _load_json_records(path: Path) -> List[Dict[str, Any]]:
    data = _read_json(path)

    if isinstance(data, dict) and "guests" in data:
        data = data["guests"]

    if not isinstance(data, list):
        raise ValueError(f"Guest records must be a JSON list of objects: {path}")

    records = [record for record in data if isinstance(record, dict)]
    if len(records) < len(data):
        logger.warning(f"Skipped {len(data) - len(records)} non-object entries in {path}")
    return records


def _load_csv_records(path: Path) -> List[Dict[str, Any]]:
    try:
        df = pd.read_csv(path, dtype=str)
    except pd.errors.EmptyDataError:
        raise ValueError(f"Guest records file is empty: {path}")

    logger.info(f"Read {len(df)} rows with {len(df.columns)} columns")

    records = []
    for row in df.to_dict(orient="records"):
        record = {}
        for column, value in row.items():
            if pd.isna(value):
                continue
            if column in LIST_COLUMNS:
                value = split_list_cell(value)
            record[column] = value
        records.append(record)
    return records


def split_list_cell(value: str, separator: str = LIST_SEPARATOR) -> List[str]:
    """Split a ';'-separated cell into trimmed, non-empty items."""
    return [item.strip() for item in str(value).split(separator) if item.strip()]
