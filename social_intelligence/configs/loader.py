"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that weights, caps and thresholds are usable.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

REQUIRED_SECTIONS = [
    "interaction", "compatibility", "networking", "pairing",
    "emotion", "sentiment", "engagement"
]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is empty or its root is not a mapping
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(path, "r") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML in {filepath}: {e}") from e

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration root must be a mapping: {filepath}")

    return config


def load_default_config() -> Dict[str, Any]:
    """Load the configuration shipped with the package."""
    return load_config(str(DEFAULT_CONFIG_PATH))


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    # Interaction caps must be positive
    interaction = config.get("interaction", {})
    for key in ["social_media_cap", "attendance_cap", "interest_cap", "social_media_divisor"]:
        value = interaction.get(key)
        if value is not None and value <= 0:
            issues.append(f"interaction.{key} must be positive, got {value}")

    # Compatibility weights live on the [0, 1] scale
    compatibility = config.get("compatibility", {})
    for key in ["baseline", "shared_interest_weight", "same_personality_bonus",
                "complementary_personality_bonus", "industry_match_bonus",
                "shared_hobby_weight"]:
        value = compatibility.get(key)
        if value is not None and not 0 <= value <= 1:
            issues.append(f"compatibility.{key} must be in [0, 1], got {value}")

    networking = config.get("networking", {})
    if "time_slots" in networking and not networking["time_slots"]:
        issues.append("networking.time_slots must not be empty")
    if networking.get("min_group_size", 2) < 2:
        issues.append(f"networking.min_group_size must be at least 2, got {networking['min_group_size']}")

    # Keyword lists drive text classification
    sentiment = config.get("sentiment", {})
    for polarity in ["positive", "negative"]:
        words = get_config_value(config, f"sentiment.keywords.{polarity}")
        if words is not None and not words:
            issues.append(f"sentiment.keywords.{polarity} must not be empty")
        words = get_config_value(config, f"emotion.social_media_keywords.{polarity}")
        if words is not None and not words:
            issues.append(f"emotion.social_media_keywords.{polarity} must not be empty")

    window = sentiment.get("window_minutes")
    if window is not None and window <= 0:
        issues.append(f"sentiment.window_minutes must be positive, got {window}")

    ratios = [sentiment.get(k) for k in ["negative_ratio", "positive_ratio", "very_positive_ratio"]]
    if all(r is not None for r in ratios) and not ratios[0] <= ratios[1] <= ratios[2]:
        issues.append(f"sentiment ratios must be ordered negative <= positive <= very_positive, got {ratios}")

    emotion = config.get("emotion", {})
    base = emotion.get("base_confidence")
    if base is not None and not 0 <= base <= 1:
        issues.append(f"emotion.base_confidence must be in [0, 1], got {base}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "sentiment.keywords.positive")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def resolve_config(filepath: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration file, or the packaged defaults when no path is given.

    Issues found by validate_config are logged as warnings.
    """
    config = load_config(filepath) if filepath else load_default_config()
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")
    return config
