"""Configuration loader for the apartment matcher."""

import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from .models.preferences import Location, Preferences
from .services.ranking import RankingSettings
from .services.scoring import MatchWeights

DEFAULT_CONFIG_PATH = "./config/config.yaml"


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file. Defaults to the
                     APARTMENT_MATCHER_CONFIG env var or ./config/config.yaml.

    Returns:
        Dictionary containing the configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    # Load environment variables from .env file
    load_dotenv()

    config_path = config_path or get_env("APARTMENT_MATCHER_CONFIG", DEFAULT_CONFIG_PATH)
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Copy config/config.example.yaml to config/config.yaml and customize it."
        )

    with open(config_file, "r") as f:
        config = yaml.safe_load(f) or {}

    _validate_config(config)

    return config


def _validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration structure."""
    required_sections = ["scoring", "ranking", "reference_location"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    # Weights must be non-negative with a positive sum
    weights = (config.get("scoring") or {}).get("weights")
    if weights:
        MatchWeights.from_dict(weights).validate()

    ranking = config["ranking"] or {}
    unknown = set(ranking) - {f.name for f in fields(RankingSettings)}
    if unknown:
        raise ValueError(f"Unknown ranking setting(s): {sorted(unknown)}")
    for key in ("close_to_you_radius", "fallback_budget"):
        if key in ranking and not _is_number(ranking[key]):
            raise ValueError(f"ranking.{key} must be a number, got {ranking[key]!r}")
    for key in ("recently_viewed_limit", "featured_limit"):
        if key in ranking and not _is_integer(ranking[key]):
            raise ValueError(f"ranking.{key} must be an integer, got {ranking[key]!r}")
    for key in ("close_to_you_radius", "recently_viewed_limit", "featured_limit"):
        if key in ranking and ranking[key] <= 0:
            raise ValueError(f"ranking.{key} must be positive, got {ranking[key]}")

    location = config["reference_location"] or {}
    if "lat" not in location or "lon" not in location:
        raise ValueError("reference_location must have lat and lon")


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but True is not a threshold
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def weights_from_config(config: Dict[str, Any]) -> MatchWeights:
    """Return configured match weights, or the defaults if none are set."""
    weights = (config.get("scoring") or {}).get("weights")
    return MatchWeights.from_dict(weights) if weights else MatchWeights()


def ranking_settings_from_config(config: Dict[str, Any]) -> RankingSettings:
    """Return ranking thresholds, filling unset keys with defaults."""
    return RankingSettings(**(config.get("ranking") or {}))


def reference_location_from_config(config: Dict[str, Any]) -> Location:
    return Location.from_dict(config["reference_location"])


def preferences_from_config(config: Dict[str, Any]) -> Preferences:
    """Return the configured default preferences."""
    return Preferences.from_dict(config.get("preferences") or {})


def get_env(key: str, default: str = None, required: bool = False) -> str:
    """
    Get environment variable with optional default and required check.

    Args:
        key: Environment variable name
        default: Default value if not set
        required: If True, raise error when not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required and not set
    """
    value = os.getenv(key, default)
    if required and not value:
        raise ValueError(f"Required environment variable not set: {key}")
    return value
