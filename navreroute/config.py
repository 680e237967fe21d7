"""
Configuration module with strict environment variable validation.
Server settings must be explicitly set; only backend credentials are optional.

Tunables are centralized in config.yaml - modify there, not in code.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

import yaml


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""
    pass


# Load YAML config once at module level
_CONFIG_PATH = Path(__file__).parent / "config.yaml"
_YAML_CONFIG: dict = {}


def _load_yaml_config() -> dict:
    """Load configuration from config.yaml file."""
    global _YAML_CONFIG
    if not _YAML_CONFIG:
        if _CONFIG_PATH.exists():
            with open(_CONFIG_PATH, "r") as f:
                _YAML_CONFIG = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Configuration file not found: {_CONFIG_PATH}")
    return _YAML_CONFIG


def get_yaml_setting(*keys: str, default: Any = None) -> Any:
    """
    Get a setting from config.yaml using dot notation.

    Example: get_yaml_setting("reroute", "default_bearing_tolerance") -> 90.0
    """
    config = _load_yaml_config()
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    # Radiuses and tolerances may be written as "inf"
    if value == "inf":
        return float("inf")
    return value


def get_required_env(key: str) -> str:
    """Get a required environment variable. Raises if not set."""
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        raise ConfigurationError(
            f"Missing required environment variable: {key}\n"
            f"Please set {key} in your .env file or environment."
        )
    return value.strip()


def get_optional_env(key: str) -> Optional[str]:
    """Get an optional environment variable. Returns None if not set."""
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Application configuration - immutable after creation."""

    # Server settings - REQUIRED
    backend_port: int
    backend_host: str

    # CORS settings - REQUIRED
    cors_origins: list[str]

    # Directions backend
    directions_base_url: str
    directions_access_token: Optional[str]

    # Tunables from config.yaml
    default_bearing_tolerance: float
    history_max_entries: int

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables and config.yaml."""

        # Required settings
        port_str = get_required_env("BACKEND_PORT")
        try:
            backend_port = int(port_str)
        except ValueError:
            raise ConfigurationError(f"BACKEND_PORT must be an integer, got: {port_str}")
        backend_host = get_required_env("BACKEND_HOST")

        cors_origins_str = get_required_env("CORS_ORIGINS")
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

        # Optional settings
        directions_base_url = get_optional_env("DIRECTIONS_BASE_URL") or get_yaml_setting(
            "directions", "base_url", default="https://api.mapbox.com"
        )
        directions_access_token = get_optional_env("DIRECTIONS_ACCESS_TOKEN")

        return cls(
            backend_port=backend_port,
            backend_host=backend_host,
            cors_origins=cors_origins,
            directions_base_url=directions_base_url,
            directions_access_token=directions_access_token,
            default_bearing_tolerance=float(
                get_yaml_setting("reroute", "default_bearing_tolerance", default=90.0)
            ),
            history_max_entries=int(get_yaml_setting("history", "max_entries", default=100)),
        )

    def validate_apis(self) -> dict[str, bool]:
        """Return which APIs are configured."""
        return {
            "directions": bool(self.directions_access_token),
        }


def load_config() -> Config:
    """Load and validate configuration."""
    from dotenv import load_dotenv

    # Load .env file if present
    load_dotenv()

    return Config.from_env()
