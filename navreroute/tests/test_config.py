"""
Test configuration loading.
"""

import pytest

from ..config import Config, ConfigurationError, get_yaml_setting


def test_yaml_settings():
    """Tunables come from config.yaml."""
    print("\n=== Testing YAML settings ===")

    assert get_yaml_setting("reroute", "default_bearing_tolerance") == 90.0
    assert get_yaml_setting("history", "max_entries") == 100
    assert get_yaml_setting("reroute", "missing", default="fallback") == "fallback"
    assert get_yaml_setting("nope", default=None) is None

    print("✓ YAML settings read")


def test_from_env(monkeypatch):
    """Required and optional environment variables."""
    print("\n=== Testing Config.from_env ===")

    monkeypatch.setenv("BACKEND_PORT", "8080")
    monkeypatch.setenv("BACKEND_HOST", "0.0.0.0")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://app.example.com")
    monkeypatch.setenv("DIRECTIONS_BASE_URL", "https://directions.example.com")
    monkeypatch.delenv("DIRECTIONS_ACCESS_TOKEN", raising=False)

    config = Config.from_env()

    assert config.backend_port == 8080
    assert config.cors_origins == ["http://localhost:3000", "https://app.example.com"]
    assert config.directions_base_url == "https://directions.example.com"
    assert config.directions_access_token is None
    assert config.default_bearing_tolerance == 90.0
    assert config.history_max_entries == 100
    assert config.validate_apis() == {"directions": False}

    print("✓ Config loaded from environment")


def test_base_url_default(monkeypatch):
    """Directions base URL falls back to config.yaml."""
    print("\n=== Testing base URL fallback ===")

    monkeypatch.setenv("BACKEND_PORT", "8080")
    monkeypatch.setenv("BACKEND_HOST", "localhost")
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.delenv("DIRECTIONS_BASE_URL", raising=False)
    monkeypatch.setenv("DIRECTIONS_ACCESS_TOKEN", "pk.test")

    config = Config.from_env()

    assert config.directions_base_url == "https://api.mapbox.com"
    assert config.validate_apis() == {"directions": True}

    print("✓ Base URL defaulted")


def test_missing_required(monkeypatch):
    """A missing required variable raises ConfigurationError naming it."""
    print("\n=== Testing missing required variable ===")

    monkeypatch.setenv("BACKEND_PORT", "8080")
    monkeypatch.delenv("BACKEND_HOST", raising=False)

    with pytest.raises(ConfigurationError, match="BACKEND_HOST"):
        Config.from_env()

    print("✓ Missing variable reported")


def test_invalid_port(monkeypatch):
    """A non-numeric port is a configuration error."""
    print("\n=== Testing invalid port ===")

    monkeypatch.setenv("BACKEND_PORT", "eighty")

    with pytest.raises(ConfigurationError, match="BACKEND_PORT"):
        Config.from_env()

    print("✓ Invalid port reported")


def run_all_tests():
    """Run the config tests that need no environment patching."""
    print("\n" + "=" * 60)
    print("CONFIGURATION - TEST SUITE")
    print("=" * 60)

    test_yaml_settings()

    print("\n" + "=" * 60)
    print("✅ ALL CONFIGURATION TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()
