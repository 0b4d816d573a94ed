"""Tests for configuration adapters."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from subway_path.adapters.config import AppConfig, FarePolicyLoader
from subway_path.domain.models import FarePolicy


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.network_file == "network.toml"
    assert config.log_level == "INFO"
    assert config.default_fare == 1250
    assert config.discount_deduction == 350


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DEFAULT_FARE", "1400")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("NETWORK_FILE", "/tmp/seoul.toml")

    config = AppConfig()

    assert config.default_fare == 1400
    assert config.log_level == "DEBUG"
    assert config.network_file == "/tmp/seoul.toml"


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError, match="log_level must be a logging level name"):
        AppConfig()


@pytest.mark.parametrize("field", ["short_distance_unit", "long_distance_unit"])
def test_config_rejects_non_positive_units(field: str) -> None:
    """Given a zero distance unit, when loading config, then validation error is raised."""
    with pytest.raises(ValidationError, match="distance units must be positive"):
        AppConfig(**{field: 0})


def test_config_rejects_discount_over_100() -> None:
    """Given a discount above 100 percent, when loading config, then validation error is raised."""
    with pytest.raises(ValidationError, match="between 0 and 100"):
        AppConfig(child_discount_percent=120)


def test_config_rejects_descending_age_limits() -> None:
    """Given a child limit above the teen limit, when loading config, then validation error is raised."""
    with pytest.raises(ValidationError, match="age limits must be ascending"):
        AppConfig(child_age_limit=20, teen_age_limit=19)


def test_config_raises_error_when_file_not_found() -> None:
    """Given a non-existent network file, when loading, then FileNotFoundError is raised."""
    config = AppConfig(network_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Network file not found"):
        config.load_network_data()


def test_config_raises_error_when_network_file_not_set() -> None:
    """Given network_file is None, when loading, then ValueError is raised."""
    config = AppConfig(network_file=None)

    with pytest.raises(ValueError, match="network_file must be set"):
        config.load_network_data()


def test_config_parses_network_toml(tmp_path: Path) -> None:
    """Given a TOML network file, when loading, then its tables are returned."""
    network_file = tmp_path / "network.toml"
    network_file.write_text('[[stations]]\nid = "a"\nname = "A"\n')

    data = AppConfig(network_file=str(network_file)).load_network_data()

    assert data == {"stations": [{"id": "a", "name": "A"}]}


def test_fare_policy_loader_defaults_match_domain() -> None:
    """Given default config, when loading the fare policy, then it equals the standard policy."""
    assert FarePolicyLoader.load(AppConfig()) == FarePolicy()


def test_fare_policy_loader_uses_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given overridden settings, when loading the fare policy, then overrides are carried."""
    monkeypatch.setenv("TEEN_DISCOUNT_PERCENT", "30")
    monkeypatch.setenv("DISTANCE_INCREMENT", "150")

    policy = FarePolicyLoader.load(AppConfig())

    assert policy.teen_discount_percent == 30
    assert policy.distance_increment == 150
    assert policy.default_fare == 1250
