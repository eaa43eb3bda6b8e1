"""test_config: AppSettings defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_MAX_LENGTH, AppSettings
from core.domain.policy import TruncationPolicy


def test_defaults():
    settings = AppSettings()

    assert settings.max_password_length == DEFAULT_MAX_LENGTH == 12
    assert settings.truncation_policy is TruncationPolicy.RESERVE
    assert settings.random_seed is None
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEEDPASS_MAX_PASSWORD_LENGTH", "16")
    monkeypatch.setenv("SEEDPASS_TRUNCATION_POLICY", "legacy")
    monkeypatch.setenv("seedpass_random_seed", "42")

    settings = AppSettings()

    assert settings.max_password_length == 16
    assert settings.truncation_policy is TruncationPolicy.LEGACY
    assert settings.random_seed == 42


@pytest.mark.parametrize("value", ["1", "500", "twelve"])
def test_invalid_max_length(monkeypatch, value):
    monkeypatch.setenv("SEEDPASS_MAX_PASSWORD_LENGTH", value)
    with pytest.raises(ValidationError):
        AppSettings()


def test_unknown_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("SEEDPASS_SOMETHING_ELSE", "x")
    assert AppSettings().max_password_length == 12
