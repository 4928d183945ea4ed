from pathlib import Path

import pytest

from config import DEFAULT_DATA_FILE, env_bool, load_settings

VARS = ["SECRET_KEY", "GUESS_DATA_FILE", "LETTER_HINT_ENABLED", "INCLUDE_DECEASED",
        "STRICT_GUESSES", "HOST", "PORT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.data_file == DEFAULT_DATA_FILE
    assert settings.letter_hint_enabled is True
    assert settings.include_deceased is True
    assert settings.strict_guesses is True
    assert settings.port == 5000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GUESS_DATA_FILE", "other.csv")
    monkeypatch.setenv("LETTER_HINT_ENABLED", "off")
    monkeypatch.setenv("INCLUDE_DECEASED", "No")
    monkeypatch.setenv("STRICT_GUESSES", "0")
    monkeypatch.setenv("PORT", "8080")
    settings = load_settings()
    assert settings.data_file == Path("other.csv")
    assert settings.letter_hint_enabled is False
    assert settings.include_deceased is False
    assert settings.strict_guesses is False
    assert settings.port == 8080


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("LETTER_HINT_ENABLED", "sometimes")
    monkeypatch.setenv("PORT", "http")
    settings = load_settings()
    assert settings.letter_hint_enabled is True
    assert settings.port == 5000


def test_env_bool_blank_is_default(monkeypatch):
    monkeypatch.setenv("STRICT_GUESSES", "  ")
    assert env_bool("STRICT_GUESSES", False) is False
