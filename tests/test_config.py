import logging

import pytest

from contact_book.config import DEFAULT_PROMPT, ConfigError, load_settings, parse_log_level


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ["CONTACT_BOOK_PROMPT", "CONTACT_BOOK_EXPORT_DIR", "CONTACT_BOOK_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.export_dir is None
    assert settings.log_level_value == logging.WARNING


def test_environment_values(monkeypatch, tmp_path):
    monkeypatch.setenv("CONTACT_BOOK_PROMPT", "> ")
    monkeypatch.setenv("CONTACT_BOOK_EXPORT_DIR", str(tmp_path))
    monkeypatch.setenv("CONTACT_BOOK_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.prompt == "> "
    assert settings.export_dir == str(tmp_path)
    assert settings.log_level_value == logging.DEBUG


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("CONTACT_BOOK_PROMPT", "> ")
    settings = load_settings(prompt="$ ", log_level="INFO")
    assert settings.prompt == "$ "
    assert settings.log_level_value == logging.INFO


def test_unknown_log_level_raises(monkeypatch):
    monkeypatch.setenv("CONTACT_BOOK_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError):
        load_settings()
    with pytest.raises(ConfigError):
        parse_log_level("verbose")
