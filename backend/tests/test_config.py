"""
Tests for config.py - SNAKE_* environment settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from config import load_settings, DEFAULT_TICK_MS  # noqa: E402

ENV_VARS = ["SNAKE_TICK_MS", "SNAKE_SEED", "SNAKE_LOG_FILE", "SNAKE_LOG_LEVEL", "SNAKE_ASCII"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.tick_ms == DEFAULT_TICK_MS == 100
    assert settings.tick_seconds == pytest.approx(0.1)
    assert settings.seed is None
    assert settings.log_file == "snake.log"
    assert settings.log_level == "INFO"
    assert settings.ascii_glyphs is False


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "50")
    monkeypatch.setenv("SNAKE_SEED", "42")
    monkeypatch.setenv("SNAKE_LOG_FILE", "/tmp/snake-test.log")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_ASCII", "yes")

    settings = load_settings()

    assert settings.tick_ms == 50
    assert settings.seed == 42
    assert settings.log_file == "/tmp/snake-test.log"
    assert settings.log_level == "DEBUG"
    assert settings.ascii_glyphs is True


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "")
    monkeypatch.setenv("SNAKE_SEED", " ")
    settings = load_settings()
    assert settings.tick_ms == DEFAULT_TICK_MS
    assert settings.seed is None


def test_bad_integer_raises(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "fast")
    with pytest.raises(ValueError):
        load_settings()


def test_tick_must_be_positive(monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "0")
    with pytest.raises(ValueError):
        load_settings()


def test_configure_logging_to_stderr(monkeypatch):
    calls = []
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    config.configure_logging(load_settings(), to_file=False)
    config.configure_logging(load_settings(), to_file=True)

    assert "filename" not in calls[0]
    assert calls[1]["filename"] == "snake.log"
