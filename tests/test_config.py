"""Unit tests for AppConfig loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from autofocus.config import DEFAULT_FRAME_NUMBER_DIGITS, AppConfig, get_config


def test_defaults():
    config = get_config()
    assert config.frames.frame_number_digits == DEFAULT_FRAME_NUMBER_DIGITS == 5
    assert config.worker.max_workers == 1
    assert config.report.top_frames == 5
    assert config.report.progress_interval == 50
    assert config.log_file is None


def test_nested_env_overrides(monkeypatch):
    monkeypatch.setenv("AUTOFOCUS_FRAMES__FRAME_NUMBER_DIGITS", "6")
    monkeypatch.setenv("AUTOFOCUS_WORKER__MAX_WORKERS", "4")
    monkeypatch.setenv("AUTOFOCUS_REPORT__TOP_FRAMES", "0")
    monkeypatch.setenv("AUTOFOCUS_LOG_FILE", "/tmp/autofocus.log")
    get_config.cache_clear()

    config = get_config()
    assert config.frames.frame_number_digits == 6
    assert config.worker.max_workers == 4
    assert config.report.top_frames == 0
    assert config.log_file == Path("/tmp/autofocus.log")


def test_get_config_is_cached():
    assert get_config() is get_config()


@pytest.mark.parametrize(
    "key, value",
    [
        ("AUTOFOCUS_FRAMES__FRAME_NUMBER_DIGITS", "0"),
        ("AUTOFOCUS_WORKER__MAX_WORKERS", "0"),
        ("AUTOFOCUS_WORKER__MAX_WORKERS", "64"),
        ("AUTOFOCUS_REPORT__PROGRESS_INTERVAL", "0"),
        ("AUTOFOCUS_REPORT__TOP_FRAMES", "-1"),
    ],
)
def test_invalid_values_raise(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppConfig()


def test_config_is_frozen():
    config = get_config()
    with pytest.raises(ValidationError):
        config.log_file = Path("x.log")
