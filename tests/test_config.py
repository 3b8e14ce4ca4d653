"""
Tests for environment-driven configuration.
"""
import importlib
import logging

import pytest
from pydantic import ValidationError

import owm.config
from owm import OpenWeatherClient, configure_logging


@pytest.fixture()
def owm_logger():
    logger = logging.getLogger("owm")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_bad_environment_does_not_break_import(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_TIMEOUT_SECONDS", "not-a-number")
    importlib.reload(owm.config)
    with pytest.raises(ValidationError):
        owm.config.Settings()


def test_from_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
    monkeypatch.setenv("OPENWEATHER_TIMEOUT_SECONDS", "3")
    c = OpenWeatherClient.from_settings()
    assert c.api_key == "env-key"
    assert c.timeout == 3.0


def test_configure_logging_reads_environment(monkeypatch, owm_logger):
    monkeypatch.setenv("LOG_LEVEL", "info")
    configure_logging()
    assert owm_logger.level == logging.INFO
