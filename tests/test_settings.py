"""Tests for environment-driven settings and logging setup."""

import json
import logging

from sensorcfg.serialization import config_from_json, config_to_json
from sensorcfg.settings import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    load_settings,
    setup_logging,
)


def test_defaults(monkeypatch):
    monkeypatch.delenv("SENSORCFG_JSON_INDENT", raising=False)
    monkeypatch.delenv("SENSORCFG_LOG_LEVEL", raising=False)
    settings = load_settings()
    assert settings.json_indent == DEFAULT_JSON_INDENT
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_overrides(monkeypatch):
    monkeypatch.setenv("SENSORCFG_JSON_INDENT", "4")
    monkeypatch.setenv("SENSORCFG_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.json_indent == 4
    assert settings.log_level == "DEBUG"


def test_invalid_indent_falls_back(monkeypatch):
    monkeypatch.setenv("SENSORCFG_JSON_INDENT", "wide")
    assert load_settings().json_indent == DEFAULT_JSON_INDENT
    monkeypatch.setenv("SENSORCFG_JSON_INDENT", "-1")
    assert load_settings().json_indent == DEFAULT_JSON_INDENT


def test_indent_applies_to_output(monkeypatch):
    monkeypatch.setenv("SENSORCFG_JSON_INDENT", "4")
    text = config_to_json(config_from_json('{"sensorTopic": "bro"}'))
    assert text == json.dumps({"sensorTopic": "bro", "fieldTransformations": []}, indent=4)


def test_setup_logging_returns_package_logger():
    logger = setup_logging(logging.INFO)
    assert logger.name == "sensorcfg"
