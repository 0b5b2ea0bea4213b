from __future__ import annotations

import logging

import pytest

from avm import config


def test_parse_bool_env_understands_synonyms():
    assert config._parse_bool_env("1") is True
    assert config._parse_bool_env("YES") is True
    assert config._parse_bool_env(" on ") is True
    assert config._parse_bool_env("0") is False
    assert config._parse_bool_env("off") is False
    assert config._parse_bool_env("maybe") is None


def test_check_params_defaults_to_enabled(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("AVM_CHECK_PARAMS", raising=False)
    assert config._read_check_params() is True


def test_check_params_can_be_disabled(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AVM_CHECK_PARAMS", "false")
    assert config._read_check_params() is False


def test_unknown_check_params_value_warns(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    monkeypatch.setenv("AVM_CHECK_PARAMS", "sometimes")
    with caplog.at_level(logging.WARNING, logger="avm.config"):
        assert config._read_check_params() is True
    assert "AVM_CHECK_PARAMS" in caplog.text


def test_backend_selection(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    monkeypatch.setenv("AVM_ARRAY_BACKEND", "NumPy")
    assert config._read_backend() == "numpy"
    monkeypatch.setenv("AVM_ARRAY_BACKEND", "cuda")
    with caplog.at_level(logging.WARNING, logger="avm.config"):
        assert config._read_backend() == "list"
    assert "cuda" in caplog.text


def test_epsilon_parsing(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("AVM_EPSILON", raising=False)
    assert config._read_epsilon() == config.DEFAULT_EPSILON
    monkeypatch.setenv("AVM_EPSILON", "1e-6")
    assert config._read_epsilon() == pytest.approx(1e-6)
    monkeypatch.setenv("AVM_EPSILON", "-1")
    assert config._read_epsilon() == config.DEFAULT_EPSILON
    monkeypatch.setenv("AVM_EPSILON", "tiny")
    assert config._read_epsilon() == config.DEFAULT_EPSILON


def test_describe_reports_active_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "CHECK_PARAMS", False)
    settings = config.describe()
    assert settings["check_params"] is False
    assert settings["array_backend"] in {"list", "numpy"}
    assert settings["epsilon"] > 0
