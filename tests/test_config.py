"""Tests for finutils.config."""

from __future__ import annotations

import logging

from finutils import config


def test_env_int_reads_environment(monkeypatch):
    monkeypatch.setenv("FINUTILS_TEST_JOBS", "4")
    assert config._env_int("FINUTILS_TEST_JOBS", 1) == 4


def test_env_int_falls_back_on_garbage(monkeypatch, caplog):
    monkeypatch.setenv("FINUTILS_TEST_JOBS", "many")
    with caplog.at_level(logging.WARNING, logger="finutils.config"):
        assert config._env_int("FINUTILS_TEST_JOBS", 1) == 1
    assert "FINUTILS_TEST_JOBS" in caplog.text


def test_env_int_default_when_unset(monkeypatch):
    monkeypatch.delenv("FINUTILS_TEST_JOBS", raising=False)
    assert config._env_int("FINUTILS_TEST_JOBS", 3) == 3


def test_configure_logging_uses_named_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    config.configure_logging("debug")
    assert seen == {"level": logging.DEBUG, "format": config.LOG_FORMAT}


def test_configure_logging_defaults_to_env_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
    config.configure_logging()
    assert seen["level"] == logging.INFO


def test_solver_defaults():
    assert config.DEFAULT_TOLERANCE == 1e-12
    assert config.DEFAULT_BISECTION_MAX_ITER == 41
    assert config.DEFAULT_NEWTON_RAPHSON_MAX_ITER == 10
    assert (config.DEFAULT_STAGE1_MAX_ITER, config.DEFAULT_STAGE2_MAX_ITER) == (2, 10)


def test_configure_logging_ignores_non_level_names(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    config.configure_logging("basic_format")
    assert seen["level"] == logging.WARNING


def test_configure_logging_passes_int_level_through(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    config.configure_logging(logging.ERROR)
    assert seen["level"] == logging.ERROR
