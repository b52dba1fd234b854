# tests/test_config.py
"""Tests for settings loaded from the environment."""

import importlib

import pytest

from ipecho import config

ENV_VARS = (
    "IPECHO_HOST",
    "IPECHO_PORT",
    "IPECHO_LOG_LEVEL",
    "IPECHO_VALIDATE_FORWARDED",
)


@pytest.fixture
def load_config(monkeypatch):
    """Reload ipecho.config under the given environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    def _load(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _load

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config)


def test_defaults(load_config):
    cfg = load_config()
    assert cfg.HOST == "0.0.0.0"
    assert cfg.PORT == 8080
    assert cfg.LOG_LEVEL == "info"
    assert cfg.VALIDATE_FORWARDED is True


def test_port(load_config):
    assert load_config(IPECHO_PORT="9000").PORT == 9000


@pytest.mark.parametrize("port", ["abc", "²", "", "0", "65536", "-1"])
def test_bad_port(load_config, port):
    with pytest.raises(RuntimeError):
        load_config(IPECHO_PORT=port)


@pytest.mark.parametrize("value", ["true", "1", "yes", "on", "TRUE", " Yes "])
def test_validate_forwarded_true(load_config, value):
    assert load_config(IPECHO_VALIDATE_FORWARDED=value).VALIDATE_FORWARDED is True


@pytest.mark.parametrize("value", ["false", "0", "no", "off", "False"])
def test_validate_forwarded_false(load_config, value):
    assert load_config(IPECHO_VALIDATE_FORWARDED=value).VALIDATE_FORWARDED is False


@pytest.mark.parametrize("value", ["", "maybe", "2"])
def test_validate_forwarded_invalid(load_config, value):
    with pytest.raises(RuntimeError):
        load_config(IPECHO_VALIDATE_FORWARDED=value)


def test_log_level(load_config):
    assert load_config(IPECHO_LOG_LEVEL="DEBUG").LOG_LEVEL == "debug"
    assert load_config(IPECHO_LOG_LEVEL="trace").LOG_LEVEL == "trace"


def test_log_level_warn_alias(load_config):
    assert load_config(IPECHO_LOG_LEVEL="WARN").LOG_LEVEL == "warning"


def test_bad_log_level(load_config):
    with pytest.raises(RuntimeError):
        load_config(IPECHO_LOG_LEVEL="verbose")
