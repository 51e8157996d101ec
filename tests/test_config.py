import logging

import pytest

from stub_services.config import LISTEN_HOST, ServiceConfig, resolve_port


@pytest.mark.parametrize("raw, expected", [("4000", 4000), (" 4000 ", 4000), ("1", 1), ("65535", 65535)])
def test_resolve_port_accepts_valid_ports(raw, expected):
    assert resolve_port(raw, 3000) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "0", "-1", "3.5", "+80", "70000", "４０００"])
def test_resolve_port_falls_back_to_default(raw):
    assert resolve_port(raw, 3000) == 3000


def test_ignored_port_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="stub_services.config"):
        assert resolve_port("abc", 3002) == 3002
    assert "Ignoring PORT='abc'" in caplog.text


def test_from_env_reads_port():
    config = ServiceConfig.from_env(3000, {"PORT": "4000"})
    assert config.port == 4000
    assert config.host == LISTEN_HOST == "0.0.0.0"


def test_from_env_uses_default_when_unset():
    assert ServiceConfig.from_env(3002, {}).port == 3002


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PORT", "4100")
    assert ServiceConfig.from_env(3000).port == 4100


def test_config_is_immutable():
    config = ServiceConfig(port=3000)
    with pytest.raises(AttributeError):
        config.port = 4000
