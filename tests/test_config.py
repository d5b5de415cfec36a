"""Tests for configuration loading and environment overrides."""

import pytest

from smartdevice.common.config import (
    AppConfig,
    AuditSettings,
    LoggingSettings,
    apply_env_overrides,
    load_app_config,
    load_config_file,
)
from smartdevice.common.exceptions import ConfigError


def test_defaults():
    config = AppConfig()
    assert config.audit == AuditSettings("device_log.txt", True, True)
    assert config.logging == LoggingSettings("WARNING", False)


def test_load_app_config_partial():
    config = load_app_config({"audit": {"log_path": "/tmp/x.txt"}, "logging": {"level": "debug"}})
    assert config.audit.log_path == "/tmp/x.txt"
    assert config.audit.console_enabled is True
    assert config.logging.level == "DEBUG"


@pytest.mark.parametrize("data", [
    {"audit": ["not", "a", "mapping"]},
    {"audit": []},
    {"logging": 0},
    {"audit": ""},
    {"audit": {"file_enabled": "yes"}},
    {"logging": {"level": 10}},
])
def test_load_app_config_rejects_bad_values(data):
    with pytest.raises(ConfigError):
        load_app_config(data)


def test_load_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "audit:\n"
        "  log_path: audit.txt\n"
        "  console_enabled: false\n"
        "logging:\n"
        "  json_format: true\n",
        encoding="utf-8",
    )
    config = load_config_file(path)
    assert config.audit.log_path == "audit.txt"
    assert config.audit.console_enabled is False
    assert config.logging.json_format is True


def test_load_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) == AppConfig()


def test_load_config_file_missing(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config_file(tmp_path / "nope.yaml")


@pytest.mark.parametrize("content", ["audit: [unclosed", "- just\n- a list\n"])
def test_load_config_file_invalid(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(path)


def test_env_overrides():
    config = apply_env_overrides(AppConfig(), {
        "SMARTDEVICE_LOG_FILE": "/var/log/devices.txt",
        "SMARTDEVICE_LOG_LEVEL": "info",
        "SMARTDEVICE_LOG_FORMAT": "json",
    })
    assert config.audit.log_path == "/var/log/devices.txt"
    assert config.logging.level == "INFO"
    assert config.logging.json_format is True


def test_env_overrides_absent_keep_config():
    original = load_app_config({"audit": {"log_path": "a.txt"}})
    assert apply_env_overrides(original, {}) == original


def test_env_overrides_read_process_environment(monkeypatch):
    monkeypatch.setenv("SMARTDEVICE_LOG_FILE", "env.txt")
    assert apply_env_overrides(AppConfig()).audit.log_path == "env.txt"
