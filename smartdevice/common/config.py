"""
Configuration Dataclasses

Type-safe configuration structures for devices and the audit log.
Runtime settings are loaded from an optional YAML file and can be
overridden from the environment.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError

DEFAULT_LOG_PATH = "device_log.txt"

# Environment variable overrides
ENV_LOG_FILE = "SMARTDEVICE_LOG_FILE"
ENV_LOG_LEVEL = "SMARTDEVICE_LOG_LEVEL"
ENV_LOG_FORMAT = "SMARTDEVICE_LOG_FORMAT"


@dataclass
class DeviceConfig:
    """
    Device configuration record.

    DeviceConfig() is the default preset. Passing a fully populated record
    to SmartDevice skips the default cascade and stores values as given.
    """
    name: str = "Unknown"
    kind: str = "Generic"
    powered_on: bool = False
    battery_level: int = 100  # percent
    temperature_c: float = 20.0
    location: str = "Not set"


@dataclass
class AuditSettings:
    """Audit log sink configuration"""
    log_path: str = DEFAULT_LOG_PATH
    file_enabled: bool = True
    console_enabled: bool = True


@dataclass
class LoggingSettings:
    """Operational (non-audit) logging configuration"""
    level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    json_format: bool = False


@dataclass
class AppConfig:
    """Complete runtime configuration"""
    audit: AuditSettings = field(default_factory=AuditSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"Section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def _typed(section: Mapping[str, Any], key: str, expected: type, default: Any) -> Any:
    value = section.get(key, default)
    if not isinstance(value, expected):
        raise ConfigError(
            f"'{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


# Helper function to load config from dict
def load_app_config(data: Mapping[str, Any]) -> AppConfig:
    """
    Load AppConfig from dictionary (e.g., parsed from YAML).

    Missing sections and keys fall back to defaults.

    Raises:
        ConfigError: A section is not a mapping or a value has the wrong type
    """
    audit_data = _section(data, "audit")
    audit = AuditSettings(
        log_path=_typed(audit_data, "log_path", str, DEFAULT_LOG_PATH),
        file_enabled=_typed(audit_data, "file_enabled", bool, True),
        console_enabled=_typed(audit_data, "console_enabled", bool, True),
    )

    logging_data = _section(data, "logging")
    logging_settings = LoggingSettings(
        level=_typed(logging_data, "level", str, "WARNING").upper(),
        json_format=_typed(logging_data, "json_format", bool, False),
    )

    return AppConfig(audit=audit, logging=logging_settings)


def load_config_file(config_path: str | Path) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Parsed configuration

    Raises:
        ConfigError: File missing or unreadable, invalid YAML, or bad values
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return AppConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(f"{config_path} must contain a mapping at top level")

    return load_app_config(data)


def apply_env_overrides(
    config: AppConfig,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Return a copy of config with environment overrides applied.

    SMARTDEVICE_LOG_FILE sets the audit log path, SMARTDEVICE_LOG_LEVEL the
    operational log level and SMARTDEVICE_LOG_FORMAT ("json" or "text")
    the operational log format.
    """
    env = os.environ if environ is None else environ

    audit = config.audit
    if env.get(ENV_LOG_FILE):
        audit = replace(audit, log_path=env[ENV_LOG_FILE])

    logging_settings = config.logging
    if env.get(ENV_LOG_LEVEL):
        logging_settings = replace(logging_settings, level=env[ENV_LOG_LEVEL].upper())
    if env.get(ENV_LOG_FORMAT):
        logging_settings = replace(
            logging_settings,
            json_format=env[ENV_LOG_FORMAT].lower() == "json",
        )

    return AppConfig(audit=audit, logging=logging_settings)
