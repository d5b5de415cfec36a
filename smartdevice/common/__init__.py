"""
Common Utilities

Shared modules used across the package:
- config.py - Configuration dataclasses and YAML loading
- exceptions.py - Custom exception classes
- logging_setup.py - Operational logging setup
- timestamp.py - Audit timestamp formatting
"""

from .config import (
    AppConfig,
    AuditSettings,
    DeviceConfig,
    LoggingSettings,
    apply_env_overrides,
    load_app_config,
    load_config_file,
)
from .exceptions import (
    SmartDeviceError,
    ConfigError,
    SinkError,
)
from .logging_setup import (
    JsonFormatter,
    setup_logging,
)
from .timestamp import (
    AUDIT_TIMESTAMP_FORMAT,
    format_timestamp,
)

__all__ = [
    # Config
    "AppConfig",
    "AuditSettings",
    "DeviceConfig",
    "LoggingSettings",
    "apply_env_overrides",
    "load_app_config",
    "load_config_file",
    # Exceptions
    "SmartDeviceError",
    "ConfigError",
    "SinkError",
    # Logging
    "JsonFormatter",
    "setup_logging",
    # Timestamps
    "AUDIT_TIMESTAMP_FORMAT",
    "format_timestamp",
]
