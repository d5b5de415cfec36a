"""
Custom Exception Classes for SmartDevice

Hierarchical exception structure. Device operations never raise for
normal use: out-of-range input is clamped and invalid operations are
logged no-ops. These classes cover configuration and audit sink failures.
"""


class SmartDeviceError(Exception):
    """Base exception for all SmartDevice errors"""

    def __init__(self, message: str, recoverable: bool = True):
        self.message = message
        self.recoverable = recoverable
        super().__init__(message)


class ConfigError(SmartDeviceError):
    """Configuration-related errors"""

    def __init__(self, message: str, recoverable: bool = False):
        super().__init__(f"Config Error: {message}", recoverable)


class SinkError(SmartDeviceError):
    """Audit sink could not be opened or written"""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"Sink Error: {message}", recoverable=True)
