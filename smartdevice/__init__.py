"""
SmartDevice

In-memory model of a generic IoT appliance with a timestamped audit log.
"""

from .audit import AuditEntry, AuditLog, AuditSink, ConsoleSink, FileSink, MemorySink
from .common.config import DeviceConfig
from .device import SmartDevice

__version__ = "1.0.0"

__all__ = [
    "AuditEntry",
    "AuditLog",
    "AuditSink",
    "ConsoleSink",
    "FileSink",
    "MemorySink",
    "DeviceConfig",
    "SmartDevice",
]
