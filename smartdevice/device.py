"""
Smart Device

Simulates a generic IoT appliance: power state, battery, temperature and
location, with every change recorded in the device's audit log.

Guard behaviour:
- Battery level is clamped to 0-100% on every write
- Charging or adjusting temperature while powered off is a logged no-op
- Temperature is never clamped; diagnostics only flag it

Construction presets:
- SmartDevice()                                default record
- SmartDevice.create(name, kind, location)     default record + overrides
- SmartDevice(DeviceConfig(...))               fully explicit, no clamping
"""

import threading
from typing import Optional

from .audit import AuditEntry, AuditLog
from .common.config import AuditSettings, DeviceConfig

# Battery
BATTERY_MIN = 0
BATTERY_MAX = 100
LOW_BATTERY_THRESHOLD = 20  # percent, exclusive

# Normal operating range (exclusive bounds)
TEMPERATURE_MIN_C = 0.0
TEMPERATURE_MAX_C = 40.0


def clamp_battery(level: int) -> int:
    """
    Clamp a battery level into the valid percentage range.

    Fractional levels are rounded to the nearest percent, so 19.9 reads
    as 20 and is not a low battery.
    """
    return max(BATTERY_MIN, min(BATTERY_MAX, int(round(level))))


def _on_off(powered: bool) -> str:
    return "ON" if powered else "OFF"


class SmartDevice:
    """
    A single smart appliance with an owned audit log.

    The audit log is released by close(); use the device as a context
    manager to guarantee it. Mutators are serialized per instance so audit
    order always matches call order.
    """

    def __init__(
        self,
        config: Optional[DeviceConfig] = None,
        audit: Optional[AuditLog] = None,
    ):
        """
        Initialize the device.

        Args:
            config: Explicit configuration. When omitted the default record
                is used and logged as a default creation.
            audit: Audit log to record into. Defaults to the standard file
                + console pair.
        """
        explicit = config is not None
        config = config or DeviceConfig()

        self._name = config.name
        self._kind = config.kind
        self._powered_on = config.powered_on
        self._battery_level = config.battery_level
        self._temperature_c = config.temperature_c
        self._location = config.location

        self._audit = audit if audit is not None else AuditLog.from_settings(AuditSettings())
        self._lock = threading.RLock()
        self._closed = False

        if explicit:
            self.log("Device fully initialized with custom parameters")
        else:
            self.log("Device created with default parameters")

    @classmethod
    def create(
        cls,
        name: Optional[str] = None,
        kind: Optional[str] = None,
        location: Optional[str] = None,
        audit: Optional[AuditLog] = None,
    ) -> "SmartDevice":
        """
        Build a device from the default record plus overrides.

        Overrides are applied and logged in the order name, kind, location.
        """
        device = cls(audit=audit)
        if name is not None:
            device._name = name
            device.log(f"Device name set to: {name}")
        if kind is not None:
            device._kind = kind
            device.log(f"Device type set to: {kind}")
        if location is not None:
            device._location = location
            device.log(f"Device location set to: {location}")
        return device

    # ------------------------------------------------------------------
    # Audit
    # ------------------------------------------------------------------

    def log(self, message: str) -> AuditEntry:
        """Record an audit entry under the device's current name."""
        with self._lock:
            return self._audit.record(self._name, message)

    def get_audit_log(self) -> tuple[AuditEntry, ...]:
        """Snapshot of all audit entries recorded so far."""
        with self._lock:
            return tuple(self._audit.entries)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_name(self, name: str):
        with self._lock:
            self._name = name
            self.log(f"Device name changed to: {name}")

    def set_kind(self, kind: str):
        with self._lock:
            self._kind = kind
            self.log(f"Device type changed to: {kind}")

    def set_location(self, location: str):
        with self._lock:
            self._location = location
            self.log(f"Location changed to: {location}")

    def set_powered_on(self, powered: bool):
        with self._lock:
            self._powered_on = powered
            self.log(f"Device power state changed to: {_on_off(powered)}")

    def set_battery_level(self, level: int):
        """
        Set the battery level.

        Out-of-range values are clamped to 0-100%, never rejected.

        Args:
            level: Battery level in percent
        """
        with self._lock:
            self._battery_level = clamp_battery(level)
            self.log(f"Battery level set to: {self._battery_level}%")

    def set_temperature(self, temperature_c: float):
        with self._lock:
            self._temperature_c = temperature_c
            self.log(f"Temperature set to: {temperature_c:.1f}°C")

    def power_toggle(self):
        """Flip the power state."""
        with self._lock:
            self._powered_on = not self._powered_on
            self.log(f"Device toggled to: {_on_off(self._powered_on)}")

    def charge_battery(self, amount: int) -> bool:
        """
        Charge the battery by a percentage.

        The result is clamped to 100%; the logged amount is what was
        actually applied.

        Args:
            amount: Percent to add

        Returns:
            False if the device is powered off (nothing charged), else True
        """
        with self._lock:
            if not self._powered_on:
                self.log("Cannot charge - device is powered off")
                return False

            new_level = clamp_battery(self._battery_level + amount)
            charged = new_level - self._battery_level
            self._battery_level = new_level

            self.log(f"Battery charged by {charged}%. New level: {new_level}%")
            return True

    def adjust_temperature(self, delta_c: float):
        """
        Shift the temperature by delta_c degrees (no clamping).

        Does nothing but log while the device is powered off.
        """
        with self._lock:
            if not self._powered_on:
                self.log("Cannot adjust temperature - device is powered off")
                return

            old_temperature = self._temperature_c
            self._temperature_c += delta_c

            self.log(
                f"Temperature adjusted from {old_temperature:.1f}°C "
                f"to {self._temperature_c:.1f}°C"
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_name(self) -> str:
        return self._name

    def get_kind(self) -> str:
        return self._kind

    def is_powered_on(self) -> bool:
        return self._powered_on

    def get_battery_level(self) -> int:
        return self._battery_level

    def get_temperature(self) -> float:
        return self._temperature_c

    def get_location(self) -> str:
        return self._location

    def is_low_battery(self) -> bool:
        """Check if battery is below the low-battery threshold."""
        return self._battery_level < LOW_BATTERY_THRESHOLD

    def is_temperature_in_range(self) -> bool:
        return TEMPERATURE_MIN_C <= self._temperature_c <= TEMPERATURE_MAX_C

    def get_status_text(self) -> str:
        """Multi-line human readable status summary."""
        return (
            f"Device: {self._name} ({self._kind})\n"
            f"Location: {self._location}\n"
            f"Power: {_on_off(self._powered_on)}\n"
            f"Battery: {self._battery_level}%\n"
            f"Temperature: {self._temperature_c:.1f}°C"
        )

    def display_info(self):
        """Print the status summary to stdout."""
        print(self.get_status_text())

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def perform_diagnostics(self):
        """
        Run the fixed diagnostic checks.

        Only produces audit entries; device state is not changed. A powered
        off device is reported as OFF, not as a failure.
        """
        with self._lock:
            self.log("Starting diagnostics...")
            self.log(f"Checking power: {'OK' if self._powered_on else 'OFF'}")

            self.log(f"Checking battery level: {self._battery_level}%")
            if self.is_low_battery():
                self.log("WARNING: Low battery detected!")
            else:
                self.log("Battery level OK")

            self.log(f"Checking temperature: {self._temperature_c:.1f}°C")
            if not self.is_temperature_in_range():
                self.log("WARNING: Temperature outside normal operating range!")
            else:
                self.log("Temperature OK")

            self.log("Diagnostics completed")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self):
        """Record teardown and release the audit sinks. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.log(f"Device {self._name} destroyed")
            self._audit.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SmartDevice":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return (f"SmartDevice(name='{self._name}', "
                f"kind='{self._kind}', "
                f"status={_on_off(self._powered_on)}, "
                f"battery={self._battery_level}%, "
                f"temp={self._temperature_c:.1f}C)")
