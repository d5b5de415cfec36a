#!/usr/bin/env python3
"""
SmartDevice Demo - Main Entry Point

Creates five devices through each construction preset, runs a fixed
sequence of operations and prints two status reports.

Usage:
    smartdevice                          # Audit to device_log.txt + stdout
    smartdevice --config my.yaml         # Use settings from a YAML file
    smartdevice --log-file /tmp/a.txt    # Override audit log path
    smartdevice --no-console             # Audit to file only
    smartdevice -v                       # Debug operational logging
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import Callable, Optional

from .audit import AuditLog
from .common.config import AppConfig, DeviceConfig, apply_env_overrides, load_config_file
from .common.exceptions import ConfigError
from .common.logging_setup import setup_logging
from .device import SmartDevice

logger = logging.getLogger(__name__)

AuditFactory = Callable[[], AuditLog]


def run_demo(audit_factory: AuditFactory) -> list[SmartDevice]:
    """
    Run the demonstration scenario.

    Args:
        audit_factory: Builds a fresh audit log for each device

    Returns:
        The five devices, closed, in creation order
    """
    with ExitStack() as stack:
        # Closed in reverse creation order on exit
        device1 = stack.enter_context(SmartDevice(audit=audit_factory()))
        device2 = stack.enter_context(SmartDevice.create(
            "Living Room Thermostat", audit=audit_factory()))
        device3 = stack.enter_context(SmartDevice.create(
            "Kitchen Light", "Light Switch", audit=audit_factory()))
        device4 = stack.enter_context(SmartDevice.create(
            "Bedroom Camera", "Security Camera", "Bedroom", audit=audit_factory()))
        device5 = stack.enter_context(SmartDevice(
            DeviceConfig(
                name="Front Door Lock",
                kind="Security Lock",
                powered_on=True,
                battery_level=85,
                temperature_c=22.5,
                location="Front Door",
            ),
            audit=audit_factory(),
        ))

        device1.set_name("Main Hub")
        device1.set_kind("Control Center")
        device1.set_location("Living Room")
        device1.set_powered_on(True)

        device1.perform_diagnostics()
        device3.power_toggle()
        device5.charge_battery(10)
        device4.adjust_temperature(-2.5)

        print("\nDevice Information:")
        print("-------------------")
        device1.display_info()
        print("\n" + device5.get_status_text())

        return [device1, device2, device3, device4, device5]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Smart device simulation demo"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Audit log file path (default: device_log.txt)"
    )
    parser.add_argument(
        "--no-console",
        action="store_true",
        help="Do not mirror audit entries to stdout"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config_file(args.config) if args.config else AppConfig()
    except ConfigError as e:
        setup_logging()
        logger.error(e.message)
        return 1

    config = apply_env_overrides(config)
    if args.log_file:
        config.audit.log_path = args.log_file
    if args.no_console:
        config.audit.console_enabled = False

    log_level = "DEBUG" if args.verbose else config.logging.level
    setup_logging(log_level, config.logging.json_format)
    logger.debug(f"Audit settings: {config.audit}")

    run_demo(lambda: AuditLog.from_settings(config.audit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
