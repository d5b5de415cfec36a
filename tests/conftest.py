import logging
from datetime import datetime

import pytest

from smartdevice.audit import AuditLog, MemorySink
from smartdevice.common.logging_setup import ROOT_LOGGER_NAME

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 17)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog sees package records."""
    yield
    pkg_logger = logging.getLogger(ROOT_LOGGER_NAME)
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def memory_sink():
    return MemorySink()


@pytest.fixture
def audit(memory_sink):
    return AuditLog([memory_sink], clock=lambda: FIXED_TIME)


@pytest.fixture
def fixed_time():
    return FIXED_TIME
