"""
Audit Timestamp Utilities

Audit entries carry a local wall-clock timestamp rendered with second
precision, e.g. "2024-01-15 10:30:17".
"""

from datetime import datetime

AUDIT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(ts: datetime) -> str:
    """
    Render a timestamp the way audit lines show it.

    Sub-second precision is dropped, the timezone (if any) is not shown.

    Args:
        ts: The timestamp to format

    Returns:
        Timestamp as "YYYY-MM-DD HH:MM:SS"
    """
    return ts.strftime(AUDIT_TIMESTAMP_FORMAT)

