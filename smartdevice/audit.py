"""
Device Audit Log

Every state change and diagnostic observation of a device is recorded as a
timestamped entry and written to one or more sinks:

- FileSink: append-only text file, shared by convention between devices
- ConsoleSink: mirror to stdout
- MemorySink: in-memory capture, used by tests

Line format: "[YYYY-MM-DD HH:MM:SS] <device name>: <message>"

Sink failures never propagate to the caller. A failing sink is reported
once through the operational logger and dropped; the remaining sinks keep
receiving entries.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from .common.config import AuditSettings
from .common.exceptions import SinkError
from .common.timestamp import format_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditEntry:
    """One audit log entry."""
    timestamp: datetime
    device_name: str
    message: str

    def format(self) -> str:
        return f"[{format_timestamp(self.timestamp)}] {self.device_name}: {self.message}"


class AuditSink:
    """Destination for formatted audit lines."""

    def write(self, line: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class FileSink(AuditSink):
    """
    Append-only file sink.

    The file is opened lazily on the first write and held open until
    close(). Several sinks may point at the same path; each line is
    flushed immediately so entries from different devices interleave in
    call order.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._file: Optional[TextIO] = None

    def _open(self) -> TextIO:
        try:
            f = open(self.path, "a", encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Failed to open log file: {self.path} ({e})", str(self.path)) from e
        logger.debug(f"Opened audit log file {self.path}", extra={"sink_path": str(self.path)})
        return f

    def write(self, line: str) -> None:
        if self._file is None:
            self._file = self._open()
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError and writes to a closed file
            raise SinkError(f"Failed to write log file: {self.path} ({e})", str(self.path)) from e

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.debug(f"Closed audit log file {self.path}", extra={"sink_path": str(self.path)})

    def __repr__(self) -> str:
        return f"FileSink(path='{self.path}')"


class ConsoleSink(AuditSink):
    """Mirror audit lines to a text stream (stdout unless given)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str) -> None:
        # Resolve stdout at write time so redirection is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            print(line, file=stream)
        except (OSError, ValueError) as e:
            raise SinkError(f"Failed to write console: {e}") from e


class MemorySink(AuditSink):
    """Keep audit lines in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


class AuditLog:
    """
    Ordered, append-only audit log with fan-out to sinks.

    Args:
        sinks: Output sinks, written in order
        clock: Returns the current time; defaults to local wall clock
    """

    def __init__(
        self,
        sinks: Iterable[AuditSink] = (),
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.sinks: list[AuditSink] = list(sinks)
        self.entries: list[AuditEntry] = []
        self._clock = clock
        self._closed = False

    @classmethod
    def from_settings(cls, settings: AuditSettings) -> "AuditLog":
        """Build the standard file + console pair from settings."""
        sinks: list[AuditSink] = []
        if settings.file_enabled:
            sinks.append(FileSink(settings.log_path))
        if settings.console_enabled:
            sinks.append(ConsoleSink())
        return cls(sinks)

    def record(self, device_name: str, message: str) -> AuditEntry:
        """
        Append an entry and write it to every sink.

        Never raises because of a sink failure. Once the log is closed,
        entries are kept in memory only.
        """
        entry = AuditEntry(self._clock(), device_name, message)
        self.entries.append(entry)
        if self._closed:
            return entry

        line = entry.format()
        for sink in list(self.sinks):
            try:
                sink.write(line)
            except SinkError as e:
                self._drop_sink(sink, e)
        return entry

    def _drop_sink(self, sink: AuditSink, error: SinkError) -> None:
        logger.warning(f"{error.message}; continuing without {sink!r}")
        self.sinks.remove(sink)
        try:
            sink.close()
        except (OSError, ValueError) as e:
            logger.debug(f"Error closing failed sink {sink!r}: {e}")

    def close(self) -> None:
        """Release every sink. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        for sink in self.sinks:
            try:
                sink.close()
            except (OSError, ValueError) as e:
                logger.warning(f"Error closing audit sink {sink!r}: {e}")

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self.entries)
