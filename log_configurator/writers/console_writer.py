"""Console writer with ANSI colors"""

import sys
import threading

from log_configurator.core.log_entry import LogEntry


class ConsoleWriter:
    """Write log entries to a console stream with optional colors."""

    def __init__(self, colored: bool = False, stream=None):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stderr, looked up per write)
        """
        self.colored = colored
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stderr

    def write(self, entry: LogEntry) -> None:
        """Write log entry to console."""
        msg = str(entry)
        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        with self._lock:
            self.stream.write(msg + "\n")
            self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def close(self) -> None:
        """Console streams are not owned; only flush."""
        self.flush()
